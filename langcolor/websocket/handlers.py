"""
WebSocket Event Handlers

Pushes game state changes, the end of the reveal phase and audio cues to
clients watching a game room.
"""

from dataclasses import asdict
from flask import request
from flask_socketio import emit, join_room, leave_room
from ..services.game_service import get_game_service, set_realtime_relay
from ..utils.game_logger import game_logger


def game_room(game_id: str) -> str:
    return f"game_{game_id}"


def register_websocket_handlers(socketio):
    """Register all WebSocket event handlers."""

    def relay(game_id, event, payload):
        socketio.emit(event, payload, room=game_room(game_id))

    set_realtime_relay(relay)

    @socketio.on('join_game')
    def handle_join_game(data):
        """Join a game room for real-time updates."""
        game_service = get_game_service()
        if not game_service:
            emit('error', {'error': 'Game service unavailable'})
            return

        game_id = (data or {}).get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        state = game_service.get_game_state(game_id)
        if state is None:
            emit('error', {'error': 'Game not found'})
            return

        join_room(game_room(game_id))
        emit('game_state', asdict(state))
        game_logger.log_game_event(game_id, 'client_joined', request.remote_addr or 'unknown',
                                   session_id=request.sid)

    @socketio.on('leave_game')
    def handle_leave_game(data):
        """Leave a game room."""
        game_id = (data or {}).get('game_id')
        if not game_id:
            emit('error', {'error': 'Game ID is required'})
            return

        leave_room(game_room(game_id))
        emit('left_game', {'game_id': game_id})
