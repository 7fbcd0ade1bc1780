"""
Game Service

Manages language color game sessions on top of the GuessEngine.
"""

import time
import uuid
from dataclasses import asdict
from typing import Callable, Dict, List, Optional, Tuple

from ..config import Config, LANGUAGE_CATALOG
from ..models.game import Attempt, GameRules, GameState, GameView, Outcome
from ..utils.game_logger import game_logger
from .audio import CallbackAudioSink
from .guess_engine import GuessEngine

GameListener = Callable[[str, str, Dict], None]


class GameService:
    """
    Core game service managing multiple game sessions.

    This class handles:
    - Game session management with unique game IDs
    - Starting each game's reveal phase
    - Guess validation and forwarding to the engine
    - Broadcasting engine events to registered listeners
    - Expiring idle sessions
    """

    def __init__(self, rules: Optional[GameRules] = None, catalog=None, scheduler=None):
        self.rules = rules or GameRules()
        self.catalog = tuple(catalog) if catalog is not None else LANGUAGE_CATALOG
        self.scheduler = scheduler
        self.games: Dict[str, GuessEngine] = {}
        self.last_activity: Dict[str, float] = {}
        self._listeners: List[GameListener] = []

    def add_listener(self, listener: GameListener) -> None:
        """Registers a callback invoked as listener(game_id, event, payload)."""
        self._listeners.append(listener)

    def remove_listener(self, listener: GameListener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _broadcast(self, game_id: str, event: str, payload: Dict) -> None:
        for listener in list(self._listeners):
            try:
                listener(game_id, event, payload)
            except Exception as e:
                game_logger.logger.error(f"Game listener failed on '{event}' for game {game_id}: {e}")

    def create_new_game(self) -> str:
        """
        Creates a new game session and starts its reveal phase.

        Returns:
            str: Unique game ID for this session
        """
        game_id = str(uuid.uuid4())

        def play_sound(outcome: Outcome):
            self._broadcast(game_id, 'play_sound', {'game_id': game_id, 'outcome': outcome.value})

        engine = GuessEngine(
            self.catalog,
            rules=self.rules,
            scheduler=self.scheduler,
            audio=CallbackAudioSink(play_sound)
        )
        engine.subscribe(lambda event, state: self._on_engine_event(game_id, event, state))

        self.games[game_id] = engine
        self.last_activity[game_id] = time.time()
        engine.reveal()
        return game_id

    def _on_engine_event(self, game_id: str, event: str, state: GameState) -> None:
        if event == 'reveal_ended':
            self._broadcast(game_id, 'reveal_ended', {'game_id': game_id})
        view = self.get_game_state(game_id)
        if view is not None:
            self._broadcast(game_id, 'game_state_update', asdict(view))

    def get_game_state(self, game_id: str) -> Optional[GameView]:
        """
        Returns the current game state for a session.

        The catalog is only included while the reveal phase is running and
        the win flag only once the game is over.

        Args:
            game_id: Unique game identifier

        Returns:
            GameView object or None if game not found
        """
        engine = self.games.get(game_id)
        if engine is None:
            return None

        state = engine.state
        catalog = None
        if state.reveal_phase:
            catalog = [asdict(entry) for entry in engine.catalog]

        return GameView(
            game_id=game_id,
            reveal_phase=state.reveal_phase,
            remaining_count=len(state.remaining_entries),
            attempt_count=len(state.attempts),
            max_attempts=engine.rules.max_attempts,
            success_count=state.success_count,
            game_over=state.is_over,
            attempts=[asdict(attempt) for attempt in state.attempts],
            catalog=catalog,
            won=engine.is_win() if state.is_over else None
        )

    def is_valid_guess(self, game_id: str, language, color) -> Tuple[bool, str]:
        """
        Validates a guess for a specific game session.

        Empty or nonsensical values are valid here; the engine scores them as
        failures. Guesses after game over are valid too and get ignored.

        Returns:
            Tuple of (is_valid, error_message)
        """
        engine = self.games.get(game_id)
        if engine is None:
            return False, "Game not found"

        if not isinstance(language, str) or not isinstance(color, str):
            return False, "Language and color must be strings"

        if engine.reveal_phase:
            return False, "Languages are still being revealed"

        return True, ""

    def make_guess(self, game_id: str, language: str, color: str) -> Optional[Tuple[Optional[Attempt], GameView]]:
        """
        Processes a guess and updates game state.

        Returns:
            (attempt, state) where attempt is None if the guess was ignored,
            or None if the guess is invalid
        """
        is_valid, _ = self.is_valid_guess(game_id, language, color)
        if not is_valid:
            return None

        # Re-read: cleanup_stale_games may have removed the game since validation
        engine = self.games.get(game_id)
        if engine is None:
            return None

        attempt = engine.submit(language, color)
        state = self.get_game_state(game_id)
        if state is None:
            return None
        self.last_activity[game_id] = time.time()
        return attempt, state

    def delete_game(self, game_id: str) -> bool:
        """
        Removes a game session and cancels its pending timer.

        Returns:
            bool: True if game was deleted, False if not found
        """
        engine = self.games.pop(game_id, None)
        self.last_activity.pop(game_id, None)
        if engine is None:
            return False
        engine.dispose()
        return True

    def cleanup_stale_games(self, max_idle_seconds: float, now: Optional[float] = None) -> List[str]:
        """
        Deletes sessions with no activity for longer than max_idle_seconds.

        Returns:
            List of expired game IDs
        """
        now = time.time() if now is None else now
        expired = [
            game_id for game_id, last_seen in list(self.last_activity.items())
            if now - last_seen > max_idle_seconds
        ]
        for game_id in expired:
            engine = self.games.get(game_id)
            attempts = len(engine.attempts) if engine else 0
            self.delete_game(game_id)
            game_logger.log_game_event(game_id, 'game_expired', 'system',
                                       idle_limit_seconds=max_idle_seconds, attempts=attempts)
        return expired

    def shutdown(self) -> None:
        """Disposes every active game."""
        for game_id in list(self.games):
            self.delete_game(game_id)


# Global service instance
_game_service = None

# Realtime relay attached to whichever service is current
_realtime_relay: Optional[GameListener] = None


def get_game_service() -> Optional[GameService]:
    """Get the global game service instance."""
    return _game_service


def set_realtime_relay(relay: GameListener) -> None:
    """
    Installs the listener that pushes game events to connected clients.

    The relay follows the global service: it is attached now and to every
    service created later by initialize_game_service.
    """
    global _realtime_relay
    if _game_service is not None:
        if _realtime_relay is not None:
            _game_service.remove_listener(_realtime_relay)
        _game_service.add_listener(relay)
    _realtime_relay = relay


def initialize_game_service(config_class=Config, scheduler=None) -> GameService:
    """Initialize the global game service instance."""
    global _game_service
    if _game_service is not None:
        _game_service.shutdown()
    _game_service = GameService(rules=GameRules.from_config(config_class), scheduler=scheduler)
    if _realtime_relay is not None:
        _game_service.add_listener(_realtime_relay)
    return _game_service
