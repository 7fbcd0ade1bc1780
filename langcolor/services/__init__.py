"""
Services Package

Contains all business logic and service classes.
"""

from .guess_engine import GuessEngine, apply_guess
from .game_service import GameService, get_game_service, initialize_game_service

__all__ = [
    'GuessEngine', 'apply_guess',
    'GameService', 'get_game_service', 'initialize_game_service'
]
