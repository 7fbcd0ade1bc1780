"""
Data Models Package

Contains all data models and schemas used throughout the application.
"""

from .game import Attempt, GameRules, GameState, GameView, LanguageColorEntry, Outcome

__all__ = ['Attempt', 'GameRules', 'GameState', 'GameView', 'LanguageColorEntry', 'Outcome']
