"""
Game Data Models

Contains all game-related data structures and enums.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Tuple


class Outcome(Enum):
    """Result of a single attempt, handed to the audio sink."""
    SUCCESS = "success"
    FAILURE = "failure"


@dataclass(frozen=True)
class LanguageColorEntry:
    """A catalog entry: a language name and its hex color."""
    name: str
    color: str


@dataclass(frozen=True)
class Attempt:
    """One accepted guess and its recorded outcome."""
    sequence_number: int
    language_guess: str
    color_guess: str
    succeeded: bool


@dataclass(frozen=True)
class GameRules:
    """Scoring and timing rules for a single game."""
    reveal_seconds: float = 4
    max_attempts: int = 20
    failure_check_attempt: int = 5
    win_threshold: int = 15

    @classmethod
    def from_config(cls, config) -> "GameRules":
        return cls(
            reveal_seconds=config.REVEAL_SECONDS,
            max_attempts=config.MAX_ATTEMPTS,
            failure_check_attempt=config.FAILURE_CHECK_ATTEMPT,
            win_threshold=config.WIN_THRESHOLD
        )


@dataclass(frozen=True)
class GameState:
    """
    Engine-side game state.

    Instances are never mutated; every transition produces a new state.
    remaining_entries keeps catalog order and is unique by name.
    """
    reveal_phase: bool
    remaining_entries: Tuple[LanguageColorEntry, ...]
    attempts: Tuple[Attempt, ...] = ()
    is_over: bool = False

    @classmethod
    def initial(cls, catalog) -> "GameState":
        return cls(reveal_phase=True, remaining_entries=tuple(catalog))

    @property
    def success_count(self) -> int:
        return sum(1 for attempt in self.attempts if attempt.succeeded)


@dataclass
class GameView:
    """Client-facing game snapshot."""
    game_id: str
    reveal_phase: bool
    remaining_count: int
    attempt_count: int
    max_attempts: int
    success_count: int
    game_over: bool
    attempts: List[Dict] = field(default_factory=list)
    catalog: Optional[List[Dict]] = None  # Only included during the reveal phase
    won: Optional[bool] = None  # Only decided once the game is over
