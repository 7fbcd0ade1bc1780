"""
Guess Engine

Contains the attempt-scoring state machine for the language color game.
"""

import threading
from dataclasses import replace
from typing import Callable, List, Optional, Tuple

from ..models.game import Attempt, GameRules, GameState, LanguageColorEntry, Outcome
from ..utils.game_logger import game_logger
from .audio import NullAudioSink
from .scheduler import ThreadingScheduler

StateListener = Callable[[str, GameState], None]


def find_entry(entries, language_guess: str) -> Optional[LanguageColorEntry]:
    """Case-insensitive exact name lookup; no trimming."""
    wanted = language_guess.lower()
    for entry in entries:
        if entry.name.lower() == wanted:
            return entry
    return None


def is_repeat(attempts, language_guess: str) -> bool:
    """True if an earlier attempt used the same language name, ignoring case."""
    wanted = language_guess.lower()
    return any(attempt.language_guess.lower() == wanted for attempt in attempts)


def apply_guess(state: GameState,
                language_guess: str,
                color_guess: str,
                rules: GameRules) -> Tuple[GameState, Optional[Attempt]]:
    """
    Applies one guess to a game state.

    Outcome priority:
    1. A repeated language name always fails.
    2. A remaining catalog entry with that name succeeds iff the color
       matches ignoring case.
    3. Anything else fails.

    A failure on or after attempt ``rules.failure_check_attempt`` ends the
    game, as does reaching ``rules.max_attempts``.

    Args:
        state: Current state (left untouched)
        language_guess: Raw language name typed by the player
        color_guess: Raw color value typed by the player
        rules: Scoring rules

    Returns:
        Tuple of (new state, new attempt). The attempt is None when the guess
        was ignored because the game is already over or at its cap.
    """
    if state.is_over or len(state.attempts) >= rules.max_attempts:
        return replace(state, is_over=True), None

    target = find_entry(state.remaining_entries, language_guess)

    if is_repeat(state.attempts, language_guess):
        succeeded = False
    elif target is not None:
        succeeded = target.color.lower() == color_guess.lower()
    else:
        succeeded = False

    attempt = Attempt(
        sequence_number=len(state.attempts) + 1,
        language_guess=language_guess,
        color_guess=color_guess,
        succeeded=succeeded
    )
    attempts = state.attempts + (attempt,)

    remaining = state.remaining_entries
    if succeeded:
        remaining = tuple(entry for entry in remaining if entry.name != target.name)

    game_ends = (not succeeded and len(attempts) >= rules.failure_check_attempt) \
        or len(attempts) >= rules.max_attempts

    return replace(state, attempts=attempts, remaining_entries=remaining, is_over=game_ends), attempt


class GuessEngine:
    """
    Owns the state of a single game.

    This class handles:
    - The reveal timer that ends the catalog display phase
    - Applying submitted guesses through apply_guess
    - Announcing outcomes to the injected audio sink
    - Notifying subscribers after every transition
    """

    def __init__(self, catalog, rules: Optional[GameRules] = None, scheduler=None, audio=None):
        self.catalog: Tuple[LanguageColorEntry, ...] = tuple(catalog)
        self.rules = rules or GameRules()
        self._scheduler = scheduler or ThreadingScheduler()
        self._audio = audio or NullAudioSink()
        self._state = GameState.initial(self.catalog)
        self._timer = None
        self._disposed = False
        self._listeners: List[StateListener] = []
        self._lock = threading.RLock()

    @property
    def state(self) -> GameState:
        return self._state

    @property
    def attempts(self) -> Tuple[Attempt, ...]:
        return self._state.attempts

    @property
    def remaining_entries(self) -> Tuple[LanguageColorEntry, ...]:
        return self._state.remaining_entries

    @property
    def is_over(self) -> bool:
        return self._state.is_over

    @property
    def reveal_phase(self) -> bool:
        return self._state.reveal_phase

    def is_win(self) -> bool:
        return self._state.success_count >= self.rules.win_threshold

    def reveal(self) -> None:
        """Starts the reveal timer. Later calls are no-ops."""
        with self._lock:
            if self._disposed or self._timer is not None or not self._state.reveal_phase:
                return
            self._timer = self._scheduler.schedule(self.rules.reveal_seconds, self._end_reveal)

    def _end_reveal(self) -> None:
        with self._lock:
            if self._disposed or not self._state.reveal_phase:
                return
            self._state = replace(self._state, reveal_phase=False)
            self._timer = None
            state = self._state
        self._notify('reveal_ended', state)

    def submit(self, language_guess: str, color_guess: str) -> Optional[Attempt]:
        """
        Scores a guess and records it.

        Returns:
            The new Attempt, or None if the game was already over
        """
        with self._lock:
            self._state, attempt = apply_guess(self._state, language_guess, color_guess, self.rules)
            state = self._state

        if attempt is None:
            self._notify('ignored', state)
            return None

        self._play(Outcome.SUCCESS if attempt.succeeded else Outcome.FAILURE)
        self._notify('attempt', state)
        return attempt

    def subscribe(self, listener: StateListener) -> Callable[[], None]:
        """Registers a listener called with (event, state); returns an unsubscribe function."""
        with self._lock:
            self._listeners.append(listener)

        def unsubscribe():
            with self._lock:
                if listener in self._listeners:
                    self._listeners.remove(listener)

        return unsubscribe

    def dispose(self) -> None:
        """Cancels a pending reveal timer and drops all listeners."""
        with self._lock:
            self._disposed = True
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._listeners.clear()

    def _play(self, outcome: Outcome) -> None:
        try:
            self._audio.play(outcome)
        except Exception as e:
            game_logger.logger.error(f"Audio sink failed for outcome {outcome.value}: {e}")

    def _notify(self, event: str, state: GameState) -> None:
        with self._lock:
            listeners = list(self._listeners)
        for listener in listeners:
            try:
                listener(event, state)
            except Exception as e:
                game_logger.logger.error(f"State listener failed on '{event}': {e}")
