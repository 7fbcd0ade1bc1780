"""
Audio Cue Sinks

The engine announces every attempt outcome to an audio sink. Playback itself
belongs to the client, so sinks here only relay the outcome.
"""

from typing import Callable

from ..models.game import Outcome


class NullAudioSink:
    """Default sink; ignores every cue."""

    def play(self, outcome: Outcome) -> None:
        pass


class CallbackAudioSink:
    """Forwards each cue to a callback."""

    def __init__(self, callback: Callable[[Outcome], None]):
        self._callback = callback

    def play(self, outcome: Outcome) -> None:
        self._callback(outcome)
