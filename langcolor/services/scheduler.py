"""
Scheduler

One-shot, cancellable timers used for the reveal phase.
"""

import threading
from typing import Callable


class TimerHandle:
    """Handle for a scheduled callback. cancel() is idempotent."""

    def __init__(self, timer: threading.Timer):
        self._timer = timer

    def cancel(self) -> None:
        self._timer.cancel()


class ThreadingScheduler:
    """Runs each callback on a daemon threading.Timer."""

    def schedule(self, delay_seconds: float, callback: Callable[[], None]) -> TimerHandle:
        timer = threading.Timer(delay_seconds, callback)
        timer.daemon = True
        timer.start()
        return TimerHandle(timer)
