"""
Periodic callback scheduling for workout playback.

The playback player never sleeps or reads the clock itself. It asks a
Scheduler to call it back every ``interval_ms`` and keeps the returned
handle; cancelling that handle is the only way a tick stream stops.

Usage:
    scheduler = ThreadingScheduler()
    handle = scheduler.schedule(lambda: print("tick"), 1000)
    ...
    handle.cancel()
"""
from typing import Callable, Protocol
import logging
import threading
import time

logger = logging.getLogger(__name__)


class CancelHandle(Protocol):
    """Handle to a scheduled periodic callback."""

    def cancel(self) -> None:
        """Stop the callback. Must be idempotent."""
        ...


class Scheduler(Protocol):
    """
    Abstract interface for a periodic timer.

    Implementations must not invoke the callback after ``cancel()`` has
    returned on the handle.
    """

    def schedule(self, callback: Callable[[], None], interval_ms: int) -> CancelHandle:
        """
        Call ``callback`` every ``interval_ms`` milliseconds until cancelled.

        Args:
            callback: Zero-argument function to invoke on each interval
            interval_ms: Interval between invocations in milliseconds

        Returns:
            Handle whose cancel() stops further invocations
        """
        ...


class _RepeatingTimer(threading.Thread):
    """Daemon thread that fires a callback on a fixed interval."""

    def __init__(self, callback: Callable[[], None], interval_ms: int):
        super().__init__(daemon=True, name="playback-tick")
        self._callback = callback
        self._interval = interval_ms / 1000.0
        self._cancelled = threading.Event()

    def run(self) -> None:
        # deadlines advance by whole intervals, independent of callback time
        next_at = time.monotonic() + self._interval
        # wait() returns True once cancel() sets the event
        while not self._cancelled.wait(max(0.0, next_at - time.monotonic())):
            next_at += self._interval
            try:
                self._callback()
            except Exception:
                logger.exception("Scheduled callback raised; timer keeps running")

    def cancel(self) -> None:
        self._cancelled.set()


class ThreadingScheduler:
    """Scheduler backed by one daemon thread per scheduled callback."""

    def schedule(self, callback: Callable[[], None], interval_ms: int) -> CancelHandle:
        timer = _RepeatingTimer(callback, interval_ms)
        timer.start()
        return timer
