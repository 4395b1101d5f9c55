"""Cooperative deferred calls driven by the host frame loop.

Nothing here sleeps or spawns threads. The host calls ``update(dt)`` once per
frame and every call whose delay has elapsed runs on that frame.

Typical usage:
    scheduler = DeferredScheduler()
    scheduler.call_later(0.1, retry)
    ...
    scheduler.update(dt)  # inside the game loop
"""

from collections.abc import Callable
from dataclasses import dataclass, field

from mastervolume.core.logging_system import get_logger

logger = get_logger(__name__)


@dataclass
class ScheduledCall:
    """A callback waiting for its delay to elapse.

    Attributes:
        due: Scheduler time (seconds) at which the callback runs.
        callback: Function to call.
        cancelled: Whether the call was cancelled before running.
    """

    due: float
    callback: Callable[[], None]
    cancelled: bool = field(default=False, repr=False)

    def cancel(self) -> None:
        """Prevent the callback from running."""
        self.cancelled = True


class DeferredScheduler:
    """Frame-pumped scheduler for one-shot deferred callbacks."""

    def __init__(self) -> None:
        """Initialize with an empty queue at time zero."""
        self._time = 0.0
        self._calls: list[ScheduledCall] = []

    @property
    def time(self) -> float:
        """Accumulated scheduler time in seconds."""
        return self._time

    @property
    def pending_count(self) -> int:
        """Number of callbacks still waiting to run."""
        return sum(1 for call in self._calls if not call.cancelled)

    def call_later(self, delay: float, callback: Callable[[], None]) -> ScheduledCall:
        """Schedule a callback to run after a delay.

        Args:
            delay: Delay in seconds (negative values are treated as 0).
            callback: Function to call.

        Returns:
            Handle that can cancel the call.
        """
        call = ScheduledCall(self._time + max(0.0, delay), callback)
        self._calls.append(call)
        return call

    def update(self, dt: float) -> int:
        """Advance time and run every due callback.

        Callbacks scheduled while this update runs wait for a later update,
        even with a zero delay.

        Args:
            dt: Elapsed time since the last update, in seconds.

        Returns:
            Number of callbacks that ran.
        """
        self._time += max(0.0, dt)

        due = [call for call in self._calls if call.due <= self._time]
        self._calls = [call for call in self._calls if call.due > self._time]

        ran = 0
        for call in sorted(due, key=lambda c: c.due):
            if call.cancelled:
                continue
            call.callback()
            ran += 1
        return ran

    def clear(self) -> None:
        """Drop every pending callback."""
        for call in self._calls:
            call.cancel()
        self._calls.clear()
