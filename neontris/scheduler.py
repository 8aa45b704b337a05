"""
Cancellable deferred actions on a caller-driven clock.

Nothing here reads the wall clock. The game loop passes its frame timestamp
to Scheduler.advance_to(), which runs every action that has come due. Tests
drive the same method with made-up timestamps.
"""

from __future__ import annotations

import heapq
import itertools
from typing import Callable


class DeferredAction:
    """A callback waiting for its due time.

    Attributes:
        due: Scheduler time (ms) at which the callback runs.
        callback: Zero-argument callable.
        cancelled: True once cancel() has been called.
        fired: True once the callback has run.
    """

    def __init__(self, due: float, callback: Callable[[], None]) -> None:
        self.due = due
        self.callback = callback
        self.cancelled = False
        self.fired = False

    @property
    def pending(self) -> bool:
        return not (self.cancelled or self.fired)

    def cancel(self) -> None:
        """Stop the callback from running. No effect once it has fired."""
        self.cancelled = True


class Scheduler:
    """Min-heap of DeferredActions ordered by due time, then insertion order.

    Attributes:
        now: Latest time passed to advance_to() (ms).
    """

    def __init__(self, now: float = 0.0) -> None:
        self.now = now
        self._queue: list[tuple[float, int, DeferredAction]] = []
        self._counter = itertools.count()

    def call_later(self, delay: float, callback: Callable[[], None]) -> DeferredAction:
        """Schedule `callback` to run `delay` ms after the current time.

        Returns:
            Handle that can cancel the action.
        """
        action = DeferredAction(self.now + delay, callback)
        heapq.heappush(self._queue, (action.due, next(self._counter), action))
        return action

    def advance_to(self, now: float) -> int:
        """Move the clock forward and run every action that is now due.

        Actions scheduled by a running callback are picked up in the same
        call if they are already due. The clock never moves backward.

        Returns:
            Number of callbacks run.
        """
        self.now = max(self.now, now)
        fired = 0
        while self._queue and self._queue[0][0] <= self.now:
            _, _, action = heapq.heappop(self._queue)
            if action.cancelled:
                continue
            action.fired = True
            action.callback()
            fired += 1
        return fired

    def pending_count(self) -> int:
        """Number of scheduled actions that have not fired or been cancelled."""
        return sum(1 for _, _, action in self._queue if action.pending)


class Debouncer:
    """Runs only the most recent of a burst of callbacks.

    Each trigger() cancels the previous pending callback and schedules the
    new one `delay` ms out.
    """

    def __init__(self, scheduler: Scheduler, delay: float) -> None:
        self.scheduler = scheduler
        self.delay = delay
        self._pending: DeferredAction | None = None

    def trigger(self, callback: Callable[[], None]) -> DeferredAction:
        self.cancel()
        self._pending = self.scheduler.call_later(self.delay, callback)
        return self._pending

    def cancel(self) -> None:
        if self._pending is not None:
            self._pending.cancel()
            self._pending = None
