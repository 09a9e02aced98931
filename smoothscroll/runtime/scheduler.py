"""Cooperative periodic timers for a single-threaded host loop.

Timers never fire on their own: the owner calls ``run_due`` (directly or via
``wait``) and every due callback runs once, in the caller's thread.
"""

from __future__ import annotations

import itertools
import time
from collections.abc import Callable
from dataclasses import dataclass


@dataclass
class _PeriodicTimer:
    interval: float
    callback: Callable[[], None]
    deadline: float


class TickScheduler:
    """Table of periodic callbacks keyed by integer handles."""

    def __init__(
        self,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        self._clock = clock
        self._sleep = sleep
        self._timers: dict[int, _PeriodicTimer] = {}
        self._handles = itertools.count(1)

    def schedule_periodic(self, interval_ms: int, callback: Callable[[], None]) -> int:
        """Register ``callback`` to run every ``interval_ms`` and return its handle."""
        interval = max(1, int(interval_ms)) / 1000.0
        handle = next(self._handles)
        self._timers[handle] = _PeriodicTimer(interval, callback, self._clock() + interval)
        return handle

    def cancel_periodic(self, handle: int) -> None:
        """Drop a timer; unknown handles are ignored."""
        self._timers.pop(handle, None)

    @property
    def pending(self) -> int:
        return len(self._timers)

    def time_until_next(self) -> float | None:
        """Seconds until the earliest deadline, or ``None`` with no timers."""
        if not self._timers:
            return None
        earliest = min(timer.deadline for timer in self._timers.values())
        return max(0.0, earliest - self._clock())

    def run_due(self) -> int:
        """Fire each due timer once and return how many fired.

        Missed intervals are not replayed: a late timer is rescheduled one
        interval after now.
        """
        now = self._clock()
        due = [handle for handle, timer in self._timers.items() if timer.deadline <= now]
        fired = 0
        for handle in due:
            timer = self._timers.get(handle)
            # An earlier callback in this batch may have cancelled it.
            if timer is None:
                continue
            timer.deadline = now + timer.interval
            timer.callback()
            fired += 1
        return fired

    def wait(self, seconds: float) -> int:
        """Sleep for ``seconds`` and then run due timers."""
        self._sleep(max(0.0, seconds))
        return self.run_due()
