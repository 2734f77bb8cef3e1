from __future__ import annotations

import asyncio
import heapq
import itertools
import time
from typing import Callable, List, Optional, Protocol, Tuple

Callback = Callable[[], None]


class TimerHandle(Protocol):
    def cancel(self) -> None: ...


class Scheduler(Protocol):
    def schedule(self, callback: Callback, delay: float) -> TimerHandle: ...


class _Timer:
    __slots__ = ('callback', 'cancelled')

    def __init__(self, callback: Callback) -> None:
        self.callback = callback
        self.cancelled = False

    def cancel(self) -> None:
        self.cancelled = True


class DeferredScheduler:
    """
    Poll-driven one-shot timers. Callbacks never run on their own: the owner
    calls run_pending() and every callback whose delay has elapsed runs on
    the caller's thread, earliest first. Cancelled timers are skipped.
    """

    def __init__(self, clock: Callable[[], float] = time.monotonic) -> None:
        self.clock = clock
        self._heap: List[Tuple[float, int, _Timer]] = []
        self._seq = itertools.count()

    def schedule(self, callback: Callback, delay: float) -> _Timer:
        timer = _Timer(callback)
        heapq.heappush(self._heap, (self.clock() + delay, next(self._seq), timer))
        return timer

    def _drop_cancelled(self) -> None:
        while self._heap and self._heap[0][2].cancelled:
            heapq.heappop(self._heap)

    def pending(self) -> int:
        return sum(1 for _, _, timer in self._heap if not timer.cancelled)

    def next_due(self) -> Optional[float]:
        """Seconds until the earliest timer fires (0 if overdue), None if idle."""
        self._drop_cancelled()
        if not self._heap:
            return None
        return max(0.0, self._heap[0][0] - self.clock())

    def run_pending(self) -> int:
        """Runs every due callback, including ones scheduled while running. Returns how many ran."""
        ran = 0
        while self._heap and self._heap[0][0] <= self.clock():
            _, _, timer = heapq.heappop(self._heap)
            if timer.cancelled:
                continue
            timer.callback()
            ran += 1
        return ran


class AsyncioScheduler:
    """One-shot timers on an asyncio event loop (loop.call_later)."""

    def __init__(self, loop: Optional[asyncio.AbstractEventLoop] = None) -> None:
        self._loop = loop

    def schedule(self, callback: Callback, delay: float) -> asyncio.TimerHandle:
        loop = self._loop or asyncio.get_running_loop()
        return loop.call_later(delay, callback)
