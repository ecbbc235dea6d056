"""Cooperative millisecond timer queue advanced by the game loop."""

from __future__ import annotations

import heapq
import itertools
from typing import Any, Callable


class TimerHandle:
    """Cancellable reference to a scheduled callback."""

    def __init__(self, due_ms: float, callback: Callable[..., None], args: tuple[Any, ...]) -> None:
        self.due_ms = due_ms
        self._callback = callback
        self._args = args
        self.cancelled = False
        self.fired = False

    def cancel(self) -> None:
        self.cancelled = True

    @property
    def active(self) -> bool:
        return not (self.cancelled or self.fired)

    def _run(self) -> None:
        self.fired = True
        self._callback(*self._args)


class TimerQueue:
    """Single-threaded timers: nothing fires except inside advance().

    Callbacks run one at a time in due order (FIFO for equal due times), and
    the clock is set to each callback's due time before it runs so delays
    chained from inside a callback stay exact.
    """

    def __init__(self) -> None:
        self._now: float = 0.0
        self._heap: list[tuple[float, int, TimerHandle]] = []
        self._seq = itertools.count()

    @property
    def now(self) -> float:
        return self._now

    @property
    def pending(self) -> int:
        return sum(1 for _, _, handle in self._heap if handle.active)

    def call_later(self, delay_ms: float, callback: Callable[..., None], *args: Any) -> TimerHandle:
        handle = TimerHandle(self._now + max(0.0, delay_ms), callback, args)
        heapq.heappush(self._heap, (handle.due_ms, next(self._seq), handle))
        return handle

    def advance(self, elapsed_ms: float) -> int:
        """Move the clock forward, firing every due callback. Returns how many fired."""
        target = self._now + max(0.0, elapsed_ms)
        fired = 0
        while self._heap and self._heap[0][0] <= target:
            due, _, handle = heapq.heappop(self._heap)
            if not handle.active:
                continue
            self._now = due
            handle._run()
            fired += 1
        self._now = target
        return fired

    def cancel_all(self) -> None:
        for _, _, handle in self._heap:
            handle.cancel()
        self._heap.clear()
