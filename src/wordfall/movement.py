"""Movement clock — advances every letter on a fixed tick and detects boundary breach."""

from __future__ import annotations

import logging
from typing import Callable

from wordfall.lane import LaneState
from wordfall.models import Letter, SongConfig
from wordfall.timers import TimerHandle, TimerQueue

logger = logging.getLogger(__name__)


class MovementClock:
    def __init__(
        self,
        timers: TimerQueue,
        lane: LaneState,
        song: SongConfig,
        on_move: Callable[[], None] | None = None,
        on_breach: Callable[[list[Letter]], None] | None = None,
    ) -> None:
        self.song = song
        self._clock = timers
        self._lane = lane
        self._on_move = on_move
        self._on_breach = on_breach
        self._tick_handle: TimerHandle | None = None
        self._freeze_handle: TimerHandle | None = None
        self.frozen = False

    @property
    def running(self) -> bool:
        return self._tick_handle is not None and self._tick_handle.active

    def start(self) -> None:
        if not self.running:
            self._tick_handle = self._clock.call_later(self.song.delay_per_movement_ms, self._tick)

    def stop(self) -> None:
        if self._tick_handle:
            self._tick_handle.cancel()
            self._tick_handle = None

    def freeze(self, duration_ms: float) -> None:
        """Hold letters in place for ``duration_ms``; the tick keeps running."""
        if self._freeze_handle:
            self._freeze_handle.cancel()
        self.frozen = True
        self._freeze_handle = self._clock.call_later(duration_ms, self.unfreeze)

    def unfreeze(self) -> None:
        if self._freeze_handle:
            self._freeze_handle.cancel()
            self._freeze_handle = None
        self.frozen = False

    def _tick(self) -> None:
        self._tick_handle = self._clock.call_later(self.song.delay_per_movement_ms, self._tick)
        if not self.frozen:
            self.step()

    def step(self) -> bool:
        """Move every letter down one interval. Returns True on boundary breach."""
        if not len(self._lane):
            return False
        dy = self.song.pixels_per_interval
        moved = self._lane.move_all(dy)
        limit = self._lane.height - dy
        if any(letter.top >= limit for letter in moved):
            cleared = self._lane.clear()
            logger.debug("Boundary breach: cleared %d letters", len(cleared))
            if self._on_breach:
                self._on_breach(cleared)
            return True
        self._lane.drop_below(self._lane.height)
        if self._on_move:
            self._on_move()
        return False
