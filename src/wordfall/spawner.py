"""Spawn scheduler — turns words into a timed stream of falling letters."""

from __future__ import annotations

import logging
from typing import Callable

from wordfall.config import AVERAGE_WORD_LENGTH, INTER_WORD_DELAY_MS, LETTER_SPACING
from wordfall.lane import LaneState
from wordfall.models import Letter, SongConfig, SpawnPolicy
from wordfall.timers import TimerHandle, TimerQueue
from wordfall.words import WordSource

logger = logging.getLogger(__name__)


def letter_delay_ms(song: SongConfig) -> float:
    """Milliseconds between two letters of the same word."""
    if song.spawn_policy == SpawnPolicy.FIXED:
        return float(song.letter_delay_ms)
    return 60_000.0 / (song.words_per_minute * AVERAGE_WORD_LENGTH)


class SpawnScheduler:
    """Spawns one word at a time, one letter per delay, then chains to the next word.

    Pending timers are kept per word index so a single word, or all of them,
    can be cancelled. Every callback re-checks ``is_running`` before touching
    the lane.
    """

    def __init__(
        self,
        timers: TimerQueue,
        lane: LaneState,
        words: WordSource,
        song: SongConfig,
        is_running: Callable[[], bool],
        on_spawn: Callable[[Letter], None] | None = None,
        letter_spacing: float = LETTER_SPACING,
        inter_word_delay_ms: float = INTER_WORD_DELAY_MS,
    ) -> None:
        self.song = song
        self._clock = timers
        self._lane = lane
        self._words = words
        self._is_running = is_running
        self._on_spawn = on_spawn
        self.letter_spacing = letter_spacing
        self.inter_word_delay_ms = inter_word_delay_ms

        self._pending: dict[int, TimerHandle] = {}
        self.cursor: float = 0.0
        self._next_word_index = 0
        self.current_word: str | None = None
        self.current_index: int | None = None
        self._letter_pos = 0

    @property
    def pending_word_indices(self) -> list[int]:
        return sorted(k for k, h in self._pending.items() if h.active)

    @property
    def word_in_progress(self) -> bool:
        return self.current_word is not None and self._letter_pos < len(self.current_word)

    def start_next_word(self) -> None:
        """Ask the word source for a word and start spawning it."""
        if not self._is_running():
            return
        word, cursor = self._words.next(self._lane.width, self.letter_spacing, self.cursor)
        if not word:
            logger.debug("No word available; spawning stalls")
            self.current_word = None
            return
        self.cursor = cursor
        self.start_word(word)

    def start_word(self, word: str) -> None:
        """Spawn ``word`` starting now, at the current cursor."""
        if not word:
            return
        if self.cursor + len(word) * self.letter_spacing > self._lane.width:
            self.cursor = 0
        self.current_word = word
        self.current_index = self._next_word_index
        self._next_word_index += 1
        self._letter_pos = 0
        logger.debug("Spawning word %r as #%d at x=%s", word, self.current_index, self.cursor)
        self._spawn_next_letter(self.current_index)

    def _spawn_next_letter(self, word_index: int) -> None:
        self._pending.pop(word_index, None)
        if not self._is_running() or word_index != self.current_index or not self.word_in_progress:
            return

        letter = self._lane.spawn(self.current_word[self._letter_pos], self.cursor, word_index)
        self.cursor += self.letter_spacing
        self._letter_pos += 1
        if self._on_spawn:
            self._on_spawn(letter)

        if self.word_in_progress:
            self._arm(word_index, letter_delay_ms(self.song), self._spawn_next_letter)
        else:
            self._arm(word_index, self.inter_word_delay_ms, self._word_gap_elapsed)

    def _word_gap_elapsed(self, word_index: int) -> None:
        self._pending.pop(word_index, None)
        if not self._is_running():
            return
        self.start_next_word()

    def _arm(self, word_index: int, delay_ms: float, callback: Callable[[int], None]) -> None:
        previous = self._pending.pop(word_index, None)
        if previous:
            previous.cancel()
        self._pending[word_index] = self._clock.call_later(delay_ms, callback, word_index)

    def cancel_word(self, word_index: int) -> None:
        handle = self._pending.pop(word_index, None)
        if handle:
            handle.cancel()

    def cancel_all(self) -> None:
        for handle in self._pending.values():
            handle.cancel()
        self._pending.clear()

    def abandon_word(self, word_index: int) -> None:
        """Stop spawning ``word_index``; if it is the current word, move on to the next one."""
        self.cancel_word(word_index)
        if word_index == self.current_index:
            self.skip_to_next_word()

    def skip_to_next_word(self) -> None:
        """Drop whatever is left of the current word and chain after the inter-word delay."""
        self.cancel_all()
        if self.current_word is not None:
            self._letter_pos = len(self.current_word)
        key = self.current_index if self.current_index is not None else -1
        self._arm(key, self.inter_word_delay_ms, self._word_gap_elapsed)

    def pause(self) -> None:
        # Progress through the current word is kept for resume().
        self.cancel_all()

    def resume(self) -> None:
        if self._pending or not self._is_running():
            return
        if self.current_word is None or self.current_index is None:
            self.start_next_word()
        elif self.word_in_progress:
            self._arm(self.current_index, letter_delay_ms(self.song), self._spawn_next_letter)
        else:
            self._arm(self.current_index, self.inter_word_delay_ms, self._word_gap_elapsed)

    def reset(self) -> None:
        self.cancel_all()
        self.cursor = 0.0
        self._next_word_index = 0
        self.current_word = None
        self.current_index = None
        self._letter_pos = 0
