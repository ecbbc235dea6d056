"""Core data models shared across the engine."""

from __future__ import annotations

import logging
from dataclasses import dataclass, fields
from enum import Enum, auto
from typing import Any, Union

from wordfall.config import (
    COMBO_PER_MULTIPLIER,
    DEFAULT_DELAY_PER_MOVEMENT_MS,
    DEFAULT_LETTER_DELAY_MS,
    DEFAULT_PIXELS_PER_INTERVAL,
    DEFAULT_WORDS_PER_MINUTE,
    FREEZE_MS,
    INPUT_LOCK_MS,
)

logger = logging.getLogger(__name__)

NoteId = Union[str, int]  # note name ("E5", "D#5") or MIDI number


class HitKind(Enum):
    PERFECT = auto()
    OK = auto()
    BAD = auto()
    MISS = auto()
    WRONG = auto()


class Cue(Enum):
    WRONG_KEY = "wrongKey"
    LINE_MISS = "lineMiss"
    BOUNDARY_BREACH = "boundaryBreach"


class SpawnPolicy(Enum):
    TEMPO = "tempo"  # delay derived from words per minute
    FIXED = "fixed"  # delay taken directly from the song


def _is_positive(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and value > 0


def _positive_number(data: dict[str, Any], keys: tuple[str, ...], default: float, title: str) -> float:
    for key in keys:
        if key not in data:
            continue
        value = data[key]
        if _is_positive(value):
            return value
        logger.warning("Song %r: invalid %s=%r, using %s", title, key, value, default)
        return default
    return default


def _normalise_notes(raw: Any, title: str) -> tuple[NoteId, ...]:
    if not isinstance(raw, (list, tuple)):
        if raw is not None:
            logger.warning("Song %r: notes must be a list, got %r", title, type(raw).__name__)
        return ()
    notes: list[NoteId] = []
    for item in raw:
        if isinstance(item, bool):
            continue
        if isinstance(item, int) and 0 <= item <= 127:
            notes.append(item)
        elif isinstance(item, str) and item.strip():
            notes.append(item.strip())
        else:
            logger.warning("Song %r: dropping invalid note %r", title, item)
    return tuple(notes)


_TIMING_FIELDS = frozenset({
    "words_per_minute", "pixels_per_interval", "delay_per_movement_ms", "letter_delay_ms",
})


@dataclass(frozen=True)
class SongConfig:
    """Immutable configuration for the active song."""

    title: str = "Untitled"
    words_per_minute: float = DEFAULT_WORDS_PER_MINUTE
    pixels_per_interval: float = DEFAULT_PIXELS_PER_INTERVAL
    delay_per_movement_ms: float = DEFAULT_DELAY_PER_MOVEMENT_MS
    notes: tuple[NoteId, ...] = ()
    spawn_policy: SpawnPolicy = SpawnPolicy.TEMPO
    letter_delay_ms: float = DEFAULT_LETTER_DELAY_MS

    def __post_init__(self) -> None:
        # A non-positive period would keep the timer queue firing at the same instant.
        for f in fields(self):
            if f.name in _TIMING_FIELDS and not _is_positive(getattr(self, f.name)):
                logger.warning("Song %r: invalid %s=%r, using %s",
                               self.title, f.name, getattr(self, f.name), f.default)
                object.__setattr__(self, f.name, f.default)

    @classmethod
    def from_dict(cls, data: dict[str, Any], title: str | None = None) -> SongConfig:
        """Build a config from a song sheet, falling back to defaults field by field.

        Accepts the camelCase keys used by song sheets as well as snake_case.
        """
        if not isinstance(data, dict):
            logger.warning("Song sheet is not an object (%r), using defaults", type(data).__name__)
            data = {}
        name = title or str(data.get("title") or "Untitled")

        policy = SpawnPolicy.TEMPO
        raw_policy = data.get("spawnPolicy", data.get("spawn_policy"))
        if raw_policy is not None:
            try:
                policy = SpawnPolicy(str(raw_policy).lower())
            except ValueError:
                logger.warning("Song %r: unknown spawn policy %r, using tempo", name, raw_policy)

        return cls(
            title=name,
            words_per_minute=_positive_number(
                data, ("wordsPerMinute", "words_per_minute"), DEFAULT_WORDS_PER_MINUTE, name),
            pixels_per_interval=_positive_number(
                data, ("pixelsPerInterval", "pixels_per_interval"), DEFAULT_PIXELS_PER_INTERVAL, name),
            delay_per_movement_ms=_positive_number(
                data, ("delayPerMovementMs", "delay_per_movement_ms"), DEFAULT_DELAY_PER_MOVEMENT_MS, name),
            notes=_normalise_notes(data.get("notes"), name),
            spawn_policy=policy,
            letter_delay_ms=_positive_number(
                data, ("letterDelayMs", "letter_delay_ms"), DEFAULT_LETTER_DELAY_MS, name),
        )


@dataclass(frozen=True)
class Letter:
    """A single falling glyph. Positions are replaced, never mutated in place."""

    id: int
    char: str
    top: float  # vertical offset from the lane top
    left: float  # horizontal offset from the lane left edge
    word_index: int

    def moved(self, dy: float) -> Letter:
        return Letter(id=self.id, char=self.char, top=self.top + dy, left=self.left,
                      word_index=self.word_index)


@dataclass(frozen=True)
class HitIndicator:
    id: int
    kind: HitKind
    x: float
    y: float
    expires_at_ms: float


@dataclass(frozen=True)
class JudgeRules:
    """Miss-recovery policy.

    The defaults are the canonical behaviour: a wrong key removes the whole
    word without freezing, a correct but late key removes only that letter
    and briefly freezes movement.
    """

    wrong_key_clears_word: bool = True
    freeze_on_late_miss: bool = True
    lock_ms: float = INPUT_LOCK_MS
    freeze_ms: float = FREEZE_MS


@dataclass
class ScoreState:
    score: int = 0
    multiplier: int = 1
    combo: int = 0
    total_hits: int = 0
    total_possible: int = 0
    max_combo: int = 0

    def accuracy(self) -> float:
        if self.total_possible == 0:
            return 100.0
        return self.total_hits / self.total_possible * 100.0

    def record_hit(self, base_points: int) -> int:
        """Award a non-miss hit. Returns the points added after the multiplier."""
        points = base_points * self.multiplier
        self.score += points
        self.combo += 1
        self.max_combo = max(self.max_combo, self.combo)
        if self.combo % COMBO_PER_MULTIPLIER == 0:
            self.multiplier += 1
        self.total_hits += 1
        self.total_possible += 1
        return points

    def record_miss(self) -> None:
        self.combo = 0
        self.multiplier = 1
        self.total_possible += 1

    def reset(self) -> None:
        self.score = 0
        self.multiplier = 1
        self.combo = 0
        self.total_hits = 0
        self.total_possible = 0
        self.max_combo = 0


@dataclass
class Judgement:
    """Outcome of one resolved keystroke."""

    kind: HitKind
    letter: Letter
    distance: float | None = None  # None for wrong keys
    points: int = 0
