"""Hit evaluation — resolve keystrokes against the active letter."""

from __future__ import annotations

import logging
from typing import Protocol

from wordfall.config import (
    BAD_WINDOW_PX,
    LETTER_HEIGHT,
    OK_WINDOW_PX,
    PERFECT_WINDOW_PX,
    SCORE_VALUES,
    TARGET_LINE_OFFSET,
)
from wordfall.effects import Effect, PlayCue, PlayNote
from wordfall.lane import LaneState
from wordfall.models import Cue, HitKind, JudgeRules, Judgement, Letter, ScoreState, SongConfig
from wordfall.movement import MovementClock
from wordfall.spawner import SpawnScheduler
from wordfall.timers import TimerHandle, TimerQueue

logger = logging.getLogger(__name__)

_MODIFIER_KEYS = {
    "Shift", "Control", "Alt", "AltGraph", "Meta", "OS", "Super", "Hyper", "Fn",
    "CapsLock", "NumLock", "ScrollLock",
}
_NAVIGATION_KEYS = {
    "ArrowUp", "ArrowDown", "ArrowLeft", "ArrowRight", "Home", "End", "PageUp", "PageDown",
    "Tab", "Insert", "Delete", "Backspace", "Enter", "ContextMenu", "PrintScreen", "Pause",
}
_SPACE_KEYS = {" ", "Space", "Spacebar"}
IGNORED_KEYS = frozenset(_MODIFIER_KEYS | _NAVIGATION_KEYS | _SPACE_KEYS)


def is_ignored_key(key: str) -> bool:
    """True for keys that never reach the judge (modifiers, navigation, F-keys, space)."""
    if not key or key in IGNORED_KEYS:
        return True
    return key[0] == "F" and key[1:].isdigit()


def distance_to_target(letter: Letter, lane_height: float) -> float:
    """Pixel distance between the letter's vertical centre and the target line."""
    target_y = lane_height - TARGET_LINE_OFFSET
    return abs(letter.top + LETTER_HEIGHT / 2 - target_y)


def classify_distance(distance: float) -> HitKind:
    if distance <= PERFECT_WINDOW_PX:
        return HitKind.PERFECT
    elif distance <= OK_WINDOW_PX:
        return HitKind.OK
    elif distance <= BAD_WINDOW_PX:
        return HitKind.BAD
    return HitKind.MISS


class EffectSink(Protocol):
    def emit(self, effect: Effect) -> None: ...
    def show_indicator(self, kind: HitKind, x: float, y: float) -> None: ...


class InputJudge:
    """Stateful judge: owns the input lock and the song's note cursor."""

    def __init__(
        self,
        timers: TimerQueue,
        lane: LaneState,
        score: ScoreState,
        spawner: SpawnScheduler,
        movement: MovementClock,
        song: SongConfig,
        sink: EffectSink,
        rules: JudgeRules | None = None,
    ) -> None:
        self.song = song
        self.rules = rules or JudgeRules()
        self._clock = timers
        self._lane = lane
        self._score = score
        self._spawner = spawner
        self._movement = movement
        self._sink = sink
        self._lock_handle: TimerHandle | None = None
        self.locked = False
        self.note_index = 0

    def judge(self, key: str) -> Judgement | None:
        """Resolve one keystroke. Returns None when the key was ignored."""
        if self.locked:
            return None
        active = self._lane.active_letter()
        if active is None:
            return None

        if key.upper() != active.char.upper():
            return self._wrong_key(active)

        distance = distance_to_target(active, self._lane.height)
        kind = classify_distance(distance)
        if kind == HitKind.MISS:
            return self._late_miss(active, distance)
        return self._hit(active, kind, distance)

    def _wrong_key(self, active: Letter) -> Judgement:
        self._sink.show_indicator(HitKind.WRONG, active.left, active.top)
        self._sink.emit(PlayCue(Cue.WRONG_KEY))
        self._score.record_miss()
        self.lock(self.rules.lock_ms)
        if self.rules.wrong_key_clears_word:
            removed = self._lane.remove_word(active.word_index)
            self._spawner.abandon_word(active.word_index)
        else:
            self._lane.remove(active.id)
            removed = [active]
        logger.debug("Wrong key on %r (word #%d), removed %d", active.char, active.word_index, len(removed))
        return Judgement(kind=HitKind.WRONG, letter=active)

    def _late_miss(self, active: Letter, distance: float) -> Judgement:
        self._lane.remove(active.id)
        self._score.record_miss()
        self._sink.show_indicator(HitKind.MISS, active.left, active.top)
        self._sink.emit(PlayCue(Cue.LINE_MISS))
        if self.rules.freeze_on_late_miss:
            self._movement.freeze(self.rules.freeze_ms)
        return Judgement(kind=HitKind.MISS, letter=active, distance=distance)

    def _hit(self, active: Letter, kind: HitKind, distance: float) -> Judgement:
        points = self._score.record_hit(SCORE_VALUES[kind.name])
        self._advance_note()
        self._lane.remove(active.id)
        self._sink.show_indicator(kind, active.left, active.top)
        return Judgement(kind=kind, letter=active, distance=distance, points=points)

    def _advance_note(self) -> None:
        notes = self.song.notes
        if not notes:
            return
        note = notes[self.note_index % len(notes)]
        self.note_index = (self.note_index + 1) % len(notes)
        self._sink.emit(PlayNote(note))

    def lock(self, duration_ms: float) -> None:
        if self._lock_handle:
            self._lock_handle.cancel()
        self.locked = True
        self._lock_handle = self._clock.call_later(duration_ms, self.unlock)

    def unlock(self) -> None:
        if self._lock_handle:
            self._lock_handle.cancel()
            self._lock_handle = None
        self.locked = False

    def reset(self) -> None:
        self.unlock()
        self.note_index = 0
