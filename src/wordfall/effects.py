"""Effect records emitted by the engine to rendering and audio collaborators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Union

from wordfall.models import Cue, HitIndicator, NoteId


@dataclass(frozen=True)
class HitIndicatorShown:
    indicator: HitIndicator


@dataclass(frozen=True)
class PlayNote:
    note_id: NoteId


@dataclass(frozen=True)
class PlayCue:
    cue: Cue


@dataclass(frozen=True)
class ScoreSnapshot:
    score: int
    multiplier: int
    combo: int
    accuracy: float
    max_combo: int = 0


@dataclass(frozen=True)
class LetterView:
    id: int
    char: str
    top: float
    left: float
    word_index: int
    active: bool


@dataclass(frozen=True)
class LaneSnapshot:
    letters: tuple[LetterView, ...]

    @property
    def active(self) -> LetterView | None:
        for view in self.letters:
            if view.active:
                return view
        return None


Effect = Union[HitIndicatorShown, PlayNote, PlayCue, ScoreSnapshot, LaneSnapshot]
EffectListener = Callable[[Effect], None]
