"""Lane state — the ordered collection of falling letters."""

from __future__ import annotations

import itertools

from wordfall.effects import LaneSnapshot, LetterView
from wordfall.models import Letter


class LaneState:
    """Letters in spawn order. Every mutation replaces the list wholesale."""

    def __init__(self, width: float, height: float) -> None:
        self.width = width
        self.height = height
        self._letters: tuple[Letter, ...] = ()
        self._ids = itertools.count(1)

    def __len__(self) -> int:
        return len(self._letters)

    @property
    def letters(self) -> tuple[Letter, ...]:
        return self._letters

    def spawn(self, char: str, left: float, word_index: int) -> Letter:
        letter = Letter(id=next(self._ids), char=char.upper(), top=0.0, left=left,
                        word_index=word_index)
        self._letters = self._letters + (letter,)
        return letter

    def active_letter(self) -> Letter | None:
        """Letter with the largest vertical offset; ties go to the earliest spawned."""
        active: Letter | None = None
        for letter in self._letters:
            if active is None or letter.top > active.top:
                active = letter
        return active

    def move_all(self, dy: float) -> tuple[Letter, ...]:
        self._letters = tuple(letter.moved(dy) for letter in self._letters)
        return self._letters

    def drop_below(self, limit: float) -> list[Letter]:
        """Remove letters whose top exceeds limit. Returns the removed letters."""
        kept = tuple(x for x in self._letters if x.top <= limit)
        removed = [x for x in self._letters if x.top > limit]
        self._letters = kept
        return removed

    def remove(self, letter_id: int) -> Letter | None:
        for letter in self._letters:
            if letter.id == letter_id:
                self._letters = tuple(x for x in self._letters if x.id != letter_id)
                return letter
        return None

    def remove_word(self, word_index: int) -> list[Letter]:
        removed = [x for x in self._letters if x.word_index == word_index]
        self._letters = tuple(x for x in self._letters if x.word_index != word_index)
        return removed

    def clear(self) -> list[Letter]:
        removed = list(self._letters)
        self._letters = ()
        return removed

    def snapshot(self) -> LaneSnapshot:
        active = self.active_letter()
        active_id = active.id if active else None
        return LaneSnapshot(letters=tuple(
            LetterView(id=x.id, char=x.char, top=x.top, left=x.left,
                       word_index=x.word_index, active=x.id == active_id)
            for x in self._letters
        ))
