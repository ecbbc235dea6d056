"""Tests for lane colouring."""

from wordfall.effects import LetterView
from wordfall.renderer.colors import LETTER_ACTIVE, WORD_COLORS
from wordfall.renderer.lane import letter_color


def view(word_index, active=False):
    return LetterView(id=1, char="A", top=0, left=0, word_index=word_index, active=active)


def test_adjacent_words_use_different_colors():
    assert letter_color(view(0)) != letter_color(view(1))
    assert letter_color(view(0)) == letter_color(view(2)) == WORD_COLORS[0]


def test_active_letter_is_highlighted():
    assert letter_color(view(1, active=True)) == LETTER_ACTIVE
