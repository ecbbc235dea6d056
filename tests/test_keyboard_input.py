"""Tests for pygame key event translation."""

import pygame

from wordfall.keyboard_input import key_name


def keydown(key, unicode=""):
    return pygame.event.Event(pygame.KEYDOWN, key=key, unicode=unicode)


def test_printable_keys_use_their_text():
    assert key_name(keydown(pygame.K_a, "a")) == "a"
    assert key_name(keydown(pygame.K_a, "A")) == "A"


def test_named_keys():
    assert key_name(keydown(pygame.K_ESCAPE, "\x1b")) == "Escape"
    assert key_name(keydown(pygame.K_LSHIFT)) == "Shift"
    assert key_name(keydown(pygame.K_F5)) == "F5"
    assert key_name(keydown(pygame.K_SPACE, " ")) == " "
    assert key_name(keydown(pygame.K_TAB, "\t")) == "Tab"


def test_unmapped_non_printable_keys_are_dropped():
    assert key_name(keydown(pygame.K_a, "")) is None


def test_key_up_is_ignored():
    assert key_name(pygame.event.Event(pygame.KEYUP, key=pygame.K_a, unicode="a")) is None
