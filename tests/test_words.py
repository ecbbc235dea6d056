"""Tests for word selection and word list loading."""

import json
import random

import pytest

from wordfall.words import WordListError, WordSource, default_words, load_word_list


def test_cursor_kept_when_word_fits():
    source = WordSource(["piano"])
    assert source.next(lane_width=1000, letter_spacing=40, cursor=100) == ("piano", 100)


def test_cursor_exactly_at_edge_still_fits():
    source = WordSource(["piano"])
    assert source.next(1000, 40, 800) == ("piano", 800)


def test_cursor_resets_when_word_would_overflow():
    source = WordSource(["piano"])
    assert source.next(1000, 40, 900) == ("piano", 0)


def test_empty_list_yields_no_word():
    source = WordSource([])
    assert source.next(1000, 40, 120) == (None, 120)


def test_blank_and_non_string_entries_are_dropped():
    source = WordSource(["", "  ", 7, " cat "])
    assert len(source) == 1
    assert source.next(1000, 40, 0) == ("cat", 0)


def test_selection_covers_the_list():
    words = ["cat", "dog", "owl"]
    source = WordSource(words, rng=random.Random(3))
    seen = {source.next(1000, 40, 0)[0] for _ in range(200)}
    assert seen == set(words)


def test_load_word_list(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps(["alpha", " beta ", ""]))
    assert load_word_list(path) == ["alpha", "beta"]


def test_load_word_list_rejects_non_array(tmp_path):
    path = tmp_path / "words.json"
    path.write_text(json.dumps({"words": ["a"]}))
    with pytest.raises(WordListError):
        load_word_list(path)


def test_load_word_list_rejects_bad_json(tmp_path):
    path = tmp_path / "words.json"
    path.write_text("[not json")
    with pytest.raises(WordListError):
        load_word_list(path)


def test_default_words_are_bundled():
    words = default_words()
    assert words
    assert all(w.isalpha() for w in words)
