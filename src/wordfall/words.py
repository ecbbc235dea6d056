"""Word list loading and random word selection with lane wrapping."""

from __future__ import annotations

import json
import logging
import random
from pathlib import Path
from typing import Iterable

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).parent / "data"
DEFAULT_WORDS_PATH = DATA_DIR / "words.json"


class WordListError(Exception):
    """Raised when a word list file cannot be read."""


def _clean(words: Iterable[object]) -> list[str]:
    cleaned: list[str] = []
    for word in words:
        if not isinstance(word, str):
            logger.warning("Skipping non-string word %r", word)
            continue
        word = word.strip()
        if word:
            cleaned.append(word)
    return cleaned


def load_word_list(path: str | Path) -> list[str]:
    """Read a JSON array of words."""
    path = Path(path)
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except (OSError, ValueError) as exc:
        raise WordListError(f"Failed to load word list {path.name}: {exc}") from exc
    if not isinstance(data, list):
        raise WordListError(f"{path.name} must contain a JSON array of words")
    return _clean(data)


def default_words() -> list[str]:
    return load_word_list(DEFAULT_WORDS_PATH)


class WordSource:
    """Picks words uniformly at random. Holds no iteration state of its own."""

    def __init__(self, words: Iterable[object], rng: random.Random | None = None) -> None:
        self._words = _clean(words)
        self._rng = rng or random.Random()
        if not self._words:
            logger.warning("Word list is empty; no letters will spawn")

    def __len__(self) -> int:
        return len(self._words)

    def next(self, lane_width: float, letter_spacing: float, cursor: float) -> tuple[str | None, float]:
        """Return (word, cursor to spawn it at). The word is None for an empty list."""
        if not self._words:
            return None, cursor
        word = self._rng.choice(self._words)
        if cursor + len(word) * letter_spacing > lane_width:
            cursor = 0
        return word, cursor
