"""
Word catalog: the valid-guess dictionary plus the ordered daily target list.

Pure data lookup. Words are normalized to lowercase on the way in, so
membership checks are case-insensitive and O(1) (frozenset).

Typical use:
    from dailyword.datasets import WordCatalog
    catalog = WordCatalog.default()
    catalog.is_valid_guess("CRANE")   # -> True
    catalog.target_for_index(0)       # -> first day's word
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import FrozenSet, Iterable, Tuple

from dailyword.engine.errors import IndexOutOfRange
from dailyword.engine.scoring import WORD_LENGTH
from dailyword.engine.validation import normalize, shape_problem
from .io import read_words

logger = logging.getLogger(__name__)

DATA_DIR = Path(__file__).resolve().parent / "data"


def default_paths(word_length: int = WORD_LENGTH) -> Tuple[Path, Path]:
    """(dictionary_path, targets_path) of the lists shipped with the package."""
    return DATA_DIR / f"dictionary_{word_length}.txt", DATA_DIR / f"targets_{word_length}.txt"


def _clean(words: Iterable[str], word_length: int, source: str) -> list[str]:
    out = []
    for raw in words:
        w = normalize(raw)
        if not w:
            continue
        problem = shape_problem(w, word_length)
        if problem:
            raise ValueError(f"{source} entry {raw!r}: {problem}")
        out.append(w)
    return out


class WordCatalog:
    def __init__(self, dictionary: Iterable[str], targets: Iterable[str], word_length: int = WORD_LENGTH):
        self.word_length = int(word_length)
        self._targets: Tuple[str, ...] = tuple(_clean(targets, self.word_length, "target"))
        # Every target must be guessable, even if the dictionary file forgot it.
        self._dictionary: FrozenSet[str] = frozenset(
            _clean(dictionary, self.word_length, "dictionary")) | frozenset(self._targets)
        logger.debug("catalog loaded: %d dictionary words, %d targets",
                     len(self._dictionary), len(self._targets))

    @classmethod
    def from_files(cls, dictionary_path: Path | str, targets_path: Path | str,
                   word_length: int = WORD_LENGTH) -> "WordCatalog":
        return cls(read_words(dictionary_path), read_words(targets_path), word_length)

    @classmethod
    def default(cls, word_length: int = WORD_LENGTH) -> "WordCatalog":
        return cls.from_files(*default_paths(word_length), word_length=word_length)

    @property
    def targets(self) -> Tuple[str, ...]:
        return self._targets

    @property
    def dictionary(self) -> FrozenSet[str]:
        return self._dictionary

    def is_valid_guess(self, word: str) -> bool:
        if not isinstance(word, str):
            return False
        return normalize(word) in self._dictionary

    def target_for_index(self, i: int) -> str:
        if i < 0 or i >= len(self._targets):
            raise IndexOutOfRange(
                f"day index {i} is outside the target list (0..{len(self._targets) - 1})")
        return self._targets[i]

    def __contains__(self, word) -> bool:
        return self.is_valid_guess(word)

    def __len__(self) -> int:
        return len(self._targets)
