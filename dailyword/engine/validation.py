"""
Lightweight word-shape validation.

A token is a well-formed word iff:
  - it is a string
  - it is alphabetic a–z only (after lowercasing)
  - it has exact length N

Dictionary membership is the catalog's job; this module only answers
"does this look like a word at all?".
"""

from __future__ import annotations

import string
from typing import Optional

LETTERS = frozenset(string.ascii_lowercase)


def normalize(word: str) -> str:
    return word.strip().lower()


def is_letter(ch) -> bool:
    """True for a single ASCII letter, either case."""
    return isinstance(ch, str) and len(ch) == 1 and ch.lower() in LETTERS


def is_well_formed(word, N: int) -> bool:
    if not isinstance(word, str):
        return False
    w = normalize(word)
    return len(w) == N and all(ch in LETTERS for ch in w)


def shape_problem(word: str, N: int) -> Optional[str]:
    """Human-readable reason `word` is malformed, or None if it is fine."""
    w = normalize(word)
    if len(w) != N:
        return f"expected {N} letters, got {len(w)}"
    if not all(ch in LETTERS for ch in w):
        return "contains characters outside a-z"
    return None
