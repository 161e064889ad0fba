"""
Keyboard classification: best verdict seen so far for each letter.

The presentation layer recolors keys from this map. Upgrades are
monotonic (ABSENT < WRONG_LOCATION < CORRECT); a later, weaker verdict for
the same letter never replaces a stronger one.
"""

from __future__ import annotations

from typing import Dict, Iterable, Mapping, Optional

from .scoring import LetterVerdict

KeyClassification = Dict[str, LetterVerdict]


def merge_guess(
        current: Mapping[str, LetterVerdict],
        word: str,
        verdicts: Iterable[LetterVerdict],
) -> KeyClassification:
    """
    Return a new classification with one scored guess folded in.

    `current` is not modified, so callers can compute the update before
    committing any other state.
    """
    out: KeyClassification = dict(current)
    for letter, verdict in zip(word.lower(), verdicts):
        best = out.get(letter)
        if best is None or verdict.rank > best.rank:
            out[letter] = verdict
    return out


def classify(letter: str, classification: Mapping[str, LetterVerdict]) -> Optional[LetterVerdict]:
    """Verdict for a single key, or None if the letter was never guessed."""
    return classification.get(letter.lower())
