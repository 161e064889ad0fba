"""
Wordle-style scoring (verdicts) for a single (guess, target) pair.

Conventions:
  - CORRECT        ('G') : right letter in the right position
  - WRONG_LOCATION ('Y') : letter is in the target, elsewhere
  - ABSENT         ('-') : letter not present (or present fewer times than guessed)

Algorithm (two-pass, consume-on-match):
  1) First pass marks all exact matches and counts the remaining (unmatched)
     letters of the target.
  2) Second pass marks WRONG_LOCATION only while the letter still has a
     remaining count, consuming one occurrence each time.

A single-pass `letter in target` check over-credits repeated letters:
for target "abcde", guess "aabbc" the second 'a' must be ABSENT because the
target's only 'a' was already consumed by position 0.
"""

from __future__ import annotations

import enum
from collections import Counter
from typing import Iterable, Tuple

from .errors import LengthMismatch

WORD_LENGTH = 5


class LetterVerdict(enum.Enum):
    """Outcome of scoring one guessed letter at one position."""

    ABSENT = "-"
    WRONG_LOCATION = "Y"
    CORRECT = "G"

    @property
    def rank(self) -> int:
        return _RANK[self]

    @property
    def symbol(self) -> str:
        return self.value


_RANK = {
    LetterVerdict.ABSENT: 0,
    LetterVerdict.WRONG_LOCATION: 1,
    LetterVerdict.CORRECT: 2,
}

Verdicts = Tuple[LetterVerdict, ...]


def evaluate(guess: str, target: str, word_length: int = WORD_LENGTH) -> Verdicts:
    """
    Score `guess` against `target`.

    Both words are case-normalized. Raises LengthMismatch if either word is
    not exactly `word_length` letters long.

    Examples (as pattern strings):
      evaluate("belle", "level") -> "-GYYY"
      evaluate("aabbc", "abcde") -> "G-Y-Y"
    """
    guess = guess.strip().lower()
    target = target.strip().lower()
    if len(guess) != word_length or len(target) != word_length:
        raise LengthMismatch(
            f"guess {guess!r} and target must both be {word_length} letters "
            f"(got {len(guess)} and {len(target)})"
        )

    verdicts = [LetterVerdict.ABSENT] * word_length

    # Pass 1: exact matches; everything else in the target stays available.
    remaining: Counter = Counter()
    for i, (g, t) in enumerate(zip(guess, target)):
        if g == t:
            verdicts[i] = LetterVerdict.CORRECT
        else:
            remaining[t] += 1

    # Pass 2: wrong-location credit is capped by the letter's leftover count.
    for i, g in enumerate(guess):
        if verdicts[i] is LetterVerdict.CORRECT:
            continue
        if remaining[g] > 0:
            verdicts[i] = LetterVerdict.WRONG_LOCATION
            remaining[g] -= 1

    return tuple(verdicts)


def pattern_string(verdicts: Iterable[LetterVerdict]) -> str:
    """Render verdicts as a compact 'G'/'Y'/'-' string, e.g. "G-Y-Y"."""
    return "".join(v.symbol for v in verdicts)


def parse_pattern(pattern: str) -> Verdicts:
    """Inverse of pattern_string. Raises ValueError on unknown symbols."""
    try:
        return tuple(LetterVerdict(ch) for ch in pattern.strip().upper())
    except ValueError as e:
        raise ValueError(f"Invalid pattern {pattern!r}; expected only 'G', 'Y', '-'") from e


def score(guess: str, target: str, word_length: int = WORD_LENGTH) -> str:
    """Convenience: evaluate and return the pattern string."""
    return pattern_string(evaluate(guess, target, word_length))
