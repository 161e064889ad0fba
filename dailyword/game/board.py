"""
Board state: the in-progress (active) entry the player is typing.

Submitted guesses live on the session; the board only knows about letters
that have not been scored yet.
"""

from __future__ import annotations

from typing import List

from dailyword.engine.errors import IncompleteGuess
from dailyword.engine.scoring import WORD_LENGTH
from dailyword.engine.validation import is_letter


class BoardState:
    def __init__(self, word_length: int = WORD_LENGTH):
        self.word_length = int(word_length)
        self._entry: List[str] = []

    @property
    def active_entry(self) -> str:
        return "".join(self._entry)

    def current_entry_length(self) -> int:
        return len(self._entry)

    def is_full(self) -> bool:
        return len(self._entry) >= self.word_length

    def type_letter(self, ch: str) -> bool:
        """Append one letter (lowercased). Returns True iff the entry changed."""
        if not is_letter(ch) or self.is_full():
            return False
        self._entry.append(ch.lower())
        return True

    def delete_letter(self) -> bool:
        if not self._entry:
            return False
        self._entry.pop()
        return True

    def take_active_entry_as_word(self) -> str:
        """The typed word; raises IncompleteGuess unless fully typed. Does not clear."""
        if len(self._entry) != self.word_length:
            raise IncompleteGuess(
                f"active entry has {len(self._entry)} of {self.word_length} letters")
        return self.active_entry

    def clear(self) -> None:
        self._entry.clear()
