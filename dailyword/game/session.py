"""
Game session: one daily game from the first keystroke to WON or LOST.

The session wires together the catalog (dictionary + targets), the board
(active entry) and the evaluator, and owns the state machine:

    IN_PROGRESS --(guess == target)------------------> WON
    IN_PROGRESS --(max_attempts guesses, no match)---> LOST

WON and LOST are terminal. Typing and deleting become no-ops, and
submit_guess raises GameAlreadyOver.

Submitting never partially updates the session: verdicts and the new key
classification are computed first, then committed together.
"""

from __future__ import annotations

import datetime as dt
import enum
import logging
from dataclasses import dataclass
from typing import Dict, Iterator, List, Optional, Tuple, Union

from dailyword.datasets.catalog import WordCatalog
from dailyword.engine.errors import GameAlreadyOver
from dailyword.engine.keyboard import KeyClassification, merge_guess
from dailyword.engine.scoring import WORD_LENGTH, LetterVerdict, Verdicts, evaluate, pattern_string
from .board import BoardState
from .config import MAX_ATTEMPTS, GameConfig
from .days import DaySelector

logger = logging.getLogger(__name__)


class GameStatus(enum.Enum):
    IN_PROGRESS = "in_progress"
    WON = "won"
    LOST = "lost"


class RejectReason(enum.Enum):
    TOO_SHORT = "too_short"
    NOT_IN_DICTIONARY = "not_in_dictionary"


class Outcome(enum.Enum):
    CONTINUE = "continue"
    WON = "won"
    LOST = "lost"


@dataclass(frozen=True)
class Guess:
    """A submitted word and its verdicts. Immutable once produced."""
    word: str
    verdicts: Verdicts

    @property
    def pattern(self) -> str:
        return pattern_string(self.verdicts)


@dataclass(frozen=True)
class Rejected:
    reason: RejectReason


@dataclass(frozen=True)
class Scored:
    guess: Guess
    outcome: Outcome


SubmitResult = Union[Rejected, Scored]

# (letters, verdicts) per board row; verdicts is None for unscored rows
Row = Tuple[str, Optional[Verdicts]]


class GameSession:
    def __init__(self, target: str, catalog: WordCatalog, *,
                 max_attempts: int = MAX_ATTEMPTS, word_length: int = WORD_LENGTH):
        self.word_length = int(word_length)
        self.max_attempts = int(max_attempts)
        self.catalog = catalog
        self._target = target.strip().lower()
        # fail fast on a mis-sized target instead of on the first submit
        evaluate(self._target, self._target, self.word_length)

        self._board = BoardState(self.word_length)
        self._guesses: List[Guess] = []
        self._keys: KeyClassification = {}
        self._status = GameStatus.IN_PROGRESS
        logger.debug("session started (N=%d, max_attempts=%d)", self.word_length, self.max_attempts)

    @classmethod
    def for_day(cls, catalog: WordCatalog, config: Optional[GameConfig] = None,
                now: Optional[dt.datetime] = None) -> "GameSession":
        """Session for the word of `now`'s day (default: today)."""
        config = config or GameConfig()
        if config.word_length != catalog.word_length:
            raise ValueError(f"config word_length {config.word_length} does not match "
                             f"catalog word_length {catalog.word_length}")
        target = DaySelector(catalog, config.epoch).target_word_for(now)
        return cls(target, catalog, max_attempts=config.max_attempts, word_length=config.word_length)

    # ---- observers ----

    @property
    def target(self) -> str:
        return self._target

    @property
    def status(self) -> GameStatus:
        return self._status

    @property
    def is_over(self) -> bool:
        return self._status is not GameStatus.IN_PROGRESS

    @property
    def guesses(self) -> Tuple[Guess, ...]:
        return tuple(self._guesses)

    @property
    def active_entry(self) -> str:
        return self._board.active_entry

    @property
    def attempts_left(self) -> int:
        return self.max_attempts - len(self._guesses)

    @property
    def key_classification(self) -> Dict[str, LetterVerdict]:
        return dict(self._keys)

    def rows(self) -> Iterator[Row]:
        """One row per board line: scored rows, then the active row, then blanks."""
        for g in self._guesses:
            yield g.word, g.verdicts
        remaining = self.max_attempts - len(self._guesses)
        if remaining > 0 and not self.is_over:
            yield self._board.active_entry, None
            remaining -= 1
        for _ in range(remaining):
            yield "", None

    # ---- mutations ----

    def type_letter(self, ch: str) -> bool:
        if self.is_over:
            return False
        return self._board.type_letter(ch)

    def delete_letter(self) -> bool:
        if self.is_over:
            return False
        return self._board.delete_letter()

    def submit_guess(self) -> SubmitResult:
        if self.is_over:
            raise GameAlreadyOver(f"game is already {self._status.value}")

        if self._board.current_entry_length() != self.word_length:
            logger.debug("rejected: %d/%d letters", self._board.current_entry_length(), self.word_length)
            return Rejected(RejectReason.TOO_SHORT)

        candidate = self._board.take_active_entry_as_word()
        if not self.catalog.is_valid_guess(candidate):
            logger.debug("rejected: %r not in word list", candidate)
            return Rejected(RejectReason.NOT_IN_DICTIONARY)

        verdicts = evaluate(candidate, self._target, self.word_length)
        guess = Guess(candidate, verdicts)
        keys = merge_guess(self._keys, candidate, verdicts)

        if candidate == self._target:
            status, outcome = GameStatus.WON, Outcome.WON
        elif len(self._guesses) + 1 == self.max_attempts:
            status, outcome = GameStatus.LOST, Outcome.LOST
        else:
            status, outcome = GameStatus.IN_PROGRESS, Outcome.CONTINUE

        # commit
        self._guesses.append(guess)
        self._keys = keys
        self._board.clear()
        self._status = status

        logger.info("guess %d/%d %s -> %s", len(self._guesses), self.max_attempts,
                    candidate, guess.pattern)
        if status is not GameStatus.IN_PROGRESS:
            logger.info("game over: %s after %d guess(es)", status.value, len(self._guesses))
        return Scored(guess, outcome)
