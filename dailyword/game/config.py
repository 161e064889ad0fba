"""
Game configuration.

Every constant the engine depends on is passed in through GameConfig; the
CLIs build one from their argparse flags.
"""

from __future__ import annotations

import argparse
import datetime as dt
from dataclasses import dataclass, field
from pathlib import Path

from dailyword.datasets.catalog import WordCatalog, default_paths
from dailyword.engine.scoring import WORD_LENGTH
from .days import DEFAULT_EPOCH

# Wordle's turn budget; the reference board has six rows.
MAX_ATTEMPTS = 6


def _default_dictionary() -> Path:
    return default_paths(WORD_LENGTH)[0]


def _default_targets() -> Path:
    return default_paths(WORD_LENGTH)[1]


@dataclass
class GameConfig:
    word_length: int = WORD_LENGTH
    max_attempts: int = MAX_ATTEMPTS
    epoch: dt.datetime = DEFAULT_EPOCH
    dictionary_path: Path = field(default_factory=_default_dictionary)
    targets_path: Path = field(default_factory=_default_targets)

    def __post_init__(self):
        if self.word_length < 1:
            raise ValueError(f"word_length must be positive; got {self.word_length}")
        if self.max_attempts < 1:
            raise ValueError(f"max_attempts must be positive; got {self.max_attempts}")
        self.dictionary_path = Path(self.dictionary_path)
        self.targets_path = Path(self.targets_path)

    def load_catalog(self) -> WordCatalog:
        return WordCatalog.from_files(self.dictionary_path, self.targets_path, self.word_length)

    @staticmethod
    def add_arguments(ap: argparse.ArgumentParser) -> None:
        """Register the shared game flags on a CLI parser."""
        dictionary, targets = default_paths(WORD_LENGTH)
        ap.add_argument("--N", type=int, default=WORD_LENGTH, help="word length")
        ap.add_argument("--max-attempts", type=int, default=MAX_ATTEMPTS,
                        help="number of guesses before the game is lost")
        ap.add_argument("--epoch", type=dt.date.fromisoformat, default=DEFAULT_EPOCH.date(),
                        help="first day of the target list (YYYY-MM-DD)")
        ap.add_argument("--dictionary", default=None,
                        help=f"path to accepted guesses (default: {dictionary.name} bundled list)")
        ap.add_argument("--targets", default=None,
                        help=f"path to daily target words (default: {targets.name} bundled list)")

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "GameConfig":
        dictionary, targets = default_paths(args.N)
        return cls(
            word_length=args.N,
            max_attempts=args.max_attempts,
            epoch=dt.datetime.combine(args.epoch, dt.time()),
            dictionary_path=Path(args.dictionary) if args.dictionary else dictionary,
            targets_path=Path(args.targets) if args.targets else targets,
        )
