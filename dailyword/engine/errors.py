"""
Error taxonomy for the game engine.

Only genuine contract violations are exceptions. Expected player-facing
outcomes (a short entry, a word that is not in the list) come back as
plain `Rejected` results from `GameSession.submit_guess`.
"""


class DailyWordError(Exception):
    """Base class for every error raised by dailyword."""


class LengthMismatch(DailyWordError, ValueError):
    """Evaluator called with a guess or target of the wrong length."""


class IncompleteGuess(DailyWordError, ValueError):
    """Active entry read as a word before it was fully typed."""


class IndexOutOfRange(DailyWordError, IndexError):
    """Day index falls outside the target-word list (fatal configuration error)."""


class GameAlreadyOver(DailyWordError, RuntimeError):
    """A guess was submitted after the session reached WON or LOST."""
