from .errors import DailyWordError, GameAlreadyOver, IncompleteGuess, IndexOutOfRange, LengthMismatch
from .scoring import WORD_LENGTH, LetterVerdict, evaluate, parse_pattern, pattern_string, score
from .keyboard import merge_guess
from .validation import is_well_formed

__all__ = [
    "WORD_LENGTH", "LetterVerdict", "evaluate", "score",
    "pattern_string", "parse_pattern", "merge_guess", "is_well_formed",
    "DailyWordError", "LengthMismatch", "IncompleteGuess", "IndexOutOfRange", "GameAlreadyOver",
]
