import pytest
from dailyword.engine import (
    LetterVerdict, LengthMismatch, evaluate, is_well_formed, merge_guess, parse_pattern, pattern_string, score,
)

C, Y, A = LetterVerdict.CORRECT, LetterVerdict.WRONG_LOCATION, LetterVerdict.ABSENT


# --- golden tests (duplicates + placements) ---
@pytest.mark.parametrize("guess,target,expected", [
    ("belle", "level", "-GYYY"),
    ("level", "level", "GGGGG"),
    ("lemon", "level", "GG---"),
    ("cools", "scoop", "YYG-Y"),
    ("crane", "crane", "GGGGG"),
    ("raise", "crane", "YY--G"),
    ("stare", "crane", "--GYG"),
    ("slate", "crane", "--G-G"),
    ("train", "crane", "-GG-Y"),
    ("aabbc", "abcde", "G-Y-Y"),
    ("eerie", "there", "Y-Y-G"),
])
def test_score_golden(guess, target, expected):
    assert score(guess, target) == expected


def test_duplicate_letter_consumed_by_exact_match():
    verdicts = evaluate("aabbc", "abcde")
    assert verdicts == (C, A, Y, A, Y)
    # the target has a single 'a' and a single 'b': each is credited once
    assert [v for ch, v in zip("aabbc", verdicts) if ch == "a" and v is not A] == [C]
    assert [v for ch, v in zip("aabbc", verdicts) if ch == "b" and v is not A] == [Y]


def test_evaluate_is_case_insensitive_and_pure():
    assert evaluate("CRANE", "crane") == evaluate("crane", "CRANE") == (C,) * 5
    assert evaluate("slate", "crane") == evaluate("slate", "crane")


@pytest.mark.parametrize("guess,target", [("cran", "crane"), ("crane", "cranes"), ("", "crane")])
def test_evaluate_length_mismatch(guess, target):
    with pytest.raises(LengthMismatch):
        evaluate(guess, target)


def test_evaluate_other_lengths():
    assert score("settle", "letter", word_length=6) == "-GGGYY"


def test_pattern_round_trip_and_rejects_junk():
    assert pattern_string((C, Y, A)) == "GY-"
    assert parse_pattern("gy-") == (C, Y, A)
    with pytest.raises(ValueError):
        parse_pattern("GX-")


def test_merge_guess_never_downgrades():
    keys = merge_guess({}, "train", evaluate("train", "crane"))
    assert keys["r"] is C and keys["n"] is Y and keys["t"] is A
    # 'r' scores WRONG_LOCATION in "raise" but stays CORRECT
    keys2 = merge_guess(keys, "raise", evaluate("raise", "crane"))
    assert keys2["r"] is C
    assert keys2["e"] is C
    assert "e" not in keys  # merge returns a copy


def test_merge_guess_repeated_letter_takes_best():
    # 'e' at index 1 is absent, index 4 correct; the key shows CORRECT
    keys = merge_guess({}, "eerie", evaluate("eerie", "crane"))
    assert keys["e"] is C


def test_is_well_formed():
    assert is_well_formed("CRANE", 5) is True
    assert is_well_formed("cranes", 5) is False
    assert is_well_formed("cr4ne", 5) is False
    assert is_well_formed(None, 5) is False
