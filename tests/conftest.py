import pytest

from dailyword.datasets import WordCatalog

WORDS = ["crane", "slate", "train", "stare", "raise", "trace", "adieu", "level", "belle", "abcde", "aabbc"]


@pytest.fixture
def catalog():
    return WordCatalog(WORDS, ["crane", "slate", "level"])
