"""dailyword: a daily five-letter word puzzle engine."""

__version__ = "0.1.0"
