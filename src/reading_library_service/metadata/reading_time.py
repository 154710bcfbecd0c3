"""Reading time estimation."""

import math

DEFAULT_WORDS_PER_MINUTE = 225


def count_words(text: str) -> int:
    """Count whitespace-separated tokens."""
    return len(text.split())


def estimate_reading_time(text: str, words_per_minute: int = DEFAULT_WORDS_PER_MINUTE) -> int:
    """Estimate reading time in minutes.

    Args:
        text: Content text
        words_per_minute: Reading speed (default 225)

    Returns:
        ceil(words / words_per_minute), never less than 1
    """
    if words_per_minute <= 0:
        raise ValueError("words_per_minute must be positive")

    return max(1, math.ceil(count_words(text) / words_per_minute))
