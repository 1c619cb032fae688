"""Reading-time estimation for blog bodies."""

from math import ceil

from app.configs import WORDS_PER_MINUTE


def count_words(text: str) -> int:
    """Count runs of non-whitespace characters."""
    return len(text.split())


def calculate_reading_time(text: object) -> int:
    """
    Estimate the minutes needed to read ``text``.

    Words are counted, divided by the reading speed and rounded up, with a
    floor of one minute for any non-empty string.

    Args:
        text: Blog body. Anything other than a non-empty string has no
            computable reading time.

    Returns:
        int: Minutes to read, or 0 for non-string or empty input.

    Examples:
    --------
    >>> calculate_reading_time("word")
    1
    >>> calculate_reading_time(" ".join(["word"] * 201))
    2
    >>> calculate_reading_time("")
    0
    """
    if not isinstance(text, str) or not text:
        return 0

    return max(1, ceil(count_words(text) / WORDS_PER_MINUTE))
