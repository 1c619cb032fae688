"""Utility helper functions."""

from app.utils.helpers import as_utc, get_summary, host, utc_now
from app.utils.reading_time import calculate_reading_time, count_words

__all__ = [
    "as_utc",
    "calculate_reading_time",
    "count_words",
    "get_summary",
    "host",
    "utc_now",
]
