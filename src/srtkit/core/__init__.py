"""Core subtitle model."""

from srtkit.core.errors import (
    IndexContiguityError,
    InvalidTimeRangeError,
    NegativeDurationError,
    SubtitleError,
)
from srtkit.core.subtitle import SubLine, Subtitles
from srtkit.core.timestamp import Timestamp

__all__ = [
    "IndexContiguityError",
    "InvalidTimeRangeError",
    "NegativeDurationError",
    "SubLine",
    "SubtitleError",
    "Subtitles",
    "Timestamp",
]
