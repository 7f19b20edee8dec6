"""Subtitle error hierarchy."""


class SubtitleError(Exception):
    """Base error for all subtitle model and format failures."""


class NegativeDurationError(SubtitleError):
    """Raised when an operation would produce a negative timestamp."""


class InvalidTimeRangeError(SubtitleError, ValueError):
    """Raised when a cue starts after it ends."""


class IndexContiguityError(SubtitleError):
    """Raised when cue indices are not contiguous or cues are out of time order."""
