"""Subtitle timestamp value type with carry arithmetic."""

import re
from dataclasses import dataclass
from datetime import timedelta
from typing import Self

from srtkit.core.errors import NegativeDurationError

_MS_PER_SECOND = 1000
_MS_PER_MINUTE = 60 * _MS_PER_SECOND
_MS_PER_HOUR = 60 * _MS_PER_MINUTE

_TIMESTAMP_RE = re.compile(r"^(\d{2,}):(\d{2}):(\d{2}),(\d{3})$")


@dataclass(frozen=True, order=True)
class Timestamp:
    """Point in time on a subtitle timeline.

    Fields are normalized on construction, so overflowing values carry upward:
    ``Timestamp(1, 120, 120, 1000) == Timestamp(3, 2, 1, 0)``. Hours are
    unbounded. Ordering is lexicographic over the fields, which matches
    ordering by total milliseconds.
    """

    hours: int = 0
    minutes: int = 0
    seconds: int = 0
    milliseconds: int = 0

    def __post_init__(self):
        """Carry overflowing fields into the next larger unit."""
        fields = (self.hours, self.minutes, self.seconds, self.milliseconds)
        if any(value < 0 for value in fields):
            raise NegativeDurationError(
                f"Timestamp fields cannot be negative, got {fields}"
            )

        total = (
            self.hours * _MS_PER_HOUR
            + self.minutes * _MS_PER_MINUTE
            + self.seconds * _MS_PER_SECOND
            + self.milliseconds
        )
        hours, rest = divmod(total, _MS_PER_HOUR)
        minutes, rest = divmod(rest, _MS_PER_MINUTE)
        seconds, milliseconds = divmod(rest, _MS_PER_SECOND)

        object.__setattr__(self, "hours", hours)
        object.__setattr__(self, "minutes", minutes)
        object.__setattr__(self, "seconds", seconds)
        object.__setattr__(self, "milliseconds", milliseconds)

    @classmethod
    def from_milliseconds(cls, total: int) -> Self:
        """Build a timestamp from a total number of milliseconds."""
        return cls(milliseconds=total)

    @classmethod
    def from_microseconds(cls, total: int) -> Self:
        """Build a timestamp from total microseconds, flooring to milliseconds."""
        return cls(milliseconds=total // 1000)

    @classmethod
    def from_timedelta(cls, value: timedelta) -> Self:
        """Build a timestamp from a non-negative timedelta."""
        if value < timedelta(0):
            raise NegativeDurationError(f"Timedelta cannot be negative, got {value}")
        return cls.from_microseconds(
            (value.days * 86_400 + value.seconds) * 1_000_000 + value.microseconds
        )

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse the SRT time form ``HH:MM:SS,mmm``.

        Args:
            value: Time string, hours may have more than two digits

        Returns:
            Parsed timestamp

        Raises:
            ValueError: If the string is not in ``HH:MM:SS,mmm`` form
        """
        match = _TIMESTAMP_RE.match(value.strip())
        if not match:
            raise ValueError(
                f"Invalid timestamp '{value}', expected 'HH:MM:SS,mmm'"
            )
        hours, minutes, seconds, milliseconds = (int(g) for g in match.groups())
        return cls(hours, minutes, seconds, milliseconds)

    def total_milliseconds(self) -> int:
        """Return the timestamp as a single millisecond magnitude."""
        return (
            self.hours * _MS_PER_HOUR
            + self.minutes * _MS_PER_MINUTE
            + self.seconds * _MS_PER_SECOND
            + self.milliseconds
        )

    def to_timedelta(self) -> timedelta:
        return timedelta(milliseconds=self.total_milliseconds())

    def __add__(self, other: object) -> "Timestamp":
        if not isinstance(other, Timestamp):
            return NotImplemented
        return Timestamp(
            self.hours + other.hours,
            self.minutes + other.minutes,
            self.seconds + other.seconds,
            self.milliseconds + other.milliseconds,
        )

    def __sub__(self, other: object) -> "Timestamp":
        """Return the difference between two timestamps.

        Raises:
            NegativeDurationError: If ``other`` is later than ``self``
        """
        if not isinstance(other, Timestamp):
            return NotImplemented
        if self < other:
            raise NegativeDurationError(
                f"Cannot subtract {other} from {self}, "
                "a timestamp cannot be negative"
            )
        return Timestamp.from_milliseconds(
            self.total_milliseconds() - other.total_milliseconds()
        )

    def __str__(self) -> str:
        return (
            f"{self.hours:02d}:{self.minutes:02d}:"
            f"{self.seconds:02d},{self.milliseconds:03d}"
        )
