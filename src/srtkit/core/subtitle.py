"""Subtitle domain models."""

from bisect import bisect_right
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass, field, replace
from itertools import pairwise
from operator import attrgetter

import structlog

from srtkit.core.errors import (
    IndexContiguityError,
    InvalidTimeRangeError,
    NegativeDurationError,
)
from srtkit.core.timestamp import Timestamp

logger = structlog.get_logger()


def _as_timestamp(value: Timestamp | int) -> Timestamp | None:
    """Accept either a Timestamp or a millisecond count.

    Negative counts lie before every cue and map to None.
    """
    if isinstance(value, Timestamp):
        return value
    if value < 0:
        return None
    return Timestamp.from_milliseconds(value)


@dataclass
class SubLine:
    """Single subtitle cue with timing and text."""

    index: int
    start: Timestamp
    end: Timestamp
    text: str

    def __post_init__(self):
        """Validate subtitle cue constraints."""
        if self.index < 1:
            raise IndexContiguityError(f"Index must be positive, got {self.index}")
        if self.start > self.end:
            raise InvalidTimeRangeError(
                f"Start time {self.start} must not be after end time {self.end}"
            )

    @property
    def duration(self) -> Timestamp:
        return self.end - self.start

    def contains(self, time: Timestamp | int) -> bool:
        """Return True if ``time`` lies within ``[start, end]``."""
        time = _as_timestamp(time)
        return time is not None and self.start <= time <= self.end

    def shift(self, offset: Timestamp, *, backward: bool = False) -> None:
        """Move the cue along the timeline.

        Args:
            offset: Amount of time to move by
            backward: Move towards zero instead of away from it

        Raises:
            NegativeDurationError: If a backward shift would move the start
                below zero. The cue is left unchanged.
        """
        if backward:
            if offset > self.start:
                raise NegativeDurationError(
                    f"Cannot shift cue {self.index} back by {offset}, "
                    f"it starts at {self.start}"
                )
            self.start, self.end = self.start - offset, self.end - offset
        else:
            self.start, self.end = self.start + offset, self.end + offset


@dataclass
class Subtitles:
    """Ordered collection of subtitle cues.

    Cue indices are 1-based and contiguous, and cues are sorted by start
    time. Construction copies every cue, so collections built from the same
    sequence never share state. Construction and structural operations
    (``push``, ``insert``, ``remove``) keep both invariants. In-place edits
    through ``apply`` or the cues returned by the lookups are not re-checked;
    call ``validate`` after edits that may reorder start times.

    Instances are not locked; concurrent writers must be serialized by the
    caller.
    """

    lines: list[SubLine] = field(default_factory=list)

    def __post_init__(self):
        """Validate subtitle collection constraints."""
        self.lines = [replace(line) for line in self.lines]
        self.validate()

    @classmethod
    def from_sequence(cls, lines: Iterable[SubLine]) -> "Subtitles":
        """Build a collection from cues already in index order.

        Raises:
            IndexContiguityError: If indices are not 1..n or starts are unsorted
        """
        return cls(lines=list(lines))

    def validate(self) -> None:
        """Check index contiguity and start-time ordering.

        Raises:
            IndexContiguityError: If either invariant is broken
        """
        for position, line in enumerate(self.lines, start=1):
            if line.index != position:
                logger.warning(
                    "subtitle_index_mismatch", expected=position, actual=line.index
                )
                raise IndexContiguityError(
                    f"Cue indices must be sequential starting from 1, "
                    f"expected {position} but got {line.index}"
                )

        for previous, current in pairwise(self.lines):
            if current.start < previous.start:
                logger.warning(
                    "subtitle_order_mismatch",
                    index=current.index,
                    start=str(current.start),
                    previous_start=str(previous.start),
                )
                raise IndexContiguityError(
                    f"Cues must be ordered by start time: cue {current.index} "
                    f"starts at {current.start}, before cue {previous.index} "
                    f"at {previous.start}"
                )

    def __len__(self) -> int:
        """Return number of cues."""
        return len(self.lines)

    def __iter__(self) -> Iterator[SubLine]:
        """Iterate over cues in index order."""
        return iter(self.lines)

    def __getitem__(self, position: int) -> SubLine:
        """Get cue by position (0-based)."""
        return self.lines[position]

    def by_index(self, index: int) -> SubLine | None:
        """Get the cue with the given 1-based index.

        The returned cue is the stored object, so edits to it apply in place.

        Returns:
            Matching cue, or None if ``index`` is out of range

        Raises:
            IndexContiguityError: If the stored cue carries a different index
        """
        if not 1 <= index <= len(self.lines):
            return None
        line = self.lines[index - 1]
        if line.index != index:
            raise IndexContiguityError(
                f"Subtitles structure is broken: position {index} holds "
                f"cue {line.index}"
            )
        return line

    def by_time(self, time: Timestamp | int) -> SubLine | None:
        """Find the cue whose ``[start, end]`` range contains ``time``.

        When ``time`` is both the end of one cue and the start of the next,
        the earlier cue wins. Among overlapping cues the earliest containing
        one is returned; the walk back to it is linear in the number of
        overlapping cues, so lookups stay logarithmic only for
        non-overlapping subtitles.

        Args:
            time: Timestamp or millisecond count

        Returns:
            Matching cue, or None if ``time`` falls outside every cue
        """
        time = _as_timestamp(time)
        if time is None:
            return None
        low, high = 0, len(self.lines) - 1
        found = None
        while low <= high:
            middle = (low + high) // 2
            guess = self.lines[middle]
            if time < guess.start:
                high = middle - 1
            elif time > guess.end:
                low = middle + 1
            else:
                found = middle
                break

        if found is None:
            return None
        # Inclusive end: a previous cue ending exactly at ``time`` takes it
        while found > 0 and self.lines[found - 1].end >= time:
            found -= 1
        return self.lines[found]

    def nearest_by_time(self, time: Timestamp | int) -> SubLine | None:
        """Find the cue on screen at ``time``, bridging gaps between cues.

        A cue covers ``[start, next.start)``; the last cue covers
        ``[start, end]``. When ``time`` is both the end of one cue and the
        start of the next, the later cue wins.

        Args:
            time: Timestamp or millisecond count

        Returns:
            Matching cue, or None if ``time`` is before the first start or
            after the last end
        """
        time = _as_timestamp(time)
        if time is None:
            return None
        position = bisect_right(self.lines, time, key=attrgetter("start")) - 1
        if position < 0:
            return None
        line = self.lines[position]
        if position == len(self.lines) - 1 and time > line.end:
            return None
        return line

    def push(self, line: SubLine) -> None:
        """Append a cue to the end.

        Raises:
            IndexContiguityError: If ``line.index`` is not ``len + 1`` or the
                cue starts before the current last cue
        """
        expected = len(self.lines) + 1
        if line.index != expected:
            raise IndexContiguityError(
                f"Pushed cue must have index {expected}, got {line.index}"
            )
        if self.lines and line.start < self.lines[-1].start:
            raise IndexContiguityError(
                f"Pushed cue starts at {line.start}, before the last cue "
                f"at {self.lines[-1].start}"
            )
        self.lines.append(line)

    def insert(self, line: SubLine) -> None:
        """Insert a cue at position ``line.index``, renumbering the following cues.

        Raises:
            IndexContiguityError: If the collection is already inconsistent,
                the index is out of ``1..len + 1`` or the cue's start does not
                fit between its new neighbours. The collection is left
                unchanged.
        """
        self.validate()
        if not 1 <= line.index <= len(self.lines) + 1:
            raise IndexContiguityError(
                f"Inserted cue index must be between 1 and {len(self.lines) + 1}, "
                f"got {line.index}"
            )

        position = line.index - 1
        before = self.lines[position - 1] if position > 0 else None
        after = self.lines[position] if position < len(self.lines) else None
        if (before is not None and line.start < before.start) or (
            after is not None and line.start > after.start
        ):
            raise IndexContiguityError(
                f"Inserted cue starting at {line.start} is out of time order "
                f"at index {line.index}"
            )

        for following in self.lines[position:]:
            following.index += 1
        self.lines.insert(position, line)
        logger.debug("subtitle_inserted", index=line.index, total=len(self.lines))

    def pop(self) -> SubLine | None:
        """Remove and return the last cue, or None if empty."""
        if not self.lines:
            return None
        return self.lines.pop()

    def remove(self, index: int) -> SubLine | None:
        """Remove the cue with the given 1-based index, renumbering the rest.

        Returns:
            Removed cue, or None if ``index`` is out of range
        """
        if not 1 <= index <= len(self.lines):
            return None
        removed = self.lines.pop(index - 1)
        for following in self.lines[index - 1 :]:
            following.index -= 1
        logger.debug("subtitle_removed", index=index, total=len(self.lines))
        return removed

    def shift(self, offset: Timestamp, *, backward: bool = False) -> None:
        """Move every cue along the timeline.

        Raises:
            NegativeDurationError: If a backward shift would move the first
                cue below zero. No cue is changed.
        """
        if backward and self.lines:
            earliest = min(line.start for line in self.lines)
            if offset > earliest:
                raise NegativeDurationError(
                    f"Cannot shift subtitles back by {offset}, "
                    f"earliest cue starts at {earliest}"
                )
        for line in self.lines:
            line.shift(offset, backward=backward)

    def edit_text(self, index: int, text: str) -> SubLine:
        """Replace the text of the cue with the given 1-based index.

        Raises:
            IndexError: If ``index`` is out of range
        """
        line = self.by_index(index)
        if line is None:
            raise IndexError(f"No cue with index {index}")
        line.text = text
        return line

    def apply(self, transform: Callable[[SubLine], None]) -> None:
        """Call ``transform`` on every cue in index order, in place.

        The transform must not change indices or reorder start times.
        """
        for line in self.lines:
            transform(line)
