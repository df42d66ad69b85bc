"""
Domain models for time range calculations.
"""

from dataclasses import dataclass
from datetime import timedelta
from typing import Iterator, Tuple

from pendulum import DateTime

from .exceptions import InvalidRangeError


@dataclass(frozen=True)
class TimeRange:
    """
    Represents an immutable closed time range with start and end datetime.

    Invariant: start must not be after end. Zero-length ranges are allowed.
    """
    start: DateTime
    end: DateTime

    def __post_init__(self):
        if self.start > self.end:
            raise InvalidRangeError(
                f"Start time {self.start} must not be after end time {self.end}"
            )

    def __iter__(self) -> Iterator[DateTime]:
        yield self.start
        yield self.end

    def as_pair(self) -> Tuple[DateTime, DateTime]:
        """Return the range as a ``(start, end)`` tuple."""
        return self.start, self.end

    def duration(self) -> timedelta:
        return self.end - self.start

    def duration_minutes(self) -> int:
        """Return the duration in minutes."""
        return int(self.duration().total_seconds() / 60)

    def overlaps(self, other: "TimeRange") -> bool:
        """Check if this range overlaps with another (touching does not count)."""
        return self.start < other.end and self.end > other.start

    def inclusive_overlaps(self, other: "TimeRange") -> bool:
        """
        Check for overlap, also counting ranges that share an endpoint.

        Two ranges where one ends exactly when the other starts are treated
        as contiguous.
        """
        return (
            self.overlaps(other)
            or self.start == other.start
            or self.start == other.end
            or other.start == self.end
            or other.end == self.end
        )

    def hull(self, other: "TimeRange") -> "TimeRange":
        """Smallest range covering both this range and ``other``."""
        return TimeRange(
            start=min(self.start, other.start),
            end=max(self.end, other.end),
        )

    def fits(self, start: DateTime, length: timedelta) -> bool:
        """Check whether ``[start, start + length]`` lies within this range."""
        return self.start <= start and start + length <= self.end

    def __str__(self) -> str:
        return f"{self.start.to_datetime_string()} - {self.end.to_datetime_string()}"
