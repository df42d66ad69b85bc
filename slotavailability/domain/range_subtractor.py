"""
Subtraction of a single unavailable range from a single available range.

The outcome is one of four value types so callers can tell a trimmed range
from an untouched one and know when a booking split a block in two.
"""

from dataclasses import dataclass
from typing import Tuple, Union

from .models import TimeRange


@dataclass(frozen=True)
class Unchanged:
    """The unavailable range did not touch the available one."""
    range: TimeRange

    @property
    def ranges(self) -> Tuple[TimeRange, ...]:
        return (self.range,)


@dataclass(frozen=True)
class Trimmed:
    """The available range lost its leading or trailing portion."""
    range: TimeRange

    @property
    def ranges(self) -> Tuple[TimeRange, ...]:
        return (self.range,)


@dataclass(frozen=True)
class Split:
    """The unavailable range sat strictly inside the available one."""
    left: TimeRange
    right: TimeRange

    @property
    def ranges(self) -> Tuple[TimeRange, ...]:
        return (self.left, self.right)


@dataclass(frozen=True)
class Removed:
    """The available range was eclipsed entirely."""

    @property
    def ranges(self) -> Tuple[TimeRange, ...]:
        return ()


SubtractionResult = Union[Unchanged, Trimmed, Split, Removed]


def subtract_range(available: TimeRange, unavailable: TimeRange) -> SubtractionResult:
    """
    Remove ``unavailable`` from ``available``.

    The trim rules run one after another against the same working bounds:
    the trailing-trim check reads the start left by the leading-trim check,
    and the eclipse check reads both.

    Example:
        Available:   10:00 - 12:00
        Unavailable: 09:45 - 10:30
        Result:      Trimmed(10:30 - 12:00)
    """
    if not available.overlaps(unavailable):
        return Unchanged(available)

    if available.start < unavailable.start and available.end > unavailable.end:
        return Split(
            left=TimeRange(start=available.start, end=unavailable.start),
            right=TimeRange(start=unavailable.end, end=available.end),
        )

    start = available.start
    end = available.end

    # Booking covers the front
    if start >= unavailable.start and end > unavailable.end:
        start = unavailable.end

    # Booking covers the back
    if end > unavailable.start and end <= unavailable.end:
        end = unavailable.start

    if start >= unavailable.start and end <= unavailable.end:
        return Removed()

    return Trimmed(TimeRange(start=start, end=end))
