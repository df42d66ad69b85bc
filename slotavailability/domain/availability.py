"""
Core business logic for calculating free periods and bookable sessions.

Pure domain logic: no I/O, no caching. Every call recomputes its result from
the two merged range lists held by the instance.
"""

import logging
from typing import Any, Iterable, Iterator, List, Optional, Tuple

from pendulum import DateTime

from .models import TimeRange
from .parsing import (
    DEFAULT_DATE_FORMAT,
    DEFAULT_TIMEZONE,
    IntervalSpec,
    parse_interval,
    parse_range,
    parse_timezone,
)
from .range_merger import merge_ranges
from .range_subtractor import Removed, Split, subtract_range

logger = logging.getLogger(__name__)


class Availability:
    """
    Calculates free time and session start times from availability and bookings.

    Algorithm:
    1. Parse both input lists into TimeRange values
    2. Merge each list independently
    3. Subtract every booked range from every available range
    4. Slice what remains into fixed-length sessions
    """

    def __init__(
        self,
        available: Iterable[Any] = (),
        unavailable: Iterable[Any] = (),
        *,
        timezone: str = DEFAULT_TIMEZONE,
        date_format: str = DEFAULT_DATE_FORMAT,
    ):
        """
        Args:
            available: ``(start, end)`` pairs or TimeRange values
            unavailable: booked ``(start, end)`` pairs or TimeRange values
            timezone: Timezone applied to literals and naive datetimes
            date_format: pendulum format token string for literals

        Raises:
            InvalidTimezoneError: If the timezone name is unknown
            ParseError: If any literal cannot be parsed
            InvalidRangeError: If any range starts after it ends
        """
        self.timezone = parse_timezone(timezone)
        self._available = tuple(merge_ranges(
            parse_range(pair, date_format, timezone) for pair in available
        ))
        self._unavailable = tuple(merge_ranges(
            parse_range(pair, date_format, timezone) for pair in unavailable
        ))

    @classmethod
    def create(
        cls,
        available: Iterable[Any] = (),
        unavailable: Iterable[Any] = (),
        **kwargs: Any,
    ) -> "Availability":
        """Alternate constructor mirroring ``Availability(...)``."""
        return cls(available, unavailable, **kwargs)

    @property
    def available(self) -> Tuple[TimeRange, ...]:
        """Merged available ranges."""
        return self._available

    @property
    def unavailable(self) -> Tuple[TimeRange, ...]:
        """Merged unavailable ranges."""
        return self._unavailable

    def periods(self) -> List[TimeRange]:
        """
        Free time left after removing every unavailable range.

        Available ranges are handled in merged order. When a booking splits a
        range, both fragments are checked against the bookings that come after
        it, the left fragment first.
        """
        periods: List[TimeRange] = []

        for available in self._available:
            periods.extend(self._subtract_all(available))

        logger.debug(
            "%d available range(s) minus %d booking(s) left %d period(s)",
            len(self._available),
            len(self._unavailable),
            len(periods),
        )
        return periods

    def _subtract_all(self, available: TimeRange) -> List[TimeRange]:
        """Apply every unavailable range to one available range."""
        survivors: List[TimeRange] = []
        pending = [(available, 0)]

        while pending:
            fragment, position = pending.pop()
            current: Optional[TimeRange] = fragment

            for index in range(position, len(self._unavailable)):
                outcome = subtract_range(current, self._unavailable[index])

                if isinstance(outcome, Split):
                    # Right is pushed first so the left fragment comes out first
                    pending.append((outcome.right, index + 1))
                    pending.append((outcome.left, index + 1))
                    current = None
                    break

                if isinstance(outcome, Removed):
                    current = None
                    break

                current = outcome.range

            if current is not None:
                survivors.append(current)

        return survivors

    def iter_sessions(self, interval: IntervalSpec) -> Iterator[DateTime]:
        """
        Lazily yield session start times across all free periods.

        A start ``t`` is yielded only when ``t + interval`` still fits in its
        period, so the period end is never a start and short tails are dropped.

        Raises:
            InvalidIntervalError: If the interval is malformed or not positive
        """
        length = parse_interval(interval)
        return self._generate_sessions(length)

    def _generate_sessions(self, length) -> Iterator[DateTime]:
        for period in self.periods():
            current = period.start
            while period.fits(current, length):
                yield current
                current = current + length

    def sessions(self, interval: IntervalSpec) -> List[DateTime]:
        """Session start times across all free periods, in period order."""
        return list(self.iter_sessions(interval))

    def __repr__(self) -> str:
        return (
            f"Availability(available={len(self._available)}, "
            f"unavailable={len(self._unavailable)}, timezone={self.timezone!r})"
        )
