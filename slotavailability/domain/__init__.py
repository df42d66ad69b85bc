"""
Domain layer - Pure business logic without external dependencies.
"""

from .availability import Availability
from .exceptions import (
    AvailabilityError,
    InvalidIntervalError,
    InvalidRangeError,
    InvalidTimezoneError,
    ParseError,
)
from .models import TimeRange
from .range_merger import merge_ranges
from .range_subtractor import Removed, Split, Trimmed, Unchanged, subtract_range

__all__ = [
    "Availability",
    "AvailabilityError",
    "InvalidIntervalError",
    "InvalidRangeError",
    "InvalidTimezoneError",
    "ParseError",
    "TimeRange",
    "merge_ranges",
    "subtract_range",
    "Unchanged",
    "Trimmed",
    "Split",
    "Removed",
]
