"""
Domain-specific exception hierarchy for the availability calculator.
"""


class AvailabilityError(Exception):
    """Base class for all application-level errors."""


class ParseError(AvailabilityError, ValueError):
    """Raised when a date/time literal cannot be parsed."""


class InvalidRangeError(AvailabilityError, ValueError):
    """Raised when a range starts after it ends."""


class InvalidIntervalError(AvailabilityError, ValueError):
    """Raised when a session interval is malformed or not positive."""


class InvalidTimezoneError(AvailabilityError, ValueError):
    """Raised when a timezone name is unknown."""
