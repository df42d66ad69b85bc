"""
Parsing helpers turning raw literals into pendulum instants and durations.
"""

import re
from datetime import datetime, timedelta
from typing import Any, Sequence, Union

import pendulum
from pendulum import DateTime

from .exceptions import InvalidIntervalError, InvalidTimezoneError, ParseError
from .models import TimeRange

DEFAULT_DATE_FORMAT = "YYYY-MM-DD HH:mm:ss"
DEFAULT_TIMEZONE = "UTC"

IntervalSpec = Union[str, timedelta]

_UNIT_ALIASES = {
    "w": "weeks", "week": "weeks", "weeks": "weeks",
    "d": "days", "day": "days", "days": "days",
    "h": "hours", "hr": "hours", "hrs": "hours", "hour": "hours", "hours": "hours",
    "m": "minutes", "min": "minutes", "mins": "minutes",
    "minute": "minutes", "minutes": "minutes",
    "s": "seconds", "sec": "seconds", "secs": "seconds",
    "second": "seconds", "seconds": "seconds",
}

_INTERVAL_PART = re.compile(r"(\d+)\s*([a-z]+)")
_INTERVAL = re.compile(
    r"\d+\s*[a-z]+(?:(?:\s*,\s*(?:and\s+)?|\s+and\s+|\s*)\d+\s*[a-z]+)*"
)


def parse_timezone(name: str) -> str:
    """
    Check that ``name`` is a timezone pendulum knows.

    Raises:
        InvalidTimezoneError: If the name is unknown.
    """
    try:
        pendulum.timezone(name)
    except ValueError as exc:
        raise InvalidTimezoneError(f"Unknown timezone: '{name}'") from exc
    return name


def parse_instant(
    value: Any,
    date_format: str = DEFAULT_DATE_FORMAT,
    timezone: str = DEFAULT_TIMEZONE,
) -> DateTime:
    """
    Convert a literal or datetime into a pendulum ``DateTime``.

    Naive ``datetime`` objects are placed in ``timezone``; aware ones keep
    their offset.

    Raises:
        ParseError: If the value is not a datetime and does not match
            ``date_format``.
    """
    if isinstance(value, DateTime):
        return value

    if isinstance(value, datetime):
        return pendulum.instance(value, tz=timezone)

    if not isinstance(value, str):
        raise ParseError(f"Cannot parse {value!r} as a date/time")

    try:
        return pendulum.from_format(value.strip(), date_format, tz=timezone)
    except ValueError as exc:
        raise ParseError(
            f"Invalid date/time '{value}' (expected format {date_format}): {exc}"
        ) from exc


def parse_range(
    pair: Any,
    date_format: str = DEFAULT_DATE_FORMAT,
    timezone: str = DEFAULT_TIMEZONE,
) -> TimeRange:
    """
    Build a TimeRange from a ``(start, end)`` pair or pass a TimeRange through.

    Raises:
        ParseError: If the pair is malformed or an element cannot be parsed.
        InvalidRangeError: If start is after end.
    """
    if isinstance(pair, TimeRange):
        return pair

    if isinstance(pair, (str, bytes)) or not isinstance(pair, Sequence) or len(pair) != 2:
        raise ParseError(f"Expected a (start, end) pair, got {pair!r}")

    start, end = pair
    return TimeRange(
        start=parse_instant(start, date_format, timezone),
        end=parse_instant(end, date_format, timezone),
    )


def parse_interval(spec: IntervalSpec) -> timedelta:
    """
    Parse a session interval such as ``"15 minutes"`` or ``"1 hour 30 min"``.

    Raises:
        InvalidIntervalError: If the interval is malformed or not positive.
    """
    if isinstance(spec, timedelta):
        interval = spec
    elif isinstance(spec, str):
        text = spec.strip().lower()
        # Amount/unit pairs, optionally joined by commas or "and"
        if not _INTERVAL.fullmatch(text):
            raise InvalidIntervalError(f"Invalid session interval: '{spec}'")

        amounts = {}
        for amount, unit in _INTERVAL_PART.findall(text):
            key = _UNIT_ALIASES.get(unit)
            if key is None:
                raise InvalidIntervalError(f"Unknown time unit '{unit}' in '{spec}'")
            amounts[key] = amounts.get(key, 0) + int(amount)
        try:
            interval = pendulum.duration(**amounts)
        except OverflowError as exc:
            raise InvalidIntervalError(f"Session interval too large: '{spec}'") from exc
    else:
        raise InvalidIntervalError(f"Invalid session interval: {spec!r}")

    if interval <= timedelta(0):
        raise InvalidIntervalError(f"Session interval must be positive, got '{spec}'")

    return interval
