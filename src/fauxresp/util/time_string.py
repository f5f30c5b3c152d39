"""Human readable durations ("+1 day", "-2 hours", "1h 30m") to milliseconds."""

from __future__ import annotations

import logging
import re

logger = logging.getLogger(__name__)


_SECOND = 1000
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR

_UNITS: dict[str, int] = {
    "ms": 1,
    "msec": 1,
    "millisecond": 1,
    "s": _SECOND,
    "sec": _SECOND,
    "second": _SECOND,
    "m": _MINUTE,
    "min": _MINUTE,
    "minute": _MINUTE,
    "h": _HOUR,
    "hr": _HOUR,
    "hour": _HOUR,
    "d": _DAY,
    "day": _DAY,
    "w": 7 * _DAY,
    "week": 7 * _DAY,
    "y": 365 * _DAY,
    "yr": 365 * _DAY,
    "year": 365 * _DAY,
}

# Longest duration accepted either way; keeps now + duration inside datetime range.
MAX_DURATION_MS = 1000 * 365 * _DAY

_TERM = re.compile(r"(\d+(?:\.\d+)?|\.\d+)\s*([a-z]*)")
_SEPARATOR = re.compile(r"[\s,]*")


def _unit_factor(unit: str) -> int | None:
    if unit == "":
        return 1
    if unit in _UNITS:
        return _UNITS[unit]
    # plurals: "days", "hours", "mins"
    if unit.endswith("s") and unit[:-1] in _UNITS:
        return _UNITS[unit[:-1]]
    return None


def parse_duration(text: str) -> int:
    """
    Convert a duration string to a signed number of milliseconds.

    A leading ``+`` or ``-`` applies to the whole expression. Terms are
    ``<number><unit>`` with optional whitespace in between; several terms may
    follow each other separated by spaces or commas. A bare number counts as
    milliseconds.

    Raises ValueError if the string is empty, any part of it doesn't parse, or
    the total exceeds MAX_DURATION_MS (1000 years) in either direction.
    """
    source = text.strip().lower()
    sign = 1
    if source[:1] in ("+", "-"):
        sign = -1 if source[0] == "-" else 1
        source = source[1:].lstrip()

    if not source:
        raise ValueError(f"empty duration: {text!r}")

    total = 0.0
    pos = 0
    while pos < len(source):
        match = _TERM.match(source, pos)
        if match is None:
            raise ValueError(f"invalid duration {text!r} at {source[pos:]!r}")
        number, unit = match.groups()
        factor = _unit_factor(unit)
        if factor is None:
            raise ValueError(f"unknown duration unit {unit!r} in {text!r}")
        total += float(number) * factor
        pos = _SEPARATOR.match(source, match.end()).end()

    if total > MAX_DURATION_MS:
        raise ValueError(f"duration {text!r} exceeds 1000 years")

    millis = sign * int(round(total))
    logger.debug("parsed duration %r as %d ms", text, millis)
    return millis


to_milliseconds = parse_duration
