"""Small helpers shared by the HTTP layer."""

from .time_string import parse_duration, to_milliseconds

__all__ = [
    "parse_duration",
    "to_milliseconds",
]
