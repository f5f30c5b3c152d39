"""Fluent HTTP response builder."""

from .http.builder import ResponseBuilder
from .http.response import HttpResponse
from .http.status import StatusCode, reason_phrase
from .http.wire import encode_response, write_response
from .util.time_string import parse_duration

__version__ = "0.1.0"

__all__ = [
    # Building
    "ResponseBuilder",
    "HttpResponse",
    "StatusCode",
    "reason_phrase",
    # Transport
    "encode_response",
    "write_response",
    # Durations
    "parse_duration",
]
