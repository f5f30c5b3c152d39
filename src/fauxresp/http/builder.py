"""Fluent accumulation of response headers, status and body."""

from __future__ import annotations

import json
import logging
import math
from datetime import datetime, timedelta, timezone
from email.utils import format_datetime
from typing import Any, Callable

from typing_extensions import Self

from ..util.time_string import parse_duration
from .response import HttpResponse
from .status import StatusCode

logger = logging.getLogger(__name__)


HeaderValues = dict[str, list[str]]
Clock = Callable[[], datetime]

DEFAULT_CONTENT_TYPE = "text/html"
DEFAULT_CACHE_DURATION = "+1 day"

# Sent with with_disabled_cache(); any date in the past works for Expires.
DISABLED_CACHE_EXPIRES = "Mon, 26 Jul 1997 05:00:00 GMT"
DISABLED_CACHE_CONTROL = "no-store, no-cache, must-revalidate, post-check=0, pre-check=0"


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


def http_date(moment: datetime) -> str:
    """Format ``moment`` as an IMF-fixdate (``Mon, 26 Jul 1997 05:00:00 GMT``)."""
    if moment.tzinfo is None:
        moment = moment.replace(tzinfo=timezone.utc)
    return format_datetime(moment.astimezone(timezone.utc), usegmt=True)


class ResponseBuilder:
    """
    Builds an HttpResponse through chained ``with_*`` calls.

    Headers are kept as a list of values per name until build() joins each
    list into a single header line. Names are case-sensitive here: "ETag" and
    "etag" are two different entries.

    build() doesn't consume the builder. It can be called again, and the
    builder can keep being mutated afterwards.
    """

    def __init__(self, *, clock: Clock | None = None):
        self._headers: HeaderValues = {}
        self._status: int = StatusCode.OK
        self._body = ""
        self._clock: Clock = clock or _utc_now

        self.with_header("Content-Type", DEFAULT_CONTENT_TYPE)

    def get_headers(self) -> HeaderValues:
        """All headers set so far. This is the live mapping, not a copy."""
        return self._headers

    def get_header(self, name: str) -> list[str]:
        """
        Values of a header as a list, or an empty list if it isn't set.

        Use get_header_line() to get them as a single string.
        """
        return self._headers.get(name, [])

    def get_header_line(self, name: str) -> str:
        """Values of a header joined with ", "."""
        return ", ".join(self.get_header(name))

    def has_header(self, name: str) -> bool:
        return name in self._headers

    def with_header(self, name: str, value: str) -> Self:
        """
        Set a header, replacing any values it had.

        Use with_added_header() to keep the existing values.
        """
        self._headers[name] = [value]
        return self

    def with_added_header(self, name: str, value: str) -> Self:
        """Append a value to a header, creating it if needed."""
        self._headers.setdefault(name, []).append(value)
        return self

    def with_type(self, mime: str = DEFAULT_CONTENT_TYPE) -> Self:
        return self.with_header("Content-Type", mime)

    def with_status(self, status: int = StatusCode.OK) -> Self:
        self._status = status
        return self

    def with_body(self, body: str) -> Self:
        self._body = body
        return self

    def with_text(self, text: str, *, encoding: str = "utf-8") -> Self:
        """Plain text body with a matching Content-Type."""
        return self.with_type(f"text/plain; charset={encoding}").with_body(text)

    def with_json(self, obj: Any) -> Self:
        """Compact JSON body with a matching Content-Type."""
        body = json.dumps(obj, separators=(",", ":"), ensure_ascii=False)
        return self.with_type("application/json; charset=utf-8").with_body(body)

    def with_cache(self, duration: str = DEFAULT_CACHE_DURATION) -> Self:
        """
        Add headers that let the client cache the response.

        ``duration`` is anything parse_duration() understands, e.g. "+1 day"
        or "2h 30m". Raises ValueError if it doesn't parse.
        """
        millis = parse_duration(duration)
        now = self._clock()
        expires = now + timedelta(milliseconds=millis)
        # round half up, the way browsers' Math.round does
        max_age = math.floor(millis / 1000 + 0.5)

        logger.debug("caching response for %s (%d s)", duration, max_age)
        return (
            self.with_header("Date", http_date(now))
            .with_header("Last-Modified", http_date(now))
            .with_header("Expires", http_date(expires))
            .with_header("max-age", str(max_age))
        )

    def with_disabled_cache(self) -> Self:
        """Add headers that tell the client not to cache the response."""
        return (
            self.with_header("Expires", DISABLED_CACHE_EXPIRES)
            .with_header("Last-Modified", http_date(self._clock()))
            .with_header("Cache-Control", DISABLED_CACHE_CONTROL)
        )

    def build(self) -> HttpResponse:
        """Build the final response that can be sent back to the client."""
        headers = {name: self.get_header_line(name) for name in self._headers}
        return HttpResponse(body=self._body, status=self._status, headers=headers)
