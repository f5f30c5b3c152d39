"""Serialize built responses onto an AnyIO byte stream.

One response per connection: unless the response says otherwise, the
serialized form carries ``Connection: close`` and a ``Content-Length``
computed from the encoded body.
"""

from __future__ import annotations

import logging

from anyio.abc import ByteSendStream

from .response import HttpResponse
from .status import reason_phrase

logger = logging.getLogger(__name__)


def status_line(status: int) -> str:
    return f"HTTP/1.1 {int(status)} {reason_phrase(status)}\r\n"


def _header_line(name: str, value: str) -> bytes:
    if any(c in "\r\n" for c in name + value):
        raise ValueError(f"header {name!r} contains a line break")
    try:
        return f"{name}: {value}\r\n".encode("latin-1")
    except UnicodeEncodeError as e:
        raise ValueError(f"header {name!r} is not latin-1 encodable: {value!r}") from e


def encode_response(response: HttpResponse, encoding: str = "utf-8") -> bytes:
    """
    Serialize ``response`` as HTTP/1.1 bytes.

    Header lines are latin-1. Raises ValueError for a header that contains CR
    or LF, or that latin-1 can't encode.
    """
    body = response.body.encode(encoding)
    headers = dict(response.headers)

    # Default headers, unless the caller set them under any casing.
    present = {name.lower() for name in headers}
    if "content-length" not in present:
        headers["Content-Length"] = str(len(body))
    if "connection" not in present:
        headers["Connection"] = "close"

    start = status_line(response.status).encode("ascii")
    head = b"".join(_header_line(k, v) for k, v in headers.items())
    return start + head + b"\r\n" + body


async def write_response(
    stream: ByteSendStream,
    response: HttpResponse,
    *,
    encoding: str = "utf-8",
) -> None:
    """Send ``response`` on ``stream`` in a single write."""
    payload = encode_response(response, encoding)
    logger.debug("writing %d %s (%d bytes)", int(response.status), reason_phrase(response.status), len(payload))
    await stream.send(payload)
