"""HTTP response building.

ResponseBuilder accumulates headers, status and body; build() turns them into
an HttpResponse, which write_response() puts on an AnyIO stream.
"""

from .builder import ResponseBuilder, http_date
from .response import HttpResponse
from .status import StatusCode, reason_phrase
from .wire import encode_response, status_line, write_response

__all__ = [
    "HttpResponse",
    "ResponseBuilder",
    "StatusCode",
    "encode_response",
    "http_date",
    "reason_phrase",
    "status_line",
    "write_response",
]
