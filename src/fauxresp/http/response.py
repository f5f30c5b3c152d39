"""The immutable response value handed to the transport layer."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Mapping

from .status import StatusCode


@dataclass(frozen=True, slots=True)
class HttpResponse:
    """
    A finished HTTP response.

    Attributes:
        body: Response body as text; encoded when written to the wire
        status: Status code (a StatusCode or any int)
        headers: One string value per header name, names case-preserved
    """
    body: str = ""
    status: int = StatusCode.OK
    headers: Mapping[str, str] = field(default_factory=dict)

    def header(self, name: str, default: str | None = None) -> str | None:
        """Case-insensitive header lookup."""
        if name in self.headers:
            return self.headers[name]
        lowered = name.lower()
        for key, value in self.headers.items():
            if key.lower() == lowered:
                return value
        return default
