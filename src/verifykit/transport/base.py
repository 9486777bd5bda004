"""HTTP transport seam used by verification drivers.

Drivers talk to their vendor through ``HTTPTransport`` only, so the HTTP
library in use never leaks into driver code or tests.
"""

from __future__ import annotations

import json as _json
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from verifykit.errors import VerifyKitError


class TransportError(VerifyKitError):
    """The request never produced an HTTP response (DNS, TLS, reset, ...)."""


class TransportTimeout(TransportError):
    """The request did not complete within its timeout."""


@dataclass(frozen=True)
class HTTPResponse:
    """Status and body of a completed HTTP exchange."""

    status_code: int
    text: str
    headers: dict[str, str] = field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300

    def json(self) -> Any:
        """Decode the body as JSON.

        Raises:
            ValueError: If the body is not valid JSON or nests too deeply.
        """
        try:
            return _json.loads(self.text)
        except RecursionError as exc:
            raise ValueError("JSON body nests too deeply") from exc


class HTTPTransport(ABC):
    """Capability to POST a body with custom headers and a timeout."""

    @abstractmethod
    async def post(
        self,
        url: str,
        *,
        json: Any = None,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float,
    ) -> HTTPResponse:
        """POST to *url* and return the response, whatever its status.

        Exactly one of *json* (sent as ``application/json``) or *data*
        (sent form-encoded) is normally given.

        Raises:
            TransportTimeout: If *timeout* seconds elapse first.
            TransportError: On any other failure to obtain a response.
        """
        ...

    async def close(self) -> None:  # noqa: B027
        """Release resources. Override in subclasses that hold connections."""
