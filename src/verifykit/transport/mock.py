"""Mock transport for testing drivers without network access."""

from __future__ import annotations

import json as _json
from dataclasses import dataclass, field
from typing import Any

from verifykit.transport.base import HTTPResponse, HTTPTransport


@dataclass
class RecordedRequest:
    url: str
    json: Any = None
    data: dict[str, str] | None = None
    headers: dict[str, str] = field(default_factory=dict)
    timeout: float | None = None


class MockTransport(HTTPTransport):
    """Returns canned responses and records every request.

    Queue responses with ``add_json`` / ``add_text`` or exceptions with
    ``add_error``; they are consumed in order. When the queue is empty the
    last item is repeated. With nothing queued, ``post`` fails the test by
    raising ``AssertionError``.
    """

    def __init__(self) -> None:
        self.requests: list[RecordedRequest] = []
        self._queue: list[HTTPResponse | BaseException] = []
        self.closed = False

    @property
    def call_count(self) -> int:
        return len(self.requests)

    def add_json(self, payload: Any, status_code: int = 200) -> MockTransport:
        self._queue.append(
            HTTPResponse(
                status_code=status_code,
                text=_json.dumps(payload),
                headers={"content-type": "application/json"},
            )
        )
        return self

    def add_text(self, text: str, status_code: int = 200) -> MockTransport:
        self._queue.append(HTTPResponse(status_code=status_code, text=text))
        return self

    def add_error(self, exc: BaseException) -> MockTransport:
        self._queue.append(exc)
        return self

    async def post(
        self,
        url: str,
        *,
        json: Any = None,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float,
    ) -> HTTPResponse:
        self.requests.append(
            RecordedRequest(
                url=url, json=json, data=data, headers=dict(headers or {}), timeout=timeout
            )
        )
        if not self._queue:
            raise AssertionError(f"MockTransport received an unexpected request to {url}")
        item = self._queue.pop(0) if len(self._queue) > 1 else self._queue[0]
        if isinstance(item, BaseException):
            raise item
        return item

    async def close(self) -> None:
        self.closed = True
