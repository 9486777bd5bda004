"""``HTTPTransport`` backed by ``httpx.AsyncClient``."""

from __future__ import annotations

from typing import Any

import httpx

from verifykit.transport.base import HTTPResponse, HTTPTransport, TransportError, TransportTimeout


class HttpxTransport(HTTPTransport):
    """Send requests with an ``httpx.AsyncClient``.

    A client passed in is borrowed and left open on ``close()``; one created
    here is owned and closed with the transport.
    """

    def __init__(self, client: httpx.AsyncClient | None = None) -> None:
        self._owns_client = client is None
        self._client = client if client is not None else httpx.AsyncClient()

    async def post(
        self,
        url: str,
        *,
        json: Any = None,
        data: dict[str, str] | None = None,
        headers: dict[str, str] | None = None,
        timeout: float,
    ) -> HTTPResponse:
        try:
            resp = await self._client.post(
                url,
                json=json,
                data=data,
                headers=headers,
                timeout=timeout,
            )
        except httpx.TimeoutException as exc:
            raise TransportTimeout(f"request timed out after {timeout:g}s") from exc
        except (httpx.HTTPError, httpx.InvalidURL) as exc:
            raise TransportError(f"{type(exc).__name__}: {exc}") from exc

        return HTTPResponse(
            status_code=resp.status_code,
            text=resp.text,
            headers=dict(resp.headers),
        )

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()
