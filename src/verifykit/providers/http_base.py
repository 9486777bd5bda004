"""Shared plumbing for drivers that call a vendor over HTTP."""

from __future__ import annotations

import asyncio
from typing import Any

from verifykit.models.enums import ErrorKind
from verifykit.models.outcome import Failure
from verifykit.providers._config import ProviderConfig
from verifykit.providers.base import VerifyCodeDriver
from verifykit.redact import redact_secrets
from verifykit.transport.base import HTTPResponse, HTTPTransport, TransportError
from verifykit.transport.httpx_transport import HttpxTransport


class HTTPVerifyDriver(VerifyCodeDriver):
    """Base for drivers that POST one request per verification code.

    Owns the transport it creates; a transport passed in (e.g. a
    ``MockTransport`` in tests) is borrowed and not closed.
    """

    display_name = "provider"

    def __init__(self, config: ProviderConfig, *, transport: HTTPTransport | None = None) -> None:
        self._config = config
        self._owns_transport = transport is None
        self._transport = transport if transport is not None else HttpxTransport()

    async def _post(self, url: str, **kwargs: Any) -> HTTPResponse | Failure:
        """POST once with the configured timeout.

        Returns the response, or a ``connection_error`` failure when no
        response arrived in time or at all. The timeout is enforced here as
        well as handed to the transport.
        """
        timeout = self._config.timeout
        try:
            async with asyncio.timeout(timeout):
                return await self._transport.post(url, timeout=timeout, **kwargs)
        except TimeoutError:
            return Failure(
                kind=ErrorKind.CONNECTION_ERROR,
                message=f"{self.display_name} did not respond within {timeout:g}s",
            )
        except TransportError as exc:
            # TransportTimeout lands here too.
            return Failure(
                kind=ErrorKind.CONNECTION_ERROR,
                message=self._redact(f"Could not reach {self.display_name}: {exc}"),
            )

    def _redact(self, text: str) -> str:
        return redact_secrets(text, self._config.secret_values())

    async def close(self) -> None:
        if self._owns_transport:
            await self._transport.close()
