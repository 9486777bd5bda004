"""HTTP transports for verification drivers."""

from verifykit.transport.base import HTTPResponse, HTTPTransport, TransportError, TransportTimeout
from verifykit.transport.httpx_transport import HttpxTransport
from verifykit.transport.mock import MockTransport, RecordedRequest

__all__ = [
    "HTTPResponse",
    "HTTPTransport",
    "HttpxTransport",
    "MockTransport",
    "RecordedRequest",
    "TransportError",
    "TransportTimeout",
]
