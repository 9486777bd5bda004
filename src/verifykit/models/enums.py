"""String enums for verifykit."""

from __future__ import annotations

from enum import StrEnum, unique


@unique
class ErrorKind(StrEnum):
    NO_DRIVER_CONFIGURED = "no_driver_configured"
    CONFIG_ERROR = "config_error"
    CONNECTION_ERROR = "connection_error"
    RESPONSE_FORMAT_ERROR = "response_format_error"
    PROVIDER_REJECTED = "provider_rejected"
