"""Telemetry providers for verifykit."""

from verifykit.telemetry.base import Attr, Span, SpanKind, TelemetryProvider
from verifykit.telemetry.console import ConsoleTelemetryProvider
from verifykit.telemetry.mock import MockTelemetryProvider
from verifykit.telemetry.noop import NoopTelemetryProvider

__all__ = [
    "Attr",
    "ConsoleTelemetryProvider",
    "MockTelemetryProvider",
    "NoopTelemetryProvider",
    "Span",
    "SpanKind",
    "TelemetryProvider",
]
