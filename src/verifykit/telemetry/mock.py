"""Mock telemetry provider: records spans and metrics for test assertions."""

from __future__ import annotations

from datetime import UTC, datetime
from typing import Any

from verifykit.telemetry.base import Span, SpanKind, TelemetryProvider


class MockTelemetryProvider(TelemetryProvider):
    """Records all spans and metrics in lists for test assertions.

    Example::

        telemetry = MockTelemetryProvider()
        dispatcher = VerifyDispatcher(telemetry=telemetry)
        await dispatcher.send_verify_code("09123456789", "4821")
        send_spans = telemetry.get_spans(SpanKind.VERIFY_SEND)
        assert send_spans[0].attributes["delivery.success"] is False
    """

    def __init__(self) -> None:
        self._spans: dict[str, Span] = {}
        self.completed_spans: list[Span] = []
        self.metrics: list[dict[str, Any]] = []

    @property
    def name(self) -> str:
        return "mock"

    def get_spans(self, kind: SpanKind) -> list[Span]:
        """Get completed spans of a specific kind."""
        return [s for s in self.completed_spans if s.kind == kind]

    def start_span(
        self,
        kind: SpanKind,
        name: str,
        *,
        attributes: dict[str, Any] | None = None,
    ) -> str:
        span = Span(
            kind=kind,
            name=name,
            attributes=dict(attributes) if attributes else {},
        )
        self._spans[span.id] = span
        return span.id

    def end_span(
        self,
        span_id: str,
        *,
        status: str = "ok",
        error_message: str | None = None,
        attributes: dict[str, Any] | None = None,
    ) -> None:
        span = self._spans.pop(span_id, None)
        if span is None:
            return
        span.end_time = datetime.now(UTC)
        span.status = status
        span.error_message = error_message
        if attributes:
            span.attributes.update(attributes)
        self.completed_spans.append(span)

    def record_metric(
        self,
        name: str,
        value: float,
        *,
        unit: str = "",
        attributes: dict[str, Any] | None = None,
    ) -> None:
        self.metrics.append(
            {
                "name": name,
                "value": value,
                "unit": unit,
                "attributes": dict(attributes) if attributes else {},
            }
        )
