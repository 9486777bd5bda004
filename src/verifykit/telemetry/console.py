"""Console telemetry provider: logs span summaries via Python logging."""

from __future__ import annotations

import logging
from datetime import UTC, datetime
from typing import Any

from verifykit.telemetry.base import Span, SpanKind, TelemetryProvider

logger = logging.getLogger("verifykit.telemetry")


class ConsoleTelemetryProvider(TelemetryProvider):
    """Logs span ends and metrics to the ``verifykit.telemetry`` logger.

    Useful for development and debugging::

        import logging
        logging.basicConfig(level=logging.INFO)

        dispatcher = VerifyDispatcher(telemetry=ConsoleTelemetryProvider())
    """

    def __init__(self, *, level: int = logging.INFO) -> None:
        self._level = level
        self._spans: dict[str, Span] = {}

    @property
    def name(self) -> str:
        return "console"

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
        if attributes:
            span.attributes.update(attributes)

        duration = span.duration_ms
        dur_str = f" {duration:.1f}ms" if duration is not None else ""
        attr_str = ""
        if span.attributes:
            parts = [f"{k}={v}" for k, v in span.attributes.items()]
            attr_str = f" [{', '.join(parts)}]"

        if status == "error":
            logger.log(
                self._level,
                "[SPAN ERROR] %s %s%s%s error=%s",
                span.kind,
                span.name,
                dur_str,
                attr_str,
                error_message or "unknown",
            )
        else:
            logger.log(
                self._level, "[SPAN END] %s %s%s%s", span.kind, span.name, dur_str, attr_str
            )

    def record_metric(
        self,
        name: str,
        value: float,
        *,
        unit: str = "",
        attributes: dict[str, Any] | None = None,
    ) -> None:
        unit_str = f" {unit}" if unit else ""
        attr_str = ""
        if attributes:
            parts = [f"{k}={v}" for k, v in attributes.items()]
            attr_str = f" [{', '.join(parts)}]"
        logger.log(self._level, "[METRIC] %s = %.2f%s%s", name, value, unit_str, attr_str)
