"""Tests for telemetry providers."""

from __future__ import annotations

import logging

import pytest

from verifykit.telemetry import (
    ConsoleTelemetryProvider,
    MockTelemetryProvider,
    NoopTelemetryProvider,
    SpanKind,
)


class TestNoopTelemetry:
    def test_all_calls_are_noops(self) -> None:
        tel = NoopTelemetryProvider()
        span_id = tel.start_span(SpanKind.VERIFY_SEND, "x")
        tel.end_span(span_id)
        tel.record_metric("m", 1.0)
        assert tel.name == "noop"


class TestMockTelemetry:
    def test_records_completed_spans_and_metrics(self) -> None:
        tel = MockTelemetryProvider()

        span_id = tel.start_span(SpanKind.VERIFY_SEND, "verify.send_code", attributes={"a": 1})
        tel.end_span(span_id, status="error", error_message="bad", attributes={"b": 2})
        tel.record_metric("verifykit.send_ms", 3.0, unit="ms")

        [span] = tel.get_spans(SpanKind.VERIFY_SEND)
        assert span.status == "error"
        assert span.error_message == "bad"
        assert span.attributes == {"a": 1, "b": 2}
        assert span.duration_ms is not None
        assert tel.get_spans(SpanKind.DRIVER_INSTALL) == []
        assert tel.metrics == [
            {"name": "verifykit.send_ms", "value": 3.0, "unit": "ms", "attributes": {}}
        ]

    def test_unknown_span_id_ignored(self) -> None:
        tel = MockTelemetryProvider()
        tel.end_span("missing")
        assert tel.completed_spans == []


class TestConsoleTelemetry:
    def test_logs_span_and_metric(self, caplog: pytest.LogCaptureFixture) -> None:
        tel = ConsoleTelemetryProvider()

        with caplog.at_level(logging.INFO, logger="verifykit.telemetry"):
            span_id = tel.start_span(SpanKind.VERIFY_SEND, "verify.send_code")
            tel.end_span(span_id, attributes={"provider": "smsir"})
            tel.record_metric("verifykit.send_ms", 12.5, unit="ms")

        assert "[SPAN END] verify.send verify.send_code" in caplog.text
        assert "provider=smsir" in caplog.text
        assert "[METRIC] verifykit.send_ms = 12.50 ms" in caplog.text

    def test_error_span(self, caplog: pytest.LogCaptureFixture) -> None:
        tel = ConsoleTelemetryProvider()

        with caplog.at_level(logging.INFO, logger="verifykit.telemetry"):
            span_id = tel.start_span(SpanKind.VERIFY_SEND, "x")
            tel.end_span(span_id, status="error", error_message="down")

        assert "[SPAN ERROR]" in caplog.text
        assert "error=down" in caplog.text
