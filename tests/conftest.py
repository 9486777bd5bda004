"""Shared test fixtures and helpers."""

from __future__ import annotations

from typing import Any

import pytest

from verifykit.providers.kavenegar import KavenegarConfig
from verifykit.providers.smsir import SmsIrConfig
from verifykit.telemetry.mock import MockTelemetryProvider
from verifykit.transport.mock import MockTransport


@pytest.fixture
def transport() -> MockTransport:
    return MockTransport()


@pytest.fixture
def telemetry() -> MockTelemetryProvider:
    return MockTelemetryProvider()


def make_smsir_config(**overrides: Any) -> SmsIrConfig:
    defaults: dict[str, Any] = {
        "api_key": "smsir-secret-key",
        "template_id": "123456",
    }
    defaults.update(overrides)
    return SmsIrConfig(**defaults)


def make_kavenegar_config(**overrides: Any) -> KavenegarConfig:
    defaults: dict[str, Any] = {
        "api_key": "kave-secret-key",
        "template_id": "verify-otp",
    }
    defaults.update(overrides)
    return KavenegarConfig(**defaults)
