"""Tests for the driver registry."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import pytest

from verifykit.errors import DriverAlreadyRegisteredError, UnknownProviderError
from verifykit.providers.kavenegar import KavenegarVerifyDriver
from verifykit.providers.mock import MockVerifyDriver
from verifykit.providers.smsir import SmsIrVerifyDriver
from verifykit.registry import DriverRegistry, default_registry


def _mock_factory(settings: Mapping[str, Any]) -> MockVerifyDriver:
    return MockVerifyDriver(name=str(settings.get("label", "mock")))


class TestDriverRegistry:
    def test_register_and_create(self) -> None:
        registry = DriverRegistry()
        registry.register("acme", _mock_factory)

        driver = registry.create("acme", {"label": "acme-1"})

        assert isinstance(driver, MockVerifyDriver)
        assert driver.name == "acme-1"

    def test_names_case_insensitive(self) -> None:
        registry = DriverRegistry()
        registry.register("Acme", _mock_factory)

        assert "ACME" in registry
        assert registry.names() == ["acme"]
        assert isinstance(registry.create(" acme "), MockVerifyDriver)

    def test_duplicate_rejected(self) -> None:
        registry = DriverRegistry()
        registry.register("acme", _mock_factory)

        with pytest.raises(DriverAlreadyRegisteredError):
            registry.register("acme", _mock_factory)

    def test_duplicate_replace(self) -> None:
        registry = DriverRegistry()
        registry.register("acme", _mock_factory)

        registry.register("acme", lambda s: MockVerifyDriver(name="v2"), replace=True)

        assert registry.create("acme").name == "v2"

    def test_unknown_provider(self) -> None:
        with pytest.raises(UnknownProviderError, match="nope"):
            DriverRegistry().create("nope", {})

    def test_decorator(self) -> None:
        registry = DriverRegistry()

        @registry.factory("deco")
        def _build(settings: Mapping[str, Any]) -> MockVerifyDriver:
            return MockVerifyDriver(name="deco")

        assert registry.create("deco").name == "deco"

    def test_unregister(self) -> None:
        registry = DriverRegistry()
        registry.register("acme", _mock_factory)

        assert registry.unregister("acme") is True
        assert registry.unregister("acme") is False
        assert len(registry) == 0


class TestDefaultRegistry:
    def test_builtin_providers_registered(self) -> None:
        assert {"smsir", "kavenegar", "mock", "console"} <= set(default_registry)

    def test_create_smsir_from_settings(self) -> None:
        driver = default_registry.create(
            "smsir", {"apiKey": "k", "templateId": "100", "timeout": "12.5"}
        )
        assert isinstance(driver, SmsIrVerifyDriver)
        assert driver.config.template_id == "100"
        assert driver.config.timeout == 12.5

    def test_create_kavenegar_from_settings(self) -> None:
        driver = default_registry.create("kavenegar", {"api_key": "k", "template_id": "otp"})
        assert isinstance(driver, KavenegarVerifyDriver)
        assert driver.config.template_id == "otp"
