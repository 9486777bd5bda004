"""Tests for settings stores and dispatcher bootstrap."""

from __future__ import annotations

from pathlib import Path

import pytest

from verifykit.bootstrap import build_dispatcher, configure_dispatcher
from verifykit.errors import UnknownProviderError
from verifykit.models import ErrorKind, Failure, Success
from verifykit.providers.console import ConsoleVerifyDriver
from verifykit.providers.mock import MockVerifyDriver
from verifykit.providers.smsir import SmsIrVerifyDriver
from verifykit.registry import DriverRegistry
from verifykit.settings import EnvSettingsStore, InMemorySettingsStore


class TestInMemorySettingsStore:
    async def test_roundtrip(self) -> None:
        store = InMemorySettingsStore()
        store.set_active_provider("smsir")
        store.set_provider_settings("SMSIR", {"api_key": "k"})

        assert await store.get_active_provider() == "smsir"
        assert await store.get_provider_settings("smsir") == {"api_key": "k"}

    async def test_unknown_provider_settings_empty(self) -> None:
        assert await InMemorySettingsStore().get_provider_settings("x") == {}

    async def test_returns_copy(self) -> None:
        store = InMemorySettingsStore(providers={"smsir": {"api_key": "k"}})
        settings = await store.get_provider_settings("smsir")
        settings["api_key"] = "changed"
        assert (await store.get_provider_settings("smsir"))["api_key"] == "k"


class TestEnvSettingsStore:
    async def test_reads_prefixed_variables(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VERIFYKIT_PROVIDER", "smsir")
        monkeypatch.setenv("VERIFYKIT_SMSIR__API_KEY", "k")
        monkeypatch.setenv("VERIFYKIT_SMSIR__TEMPLATE_ID", "123")
        monkeypatch.setenv("VERIFYKIT_KAVENEGAR__API_KEY", "other")
        store = EnvSettingsStore()

        assert await store.get_active_provider() == "smsir"
        assert await store.get_provider_settings("smsir") == {
            "api_key": "k",
            "template_id": "123",
        }

    async def test_no_provider(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("VERIFYKIT_PROVIDER", raising=False)
        assert await EnvSettingsStore().get_active_provider() is None

    async def test_custom_prefix(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("OTP_PROVIDER", "console")
        assert await EnvSettingsStore(prefix="OTP_").get_active_provider() == "console"

    async def test_section_as_json(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VERIFYKIT_KAVENEGAR", '{"api_key": "k", "timeout": 5}')

        settings = await EnvSettingsStore().get_provider_settings("kavenegar")

        assert settings == {"api_key": "k", "timeout": "5"}

    async def test_unknown_section_empty(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.delenv("VERIFYKIT_NOPE", raising=False)
        assert await EnvSettingsStore().get_provider_settings("nope") == {}

    async def test_reads_env_file(self, tmp_path: Path) -> None:
        env_file = tmp_path / ".env"
        env_file.write_text(
            "SMSAPP_PROVIDER=smsir\nSMSAPP_SMSIR__TEMPLATE_ID=77\n", encoding="utf-8"
        )
        store = EnvSettingsStore(prefix="SMSAPP_", env_file=env_file)

        assert await store.get_active_provider() == "smsir"
        assert await store.get_provider_settings("smsir") == {"template_id": "77"}

    async def test_camel_case_keys_reach_driver(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("VERIFYKIT_PROVIDER", "smsir")
        monkeypatch.setenv("VERIFYKIT_SMSIR__APIKEY", "k")
        monkeypatch.setenv("VERIFYKIT_SMSIR__TEMPLATEID", "123")

        dispatcher = await build_dispatcher(EnvSettingsStore())

        driver = dispatcher.active_driver
        assert isinstance(driver, SmsIrVerifyDriver)
        assert driver.config.missing("api_key", "template_id") == []
        assert driver.config.template_id == "123"
        await dispatcher.close()


class TestBuildDispatcher:
    async def test_installs_selected_provider(self) -> None:
        store = InMemorySettingsStore(
            "smsir", {"smsir": {"api_key": "k", "template_id": "123"}}
        )

        dispatcher = await build_dispatcher(store)

        assert isinstance(dispatcher.active_driver, SmsIrVerifyDriver)
        assert dispatcher.normalizer.country_code == "98"
        await dispatcher.close()

    async def test_no_provider_selected(self) -> None:
        dispatcher = await build_dispatcher(InMemorySettingsStore())

        result = await dispatcher.send_verify_code("09123456789", "4821")

        assert isinstance(result, Failure)
        assert result.kind == ErrorKind.NO_DRIVER_CONFIGURED

    async def test_unknown_provider(self) -> None:
        with pytest.raises(UnknownProviderError):
            await build_dispatcher(InMemorySettingsStore("carrier-pigeon"))

    async def test_missing_settings_surface_at_send(self) -> None:
        dispatcher = await build_dispatcher(InMemorySettingsStore("smsir"))

        result = await dispatcher.send_verify_code("09123456789", "4821")

        assert isinstance(result, Failure)
        assert result.kind == ErrorKind.CONFIG_ERROR
        await dispatcher.close()

    async def test_custom_registry_and_country(self) -> None:
        driver = MockVerifyDriver()
        registry = DriverRegistry()
        registry.register("fake", lambda settings: driver)

        dispatcher = await build_dispatcher(
            InMemorySettingsStore("fake"), registry=registry, country_code="44"
        )
        result = await dispatcher.send_verify_code("07911 123456", "4821")

        assert isinstance(result, Success)
        assert driver.sent[0]["number"] == "+447911123456"


class TestConfigureDispatcher:
    async def test_operator_switches_provider(self) -> None:
        store = InMemorySettingsStore("mock")
        dispatcher = await build_dispatcher(store)
        first = dispatcher.active_driver

        store.set_active_provider("console")
        installed = await configure_dispatcher(dispatcher, store)

        assert isinstance(installed, ConsoleVerifyDriver)
        assert dispatcher.active_driver is installed
        assert isinstance(first, MockVerifyDriver)
        assert first.closed is True

    async def test_deselected_provider_leaves_dispatcher(self) -> None:
        store = InMemorySettingsStore("mock")
        dispatcher = await build_dispatcher(store)
        store.set_active_provider(None)

        assert await configure_dispatcher(dispatcher, store) is None
        assert dispatcher.has_driver is True
