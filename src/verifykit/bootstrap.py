"""Composition root: build a dispatcher from stored provider settings."""

from __future__ import annotations

import logging

from verifykit.dispatcher import VerifyDispatcher
from verifykit.phone import DEFAULT_COUNTRY_CODE, PhoneNormalizer
from verifykit.providers.base import VerifyCodeDriver
from verifykit.registry import DriverRegistry, default_registry
from verifykit.settings.base import SettingsStore
from verifykit.telemetry.base import TelemetryProvider

logger = logging.getLogger("verifykit.bootstrap")


async def build_dispatcher(
    store: SettingsStore,
    *,
    registry: DriverRegistry | None = None,
    country_code: str = DEFAULT_COUNTRY_CODE,
    telemetry: TelemetryProvider | None = None,
) -> VerifyDispatcher:
    """Create a dispatcher and install the operator's selected provider.

    When the store names no provider the dispatcher is returned without a
    driver, and sends fail with ``no_driver_configured`` until one is
    installed.

    Raises:
        UnknownProviderError: If the store names an unregistered provider.
    """
    dispatcher = VerifyDispatcher(PhoneNormalizer(country_code), telemetry=telemetry)
    await configure_dispatcher(dispatcher, store, registry=registry)
    return dispatcher


async def configure_dispatcher(
    dispatcher: VerifyDispatcher,
    store: SettingsStore,
    *,
    registry: DriverRegistry | None = None,
) -> VerifyCodeDriver | None:
    """(Re)build the selected provider's driver and install it.

    Call again after an operator changes the provider or its settings. The
    dispatcher is left untouched when no provider is selected.
    """
    registry = registry or default_registry
    name = await store.get_active_provider()
    if not name:
        logger.warning("No SMS provider selected; verification codes cannot be sent")
        return None

    settings = await store.get_provider_settings(name)
    driver = registry.create(name, settings)
    await dispatcher.install_driver(driver)
    return driver
