"""Abstract base class for provider settings storage."""

from __future__ import annotations

from abc import ABC, abstractmethod


class SettingsStore(ABC):
    """Read access to the operator's SMS provider configuration.

    Implement this ABC to back provider selection with any storage (a
    settings table, Redis, a secrets manager). The library ships with
    ``InMemorySettingsStore`` and ``EnvSettingsStore``.

    Settings are a flat string-keyed bundle per provider, using the keys
    ``api_key``, ``template_id``, ``sender_number``, ``base_url`` and
    ``timeout`` plus any provider-specific extras.
    """

    @abstractmethod
    async def get_active_provider(self) -> str | None:
        """Name of the provider the operator selected, or ``None``."""
        ...

    @abstractmethod
    async def get_provider_settings(self, name: str) -> dict[str, str]:
        """Settings bundle for provider *name* (empty if none stored)."""
        ...
