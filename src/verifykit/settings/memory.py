"""In-memory implementation of SettingsStore."""

from __future__ import annotations

from collections.abc import Mapping

from verifykit.settings.base import SettingsStore


class InMemorySettingsStore(SettingsStore):
    """Dict-based settings store for development and testing."""

    def __init__(
        self,
        active_provider: str | None = None,
        providers: Mapping[str, Mapping[str, str]] | None = None,
    ) -> None:
        self._active = active_provider
        self._providers: dict[str, dict[str, str]] = {
            name.lower(): dict(values) for name, values in (providers or {}).items()
        }

    def set_active_provider(self, name: str | None) -> None:
        self._active = name

    def set_provider_settings(self, name: str, settings: Mapping[str, str]) -> None:
        self._providers[name.lower()] = dict(settings)

    async def get_active_provider(self) -> str | None:
        return self._active

    async def get_provider_settings(self, name: str) -> dict[str, str]:
        return dict(self._providers.get(name.lower(), {}))
