"""Settings store reading provider configuration from environment variables."""

from __future__ import annotations

from pathlib import Path
from typing import Any

from pydantic import create_model
from pydantic_settings import BaseSettings, SettingsConfigDict

from verifykit.settings.base import SettingsStore


class _VerifyEnv(BaseSettings):
    """Environment variables under the store prefix."""

    model_config = SettingsConfigDict(
        env_prefix="VERIFYKIT_",
        env_nested_delimiter="__",
        case_sensitive=False,
        extra="ignore",
    )

    provider: str | None = None


class EnvSettingsStore(SettingsStore):
    """Read provider settings from ``<prefix>*`` environment variables.

    With the default prefix::

        VERIFYKIT_PROVIDER=smsir
        VERIFYKIT_SMSIR__API_KEY=...
        VERIFYKIT_SMSIR__TEMPLATE_ID=123456

    yields active provider ``smsir`` with settings
    ``{"api_key": ..., "template_id": "123456"}``. A whole section may also
    be given as JSON, e.g. ``VERIFYKIT_SMSIR='{"api_key": "..."}'``.

    The environment is read on every call, so a restarted configure step
    picks up changed variables. An optional dotenv file is read as well.
    """

    def __init__(self, prefix: str = "VERIFYKIT_", *, env_file: str | Path | None = None) -> None:
        self._prefix = prefix
        self._env_file = env_file

    async def get_active_provider(self) -> str | None:
        env = _VerifyEnv(_env_prefix=self._prefix, _env_file=self._env_file)
        value = (env.provider or "").strip()
        return value or None

    async def get_provider_settings(self, name: str) -> dict[str, str]:
        key = name.strip().lower()
        if not key.isidentifier() or key.startswith("_") or key == "provider":
            return {}
        section_model = create_model(
            f"_VerifyEnv_{key}",
            __base__=_VerifyEnv,
            **{key: (dict[str, Any], {})},
        )
        env = section_model(_env_prefix=self._prefix, _env_file=self._env_file)
        return {k: str(v) for k, v in getattr(env, key).items()}
