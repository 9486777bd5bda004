"""Settings shared by every HTTP verification driver."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Self

from pydantic import BaseModel, ConfigDict, Field, SecretStr


class ProviderConfig(BaseModel):
    """Immutable per-provider settings captured when a driver is built.

    Fields that a vendor needs are optional here: drivers check them at send
    time and return a ``config_error`` outcome, so a half-configured provider
    can still be installed and reports what is missing.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True, extra="ignore")

    api_key: SecretStr | None = Field(default=None, alias="apiKey")
    template_id: str | None = Field(default=None, alias="templateId")
    sender_number: str | None = Field(default=None, alias="senderNumber")
    base_url: str = Field(default="", alias="baseUrl")
    timeout: float = Field(default=30.0, gt=0)

    @classmethod
    def from_settings(cls, settings: Mapping[str, Any]) -> Self:
        """Build a config from a flat settings bundle.

        Keys match field names or their camelCase aliases in any letter
        case, so ``apikey`` read from an environment variable still lands
        on ``api_key``. Blank strings count as unset so that empty form
        fields in an admin UI do not shadow defaults.
        """
        lookup: dict[str, str] = {}
        for name, info in cls.model_fields.items():
            lookup[name.lower()] = name
            if info.alias:
                lookup[info.alias.lower()] = name
        cleaned = {
            lookup.get(key.lower(), key): value
            for key, value in settings.items()
            if not (isinstance(value, str) and not value.strip())
        }
        return cls.model_validate(cleaned)

    def missing(self, *fields: str) -> list[str]:
        """Return which of *fields* are unset or blank."""
        result: list[str] = []
        for name in fields:
            value = getattr(self, name)
            if isinstance(value, SecretStr):
                value = value.get_secret_value()
            if value is None or (isinstance(value, str) and not value.strip()):
                result.append(name)
        return result

    def secret_values(self) -> list[str]:
        """Secret strings that must never appear in messages or logs."""
        return [self.api_key.get_secret_value()] if self.api_key is not None else []
