"""Kavenegar provider configuration."""

from __future__ import annotations

from pydantic import Field

from verifykit.providers._config import ProviderConfig


class KavenegarConfig(ProviderConfig):
    """Kavenegar "verify/lookup" API configuration.

    ``template_id`` is the template *name* defined in the Kavenegar panel.
    The API key is part of the request path, never a header.
    """

    base_url: str = Field(default="https://api.kavenegar.com/v1", alias="baseUrl")

    @property
    def api_url(self) -> str:
        key = self.api_key.get_secret_value() if self.api_key else ""
        return f"{self.base_url.rstrip('/')}/{key}/verify/lookup.json"
