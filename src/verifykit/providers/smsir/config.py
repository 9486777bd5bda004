"""sms.ir provider configuration."""

from __future__ import annotations

from pydantic import Field

from verifykit.providers._config import ProviderConfig


class SmsIrConfig(ProviderConfig):
    """sms.ir "verify" (template) API configuration.

    ``template_id`` is the numeric id of a template approved in the sms.ir
    panel; ``parameter_name`` is the placeholder that receives the code.
    """

    base_url: str = Field(default="https://api.sms.ir/v1", alias="baseUrl")
    parameter_name: str = Field(default="CODE", alias="parameterName")

    @property
    def api_url(self) -> str:
        return f"{self.base_url.rstrip('/')}/send/verify"
