"""Kavenegar driver: sends verification codes via the verify/lookup API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from verifykit.models.enums import ErrorKind
from verifykit.models.outcome import Failure, Outcome, Success
from verifykit.models.request import PhoneNumber
from verifykit.providers.base import config_failure
from verifykit.providers.http_base import HTTPVerifyDriver
from verifykit.providers.kavenegar.config import KavenegarConfig
from verifykit.redact import mask_phone
from verifykit.registry import register_driver
from verifykit.transport.base import HTTPResponse, HTTPTransport

_STATUS_OK = 200


class KavenegarVerifyDriver(HTTPVerifyDriver):
    """Verification driver using the Kavenegar REST API.

    The response wraps the vendor status in a ``return`` object::

        {"return": {"status": 200, "message": "..."},
         "entries": [{"messageid": 8792343, "status": 5, ...}]}
    """

    display_name = "Kavenegar"
    _config: KavenegarConfig

    def __init__(self, config: KavenegarConfig, *, transport: HTTPTransport | None = None) -> None:
        super().__init__(config, transport=transport)

    @property
    def name(self) -> str:
        return "kavenegar"

    @property
    def config(self) -> KavenegarConfig:
        return self._config

    async def send_verify_code(self, number: PhoneNumber, code: str) -> Outcome:
        cfg = self._config
        summary: dict[str, Any] = {
            "url": self._redact(cfg.api_url),
            "receptor": mask_phone(number),
            "template": cfg.template_id,
        }

        missing = cfg.missing("api_key", "template_id")
        if missing:
            outcome: Outcome = config_failure(self.name, missing)
        else:
            data = {"receptor": number, "token": code, "template": cfg.template_id or ""}
            if cfg.sender_number:
                data["sender"] = cfg.sender_number
            result = await self._post(
                cfg.api_url, data=data, headers={"Accept": "application/json"}
            )
            if isinstance(result, HTTPResponse):
                summary["http_status"] = result.status_code
                outcome = self._parse_response(result)
            else:
                outcome = result

        self._record_attempt(summary, outcome)
        return outcome

    def _parse_response(self, resp: HTTPResponse) -> Outcome:
        try:
            data = resp.json()
        except ValueError:
            return Failure(
                kind=ErrorKind.RESPONSE_FORMAT_ERROR,
                message=f"Kavenegar returned a non-JSON body (HTTP {resp.status_code})",
            )

        ret = data.get("return") if isinstance(data, dict) else None
        status = ret.get("status") if isinstance(ret, dict) else None
        if not isinstance(status, int) or isinstance(status, bool):
            return Failure(
                kind=ErrorKind.RESPONSE_FORMAT_ERROR,
                message=f"Kavenegar response has no return.status field (HTTP {resp.status_code})",
            )
        message = str(ret.get("message") or "")

        if status != _STATUS_OK:
            detail = message or f"status {status}"
            return Failure(
                kind=ErrorKind.PROVIDER_REJECTED,
                message=self._redact(f"Kavenegar rejected the request: {detail}"),
            )

        entries = data.get("entries")
        message_id = None
        if isinstance(entries, list) and entries and isinstance(entries[0], dict):
            message_id = entries[0].get("messageid")
        return Success(
            message=message or "Verification code sent",
            provider_message_id=str(message_id) if message_id is not None else None,
        )


@register_driver("kavenegar")
def _build(settings: Mapping[str, Any]) -> KavenegarVerifyDriver:
    return KavenegarVerifyDriver(KavenegarConfig.from_settings(settings))
