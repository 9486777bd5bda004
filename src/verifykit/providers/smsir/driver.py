"""sms.ir driver: sends verification codes via the sms.ir verify API."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from verifykit.models.enums import ErrorKind
from verifykit.models.outcome import Failure, Outcome, Success
from verifykit.models.request import PhoneNumber
from verifykit.providers.base import config_failure
from verifykit.providers.http_base import HTTPVerifyDriver
from verifykit.providers.smsir.config import SmsIrConfig
from verifykit.redact import mask_phone
from verifykit.registry import register_driver
from verifykit.transport.base import HTTPResponse, HTTPTransport

_STATUS_OK = 1


class SmsIrVerifyDriver(HTTPVerifyDriver):
    """Verification driver using the sms.ir REST API.

    Request::

        POST {base_url}/send/verify
        x-api-key: <api_key>
        {"mobile": "09123456789", "templateId": 123456,
         "parameters": [{"name": "CODE", "value": "4821"}]}

    Response::

        {"status": 1, "message": "...", "data": {"messageId": 885, "cost": 1.0}}

    Any ``status`` other than 1 is a refusal. The API wants Iranian numbers
    in national form, so ``+98`` numbers are sent as ``0...``.
    """

    display_name = "sms.ir"
    _config: SmsIrConfig

    def __init__(self, config: SmsIrConfig, *, transport: HTTPTransport | None = None) -> None:
        super().__init__(config, transport=transport)

    @property
    def name(self) -> str:
        return "smsir"

    @property
    def config(self) -> SmsIrConfig:
        return self._config

    async def send_verify_code(self, number: PhoneNumber, code: str) -> Outcome:
        cfg = self._config
        mobile = _to_national(number)
        summary: dict[str, Any] = {
            "url": cfg.api_url,
            "mobile": mask_phone(mobile),
            "template_id": cfg.template_id,
        }

        outcome = self._check_config()
        if outcome is None:
            api_key = cfg.api_key.get_secret_value() if cfg.api_key else ""
            result = await self._post(
                cfg.api_url,
                json={
                    "mobile": mobile,
                    "templateId": int(cfg.template_id or 0),
                    "parameters": [{"name": cfg.parameter_name, "value": code}],
                },
                headers={
                    "x-api-key": api_key,
                    "Accept": "application/json",
                    "Content-Type": "application/json",
                },
            )
            if isinstance(result, HTTPResponse):
                summary["http_status"] = result.status_code
                outcome = self._parse_response(result)
            else:
                outcome = result

        self._record_attempt(summary, outcome)
        return outcome

    def _check_config(self) -> Failure | None:
        cfg = self._config
        missing = cfg.missing("api_key", "template_id")
        if missing:
            return config_failure(self.name, missing)
        if not (cfg.template_id or "").strip().isdecimal():
            return Failure(
                kind=ErrorKind.CONFIG_ERROR,
                message=f"smsir template_id must be numeric, got {cfg.template_id!r}",
            )
        # HTTP header values are ASCII only.
        if cfg.api_key is not None and not cfg.api_key.get_secret_value().isascii():
            return Failure(
                kind=ErrorKind.CONFIG_ERROR,
                message="smsir api_key contains non-ASCII characters",
            )
        return None

    def _parse_response(self, resp: HTTPResponse) -> Outcome:
        try:
            data = resp.json()
        except ValueError:
            return Failure(
                kind=ErrorKind.RESPONSE_FORMAT_ERROR,
                message=f"sms.ir returned a non-JSON body (HTTP {resp.status_code})",
            )

        status = data.get("status") if isinstance(data, dict) else None
        # bool is an int subclass; the API never sends one.
        if not isinstance(status, int) or isinstance(status, bool):
            return Failure(
                kind=ErrorKind.RESPONSE_FORMAT_ERROR,
                message=f"sms.ir response has no status field (HTTP {resp.status_code})",
            )
        message = str(data.get("message") or "")

        if status != _STATUS_OK or not resp.is_success:
            detail = message or f"status {status}"
            return Failure(
                kind=ErrorKind.PROVIDER_REJECTED,
                message=self._redact(f"sms.ir rejected the request: {detail}"),
            )

        body = data.get("data")
        message_id = body.get("messageId") if isinstance(body, dict) else data.get("messageId")
        return Success(
            message=message or "Verification code sent",
            provider_message_id=str(message_id) if message_id is not None else None,
        )


def _to_national(number: str) -> str:
    if number.startswith("+98"):
        return f"0{number[3:]}"
    return number


@register_driver("smsir")
def _build(settings: Mapping[str, Any]) -> SmsIrVerifyDriver:
    return SmsIrVerifyDriver(SmsIrConfig.from_settings(settings))
