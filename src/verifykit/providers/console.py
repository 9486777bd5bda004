"""Dry-run driver that logs verification codes instead of sending them."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from verifykit.models.outcome import Outcome, Success
from verifykit.models.request import PhoneNumber
from verifykit.providers.base import VerifyCodeDriver
from verifykit.registry import register_driver

logger = logging.getLogger("verifykit.providers.console")


class ConsoleVerifyDriver(VerifyCodeDriver):
    """Writes each code to the ``verifykit.providers.console`` logger.

    Meant for local development, where codes are read from the log. Never
    install it in production: the code itself is logged.
    """

    def __init__(self, *, level: int = logging.INFO) -> None:
        self._level = level

    @property
    def name(self) -> str:
        return "console"

    async def send_verify_code(self, number: PhoneNumber, code: str) -> Outcome:
        logger.log(self._level, "DRY-RUN verify code | number=%s | code=%s", number, code)
        return Success(message=f"Verification code logged for {number} (dry run)")


@register_driver("console")
def _build(settings: Mapping[str, Any]) -> ConsoleVerifyDriver:
    return ConsoleVerifyDriver()
