"""Mock verification driver for testing."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from uuid import uuid4

from verifykit.models.outcome import Outcome, Success
from verifykit.models.request import PhoneNumber
from verifykit.providers.base import VerifyCodeDriver
from verifykit.registry import register_driver


class MockVerifyDriver(VerifyCodeDriver):
    """Records sent codes for verification in tests.

    Returns *outcome* for every send when given, otherwise a ``Success``
    with a random message id.
    """

    def __init__(self, outcome: Outcome | None = None, *, name: str = "mock") -> None:
        self.sent: list[dict[str, str]] = []
        self.closed = False
        self._outcome = outcome
        self._name = name

    @property
    def name(self) -> str:
        return self._name

    async def send_verify_code(self, number: PhoneNumber, code: str) -> Outcome:
        self.sent.append({"number": number, "code": code})
        if self._outcome is not None:
            return self._outcome
        return Success(message="Verification code sent", provider_message_id=uuid4().hex)

    async def close(self) -> None:
        self.closed = True


@register_driver("mock")
def _build(settings: Mapping[str, Any]) -> MockVerifyDriver:
    return MockVerifyDriver()
