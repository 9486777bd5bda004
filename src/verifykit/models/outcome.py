"""Outcome of a verification-code send: ``Success`` or ``Failure``."""

from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, ConfigDict

from verifykit.models.enums import ErrorKind


class Success(BaseModel):
    """The provider accepted the message."""

    model_config = ConfigDict(frozen=True)

    success: Literal[True] = True
    message: str
    provider_message_id: str | None = None

    def to_payload(self) -> dict[str, Any]:
        payload: dict[str, Any] = {"success": True, "message": self.message}
        if self.provider_message_id is not None:
            payload["messageId"] = self.provider_message_id
        return payload


class Failure(BaseModel):
    """The send did not go through.

    ``message`` is safe to show to users or write to logs: drivers redact
    secret configuration values before building it.
    """

    model_config = ConfigDict(frozen=True)

    success: Literal[False] = False
    kind: ErrorKind
    message: str

    def to_payload(self) -> dict[str, Any]:
        return {"success": False, "errorKind": str(self.kind), "message": self.message}


Outcome = Success | Failure


def is_success(outcome: Success | Failure) -> bool:
    """Return True if *outcome* is a ``Success``."""
    return isinstance(outcome, Success)


def outcome_to_payload(outcome: Success | Failure) -> dict[str, Any]:
    """Serialize an outcome for cross-boundary use (e.g. an HTTP API)."""
    return outcome.to_payload()
