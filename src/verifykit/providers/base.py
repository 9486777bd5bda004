"""Abstract base class for verification-code drivers."""

from __future__ import annotations

import contextlib
import logging
from abc import ABC, abstractmethod
from typing import Any

from verifykit.models.enums import ErrorKind
from verifykit.models.outcome import Failure, Outcome, Success
from verifykit.models.request import PhoneNumber


class VerifyCodeDriver(ABC):
    """Sends a one-time verification code through one SMS vendor.

    Implementations must never raise from ``send_verify_code``. Every
    problem is returned as a ``Failure``:

    - missing credentials: ``config_error``, checked before any I/O
    - transport failures and timeouts: ``connection_error``
    - a body that does not have the vendor's shape: ``response_format_error``
    - a well-formed refusal from the vendor: ``provider_rejected``

    A driver makes exactly one attempt per call and holds no mutable state
    besides its HTTP client, so it may be shared by concurrent sends.
    """

    @property
    def name(self) -> str:
        """Provider name (e.g. 'smsir', 'kavenegar')."""
        return self.__class__.__name__

    @abstractmethod
    async def send_verify_code(self, number: PhoneNumber, code: str) -> Outcome:
        """Send *code* to the normalized *number*.

        Args:
            number: Recipient number, already normalized by the dispatcher.
            code: The verification code; opaque to the driver.

        Returns:
            ``Success`` or ``Failure``; never raises.
        """
        ...

    async def close(self) -> None:  # noqa: B027
        """Release resources. Override in subclasses that hold connections."""

    def _record_attempt(self, request_summary: dict[str, Any], outcome: Outcome) -> None:
        """Write one diagnostic record for a send attempt.

        *request_summary* must already be redacted. Errors while logging are
        ignored: diagnostics never change the returned outcome.
        """
        with contextlib.suppress(Exception):
            log = logging.getLogger(f"verifykit.providers.{self.name}")
            if isinstance(outcome, Success):
                log.info(
                    "Verify code sent | provider=%s | request=%s | message_id=%s",
                    self.name,
                    request_summary,
                    outcome.provider_message_id,
                )
            else:
                log.warning(
                    "Verify code failed | provider=%s | request=%s | kind=%s | message=%s",
                    self.name,
                    request_summary,
                    outcome.kind,
                    outcome.message,
                )


def config_failure(provider: str, missing: list[str]) -> Failure:
    """Build the ``config_error`` outcome for missing settings."""
    return Failure(
        kind=ErrorKind.CONFIG_ERROR,
        message=f"{provider} is missing required settings: {', '.join(missing)}",
    )
