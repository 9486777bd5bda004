"""Helpers that keep secrets and full phone numbers out of logs and messages."""

from __future__ import annotations

from collections.abc import Iterable

REDACTED = "***"


def redact_secrets(text: str, secrets: Iterable[str | None]) -> str:
    """Replace every occurrence of each non-empty secret in *text*."""
    # Longest first so a secret containing another is fully replaced.
    for secret in sorted((s for s in secrets if s), key=len, reverse=True):
        text = text.replace(secret, REDACTED)
    return text


def mask_phone(number: str, visible: int = 4) -> str:
    """Mask all but the last *visible* digits of a phone number.

    Example:
        >>> mask_phone("+989123456789")
        '+98******6789'
    """
    if len(number) <= visible + 3:
        return number
    head = number[:3]
    tail = number[-visible:]
    return f"{head}{'*' * (len(number) - len(head) - visible)}{tail}"
