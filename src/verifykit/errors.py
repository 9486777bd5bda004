"""Exceptions raised by verifykit.

Send failures are never raised: they are returned as ``Failure`` outcomes.
These exceptions cover wiring mistakes made by bootstrap code.
"""

from __future__ import annotations


class VerifyKitError(Exception):
    """Base exception for all verifykit errors."""


class UnknownProviderError(VerifyKitError):
    """No driver factory is registered under the requested provider name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"Unknown SMS provider: {name!r}")
        self.name = name


class DriverAlreadyRegisteredError(VerifyKitError):
    """A driver factory is already registered under this provider name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"SMS provider already registered: {name!r}")
        self.name = name
