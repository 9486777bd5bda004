"""Request-side value types."""

from __future__ import annotations

from typing import NewType

from pydantic import BaseModel, ConfigDict

PhoneNumber = NewType("PhoneNumber", str)
"""A normalized number: ``+`` followed by the country code and digits only."""


class VerificationRequest(BaseModel):
    """A caller's request to deliver *code* to *raw_number*.

    ``code`` is opaque: it is neither checked for digits nor for length.
    """

    model_config = ConfigDict(frozen=True)

    raw_number: str
    code: str
