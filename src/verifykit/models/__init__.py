"""Data models for verifykit."""

from verifykit.models.enums import ErrorKind
from verifykit.models.outcome import Failure, Outcome, Success, is_success, outcome_to_payload
from verifykit.models.request import PhoneNumber, VerificationRequest

__all__ = [
    "ErrorKind",
    "Failure",
    "Outcome",
    "PhoneNumber",
    "Success",
    "VerificationRequest",
    "is_success",
    "outcome_to_payload",
]
