"""Verification-code drivers.

Importing this package registers every built-in driver on
``verifykit.registry.default_registry``.
"""

from verifykit.providers.base import VerifyCodeDriver
from verifykit.providers.console import ConsoleVerifyDriver
from verifykit.providers.http_base import HTTPVerifyDriver
from verifykit.providers.kavenegar import KavenegarConfig, KavenegarVerifyDriver
from verifykit.providers.mock import MockVerifyDriver
from verifykit.providers.smsir import SmsIrConfig, SmsIrVerifyDriver

__all__ = [
    "ConsoleVerifyDriver",
    "HTTPVerifyDriver",
    "KavenegarConfig",
    "KavenegarVerifyDriver",
    "MockVerifyDriver",
    "SmsIrConfig",
    "SmsIrVerifyDriver",
    "VerifyCodeDriver",
]
