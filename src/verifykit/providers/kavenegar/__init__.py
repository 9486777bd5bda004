"""Kavenegar provider."""

from verifykit.providers.kavenegar.config import KavenegarConfig
from verifykit.providers.kavenegar.driver import KavenegarVerifyDriver

__all__ = ["KavenegarConfig", "KavenegarVerifyDriver"]
