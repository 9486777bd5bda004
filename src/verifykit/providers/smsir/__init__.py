"""sms.ir provider."""

from verifykit.providers.smsir.config import SmsIrConfig
from verifykit.providers.smsir.driver import SmsIrVerifyDriver

__all__ = ["SmsIrConfig", "SmsIrVerifyDriver"]
