"""verifykit - pluggable-provider dispatch for SMS verification codes."""

from verifykit._version import __version__
from verifykit.bootstrap import build_dispatcher, configure_dispatcher
from verifykit.dispatcher import VerifyDispatcher
from verifykit.errors import DriverAlreadyRegisteredError, UnknownProviderError, VerifyKitError
from verifykit.models import (
    ErrorKind,
    Failure,
    Outcome,
    PhoneNumber,
    Success,
    VerificationRequest,
    is_success,
    outcome_to_payload,
)
from verifykit.phone import PhoneNormalizer, normalize_phone
from verifykit.providers import (
    ConsoleVerifyDriver,
    HTTPVerifyDriver,
    KavenegarConfig,
    KavenegarVerifyDriver,
    MockVerifyDriver,
    SmsIrConfig,
    SmsIrVerifyDriver,
    VerifyCodeDriver,
)
from verifykit.registry import DriverFactory, DriverRegistry, default_registry, register_driver
from verifykit.settings import EnvSettingsStore, InMemorySettingsStore, SettingsStore
from verifykit.transport import (
    HTTPResponse,
    HTTPTransport,
    HttpxTransport,
    TransportError,
    TransportTimeout,
)

__all__ = [
    "ConsoleVerifyDriver",
    "DriverAlreadyRegisteredError",
    "DriverFactory",
    "DriverRegistry",
    "EnvSettingsStore",
    "ErrorKind",
    "Failure",
    "HTTPResponse",
    "HTTPTransport",
    "HTTPVerifyDriver",
    "HttpxTransport",
    "InMemorySettingsStore",
    "KavenegarConfig",
    "KavenegarVerifyDriver",
    "MockVerifyDriver",
    "Outcome",
    "PhoneNormalizer",
    "PhoneNumber",
    "SettingsStore",
    "SmsIrConfig",
    "SmsIrVerifyDriver",
    "Success",
    "TransportError",
    "TransportTimeout",
    "UnknownProviderError",
    "VerificationRequest",
    "VerifyCodeDriver",
    "VerifyDispatcher",
    "VerifyKitError",
    "__version__",
    "build_dispatcher",
    "configure_dispatcher",
    "default_registry",
    "is_success",
    "normalize_phone",
    "outcome_to_payload",
    "register_driver",
]
