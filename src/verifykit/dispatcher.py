"""Dispatcher holding the active verification driver."""

from __future__ import annotations

import asyncio
import logging
import time
from typing import Any

from verifykit.models.enums import ErrorKind
from verifykit.models.outcome import Failure, Outcome, Success
from verifykit.models.request import VerificationRequest
from verifykit.phone import PhoneNormalizer
from verifykit.providers.base import VerifyCodeDriver
from verifykit.redact import mask_phone
from verifykit.telemetry.base import Attr, SpanKind, TelemetryProvider
from verifykit.telemetry.noop import NoopTelemetryProvider

logger = logging.getLogger("verifykit.dispatcher")


class VerifyDispatcher:
    """Route verification codes to the one installed driver.

    Calling code only ever uses ``send_verify_code``; bootstrap code binds
    the provider with ``install_driver``. Numbers are normalized here once,
    so drivers always receive ``+<country code><digits>``.

    Sends read the driver reference once and never hold a lock across the
    network call. Replacing the driver while sends are in flight lets those
    sends finish on the old driver, which is closed after the last of them
    completes.

    Example::

        dispatcher = VerifyDispatcher(PhoneNormalizer("98"))
        await dispatcher.install_driver(SmsIrVerifyDriver(config))
        outcome = await dispatcher.send_verify_code("0912 345 6789", "4821")
        if not outcome.success:
            print(outcome.kind, outcome.message)
    """

    def __init__(
        self,
        normalizer: PhoneNormalizer | None = None,
        *,
        telemetry: TelemetryProvider | None = None,
    ) -> None:
        self._normalizer = normalizer or PhoneNormalizer()
        self._telemetry = telemetry or NoopTelemetryProvider()
        self._driver: VerifyCodeDriver | None = None
        self._install_lock = asyncio.Lock()
        # id(driver) -> number of sends currently using it
        self._in_flight: dict[int, int] = {}
        # replaced drivers waiting for their in-flight sends to finish
        self._retired: dict[int, VerifyCodeDriver] = {}

    @property
    def normalizer(self) -> PhoneNormalizer:
        return self._normalizer

    @property
    def active_driver(self) -> VerifyCodeDriver | None:
        return self._driver

    @property
    def has_driver(self) -> bool:
        return self._driver is not None

    # -- Driver lifecycle -----------------------------------------------------

    async def install_driver(self, driver: VerifyCodeDriver) -> None:
        """Make *driver* the active driver, releasing the previous one."""
        async with self._install_lock:
            previous, self._driver = self._driver, driver
            self._retired.pop(id(driver), None)
            logger.info(
                "Installed SMS driver %s (replaced %s)",
                driver.name,
                previous.name if previous is not None else "none",
            )
            self._record_install(driver, previous)
            if previous is not None and previous is not driver:
                await self._retire(previous)

    async def uninstall_driver(self) -> VerifyCodeDriver | None:
        """Remove the active driver. Later sends fail with ``no_driver_configured``."""
        async with self._install_lock:
            previous, self._driver = self._driver, None
            if previous is not None:
                logger.info("Uninstalled SMS driver %s", previous.name)
                await self._retire(previous)
            return previous

    async def close(self) -> None:
        """Uninstall and release the active driver."""
        await self.uninstall_driver()

    async def _retire(self, driver: VerifyCodeDriver) -> None:
        if self._in_flight.get(id(driver), 0):
            self._retired[id(driver)] = driver
            return
        await self._release(driver)

    async def _release(self, driver: VerifyCodeDriver) -> None:
        try:
            await driver.close()
        except Exception:
            logger.exception("Failed to close SMS driver %s", driver.name)

    # -- Sending ----------------------------------------------------------------

    async def send_verify_code(self, raw_number: str, code: str) -> Outcome:
        """Normalize *raw_number* and send *code* through the active driver.

        Returns the driver's outcome unchanged, or a ``no_driver_configured``
        failure when nothing is installed (no normalization or I/O happens
        in that case).
        """
        driver = self._driver
        if driver is None:
            logger.warning("Verify code not sent: no SMS driver installed")
            return Failure(
                kind=ErrorKind.NO_DRIVER_CONFIGURED,
                message="No SMS provider is configured",
            )

        key = id(driver)
        self._in_flight[key] = self._in_flight.get(key, 0) + 1
        try:
            number = self._normalizer.normalize(raw_number)
            span_id = self._start_span(driver, number)
            t0 = time.monotonic()
            try:
                outcome = await driver.send_verify_code(number, code)
            except BaseException as exc:
                self._end_span(span_id, driver, None, t0, error=exc)
                raise
            self._end_span(span_id, driver, outcome, t0)
        finally:
            await self._finish(key)
        return outcome

    async def send(self, request: VerificationRequest) -> Outcome:
        """Send a ``VerificationRequest``; see ``send_verify_code``."""
        return await self.send_verify_code(request.raw_number, request.code)

    async def _finish(self, key: int) -> None:
        remaining = self._in_flight.get(key, 0) - 1
        if remaining > 0:
            self._in_flight[key] = remaining
            return
        self._in_flight.pop(key, None)
        retired = self._retired.pop(key, None)
        if retired is not None:
            await self._release(retired)

    # -- Telemetry ---------------------------------------------------------------

    def _record_install(
        self, driver: VerifyCodeDriver, previous: VerifyCodeDriver | None
    ) -> None:
        try:
            span_id = self._telemetry.start_span(
                SpanKind.DRIVER_INSTALL,
                "verify.install_driver",
                attributes={Attr.PROVIDER: driver.name},
            )
            self._telemetry.end_span(
                span_id,
                attributes={
                    Attr.DRIVER_REPLACED: previous.name if previous is not None else None
                },
            )
        except Exception:
            logger.exception("Telemetry install span failed")

    def _start_span(self, driver: VerifyCodeDriver, number: str) -> str | None:
        try:
            return self._telemetry.start_span(
                SpanKind.VERIFY_SEND,
                "verify.send_code",
                attributes={
                    Attr.PROVIDER: driver.name,
                    Attr.DELIVERY_RECIPIENT: mask_phone(number),
                },
            )
        except Exception:
            logger.exception("Telemetry start_span failed")
            return None

    def _end_span(
        self,
        span_id: str | None,
        driver: VerifyCodeDriver,
        outcome: Outcome | None,
        started: float,
        *,
        error: BaseException | None = None,
    ) -> None:
        send_ms = (time.monotonic() - started) * 1000
        attrs: dict[str, Any] = {Attr.DELIVERY_SUCCESS: outcome is not None and outcome.success}
        if isinstance(outcome, Success):
            attrs[Attr.DELIVERY_MESSAGE_ID] = outcome.provider_message_id
            error_message = None
        elif isinstance(outcome, Failure):
            attrs[Attr.DELIVERY_ERROR] = str(outcome.kind)
            error_message = outcome.message
        else:
            # The driver raised instead of returning an outcome.
            attrs[Attr.DELIVERY_ERROR] = type(error).__name__
            error_message = str(error) or type(error).__name__
        try:
            if span_id is not None:
                self._telemetry.end_span(
                    span_id,
                    status="ok" if isinstance(outcome, Success) else "error",
                    error_message=error_message,
                    attributes=attrs,
                )
            self._telemetry.record_metric(
                "verifykit.send_ms",
                send_ms,
                unit="ms",
                attributes={Attr.PROVIDER: driver.name},
            )
        except Exception:
            logger.exception("Telemetry end_span failed")
