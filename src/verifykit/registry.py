"""Provider-name to driver-factory registry."""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterator, Mapping
from typing import TYPE_CHECKING, Any

from verifykit.errors import DriverAlreadyRegisteredError, UnknownProviderError

if TYPE_CHECKING:
    from verifykit.providers.base import VerifyCodeDriver

logger = logging.getLogger("verifykit.registry")

DriverFactory = Callable[[Mapping[str, Any]], "VerifyCodeDriver"]
"""Builds a driver from a provider's flat settings bundle."""


class DriverRegistry:
    """Look up driver factories by the provider name an operator configured.

    Each provider module registers its factory once at import time, so adding
    a provider never requires editing dispatch code::

        @default_registry.factory("acme")
        def _build(settings):
            return AcmeVerifyDriver(AcmeConfig.from_settings(settings))
    """

    def __init__(self) -> None:
        self._factories: dict[str, DriverFactory] = {}

    def register(self, name: str, factory: DriverFactory, *, replace: bool = False) -> None:
        """Register *factory* under *name* (case-insensitive).

        Raises:
            DriverAlreadyRegisteredError: If *name* is taken and *replace* is
                False.
        """
        key = _key(name)
        if key in self._factories and not replace:
            raise DriverAlreadyRegisteredError(key)
        self._factories[key] = factory
        logger.debug("Registered SMS provider: %s", key)

    def factory(
        self, name: str, *, replace: bool = False
    ) -> Callable[[DriverFactory], DriverFactory]:
        """Decorator form of ``register``."""

        def decorator(fn: DriverFactory) -> DriverFactory:
            self.register(name, fn, replace=replace)
            return fn

        return decorator

    def unregister(self, name: str) -> bool:
        """Remove *name*. Returns False if it was not registered."""
        return self._factories.pop(_key(name), None) is not None

    def names(self) -> list[str]:
        """Registered provider names, sorted."""
        return sorted(self._factories)

    def create(self, name: str, settings: Mapping[str, Any] | None = None) -> VerifyCodeDriver:
        """Build the driver registered under *name* from *settings*.

        Raises:
            UnknownProviderError: If no factory is registered under *name*.
        """
        factory = self._factories.get(_key(name))
        if factory is None:
            raise UnknownProviderError(name)
        return factory(dict(settings or {}))

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and _key(name) in self._factories

    def __iter__(self) -> Iterator[str]:
        return iter(self.names())

    def __len__(self) -> int:
        return len(self._factories)


def _key(name: str) -> str:
    return name.strip().lower()


default_registry = DriverRegistry()


def register_driver(
    name: str, *, replace: bool = False
) -> Callable[[DriverFactory], DriverFactory]:
    """Register a factory on ``default_registry`` (decorator)."""
    return default_registry.factory(name, replace=replace)
