"""Apply a LocaleIdentity to the process and to a host environment.

Two strategies make a locale take effect, one per capability tier:

    ScopedConfigurationStrategy (CapabilityTier.SCOPED):
        Copies the environment's configuration, sets locale and layout
        direction on the copy, and returns a newly derived environment.
        The caller's environment is left untouched.

    InPlaceConfigurationStrategy (CapabilityTier.LEGACY):
        Mutates the live configuration, pushes it back into the shared
        resources together with the current display metrics, and returns
        the caller's own environment.

LocaleApplier is built with exactly one strategy, chosen once from the
host platform, so every apply() on it follows the same path. Layout
direction is always derived from the identity's language.

Thread Safety:
    None. apply() overwrites the process default locale and, on legacy
    hosts, a shared configuration object. Hosts must serialize calls.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Protocol

from localehelper.enums import CapabilityTier
from localehelper.errors import EnvironmentUnavailableError
from localehelper.process import set_default_locale

if TYPE_CHECKING:
    from localehelper.host import Environment, HostPlatform
    from localehelper.identity import LocaleIdentity

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "ApplyStrategy",
    # Strategies
    "ScopedConfigurationStrategy",
    "InPlaceConfigurationStrategy",
    "select_strategy",
    # Preconditions
    "ensure_environment",
    # Facade
    "LocaleApplier",
]

logger = logging.getLogger(__name__)


class ApplyStrategy(Protocol):
    """Protocol for making a locale take effect in an environment."""

    @property
    def tier(self) -> CapabilityTier:
        """Capability tier this strategy serves."""

    def apply(self, environment: Environment, identity: LocaleIdentity) -> Environment:
        """Bind identity to environment and return the handle to use afterwards."""


class ScopedConfigurationStrategy:
    """Derive a new environment from a configured copy."""

    __slots__ = ()

    @property
    def tier(self) -> CapabilityTier:
        return CapabilityTier.SCOPED

    def apply(self, environment: Environment, identity: LocaleIdentity) -> Environment:
        configuration = environment.resources.configuration.copy()
        configuration.set_locale(identity)
        configuration.set_layout_direction(identity)
        logger.debug("Deriving scoped environment for %s", identity)
        return environment.create_configuration_environment(configuration)

    def __repr__(self) -> str:
        return "ScopedConfigurationStrategy()"


class InPlaceConfigurationStrategy:
    """Mutate the shared configuration and push it back to resources."""

    __slots__ = ()

    @property
    def tier(self) -> CapabilityTier:
        return CapabilityTier.LEGACY

    def apply(self, environment: Environment, identity: LocaleIdentity) -> Environment:
        resources = environment.resources
        configuration = resources.configuration
        configuration.set_locale(identity)
        configuration.set_layout_direction(identity)
        resources.update_configuration(configuration, resources.display_metrics)
        logger.debug("Updated shared configuration in place for %s", identity)
        return environment

    def __repr__(self) -> str:
        return "InPlaceConfigurationStrategy()"


def ensure_environment(environment: Environment | None) -> None:
    """Check that environment can have a locale applied to it.

    Raises:
        EnvironmentUnavailableError: If environment is None or has no resources
    """
    if environment is None or getattr(environment, "resources", None) is None:
        msg = "Host environment unavailable: no resources to configure"
        raise EnvironmentUnavailableError(msg)


def select_strategy(platform: HostPlatform) -> ApplyStrategy:
    """Pick the strategy matching the platform's capability tier.

    Example:
        >>> select_strategy(HostPlatform(api_level=21))
        InPlaceConfigurationStrategy()
    """
    if platform.tier is CapabilityTier.SCOPED:
        return ScopedConfigurationStrategy()
    return InPlaceConfigurationStrategy()


class LocaleApplier:
    """Set the process default locale and bind it to an environment.

    Example:
        >>> applier = LocaleApplier.for_platform(HostPlatform(api_level=30))
        >>> env = applier.apply(HostEnvironment(Resources(), InMemoryPreferenceStore()),
        ...                     LocaleIdentity.build("ar", "EG"))
        >>> env.resources.configuration.layout_direction
        <LayoutDirection.RTL: 'rtl'>
    """

    __slots__ = ("_strategy",)

    def __init__(self, strategy: ApplyStrategy) -> None:
        self._strategy = strategy

    @classmethod
    def for_platform(cls, platform: HostPlatform) -> LocaleApplier:
        """Create an applier for platform's capability tier."""
        return cls(select_strategy(platform))

    @property
    def strategy(self) -> ApplyStrategy:
        return self._strategy

    @property
    def tier(self) -> CapabilityTier:
        return self._strategy.tier

    def apply(self, environment: Environment, identity: LocaleIdentity) -> Environment:
        """Apply identity and return the environment handle to use from now on.

        Args:
            environment: Host environment the caller currently holds
            identity: Locale to apply

        Returns:
            A new derived environment on scoped hosts, the same environment
            object on legacy hosts.

        Raises:
            EnvironmentUnavailableError: If environment is None or has no resources
        """
        ensure_environment(environment)
        set_default_locale(identity)
        handle = self._strategy.apply(environment, identity)
        logger.info("Applied locale %s via %s strategy", identity, self._strategy.tier)
        return handle

    def __repr__(self) -> str:
        return f"LocaleApplier({self._strategy!r})"
