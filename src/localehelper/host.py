"""Reference host environment for locale application.

Models the pieces of an application host that the locale appliers touch:
a resource-lookup subsystem holding a configuration, the display metrics it
renders with, the string catalog it resolves from, and the preference store
bound to the environment.

Architecture:
    - Configuration: mutable locale/direction/font-scale record
    - DisplayMetrics: immutable rendering parameters
    - StringCatalog: per-locale string tables with language fallback
    - Resources: live configuration + metrics + catalog
    - HostEnvironment: resources + preferences + platform; can derive a
      new environment bound to a given configuration
    - HostPlatform: API level and the capability tier it implies

Hosts with their own objects may satisfy the Environment protocol directly.

Python 3.13+.
"""

from __future__ import annotations

import dataclasses
import logging
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

from localehelper.config import LocaleHelperConfig
from localehelper.constants import DEFAULT_API_LEVEL, SCOPED_CONFIGURATION_API_LEVEL
from localehelper.enums import CapabilityTier, LayoutDirection

if TYPE_CHECKING:
    from collections.abc import Mapping

    from localehelper.identity import LocaleIdentity
    from localehelper.preferences import PreferenceStore

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Protocol
    "Environment",
    # Configuration state
    "Configuration",
    "DisplayMetrics",
    # Resource lookup
    "StringCatalog",
    "Resources",
    # Concrete host
    "HostEnvironment",
    "HostPlatform",
]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class Configuration:
    """Mutable resource configuration.

    Legacy hosts hand this object out by reference and expect it to be
    mutated in place; scoped hosts copy it first.

    Attributes:
        locale: Locale resources resolve against (None until applied)
        layout_direction: Text layout direction
        font_scale: User font scaling factor, carried through untouched
    """

    locale: LocaleIdentity | None = None
    layout_direction: LayoutDirection = LayoutDirection.LTR
    font_scale: float = 1.0

    def set_locale(self, identity: LocaleIdentity) -> None:
        self.locale = identity

    def set_layout_direction(self, identity: LocaleIdentity) -> None:
        """Set layout direction from the identity's language."""
        self.layout_direction = identity.layout_direction

    def copy(self) -> Configuration:
        return dataclasses.replace(self)


@dataclass(frozen=True, slots=True)
class DisplayMetrics:
    """Rendering parameters pushed alongside a configuration update."""

    density: float = 1.0
    width_px: int = 0
    height_px: int = 0


@dataclass(frozen=True, slots=True)
class StringCatalog:
    """Named strings grouped by locale tag.

    Tables are keyed by POSIX tag ("ar_EG"), bare language ("ar"), or ""
    for the default table. Lookup tries the most specific table first.

    Example:
        >>> catalog = StringCatalog({"": {"hello": "Hello"}, "ar": {"hello": "مرحبا"}})
        >>> catalog.lookup("hello", LocaleIdentity.build("ar", "EG"))
        'مرحبا'
    """

    tables: Mapping[str, Mapping[str, str]] = field(default_factory=dict)

    def candidates(self, identity: LocaleIdentity | None) -> tuple[str, ...]:
        """Table keys consulted for identity, most specific first."""
        if identity is None:
            return ("",)
        if identity.region is None:
            return (identity.language, "")
        return (identity.tag, identity.language, "")

    def lookup(self, name: str, identity: LocaleIdentity | None) -> str:
        """Resolve name for identity.

        Raises:
            KeyError: If no candidate table defines name
        """
        for key in self.candidates(identity):
            table = self.tables.get(key)
            if table is not None and name in table:
                return table[name]
        msg = f"No string {name!r} for locale {identity}"
        raise KeyError(msg)


class Resources:
    """Resource-lookup subsystem bound to one configuration.

    ``configuration`` returns the live object, not a copy.
    """

    __slots__ = ("_catalog", "_configuration", "_display_metrics")

    def __init__(
        self,
        configuration: Configuration | None = None,
        display_metrics: DisplayMetrics | None = None,
        catalog: StringCatalog | None = None,
    ) -> None:
        self._configuration = configuration if configuration is not None else Configuration()
        self._display_metrics = display_metrics if display_metrics is not None else DisplayMetrics()
        self._catalog = catalog if catalog is not None else StringCatalog()

    @property
    def configuration(self) -> Configuration:
        return self._configuration

    @property
    def display_metrics(self) -> DisplayMetrics:
        return self._display_metrics

    @property
    def catalog(self) -> StringCatalog:
        return self._catalog

    def update_configuration(
        self, configuration: Configuration, display_metrics: DisplayMetrics | None = None
    ) -> None:
        """Install configuration (and optionally new metrics) as current."""
        self._configuration = configuration
        if display_metrics is not None:
            self._display_metrics = display_metrics
        logger.debug("Resources updated to locale %s", configuration.locale)

    def get_string(self, name: str) -> str:
        """Resolve a named string against the current configuration locale.

        Raises:
            KeyError: If the catalog has no entry for name
        """
        return self._catalog.lookup(name, self._configuration.locale)


class Environment(Protocol):
    """Structural type of a host environment.

    Anything exposing these members can be passed to LocaleHelper and
    LocaleApplier.
    """

    @property
    def resources(self) -> Resources: ...

    @property
    def preferences(self) -> PreferenceStore: ...

    def create_configuration_environment(self, configuration: Configuration) -> Environment: ...


class HostEnvironment:
    """Concrete environment: resources, preferences and platform.

    Environments derived with create_configuration_environment() share the
    preference store, catalog, metrics and platform of their parent but own
    a separate Resources bound to the given configuration object, which the
    caller hands over and must not mutate afterwards.

    ``platform`` is None when the host did not report one; LocaleHelper
    then detects it from LocaleHelperConfig.

    Example:
        >>> env = HostEnvironment(Resources(), InMemoryPreferenceStore())
        >>> derived = env.create_configuration_environment(Configuration(font_scale=1.5))
        >>> derived is env, env.resources.configuration.font_scale
        (False, 1.0)
    """

    __slots__ = ("_platform", "_preferences", "_resources")

    def __init__(
        self,
        resources: Resources,
        preferences: PreferenceStore,
        platform: HostPlatform | None = None,
    ) -> None:
        self._resources = resources
        self._preferences = preferences
        self._platform = platform

    @property
    def resources(self) -> Resources:
        return self._resources

    @property
    def preferences(self) -> PreferenceStore:
        return self._preferences

    @property
    def platform(self) -> HostPlatform | None:
        return self._platform

    def create_configuration_environment(self, configuration: Configuration) -> HostEnvironment:
        """Derive a new environment bound to configuration."""
        resources = Resources(
            configuration, self._resources.display_metrics, self._resources.catalog
        )
        return HostEnvironment(resources, self._preferences, self._platform)

    def __repr__(self) -> str:
        return (
            f"HostEnvironment(locale={self._resources.configuration.locale}, "
            f"platform={self._platform!r})"
        )


@dataclass(frozen=True, slots=True)
class HostPlatform:
    """Host platform identity used for capability detection.

    Attributes:
        api_level: Platform API level; 26 and above can derive scoped
            configuration environments.
    """

    api_level: int = DEFAULT_API_LEVEL

    @property
    def tier(self) -> CapabilityTier:
        if self.api_level >= SCOPED_CONFIGURATION_API_LEVEL:
            return CapabilityTier.SCOPED
        return CapabilityTier.LEGACY

    @classmethod
    def detect(cls, config: LocaleHelperConfig | None = None) -> HostPlatform:
        """Build the platform description from configuration.

        Args:
            config: Explicit configuration (default: LocaleHelperConfig.from_env())
        """
        if config is None:
            config = LocaleHelperConfig.from_env()
        return cls(api_level=config.api_level)
