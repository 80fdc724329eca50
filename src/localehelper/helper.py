"""Public entry points: attach, change and read the selected locale.

LocaleHelper ties the pieces together. It reads the preference store bound
to an environment, builds a LocaleIdentity and hands it to its
LocaleApplier. Callers always continue with the environment it returns.

Typical host integration, once per environment construction:

    >>> helper = LocaleHelper()
    >>> env = helper.on_attach(base_env)                  # stored or "ar"
    >>> env = helper.on_attach(base_env, "en")            # language only
    >>> env = helper.on_attach(base_env, "ar", "EG")      # language + country

And when the user picks a new locale:

    >>> env = helper.set_locale(env, "ar", "EG")
    >>> helper.get_language(env), helper.get_country(env)
    ('ar', 'EG')

Module-level functions mirror these methods on a shared default helper.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from localehelper.applier import LocaleApplier, ensure_environment, select_strategy
from localehelper.errors import EnvironmentUnavailableError
from localehelper.host import HostPlatform
from localehelper.identity import LocaleIdentity
from localehelper.resolver import (
    persist_language,
    persist_region,
    resolve_language,
    resolve_region,
)

if TYPE_CHECKING:
    from localehelper.applier import ApplyStrategy
    from localehelper.config import LocaleHelperConfig
    from localehelper.host import Environment
    from localehelper.preferences import PreferenceStore

__all__ = [
    "LocaleHelper",
    "get_country",
    "get_default_helper",
    "get_language",
    "on_attach",
    "reset_default_helper",
    "set_locale",
]

logger = logging.getLogger(__name__)


class LocaleHelper:
    """Resolve, persist and apply the user's locale preference.

    The apply strategy is selected once per helper. In order of precedence
    it comes from ``strategy``, ``platform``, ``config``, and otherwise from
    the ``platform`` of the first environment the helper is given (hosts
    without one fall back to LocaleHelperConfig.from_env()).

    Args:
        strategy: Explicit ApplyStrategy; overrides platform detection
        platform: Host platform to detect the tier from
        config: Configuration to detect the platform from
    """

    __slots__ = ("_applier", "_config")

    def __init__(
        self,
        strategy: ApplyStrategy | None = None,
        *,
        platform: HostPlatform | None = None,
        config: LocaleHelperConfig | None = None,
    ) -> None:
        self._config = config
        self._applier: LocaleApplier | None = None
        if strategy is None and platform is None and config is not None:
            platform = HostPlatform.detect(config)
        if strategy is None and platform is not None:
            strategy = select_strategy(platform)
        if strategy is not None:
            self._applier = LocaleApplier(strategy)
            logger.debug("LocaleHelper using %r", strategy)

    @property
    def applier(self) -> LocaleApplier:
        """Applier in use; detects the platform from configuration if still undecided."""
        return self._applier_for(None)

    def _applier_for(self, environment: Environment | None) -> LocaleApplier:
        if self._applier is None:
            platform = getattr(environment, "platform", None)
            if not isinstance(platform, HostPlatform):
                platform = HostPlatform.detect(self._config)
            self._applier = LocaleApplier.for_platform(platform)
            logger.debug("LocaleHelper detected %r from %r", self._applier.strategy, platform)
        return self._applier

    def on_attach(
        self,
        environment: Environment,
        default_language: str | None = None,
        default_region: str | None = None,
    ) -> Environment:
        """Apply the stored preference when an environment is created.

        Three forms:
            on_attach(env): stored language (else "ar") and stored country
                (else none).
            on_attach(env, lang): stored language (else lang); the locale is
                language-only and any stored country is left alone.
            on_attach(env, lang, region): stored language and country, else
                the given defaults.

        The resolved values are persisted through set_locale().

        Returns:
            The environment handle to use for resource lookups

        Raises:
            TypeError: If default_region is given without default_language
        """
        if default_language is None and default_region is not None:
            msg = "on_attach() needs default_language when default_region is given"
            raise TypeError(msg)

        store = _preferences_of(environment)
        if default_language is None:
            language = resolve_language(store)
            region = resolve_region(store)
            return self._set_locale(environment, language, region, persist_region_key=True)
        if default_region is None:
            language = resolve_language(store, default_language)
            return self.set_locale(environment, language)
        language = resolve_language(store, default_language)
        region = resolve_region(store, default_region)
        return self.set_locale(environment, language, region)

    def set_locale(
        self,
        environment: Environment,
        language: str,
        region: str | None = None,
    ) -> Environment:
        """Persist and apply a new locale.

        With region None only the language key is written and the applied
        locale is language-only; a previously stored country stays stored.
        With a region both keys are written.

        Nothing is written unless the identity can be built and the
        environment can be configured.

        Args:
            environment: Environment the caller currently holds
            language: Language code in lowercase like "ar" or "en"
            region: Country code in uppercase like "EG" or "SA"

        Returns:
            The environment handle to use for resource lookups

        Raises:
            InvalidLocaleError: If language is empty
            EnvironmentUnavailableError: If environment has no store or resources
        """
        return self._set_locale(
            environment, language, region, persist_region_key=region is not None
        )

    def _set_locale(
        self,
        environment: Environment,
        language: str,
        region: str | None,
        *,
        persist_region_key: bool,
    ) -> Environment:
        identity = LocaleIdentity.build(language, region)
        store = _preferences_of(environment)
        ensure_environment(environment)
        applier = self._applier_for(environment)

        persist_language(store, language)
        if persist_region_key:
            persist_region(store, region)
        return applier.apply(environment, identity)

    def get_language(self, environment: Environment) -> str:
        """Stored language, or the built-in fallback "ar"."""
        return resolve_language(_preferences_of(environment))

    def get_country(self, environment: Environment) -> str | None:
        """Stored country, or None."""
        return resolve_region(_preferences_of(environment))

    def __repr__(self) -> str:
        return f"LocaleHelper({self._applier!r})"


_default_helper: LocaleHelper | None = None


def get_default_helper() -> LocaleHelper:
    """Return the shared helper, creating it from the environment on first use."""
    global _default_helper  # noqa: PLW0603  # pylint: disable=global-statement
    if _default_helper is None:
        _default_helper = LocaleHelper()
    return _default_helper


def reset_default_helper() -> None:
    """Drop the shared helper so the next call re-detects the platform."""
    global _default_helper  # noqa: PLW0603  # pylint: disable=global-statement
    _default_helper = None


def on_attach(
    environment: Environment,
    default_language: str | None = None,
    default_region: str | None = None,
) -> Environment:
    """See LocaleHelper.on_attach()."""
    return get_default_helper().on_attach(environment, default_language, default_region)


def set_locale(environment: Environment, language: str, region: str | None = None) -> Environment:
    """See LocaleHelper.set_locale()."""
    return get_default_helper().set_locale(environment, language, region)


def get_language(environment: Environment) -> str:
    """See LocaleHelper.get_language()."""
    return get_default_helper().get_language(environment)


def get_country(environment: Environment) -> str | None:
    """See LocaleHelper.get_country()."""
    return get_default_helper().get_country(environment)


def _preferences_of(environment: Environment) -> PreferenceStore:
    """Return the store bound to environment.

    Raises:
        EnvironmentUnavailableError: If environment is None or has no store
    """
    store = getattr(environment, "preferences", None) if environment is not None else None
    if store is None:
        msg = "Host environment unavailable: no preference store"
        raise EnvironmentUnavailableError(msg)
    return store
