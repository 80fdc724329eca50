"""localehelper - persist and apply an application's language/region preference.

Resolves the user's selected locale from a preference store, builds a
canonical LocaleIdentity, sets it as the process default and binds it to the
host environment using the strategy the host platform supports.

Public API:
    LocaleHelper - Resolve, persist and apply the locale preference
    on_attach, set_locale, get_language, get_country - Functions on a shared helper
    LocaleIdentity - Immutable (language, region) locale identifier
    LocaleApplier - Process default + environment binding
    HostEnvironment, Resources, Configuration - Reference host environment
    InMemoryPreferenceStore, JsonFilePreferenceStore - PreferenceStore implementations
    LocaleHelperConfig - Runtime configuration

Exceptions:
    LocaleHelperError - Base exception class
    EnvironmentUnavailableError - Host environment missing or unusable
    InvalidLocaleError - Empty language

Submodules:
    localehelper.resolver - Read/write the stored selection with fallbacks
    localehelper.applier - Scoped and in-place apply strategies
    localehelper.process - Process-wide default locale
    localehelper.locale_utils - Babel-backed locale helpers
"""

from .applier import LocaleApplier
from .config import LocaleHelperConfig
from .constants import AR, EGYPT, EN, FALLBACK_LANGUAGE, SAUDI_ARABIA
from .enums import CapabilityTier, LayoutDirection
from .errors import EnvironmentUnavailableError, InvalidLocaleError, LocaleHelperError
from .helper import LocaleHelper, get_country, get_language, on_attach, set_locale
from .host import (
    Configuration,
    DisplayMetrics,
    HostEnvironment,
    HostPlatform,
    Resources,
    StringCatalog,
)
from .identity import LocaleIdentity
from .preferences import InMemoryPreferenceStore, JsonFilePreferenceStore, PreferenceStore
from .process import get_default_locale

# Version information - Auto-populated from package metadata
# SINGLE SOURCE OF TRUTH: pyproject.toml [project] version
from importlib.metadata import PackageNotFoundError
from importlib.metadata import version as _get_version

try:
    __version__ = _get_version("localehelper")
except PackageNotFoundError:
    # Development mode: package not installed yet
    __version__ = "0.0.0+dev"

__all__ = [
    "AR",
    "EGYPT",
    "EN",
    "FALLBACK_LANGUAGE",
    "SAUDI_ARABIA",
    "CapabilityTier",
    "Configuration",
    "DisplayMetrics",
    "EnvironmentUnavailableError",
    "HostEnvironment",
    "HostPlatform",
    "InMemoryPreferenceStore",
    "InvalidLocaleError",
    "JsonFilePreferenceStore",
    "LayoutDirection",
    "LocaleApplier",
    "LocaleHelper",
    "LocaleHelperConfig",
    "LocaleHelperError",
    "LocaleIdentity",
    "PreferenceStore",
    "Resources",
    "StringCatalog",
    "__version__",
    "get_country",
    "get_default_locale",
    "get_language",
    "on_attach",
    "set_locale",
]
