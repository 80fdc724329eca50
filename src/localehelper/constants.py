"""Shared constants for localehelper.

Constants are grouped by domain:
- Preference keys: stable names under which the selection is persisted
- Built-in codes: language and country literals callers may pass as defaults
- Platform thresholds: capability tier boundaries

Python 3.13+. Zero external dependencies.
"""

# ruff: noqa: RUF022 - __all__ organized by category for readability
__all__ = [
    # Preference keys
    "SELECTED_LANGUAGE",
    "SELECTED_COUNTRY",
    # Built-in codes
    "AR",
    "EN",
    "EGYPT",
    "SAUDI_ARABIA",
    "FALLBACK_LANGUAGE",
    # Platform thresholds
    "SCOPED_CONFIGURATION_API_LEVEL",
    "DEFAULT_API_LEVEL",
    # Cache limits
    "MAX_LOCALE_CACHE_SIZE",
]

# ============================================================================
# PREFERENCE KEYS
# ============================================================================
#
# These keys are read back from stores written by earlier releases.
# Never rename them.

SELECTED_LANGUAGE: str = "Locale.Helper.Selected.Language"
"""Store key holding the lowercase language code."""

SELECTED_COUNTRY: str = "Locale.Helper.Selected.Country"
"""Store key holding the uppercase country code (absent for language-only)."""

# ============================================================================
# BUILT-IN CODES
# ============================================================================

EGYPT: str = "EG"
SAUDI_ARABIA: str = "SA"

AR: str = "ar"
EN: str = "en"

FALLBACK_LANGUAGE: str = AR
"""Language used when neither the store nor the caller supplies one.

There is deliberately no country counterpart: an unresolved country is
absent (None), never a built-in code.
"""

# ============================================================================
# PLATFORM THRESHOLDS
# ============================================================================

SCOPED_CONFIGURATION_API_LEVEL: int = 26
"""First host API level able to derive a scoped configuration environment."""

DEFAULT_API_LEVEL: int = SCOPED_CONFIGURATION_API_LEVEL
"""API level assumed when the host does not report one."""

# ============================================================================
# CACHE LIMITS
# ============================================================================

MAX_LOCALE_CACHE_SIZE: int = 128
"""Maximum Babel Locale objects kept by get_babel_locale()."""
