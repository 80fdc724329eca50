"""Locale utilities backed by Babel CLDR data.

Centralizes locale tag normalization and the lookups that need CLDR data:
parsing a tag into a Babel Locale and deriving the text layout direction
of a language.

Python 3.13+.
"""

from __future__ import annotations

import functools
import logging
from typing import TYPE_CHECKING

from localehelper.constants import MAX_LOCALE_CACHE_SIZE
from localehelper.enums import LayoutDirection

if TYPE_CHECKING:
    from babel import Locale

__all__ = [
    "clear_locale_cache",
    "get_babel_locale",
    "layout_direction_for",
    "normalize_locale",
]

logger = logging.getLogger(__name__)


def normalize_locale(locale_code: str) -> str:
    """Convert BCP-47 locale code to POSIX format for Babel.

    BCP-47 uses hyphens (en-US), while Babel/POSIX uses underscores (en_US).
    Case is preserved: language and region codes are passed through exactly
    as the caller supplied them.

    Args:
        locale_code: BCP-47 locale code (e.g., "en-US", "ar-EG")

    Returns:
        POSIX-formatted locale code (e.g., "en_US", "ar_EG")

    Example:
        >>> normalize_locale("ar-EG")
        'ar_EG'
        >>> normalize_locale("en")
        'en'
    """
    return locale_code.replace("-", "_")


@functools.lru_cache(maxsize=MAX_LOCALE_CACHE_SIZE)
def get_babel_locale(locale_code: str) -> Locale:
    """Get a Babel Locale object with caching.

    Args:
        locale_code: Locale code (BCP-47 or POSIX format accepted)

    Returns:
        Babel Locale object

    Raises:
        babel.core.UnknownLocaleError: If locale is not recognized
        ValueError: If locale format is invalid

    Example:
        >>> locale = get_babel_locale("ar-EG")
        >>> locale.language
        'ar'
        >>> locale.territory
        'EG'
    """
    # Lazy import: Babel loads CLDR data at import time; defer until needed
    from babel import Locale  # noqa: PLC0415

    return Locale.parse(normalize_locale(locale_code))


def clear_locale_cache() -> None:
    """Clear the get_babel_locale() cache."""
    get_babel_locale.cache_clear()


def layout_direction_for(language: str) -> LayoutDirection:
    """Derive text layout direction from a language code.

    Only the language matters; the region never changes direction.
    Languages Babel does not know are laid out left-to-right.

    Args:
        language: Language code (e.g., "ar", "en")

    Returns:
        LayoutDirection.RTL for right-to-left scripts, else LayoutDirection.LTR

    Example:
        >>> layout_direction_for("ar")
        <LayoutDirection.RTL: 'rtl'>
        >>> layout_direction_for("en")
        <LayoutDirection.LTR: 'ltr'>
    """
    from babel import UnknownLocaleError  # noqa: PLC0415

    try:
        babel_locale = get_babel_locale(language)
    except (UnknownLocaleError, ValueError) as e:
        logger.warning("Unknown language '%s': %s. Using left-to-right layout", language, e)
        return LayoutDirection.LTR

    if babel_locale.character_order == "right-to-left":
        return LayoutDirection.RTL
    return LayoutDirection.LTR
