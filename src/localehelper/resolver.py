"""Resolve and persist the selected language and country.

Reading applies a fallback chain (stored value, then caller default).
Language has a built-in last resort; country does not, so an unresolved
country is None. The two chains differ on purpose and must stay separate.

No format validation happens here: whatever the store or caller hands in
is returned unchanged.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from localehelper.constants import FALLBACK_LANGUAGE, SELECTED_COUNTRY, SELECTED_LANGUAGE

if TYPE_CHECKING:
    from localehelper.preferences import PreferenceStore

__all__ = [
    "persist_language",
    "persist_region",
    "resolve_language",
    "resolve_region",
]

logger = logging.getLogger(__name__)


def resolve_language(store: PreferenceStore, default_language: str | None = None) -> str:
    """Return the stored language, else default_language, else FALLBACK_LANGUAGE.

    Empty strings from either source count as missing, so the result is
    never empty.

    Args:
        store: Preference store to read from
        default_language: Caller default in lowercase like "ar" or "en"

    Returns:
        Language code
    """
    fallback = default_language or FALLBACK_LANGUAGE
    language = store.get(SELECTED_LANGUAGE) or fallback
    logger.debug("Resolved language %r (default %r)", language, default_language)
    return language


def resolve_region(store: PreferenceStore, default_region: str | None = None) -> str | None:
    """Return the stored country, else default_region.

    Empty strings from either source are normalized to None.

    Args:
        store: Preference store to read from
        default_region: Caller default in uppercase like "EG" or "SA"

    Returns:
        Country code, or None for a language-only locale
    """
    region = store.get(SELECTED_COUNTRY, default_region)
    logger.debug("Resolved region %r (default %r)", region, default_region)
    return region or None


def persist_language(store: PreferenceStore, language: str) -> None:
    """Save language under SELECTED_LANGUAGE."""
    store.set(SELECTED_LANGUAGE, language)


def persist_region(store: PreferenceStore, region: str | None) -> None:
    """Save region under SELECTED_COUNTRY; None (or "") removes the key."""
    store.set(SELECTED_COUNTRY, region or None)
