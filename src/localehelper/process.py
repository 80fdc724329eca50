"""Process-wide default locale.

Exactly one LocaleIdentity is current for the whole process. Every
LocaleApplier.apply() overwrites it. There is no lock: hosts must
serialize apply() calls, typically by applying only while constructing
an environment.

Python 3.13+.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from localehelper.identity import LocaleIdentity

__all__ = ["get_default_locale", "reset_default_locale", "set_default_locale"]

logger = logging.getLogger(__name__)

_default_locale: LocaleIdentity | None = None


def get_default_locale() -> LocaleIdentity | None:
    """Return the current process default, or None if nothing was applied yet."""
    return _default_locale


def set_default_locale(identity: LocaleIdentity) -> None:
    """Make identity the process default locale."""
    global _default_locale  # noqa: PLW0603  # pylint: disable=global-statement
    if _default_locale != identity:
        logger.debug("Process default locale %s -> %s", _default_locale, identity)
    _default_locale = identity


def reset_default_locale() -> None:
    """Forget the process default locale (test isolation)."""
    global _default_locale  # noqa: PLW0603  # pylint: disable=global-statement
    _default_locale = None
