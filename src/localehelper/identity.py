"""Canonical locale identity built from a language and optional region.

LocaleIdentity is the value handed from resolution to application. It is
immutable and compares by (language, region) only.

Python 3.13+.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from localehelper.errors import InvalidLocaleError
from localehelper.locale_utils import get_babel_locale, layout_direction_for

if TYPE_CHECKING:
    from babel import Locale

    from localehelper.enums import LayoutDirection

__all__ = ["LocaleIdentity", "build_identity"]


@dataclass(frozen=True, slots=True)
class LocaleIdentity:
    """Immutable locale identifier.

    Use LocaleIdentity.build() so that an empty region collapses to None.
    Codes are not validated: "EN", "xx" and "123" are all carried verbatim.

    Examples:
        >>> LocaleIdentity.build("ar", "EG").tag
        'ar_EG'
        >>> LocaleIdentity.build("en", "").region is None
        True

    Attributes:
        language: Language code, never empty
        region: Region code, or None for a language-only locale
    """

    language: str
    region: str | None = None

    @classmethod
    def build(cls, language: str, region: str | None = None) -> LocaleIdentity:
        """Construct an identity, normalizing an empty region to None.

        Args:
            language: Language code in lowercase like "ar" or "en"
            region: Country code in uppercase like "EG" or "SA"

        Returns:
            Language-only identity when region is empty or None,
            language+region identity otherwise.

        Raises:
            InvalidLocaleError: If language is empty
        """
        if not language:
            raise InvalidLocaleError(language, region)
        return cls(language, region or None)

    @property
    def tag(self) -> str:
        """POSIX-style tag ("ar_EG", or "ar" when language-only)."""
        if self.region is None:
            return self.language
        return f"{self.language}_{self.region}"

    @property
    def bcp47(self) -> str:
        """BCP-47 tag ("ar-EG", or "ar" when language-only)."""
        if self.region is None:
            return self.language
        return f"{self.language}-{self.region}"

    @property
    def layout_direction(self) -> LayoutDirection:
        """Text layout direction, derived from the language alone."""
        return layout_direction_for(self.language)

    def to_babel(self) -> Locale:
        """Parse this identity into a Babel Locale.

        Raises:
            babel.core.UnknownLocaleError: If Babel has no data for the tag
            ValueError: If the tag is malformed
        """
        return get_babel_locale(self.tag)

    def __str__(self) -> str:
        return self.tag


def build_identity(language: str, region: str | None = None) -> LocaleIdentity:
    """Build a LocaleIdentity; see LocaleIdentity.build()."""
    return LocaleIdentity.build(language, region)
