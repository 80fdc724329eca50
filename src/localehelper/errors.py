"""Exception hierarchy for localehelper.

Only precondition violations are modeled. Malformed language or country
codes are never rejected; they flow through unchanged and the host decides
what a malformed locale means.

Python 3.13+. Zero external dependencies.
"""

__all__ = [
    "EnvironmentUnavailableError",
    "InvalidLocaleError",
    "LocaleHelperError",
]


class LocaleHelperError(Exception):
    """Base exception for all localehelper errors.

    Every subclass marks a precondition violation: fatal, never recovered
    inside the library.
    """


class EnvironmentUnavailableError(LocaleHelperError):
    """Host environment object is missing or unusable.

    Raised by LocaleApplier.apply(), and by LocaleHelper before it writes
    anything, when given None or an object without resources or store. Not recovered: a correctly integrated host never triggers it.
    """


class InvalidLocaleError(LocaleHelperError, ValueError):
    """Locale identity cannot be built because the language is empty.

    Attributes:
        language: The rejected language value
        region: The region it was paired with (may be None)
    """

    def __init__(self, language: str, region: str | None = None) -> None:
        """Initialize InvalidLocaleError.

        Args:
            language: The rejected language value
            region: The region it was paired with
        """
        super().__init__(f"Locale language must be non-empty (got {language!r}, region={region!r})")
        self.language = language
        self.region = region
