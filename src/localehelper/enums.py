"""Enumerations for localehelper type-safe constants.

Uses StrEnum (Python 3.11+) for automatic string conversion.

Python 3.13+.
"""

from enum import StrEnum


class LayoutDirection(StrEnum):
    """Text layout direction of a configuration.

    StrEnum provides automatic string conversion: str(LayoutDirection.RTL) == "rtl"
    """

    LTR = "ltr"
    """Left-to-right rendering order."""

    RTL = "rtl"
    """Right-to-left rendering order (Arabic, Hebrew, Persian, ...)."""


class CapabilityTier(StrEnum):
    """Host platform feature class for applying a locale.

    StrEnum provides automatic string conversion: str(CapabilityTier.SCOPED) == "scoped"
    """

    SCOPED = "scoped"
    """Configuration can be copied and bound to a newly derived environment."""

    LEGACY = "legacy"
    """Configuration must be mutated in place and pushed back to resources."""


__all__ = [
    "CapabilityTier",
    "LayoutDirection",
]
