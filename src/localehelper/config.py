"""Runtime configuration for localehelper.

A single frozen dataclass gathers the knobs a host integration may set:
the platform API level used for capability detection and where preferences
are persisted. from_env() reads them from environment variables.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import TYPE_CHECKING

from localehelper.constants import DEFAULT_API_LEVEL
from localehelper.preferences import InMemoryPreferenceStore, JsonFilePreferenceStore

if TYPE_CHECKING:
    from collections.abc import Mapping

    from localehelper.preferences import PreferenceStore

__all__ = ["API_LEVEL_ENV", "PREFERENCES_PATH_ENV", "LocaleHelperConfig"]

API_LEVEL_ENV = "LOCALEHELPER_API_LEVEL"
PREFERENCES_PATH_ENV = "LOCALEHELPER_PREFERENCES_PATH"


@dataclass(frozen=True, slots=True)
class LocaleHelperConfig:
    """Immutable configuration for LocaleHelper.

    Constructing ``LocaleHelperConfig()`` with no arguments gives a modern
    host with in-memory preferences.

    Attributes:
        api_level: Host platform API level (default: 26). Levels below 26
            select the in-place configuration strategy.
        preferences_path: JSON file for durable preferences (default: None,
            meaning preferences live in memory only).

    Example:
        >>> config = LocaleHelperConfig(api_level=21)
        >>> HostPlatform.detect(config).tier
        <CapabilityTier.LEGACY: 'legacy'>
    """

    api_level: int = DEFAULT_API_LEVEL
    preferences_path: Path | None = None

    def __post_init__(self) -> None:
        """Validate configuration values at construction time.

        Raises:
            ValueError: If api_level is not positive.
        """
        if self.api_level <= 0:
            msg = "api_level must be positive"
            raise ValueError(msg)

    @classmethod
    def from_env(cls, environ: Mapping[str, str] | None = None) -> LocaleHelperConfig:
        """Build configuration from environment variables.

        Reads LOCALEHELPER_API_LEVEL (integer) and
        LOCALEHELPER_PREFERENCES_PATH (file path). Unset or empty variables
        keep their defaults.

        Args:
            environ: Mapping to read from (default: os.environ)

        Raises:
            ValueError: If LOCALEHELPER_API_LEVEL is not a positive integer
        """
        env = os.environ if environ is None else environ

        raw_level = env.get(API_LEVEL_ENV, "").strip()
        try:
            api_level = int(raw_level) if raw_level else DEFAULT_API_LEVEL
        except ValueError as e:
            msg = f"{API_LEVEL_ENV} must be an integer, got {raw_level!r}"
            raise ValueError(msg) from e

        raw_path = env.get(PREFERENCES_PATH_ENV, "").strip()
        return cls(api_level=api_level, preferences_path=Path(raw_path) if raw_path else None)

    def create_store(self) -> PreferenceStore:
        """Create the preference store this configuration describes."""
        if self.preferences_path is None:
            return InMemoryPreferenceStore()
        return JsonFilePreferenceStore(self.preferences_path)
