"""Preference storage for the selected language and country.

Provides the protocol the resolver reads and writes through, an in-memory
implementation for tests and short-lived processes, and a JSON file
implementation that survives restarts.

Components:
    PreferenceStore - Protocol for key-value preference storage (structural typing)
    InMemoryPreferenceStore - Dict-backed store
    JsonFilePreferenceStore - Durable store persisted as a JSON object on disk

Writes are immediate: set() returns only after the value is stored. Each
key is written independently; there is no multi-key transaction.

Python 3.13+. Zero external dependencies.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
from pathlib import Path
from typing import Protocol

__all__ = [
    "InMemoryPreferenceStore",
    "JsonFilePreferenceStore",
    "PreferenceStore",
]

logger = logging.getLogger(__name__)


class PreferenceStore(Protocol):
    """Protocol for durable string preferences.

    Implementations map a small set of named keys to string values.
    Writing None removes the key, so a later get() returns its default.

    Example:
        >>> class DictStore:
        ...     def __init__(self) -> None:
        ...         self.data: dict[str, str] = {}
        ...     def get(self, key: str, default: str | None = None) -> str | None:
        ...         return self.data.get(key, default)
        ...     def set(self, key: str, value: str | None) -> None:
        ...         if value is None:
        ...             self.data.pop(key, None)
        ...         else:
        ...             self.data[key] = value
    """

    def get(self, key: str, default: str | None = None) -> str | None:
        """Return the stored value for key, or default when absent."""

    def set(self, key: str, value: str | None) -> None:
        """Store value under key (upsert); None removes the key."""


class InMemoryPreferenceStore:
    """Dict-backed PreferenceStore.

    Lives as long as the process. Useful as a fake in tests and as the
    fallback when no preferences path is configured.
    """

    __slots__ = ("_values",)

    def __init__(self, initial: dict[str, str] | None = None) -> None:
        self._values: dict[str, str] = dict(initial or {})

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key, default)

    def set(self, key: str, value: str | None) -> None:
        if value is None:
            self._values.pop(key, None)
        else:
            self._values[key] = value

    def as_dict(self) -> dict[str, str]:
        """Return a copy of all stored values."""
        return dict(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __repr__(self) -> str:
        return f"InMemoryPreferenceStore({self._values!r})"


class JsonFilePreferenceStore:
    """PreferenceStore persisted as a single JSON object.

    The file is read lazily on first access. Every set() rewrites the whole
    file through a temporary sibling and os.replace(), so a reader never
    sees a half-written file and the value is on disk before set() returns.

    Example:
        >>> store = JsonFilePreferenceStore("prefs.json")
        >>> store.set("Locale.Helper.Selected.Language", "en")
        >>> JsonFilePreferenceStore("prefs.json").get("Locale.Helper.Selected.Language")
        'en'

    Raises:
        OSError: If the file cannot be read or written
        json.JSONDecodeError: If the existing file is not valid JSON
        TypeError: If the existing file holds JSON that is not an object, or a
            value that is neither a string nor null (null reads as absent)
    """

    __slots__ = ("_path", "_values")

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._values: dict[str, str] | None = None

    @property
    def path(self) -> Path:
        """Location of the backing JSON file."""
        return self._path

    def _load(self) -> dict[str, str]:
        if self._values is None:
            if self._path.exists():
                data = json.loads(self._path.read_text(encoding="utf-8"))
                if not isinstance(data, dict):
                    msg = f"Preference file {self._path} must contain a JSON object"
                    raise TypeError(msg)
                self._values = _string_values(self._path, data)
                logger.debug("Loaded %d preferences from %s", len(self._values), self._path)
            else:
                self._values = {}
        return self._values

    def _flush(self, values: dict[str, str]) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as handle:
                json.dump(values, handle, ensure_ascii=False, indent=2, sort_keys=True)
                handle.flush()
                os.fsync(handle.fileno())
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise

    def get(self, key: str, default: str | None = None) -> str | None:
        return self._load().get(key, default)

    def set(self, key: str, value: str | None) -> None:
        updated = dict(self._load())
        if value is None:
            updated.pop(key, None)
        else:
            updated[key] = value
        self._flush(updated)
        self._values = updated
        logger.debug("Wrote preference %s=%r to %s", key, value, self._path)

    def __repr__(self) -> str:
        return f"JsonFilePreferenceStore({str(self._path)!r})"


def _string_values(path: Path, data: dict[str, object]) -> dict[str, str]:
    """Keep string values, drop nulls, reject anything else."""
    values: dict[str, str] = {}
    for key, value in data.items():
        if value is None:
            continue
        if not isinstance(value, str):
            msg = f"Preference {key!r} in {path} must be a string, got {type(value).__name__}"
            raise TypeError(msg)
        values[key] = value
    return values
