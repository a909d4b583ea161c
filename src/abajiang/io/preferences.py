"""Key-value preference storage."""

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Optional

from PySide6.QtCore import QSettings

# Namespace the application's preferences are stored under.
PREFERENCES_NAMESPACE = "TranslatorAppPrefs"


class Preferences(ABC):
    """
    Abstract string key-value store.

    Writes overwrite the previous value for the key (single slot per key).
    """

    @abstractmethod
    def get_string(self, key: str) -> Optional[str]:
        """Return the stored value, or None if the key is absent."""
        pass

    @abstractmethod
    def put_string(self, key: str, value: str) -> None:
        pass

    @abstractmethod
    def remove(self, key: str) -> None:
        """Remove the key; removing an absent key is a no-op."""
        pass


class QSettingsPreferences(Preferences):
    """
    Preferences persisted through QSettings under a named namespace.

    Without a file path the platform's native location for the
    application/namespace pair is used; with one an INI file is written there.
    """

    def __init__(self, namespace: str, file_path: Optional[Path] = None):
        if file_path is not None:
            self._settings = QSettings(str(file_path), QSettings.Format.IniFormat)
        else:
            self._settings = QSettings(QSettings.Scope.UserScope, namespace, namespace)
        self._namespace = namespace

    def get_string(self, key: str) -> Optional[str]:
        value = self._settings.value(self._qualified(key))
        if value is None:
            return None
        return str(value)

    def put_string(self, key: str, value: str) -> None:
        self._settings.setValue(self._qualified(key), value)
        self._settings.sync()

    def remove(self, key: str) -> None:
        self._settings.remove(self._qualified(key))
        self._settings.sync()

    def _qualified(self, key: str) -> str:
        return f"{self._namespace}/{key}"


class InMemoryPreferences(Preferences):
    """Session-only preferences. Used for testing and headless runs."""

    def __init__(self):
        self._store: dict[str, str] = {}

    def get_string(self, key: str) -> Optional[str]:
        return self._store.get(key)

    def put_string(self, key: str, value: str) -> None:
        self._store[key] = value

    def remove(self, key: str) -> None:
        self._store.pop(key, None)
