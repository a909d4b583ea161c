"""I/O layer - preference persistence and image access."""

from .preferences import (
    PREFERENCES_NAMESPACE,
    InMemoryPreferences,
    Preferences,
    QSettingsPreferences,
)
from .image_source import ImageDecodeError, ImageSource, LocalImageSource, local_path_from_uri
from .background_store import BACKGROUND_URI_KEY, BackgroundStore, request_read_access

__all__ = [
    "PREFERENCES_NAMESPACE",
    "Preferences",
    "QSettingsPreferences",
    "InMemoryPreferences",
    "ImageSource",
    "LocalImageSource",
    "ImageDecodeError",
    "local_path_from_uri",
    "BackgroundStore",
    "BACKGROUND_URI_KEY",
    "request_read_access",
]
