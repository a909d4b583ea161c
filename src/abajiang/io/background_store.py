"""Background Persistence Store - remembers the user's chosen background image."""

import logging
from typing import Optional

from PySide6.QtGui import QImage

from abajiang.io.image_source import ImageDecodeError, ImageSource
from abajiang.io.preferences import Preferences

logger = logging.getLogger(__name__)

BACKGROUND_URI_KEY = "background_uri"


def request_read_access(image_source: ImageSource, uri: str) -> bool:
    """Ask for durable read access to uri. Failures are logged, never raised."""
    try:
        granted = image_source.request_read_access(uri)
    except Exception as e:
        logger.error("Failed to request read access for %s: %s", uri, e)
        return False

    if not granted:
        logger.warning("Read access to background %s was not granted", uri)
    return bool(granted)


class BackgroundStore:
    """
    Single-slot store for the background image reference.

    Only the URI is persisted; the decoded image is recomputed on each load.
    Failures never propagate: access problems are logged, and an image that
    can no longer be decoded loads as "no background".
    """

    def __init__(
        self,
        preferences: Preferences,
        image_source: ImageSource,
        key: str = BACKGROUND_URI_KEY,
    ) -> None:
        if preferences is None:
            raise ValueError("Preferences must not be None")
        if image_source is None:
            raise ValueError("ImageSource must not be None")

        self._preferences = preferences
        self._image_source = image_source
        self._key = key

    def save(self, uri: str, request_access: bool = True) -> None:
        """Record uri as the background, replacing any previous one.

        Pass request_access=False when read access was already requested.
        """
        if request_access:
            request_read_access(self._image_source, uri)

        self._preferences.put_string(self._key, uri)
        logger.info("Background URI saved: %s", uri)

    def load(self) -> Optional[QImage]:
        """Decode the stored background, or return None if unset or undecodable."""
        uri = self.current_uri()
        if uri is None:
            return None

        try:
            return self._image_source.decode_image(uri)
        except (ImageDecodeError, OSError) as e:
            logger.error("Failed to load background from %s: %s", uri, e)
            return None

    def clear(self) -> None:
        """Forget the background; subsequent loads return None."""
        self._preferences.remove(self._key)
        logger.info("Background URI cleared")

    def current_uri(self) -> Optional[str]:
        """The stored reference, without decoding it."""
        uri = self._preferences.get_string(self._key)
        return uri or None
