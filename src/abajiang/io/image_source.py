"""Image access and decoding for user-selected background images.

The platform boundary is kept behind ImageSource so the store and
coordinators never touch files or permission checks directly.
"""

import os
from abc import ABC, abstractmethod
from pathlib import Path

from PySide6.QtCore import QUrl
from PySide6.QtGui import QImage, QImageReader


class ImageDecodeError(RuntimeError):
    """The referenced image could not be read or decoded."""


class ImageSource(ABC):
    """Capability interface for reading user-selected images."""

    @abstractmethod
    def request_read_access(self, uri: str) -> bool:
        """Ask for durable read access to the image. Returns False if denied."""
        pass

    @abstractmethod
    def decode_image(self, uri: str) -> QImage:
        """
        Decode the referenced image into memory.

        Raises:
            ImageDecodeError: If the image is missing, unreadable or corrupt.
        """
        pass


def local_path_from_uri(uri: str) -> Path:
    """
    Resolve a file:// URI or a plain filesystem path.

    Raises:
        ImageDecodeError: For empty references and non-file schemes.
    """
    if not uri:
        raise ImageDecodeError("Empty image reference")

    url = QUrl(uri)
    if url.isLocalFile():
        return Path(url.toLocalFile())

    # Single-letter "schemes" are Windows drive letters.
    scheme = url.scheme()
    if scheme and len(scheme) > 1:
        raise ImageDecodeError(f"Unsupported image URI scheme: {scheme}")
    return Path(uri)


class LocalImageSource(ImageSource):
    """Reads images from the local filesystem with QImageReader."""

    def request_read_access(self, uri: str) -> bool:
        try:
            path = local_path_from_uri(uri)
        except ImageDecodeError:
            return False
        return path.is_file() and os.access(path, os.R_OK)

    def decode_image(self, uri: str) -> QImage:
        path = local_path_from_uri(uri)
        if not path.is_file():
            raise ImageDecodeError(f"Image path does not exist: {path}")

        reader = QImageReader(str(path))
        reader.setAutoTransform(True)
        image = reader.read()
        if image.isNull():
            raise ImageDecodeError(f"Failed to decode image {path}: {reader.errorString()}")
        return image
