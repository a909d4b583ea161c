"""Shared fixtures: an offscreen Qt application, thread pool doubles and sample images."""

import os

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

from pathlib import Path

import pytest
from PySide6.QtGui import QColor, QImage
from PySide6.QtWidgets import QApplication


@pytest.fixture(scope="session", autouse=True)
def qt_app():
    """One QApplication for the whole session."""
    app = QApplication.instance()
    if app is None:
        app = QApplication([])
    yield app


class SynchronousThreadPool:
    """Runs each worker immediately on the calling thread."""

    def __init__(self):
        self.started = []

    def start(self, runnable):
        self.started.append(runnable)
        runnable.run()


class RecordingThreadPool:
    """Holds workers until the test runs them, in any order it likes."""

    def __init__(self):
        self.started = []

    def start(self, runnable):
        self.started.append(runnable)


@pytest.fixture
def sync_pool():
    return SynchronousThreadPool()


@pytest.fixture
def recording_pool():
    return RecordingThreadPool()


def write_png(path: Path, width: int = 20, height: int = 10, color: str = "red") -> Path:
    """Write a real PNG file and return its path."""
    image = QImage(width, height, QImage.Format.Format_RGB32)
    image.fill(QColor(color))
    assert image.save(str(path), "PNG")
    return path


@pytest.fixture
def png_factory():
    """Provide write_png so tests can create extra images."""
    return write_png


@pytest.fixture
def sample_png(tmp_path) -> Path:
    return write_png(tmp_path / "background.png")


@pytest.fixture
def corrupt_png(tmp_path) -> Path:
    path = tmp_path / "corrupt.png"
    path.write_bytes(b"\x89PNG\r\n\x1a\nthis is not really an image")
    return path
