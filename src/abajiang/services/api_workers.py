"""Async workers for non-blocking API calls and image decoding using Qt threading."""

from PySide6.QtCore import QObject, QRunnable, Signal, Slot

from abajiang.core import TranslationRequest
from abajiang.io.image_source import ImageSource
from abajiang.services.translation import TranslationService


class WorkerSignals(QObject):
    """
    Signals for communicating results from worker threads.

    QRunnable doesn't inherit from QObject, so we need a separate
    QObject to hold the signals. It is created on the thread that builds the
    worker, so connected slots run there (queued) rather than in the pool.
    """
    finished = Signal()
    error = Signal(str)
    translation_result = Signal(object)  # TranslationResult
    image_decoded = Signal(str, object)  # uri, QImage


class TranslationWorker(QRunnable):
    """
    Worker that runs one translation API call in a background thread.

    Emits translation_result on completion, error only if the service
    raised despite its own error handling.
    """

    def __init__(self, translation_service: TranslationService, request: TranslationRequest):
        super().__init__()
        self.translation_service = translation_service
        self.request = request
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Execute the translation API call in background thread."""
        try:
            result = self.translation_service.translate(self.request)
            self.signals.translation_result.emit(result)
        except Exception as e:
            # Catch any unexpected exceptions not handled by service
            self.signals.error.emit(f"Unexpected translation error: {str(e)}")
        finally:
            self.signals.finished.emit()


class ImageDecodeWorker(QRunnable):
    """Worker that decodes a selected image off the UI thread."""

    def __init__(self, image_source: ImageSource, uri: str):
        super().__init__()
        self.image_source = image_source
        self.uri = uri
        self.signals = WorkerSignals()
        self.setAutoDelete(True)

    @Slot()
    def run(self):
        """Decode the image; QImage is safe to build outside the GUI thread."""
        try:
            image = self.image_source.decode_image(self.uri)
            self.signals.image_decoded.emit(self.uri, image)
        except Exception as e:
            self.signals.error.emit(f"Failed to load image {self.uri}: {str(e)}")
        finally:
            self.signals.finished.emit()
