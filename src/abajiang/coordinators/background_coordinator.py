"""Background Coordinator - Applies, persists and resets the custom background."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot

from abajiang.coordinators.translator_coordinator import TranslatorCoordinator
from abajiang.io import BackgroundStore, ImageSource, request_read_access
from abajiang.services.api_workers import ImageDecodeWorker

logger = logging.getLogger(__name__)


class BackgroundCoordinator(QObject):
    """Connects image selection to the background store and the screen state.

    Responsibilities:
    - Restore the saved background at startup
    - Request read access to a selection before decoding it
    - Decode newly selected images off the UI thread
    - Persist a selection only once it decoded successfully
    - Reset to the solid fallback fill
    """

    background_failed = Signal(str)

    def __init__(
        self,
        background_store: BackgroundStore,
        image_source: ImageSource,
        translator_coordinator: TranslatorCoordinator,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        if background_store is None:
            raise ValueError("BackgroundStore must not be None")
        if image_source is None:
            raise ValueError("ImageSource must not be None")
        if translator_coordinator is None:
            raise ValueError("TranslatorCoordinator must not be None")

        self.background_store = background_store
        self.image_source = image_source
        self.translator_coordinator = translator_coordinator
        self.thread_pool = thread_pool or QThreadPool.globalInstance()

    def load_saved_background(self) -> None:
        """Show the persisted background, if any still decodes."""
        image = self.background_store.load()
        self.translator_coordinator.set_background(image)

    @Slot(str)
    def handle_image_selected(self, uri: str) -> None:
        """Request read access, decode the image in the background, then persist and show it."""
        request_read_access(self.image_source, uri)

        worker = ImageDecodeWorker(image_source=self.image_source, uri=uri)
        worker.signals.image_decoded.connect(self._handle_image_decoded)
        worker.signals.error.connect(self._handle_decode_error)
        self.thread_pool.start(worker)

    @Slot()
    def reset_background(self) -> None:
        """Forget the saved background and fall back to the solid fill."""
        self.background_store.clear()
        self.translator_coordinator.set_background(None)

    @Slot(str, object)
    def _handle_image_decoded(self, uri: str, image) -> None:
        self.background_store.save(uri, request_access=False)
        self.translator_coordinator.set_background(image)

    @Slot(str)
    def _handle_decode_error(self, error: str) -> None:
        # Keep whatever background is currently shown
        logger.error(error)
        self.background_failed.emit(error)
