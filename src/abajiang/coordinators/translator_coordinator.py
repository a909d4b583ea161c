"""Translator Coordinator - Owns the screen state and dispatches translations."""

import logging
from typing import Optional

from PySide6.QtCore import QObject, QThreadPool, Signal, Slot
from PySide6.QtGui import QImage

from abajiang.core import EMPTY_INPUT_MESSAGE, TranslationRequest, TranslatorState, is_supported
from abajiang.services import TranslationService
from abajiang.services.api_workers import TranslationWorker

logger = logging.getLogger(__name__)


class _PendingTranslation(QObject):
    """Helper class to hold a dispatched request's id and route its outcome safely."""

    def __init__(self, worker_id: int, parent: "TranslatorCoordinator"):
        super().__init__()
        self.worker_id = worker_id
        self.parent_ref = parent

    @Slot(object)
    def on_translation_result(self, result):
        """Handle translation result safely."""
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_result(result, self.worker_id)
            except RuntimeError:
                # Coordinator might be destroyed
                logger.exception("Could not apply result of translation worker %d", self.worker_id)

    @Slot(str)
    def on_translation_error(self, error: str):
        """Handle translation error safely."""
        coordinator = self.parent_ref
        if coordinator:
            try:
                coordinator._handle_translation_error(error, self.worker_id)
            except RuntimeError:
                logger.exception("Could not apply error of translation worker %d", self.worker_id)


class TranslatorCoordinator(QObject):
    """
    Orchestrates the translate workflow and the editable screen state.

    Responsibilities:
    - Hold TranslatorState and emit it after every change.
    - Validate and swap the language pair.
    - Run translation calls on the thread pool and apply results on the UI thread.

    Concurrent requests are neither cancelled nor deduplicated: each one
    writes its result when it completes, so the last to finish is shown.
    """

    state_changed = Signal(object)  # TranslatorState

    translation_started = Signal()
    translation_completed = Signal(str)
    translation_failed = Signal(str)

    def __init__(
        self,
        translation_service: TranslationService,
        thread_pool: Optional[QThreadPool] = None,
    ):
        super().__init__()

        if translation_service is None:
            raise ValueError("TranslationService must not be None")

        self.translation_service = translation_service
        self.thread_pool = thread_pool or QThreadPool.globalInstance()
        self.state = TranslatorState()

        self._worker_counter = 0  # Unique ID for each worker request
        # Keep helpers alive while their workers run in background threads
        self._pending: dict[int, _PendingTranslation] = {}

    @Slot(str)
    def set_input_text(self, text: str) -> None:
        if text == self.state.input_text:
            return
        self.state.input_text = text
        self._publish()

    @Slot(str)
    def set_source_language(self, code: str) -> None:
        self._require_supported(code)
        self.state.source_lang = code
        self._publish()

    @Slot(str)
    def set_target_language(self, code: str) -> None:
        self._require_supported(code)
        self.state.target_lang = code
        self._publish()

    @Slot()
    def swap_languages(self) -> None:
        self.state.source_lang, self.state.target_lang = (
            self.state.target_lang,
            self.state.source_lang,
        )
        self._publish()

    @Slot()
    def clear_text(self) -> None:
        """Empty both the input and the displayed result."""
        self.state.input_text = ""
        self.state.result_text = ""
        self._publish()

    def set_background(self, image: Optional[QImage]) -> None:
        self.state.background = image
        self._publish()

    @Slot()
    def request_translation(self) -> None:
        """Translate the current input with the current language pair."""
        request = TranslationRequest(
            text=self.state.input_text,
            source_lang=self.state.source_lang,
            target_lang=self.state.target_lang,
        )

        if request.is_empty:
            self.state.result_text = EMPTY_INPUT_MESSAGE
            self.translation_failed.emit(EMPTY_INPUT_MESSAGE)
            self._publish()
            return

        self._worker_counter += 1
        worker_id = self._worker_counter

        worker = TranslationWorker(translation_service=self.translation_service, request=request)

        # IMPORTANT: Store reference so it doesn't get garbage collected while worker runs
        pending = _PendingTranslation(worker_id, self)
        self._pending[worker_id] = pending

        worker.signals.translation_result.connect(pending.on_translation_result)
        worker.signals.error.connect(pending.on_translation_error)

        self.state.in_flight += 1
        self.translation_started.emit()
        self._publish()

        logger.debug("Dispatching translation worker %d", worker_id)
        self.thread_pool.start(worker)

    def _handle_translation_result(self, result, worker_id: int) -> None:
        """Apply a worker's result (runs in main thread)."""
        if not self._finish(worker_id):
            return

        self.state.result_text = result.display_text
        if result.is_error:
            self.translation_failed.emit(result.display_text)
        else:
            self.translation_completed.emit(result.text)
        self._publish()

    def _handle_translation_error(self, error: str, worker_id: int) -> None:
        """Apply an unexpected worker failure (runs in main thread)."""
        if not self._finish(worker_id):
            return

        logger.error("Translation worker %d failed: %s", worker_id, error)
        self.state.result_text = error
        self.translation_failed.emit(error)
        self._publish()

    def _finish(self, worker_id: int) -> bool:
        """Retire a worker; False if it was already retired."""
        if self._pending.pop(worker_id, None) is None:
            return False
        self.state.in_flight = max(0, self.state.in_flight - 1)
        return True

    def _publish(self) -> None:
        self.state_changed.emit(self.state)

    @staticmethod
    def _require_supported(code: str) -> None:
        if not is_supported(code):
            raise ValueError(f'Unsupported language code: "{code}"')
