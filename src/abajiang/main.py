"""Main entry point for the translator application."""

import logging
import sys

from PySide6.QtWidgets import QApplication

from abajiang.coordinators import BackgroundCoordinator, TranslatorCoordinator
from abajiang.io import PREFERENCES_NAMESPACE, BackgroundStore, LocalImageSource, QSettingsPreferences
from abajiang.services import SettingsManager, create_translation_service
from abajiang.ui import TranslatorWindow

logger = logging.getLogger(__name__)


def main():
    """
    Bootstrap the application following the Composition Root pattern.
    This is the only place that knows how to instantiate and wire all components.
    """
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    # 1. Initialize Application
    app = QApplication(sys.argv)
    app.setApplicationName("Translator")
    app.setOrganizationName(PREFERENCES_NAMESPACE)

    # 2. Initialize Infrastructure
    settings = SettingsManager()
    try:
        translation_service = create_translation_service(settings)
    except ValueError as e:
        logger.error("Cannot start translator: %s", e)
        return 1

    image_source = LocalImageSource()
    background_store = BackgroundStore(
        preferences=QSettingsPreferences(PREFERENCES_NAMESPACE),
        image_source=image_source,
    )

    # 3. Construct UI
    window = TranslatorWindow()

    # 4. Instantiate Coordinators (Dependency Injection)
    translator = TranslatorCoordinator(translation_service=translation_service)
    background = BackgroundCoordinator(
        background_store=background_store,
        image_source=image_source,
        translator_coordinator=translator,
    )

    # 5. Signal Wiring (Connect UI signals to Coordinator slots)
    translator.state_changed.connect(window.render)
    window.input_changed.connect(translator.set_input_text)
    window.source_language_selected.connect(translator.set_source_language)
    window.target_language_selected.connect(translator.set_target_language)
    window.swap_requested.connect(translator.swap_languages)
    window.translate_requested.connect(translator.request_translation)
    window.clear_requested.connect(translator.clear_text)
    window.background_selected.connect(background.handle_image_selected)
    window.background_reset_requested.connect(background.reset_background)
    background.background_failed.connect(
        lambda message: window.show_error("Background Error", message)
    )

    # 6. Restore persisted state, show UI and start event loop
    window.render(translator.state)
    background.load_saved_background()
    window.show()

    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
