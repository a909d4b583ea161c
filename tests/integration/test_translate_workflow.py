"""End-to-end workflows: real thread pool, mocked HTTP, persisted background."""

import threading
import time

import httpx
import pytest
from PySide6.QtCore import QCoreApplication, QThreadPool

from abajiang.coordinators import BackgroundCoordinator, TranslatorCoordinator
from abajiang.io import BackgroundStore, LocalImageSource, QSettingsPreferences
from abajiang.services import BaiduTranslationService, GoogleTranslationService


def wait_until(predicate, pool: QThreadPool, timeout: float = 5.0) -> bool:
    """Pump the Qt event loop until predicate() holds or the timeout expires."""
    deadline = time.monotonic() + timeout
    while time.monotonic() < deadline:
        pool.waitForDone(50)
        QCoreApplication.processEvents()
        if predicate():
            return True
    return False


@pytest.fixture
def thread_pool():
    pool = QThreadPool()
    yield pool
    pool.waitForDone(5000)


def test_concurrent_translations_resolve_independently(thread_pool):
    requests = []
    lock = threading.Lock()

    def handler(request: httpx.Request) -> httpx.Response:
        text = request.url.params["q"]
        # Stagger completions so the requests genuinely overlap
        time.sleep(0.05 if text == "first" else 0.01)
        with lock:
            requests.append(text)
        return httpx.Response(200, json=[[[text.upper(), text]]])

    service = GoogleTranslationService(client=httpx.Client(transport=httpx.MockTransport(handler)))
    coordinator = TranslatorCoordinator(translation_service=service, thread_pool=thread_pool)

    coordinator.set_input_text("first")
    coordinator.request_translation()
    coordinator.set_input_text("second")
    coordinator.request_translation()

    assert wait_until(lambda: coordinator.state.in_flight == 0, thread_pool)
    assert sorted(requests) == ["first", "second"]
    assert coordinator.state.result_text in {"FIRST", "SECOND"}
    assert not coordinator.state.is_translating


def test_signed_translation_round_trip(thread_pool):
    def handler(request: httpx.Request) -> httpx.Response:
        assert request.url.params["from"] == "zh"
        assert request.url.params["to"] == "en"
        return httpx.Response(200, json={"trans_result": [{"src": "你好", "dst": "Hello"}]})

    service = BaiduTranslationService(
        app_id="2024",
        secret_key="s3cret",
        client=httpx.Client(transport=httpx.MockTransport(handler)),
    )
    coordinator = TranslatorCoordinator(translation_service=service, thread_pool=thread_pool)

    coordinator.set_input_text("你好")
    coordinator.request_translation()

    assert wait_until(lambda: coordinator.state.result_text == "Hello", thread_pool)


def test_background_restored_on_next_launch(tmp_path, sample_png, thread_pool):
    ini_path = tmp_path / "prefs.ini"
    image_source = LocalImageSource()

    # First launch: user picks an image
    translator = TranslatorCoordinator(translation_service=GoogleTranslationService())
    background = BackgroundCoordinator(
        background_store=BackgroundStore(
            QSettingsPreferences("TranslatorAppPrefs", file_path=ini_path), image_source
        ),
        image_source=image_source,
        translator_coordinator=translator,
        thread_pool=thread_pool,
    )
    background.handle_image_selected(str(sample_png))
    assert wait_until(lambda: translator.state.has_background, thread_pool)

    # Second launch: a fresh store reads the same preferences file
    relaunched = TranslatorCoordinator(translation_service=GoogleTranslationService())
    BackgroundCoordinator(
        background_store=BackgroundStore(
            QSettingsPreferences("TranslatorAppPrefs", file_path=ini_path), image_source
        ),
        image_source=image_source,
        translator_coordinator=relaunched,
    ).load_saved_background()

    assert relaunched.state.has_background
    assert relaunched.state.background.size() == translator.state.background.size()
