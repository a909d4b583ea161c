"""Unit tests for GoogleTranslationService against canned provider responses."""

import httpx
import pytest

from abajiang.core import EMPTY_INPUT_MESSAGE, TranslationRequest
from abajiang.services import GoogleTranslationService
from abajiang.services.translation.translation_service import NO_RESULT_MESSAGE


@pytest.fixture
def captured():
    return []


def make_service(captured, response=None, exc=None) -> GoogleTranslationService:
    def handler(request: httpx.Request) -> httpx.Response:
        captured.append(request)
        if exc is not None:
            raise exc
        return response

    return GoogleTranslationService(client=httpx.Client(transport=httpx.MockTransport(handler)))


def test_builds_unauthenticated_query(captured):
    service = make_service(captured, httpx.Response(200, json=[[["Hello", "你好", None, None, 10]]]))

    service.translate(TranslationRequest("你好", "zh", "en"))

    assert len(captured) == 1
    request = captured[0]
    assert request.method == "GET"
    assert request.url.host == "translate.googleapis.com"
    params = request.url.params
    assert params["client"] == "gtx"
    assert params["sl"] == "zh-CN"
    assert params["tl"] == "en"
    assert params["dt"] == "t"
    assert params["q"] == "你好"
    assert "appid" not in params
    assert "sign" not in params


@pytest.mark.parametrize(
    "code,google_code",
    [("jp", "ja"), ("kor", "ko"), ("fra", "fr"), ("spa", "es"), ("de", "de"), ("hmn", "hmn")],
)
def test_maps_application_codes(captured, code, google_code):
    service = make_service(captured, httpx.Response(200, json=[[["x", "y"]]]))

    service.translate(TranslationRequest("hello", "en", code))

    assert captured[0].url.params["tl"] == google_code


def test_success_joins_sentence_segments(captured):
    body = [[["Hello. ", "你好。", None, None], ["How are you?", "你好吗？", None, None]], None, "zh-CN"]
    service = make_service(captured, httpx.Response(200, json=body))

    result = service.translate(TranslationRequest("你好。你好吗？", "zh", "en"))

    assert not result.is_error
    assert result.text == "Hello. How are you?"
    assert result.provider == "google"


def test_no_segments_is_no_result(captured):
    service = make_service(captured, httpx.Response(200, json=[None, None, "zh-CN"]))

    result = service.translate(TranslationRequest("你好", "zh", "en"))

    assert result.error == NO_RESULT_MESSAGE


def test_http_error_status_is_reported(captured):
    service = make_service(captured, httpx.Response(429, content=b""))

    result = service.translate(TranslationRequest("你好", "zh", "en"))

    assert result.is_error
    assert result.error == "Translation failed: HTTP 429"
    assert result.error_code == "429"


def test_unexpected_body_becomes_failure(captured):
    service = make_service(captured, httpx.Response(200, json={"error": "nope"}))

    result = service.translate(TranslationRequest("你好", "zh", "en"))

    assert result.is_error
    assert result.error.startswith("Translation failed: unexpected response body")


def test_timeout_is_caught(captured):
    service = make_service(captured, exc=httpx.ReadTimeout("timed out"))

    result = service.translate(TranslationRequest("你好", "zh", "en"))

    assert result.error == "Translation failed: timed out"


def test_empty_text_sends_nothing(captured):
    service = make_service(captured, httpx.Response(200, json=[[["x", "y"]]]))

    result = service.translate(TranslationRequest("", "zh", "en"))

    assert result.error == EMPTY_INPUT_MESSAGE
    assert captured == []


def test_whitespace_only_text_is_sent(captured):
    service = make_service(captured, httpx.Response(200, json=[[[" ", "   "]]]))

    result = service.translate(TranslationRequest("   ", "zh", "en"))

    assert len(captured) == 1
    assert captured[0].url.params["q"] == "   "
    assert result.text == " "
