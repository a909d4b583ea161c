"""Google Translation Service - unauthenticated public translate endpoint."""

import logging

import httpx

from abajiang.core import TranslationRequest, TranslationResult
from abajiang.services.translation.translation_service import (
    FAILURE_PREFIX,
    NO_RESULT_MESSAGE,
    InvalidProviderResponse,
    TranslationService,
)

logger = logging.getLogger(__name__)


class GoogleTranslationService(TranslationService):
    """Google Translate free service ("gtx" client), plain GET without credentials."""

    PROVIDER_NAME = "google"
    ENDPOINT = "https://translate.googleapis.com/translate_a/single"

    # Application code -> Google code. Codes not listed are sent unchanged.
    _LANGUAGE_CODE_MAP = {
        "zh": "zh-CN",
        "jp": "ja",
        "kor": "ko",
        "fra": "fr",
        "spa": "es",
    }

    def _build_params(self, request: TranslationRequest) -> dict[str, str]:
        return {
            "client": "gtx",
            "sl": self._map_code(request.source_lang),
            "tl": self._map_code(request.target_lang),
            "dt": "t",
            "q": request.text,
        }

    def _handle_response(self, response: httpx.Response) -> TranslationResult:
        if response.status_code != 200:
            logger.warning("Google API returned status %s", response.status_code)
            code = str(response.status_code)
            return TranslationResult.failure(
                f"{FAILURE_PREFIX}HTTP {code}", self.PROVIDER_NAME, error_code=code
            )
        return super()._handle_response(response)

    def _parse_response(self, response: httpx.Response) -> TranslationResult:
        data = response.json()
        if not isinstance(data, list) or not data:
            raise InvalidProviderResponse(f"unexpected response body: {data!r}")

        # data[0] holds one [translated, original, ...] entry per sentence
        segments = data[0] or []
        translation_parts = [item[0] for item in segments if item and item[0]]
        if not translation_parts:
            return TranslationResult.failure(NO_RESULT_MESSAGE, self.PROVIDER_NAME)

        return TranslationResult.success("".join(translation_parts), self.PROVIDER_NAME)

    def _map_code(self, code: str) -> str:
        return self._LANGUAGE_CODE_MAP.get(code, code)
