"""Baidu Translation Service - signed requests to the Baidu general translate API."""

import hashlib
import logging
import uuid
from typing import Callable

import httpx

from abajiang.core import TranslationRequest, TranslationResult
from abajiang.services.translation.translation_service import (
    FAILURE_PREFIX,
    NO_RESULT_MESSAGE,
    InvalidProviderResponse,
    TranslationService,
)

logger = logging.getLogger(__name__)


def make_sign(app_id: str, text: str, salt: str, secret_key: str) -> str:
    """Lowercase hex MD5 of appid + q + salt + secret, as Baidu expects."""
    return hashlib.md5((app_id + text + salt + secret_key).encode("utf-8")).hexdigest()


class BaiduTranslationService(TranslationService):
    """
    Translation via the Baidu general translate API.

    Every request carries a fresh random salt and an MD5 signature over
    appid + text + salt + secret. Application language codes are Baidu codes,
    so they are sent unchanged.
    """

    PROVIDER_NAME = "baidu"
    ENDPOINT = "https://fanyi-api.baidu.com/api/trans/vip/translate"

    PAID_PLAN_ERROR_CODE = "58001"

    # Documented error codes with a dedicated message.
    KNOWN_ERRORS = {
        "52001": "request timed out on the provider",
        "52002": "provider system error",
        "52003": "unauthorized user, check the AppID",
        "54001": "signature error, check the secret key",
        "54003": "access frequency limited",
        "54004": "insufficient account balance",
        "58000": "client IP is not allowed",
        PAID_PLAN_ERROR_CODE: "the target language may require a paid plan",
        "58002": "the service is closed for this account",
        "90107": "verification failed or not in effect",
    }

    def __init__(
        self,
        app_id: str,
        secret_key: str,
        client: httpx.Client | None = None,
        salt_factory: Callable[[], str] | None = None,
    ):
        super().__init__(client=client)

        if not app_id:
            raise ValueError("Baidu AppID must not be empty")
        if not secret_key:
            raise ValueError("Baidu secret key must not be empty")

        self._app_id = app_id
        self._secret_key = secret_key
        self._salt_factory = salt_factory or (lambda: str(uuid.uuid4()))

    def _build_params(self, request: TranslationRequest) -> dict[str, str]:
        salt = self._salt_factory()
        return {
            "q": request.text,
            "from": request.source_lang,
            "to": request.target_lang,
            "appid": self._app_id,
            "salt": salt,
            "sign": make_sign(self._app_id, request.text, salt, self._secret_key),
        }

    def _parse_response(self, response: httpx.Response) -> TranslationResult:
        data = response.json()
        if not isinstance(data, dict):
            raise InvalidProviderResponse(f"unexpected response body: {data!r}")

        if "error_code" in data:
            return self._error_result(str(data["error_code"]), str(data.get("error_msg", "")))

        candidates = data.get("trans_result")
        if candidates is None:
            raise InvalidProviderResponse("response has neither error_code nor trans_result")
        if not candidates:
            return TranslationResult.failure(NO_RESULT_MESSAGE, self.PROVIDER_NAME)

        return TranslationResult.success(candidates[0]["dst"], self.PROVIDER_NAME)

    def _error_result(self, code: str, message: str) -> TranslationResult:
        logger.warning("Baidu returned error %s: %s", code, message)
        description = self.KNOWN_ERRORS.get(code)
        if description:
            reason = f"{FAILURE_PREFIX}{description} (error code {code}, {message})"
        else:
            reason = f"{FAILURE_PREFIX}error code {code}, {message}"
        return TranslationResult.failure(reason, self.PROVIDER_NAME, error_code=code)
