"""Translation Service - provider-agnostic request/response pipeline."""

import logging
from abc import ABC, abstractmethod

import httpx

from abajiang.core import EMPTY_INPUT_MESSAGE, TranslationRequest, TranslationResult

logger = logging.getLogger(__name__)

FAILURE_PREFIX = "Translation failed: "
NO_RESULT_MESSAGE = FAILURE_PREFIX + "no translation result"
EMPTY_RESPONSE_MESSAGE = FAILURE_PREFIX + "empty response"


class InvalidProviderResponse(Exception):
    """Provider returned a body that does not match its documented shape."""


class TranslationService(ABC):
    """
    Abstract translation provider.

    ``translate`` is the only public entry point. It validates the request,
    sends exactly one GET built by ``_build_params`` and hands the decoded JSON
    to ``_parse_response``. Every failure resolves to a TranslationResult;
    nothing is raised to the caller and nothing is retried.
    """

    PROVIDER_NAME = ""
    ENDPOINT = ""

    def __init__(self, client: httpx.Client | None = None):
        """
        Args:
            client: HTTP client to send requests with. A default httpx.Client
                    (default timeout) is created per call when omitted.
        """
        self._client = client

    def translate(self, request: TranslationRequest) -> TranslationResult:
        """
        Translate the request text.

        Args:
            request: Text and language pair.

        Returns:
            TranslationResult with translated text or a displayable error.
        """
        if request.is_empty:
            return TranslationResult.failure(EMPTY_INPUT_MESSAGE, self.PROVIDER_NAME)

        logger.info(
            "Translating %d chars %s -> %s via %s",
            len(request.text),
            request.source_lang,
            request.target_lang,
            self.PROVIDER_NAME,
        )
        try:
            params = self._build_params(request)
            response = self._send(params)
            return self._handle_response(response)
        except Exception as e:
            logger.warning("%s translation failed: %s", self.PROVIDER_NAME, e)
            return TranslationResult.failure(f"{FAILURE_PREFIX}{e}", self.PROVIDER_NAME)

    def _send(self, params: dict[str, str]) -> httpx.Response:
        if self._client is not None:
            return self._client.get(self.ENDPOINT, params=params)
        with httpx.Client() as client:
            return client.get(self.ENDPOINT, params=params)

    def _handle_response(self, response: httpx.Response) -> TranslationResult:
        if not response.content:
            return TranslationResult.failure(EMPTY_RESPONSE_MESSAGE, self.PROVIDER_NAME)
        return self._parse_response(response)

    @abstractmethod
    def _build_params(self, request: TranslationRequest) -> dict[str, str]:
        """Build the query parameters for the provider endpoint."""
        pass

    @abstractmethod
    def _parse_response(self, response: httpx.Response) -> TranslationResult:
        """
        Map a non-empty provider response to a result.

        Raises:
            InvalidProviderResponse: If the body has an unexpected shape.
        """
        pass
