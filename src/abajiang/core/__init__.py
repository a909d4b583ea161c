"""Domain layer - requests, results, languages and screen state."""

from .languages import (
    DEFAULT_SOURCE_LANG,
    DEFAULT_TARGET_LANG,
    LANGUAGES,
    Language,
    display_name,
    find_language,
    is_supported,
)
from .translation_request import EMPTY_INPUT_MESSAGE, TranslationRequest
from .translation_result import TranslationResult
from .translator_state import FALLBACK_BACKGROUND_COLOR, TranslatorState

__all__ = [
    "Language",
    "LANGUAGES",
    "DEFAULT_SOURCE_LANG",
    "DEFAULT_TARGET_LANG",
    "find_language",
    "is_supported",
    "display_name",
    "TranslationRequest",
    "EMPTY_INPUT_MESSAGE",
    "TranslationResult",
    "TranslatorState",
    "FALLBACK_BACKGROUND_COLOR",
]
