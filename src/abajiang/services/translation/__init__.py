"""Translation services - abstract interface and provider implementations."""

from abajiang.services.translation.translation_service import (
    InvalidProviderResponse,
    TranslationService,
)
from abajiang.services.translation.baidu_translation_service import BaiduTranslationService
from abajiang.services.translation.google_translation_service import GoogleTranslationService
from abajiang.services.translation.provider_factory import create_translation_service

__all__ = [
    "TranslationService",
    "InvalidProviderResponse",
    "BaiduTranslationService",
    "GoogleTranslationService",
    "create_translation_service",
]
