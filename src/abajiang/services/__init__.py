"""Services layer - configuration, translation providers and background workers."""

from abajiang.services.settings_manager import SettingsManager

# Translation services
from abajiang.services.translation import (
    BaiduTranslationService,
    GoogleTranslationService,
    InvalidProviderResponse,
    TranslationService,
    create_translation_service,
)

from abajiang.services.api_workers import ImageDecodeWorker, TranslationWorker, WorkerSignals

__all__ = [
    "SettingsManager",
    "TranslationService",
    "InvalidProviderResponse",
    "BaiduTranslationService",
    "GoogleTranslationService",
    "create_translation_service",
    "TranslationWorker",
    "ImageDecodeWorker",
    "WorkerSignals",
]
