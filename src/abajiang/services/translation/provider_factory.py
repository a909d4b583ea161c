"""Builds the configured translation provider."""

import httpx

from abajiang.services.settings_manager import SettingsManager
from abajiang.services.translation.baidu_translation_service import BaiduTranslationService
from abajiang.services.translation.google_translation_service import GoogleTranslationService
from abajiang.services.translation.translation_service import TranslationService

PROVIDERS = ("baidu", "google")


def create_translation_service(
    settings: SettingsManager, client: httpx.Client | None = None
) -> TranslationService:
    """
    Instantiate the provider named by the TRANSLATION_PROVIDER setting.

    Raises:
        ValueError: If the provider is unknown or Baidu credentials are missing.
    """
    provider = settings.get_translation_provider()

    if provider == "baidu":
        app_id = settings.get_baidu_app_id()
        secret_key = settings.get_baidu_secret_key()
        if not app_id or not secret_key:
            raise ValueError(
                "Baidu credentials not configured. Add BAIDU_APP_ID and BAIDU_SECRET_KEY to .env file."
            )
        return BaiduTranslationService(app_id=app_id, secret_key=secret_key, client=client)

    if provider == "google":
        return GoogleTranslationService(client=client)

    raise ValueError(
        f'Unknown translation provider: "{provider}". Choose from: {", ".join(PROVIDERS)}'
    )
