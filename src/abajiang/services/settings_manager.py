"""Settings Manager - Handles translation provider credentials and selection."""

import os
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv

DEFAULT_PROVIDER = "baidu"


class SettingsManager:
    """
    Manages provider configuration.

    Reads credentials and the provider name from a .env file in the project root.
    """

    def __init__(self, project_root: Optional[Path] = None):
        """
        Initialize settings manager.

        Args:
            project_root: Path to project root where .env is located.
                         If None, searches upward from current file.
        """
        if project_root is None:
            current = Path(__file__).resolve()
            project_root = current.parent.parent.parent.parent

        env_path = project_root / ".env"
        load_dotenv(dotenv_path=env_path)

        self._project_root = project_root

    def get_baidu_app_id(self) -> Optional[str]:
        """Get the Baidu translate AppID from environment."""
        return self._get_stripped("BAIDU_APP_ID")

    def get_baidu_secret_key(self) -> Optional[str]:
        """Get the Baidu translate secret key from environment."""
        return self._get_stripped("BAIDU_SECRET_KEY")

    def get_translation_provider(self) -> str:
        """Name of the configured provider, lowercased ("baidu" by default)."""
        provider = self._get_stripped("TRANSLATION_PROVIDER")
        return provider.lower() if provider else DEFAULT_PROVIDER

    def reload_env(self) -> None:
        """Reload environment variables from .env file."""
        env_path = self._project_root / ".env"
        load_dotenv(dotenv_path=env_path, override=True)

    @staticmethod
    def _get_stripped(name: str) -> Optional[str]:
        value = os.getenv(name)
        return value.strip() if value and value.strip() else None
