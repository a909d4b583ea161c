"""Result of a translation request."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class TranslationResult:
    """Either a translated text or a displayable failure reason.

    A result is created per request, rendered once and discarded.
    """

    text: str
    provider: str
    error: Optional[str] = None
    error_code: Optional[str] = None

    @classmethod
    def success(cls, text: str, provider: str) -> "TranslationResult":
        return cls(text=text, provider=provider)

    @classmethod
    def failure(
        cls, reason: str, provider: str, error_code: Optional[str] = None
    ) -> "TranslationResult":
        return cls(text="", provider=provider, error=reason, error_code=error_code)

    @property
    def is_error(self) -> bool:
        """True if translation failed."""
        return self.error is not None

    @property
    def display_text(self) -> str:
        """Text the UI shows: the translation, or the failure reason."""
        return self.error if self.error is not None else self.text
