"""Value object describing a single translation request."""

from dataclasses import dataclass, replace

# Shown instead of dispatching a request when the input is empty.
EMPTY_INPUT_MESSAGE = "Please enter text to translate"


@dataclass(frozen=True)
class TranslationRequest:
    """Text plus the language pair it should be translated across."""

    text: str
    source_lang: str
    target_lang: str

    @property
    def is_empty(self) -> bool:
        """True only for empty text; whitespace-only text is still sent."""
        return not self.text

    def swapped(self) -> "TranslationRequest":
        """Return the same text with source and target exchanged."""
        return replace(self, source_lang=self.target_lang, target_lang=self.source_lang)
