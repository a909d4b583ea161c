"""Application state rendered by the translator window."""

from dataclasses import dataclass
from typing import Optional

from PySide6.QtGui import QImage

from .languages import DEFAULT_SOURCE_LANG, DEFAULT_TARGET_LANG

# Solid fill shown when no custom background is set.
FALLBACK_BACKGROUND_COLOR = "#D3D3D3"


@dataclass
class TranslatorState:
    """Mutable screen state, owned by the TranslatorCoordinator.

    Attributes:
        input_text: Text typed by the user.
        result_text: Last rendered translation or failure message.
        source_lang: Application code of the source language.
        target_lang: Application code of the target language.
        background: Decoded background image, or None for the fallback fill.
        in_flight: Number of translation workers not yet completed.
    """

    input_text: str = ""
    result_text: str = ""
    source_lang: str = DEFAULT_SOURCE_LANG
    target_lang: str = DEFAULT_TARGET_LANG
    background: Optional[QImage] = None
    in_flight: int = 0

    @property
    def is_translating(self) -> bool:
        return self.in_flight > 0

    @property
    def has_background(self) -> bool:
        return self.background is not None and not self.background.isNull()
