"""UI layer - PySide6 presentation components."""

from .translator_window import TranslatorWindow

__all__ = ["TranslatorWindow"]
