"""
Abajiang Translator - a small desktop text translator.

This package provides a desktop application with:
- Pluggable translation providers (Baidu signed API, Google public endpoint)
- Non-blocking translation calls on a Qt thread pool
- A persistent user-chosen background image
"""

__version__ = "0.1.0"

# Make key components available at package level
from abajiang.core import TranslationRequest, TranslationResult, TranslatorState

__all__ = [
    "TranslationRequest",
    "TranslationResult",
    "TranslatorState",
]
