"""Language catalog shared by the UI, coordinators and providers."""

from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Language:
    """A selectable translation language.

    Attributes:
        code: Application language code (Baidu style, e.g. "jp", "kor").
        name: Human-readable display name.
    """

    code: str
    name: str

    @property
    def label(self) -> str:
        """Display label used by the language pickers, e.g. "Japanese (jp)"."""
        return f"{self.name} ({self.code})"


LANGUAGES: tuple[Language, ...] = (
    Language("zh", "Chinese"),
    Language("en", "English"),
    Language("jp", "Japanese"),
    Language("kor", "Korean"),
    Language("fra", "French"),
    Language("spa", "Spanish"),
    Language("de", "German"),
    Language("hmn", "Hmong"),
)

DEFAULT_SOURCE_LANG = "zh"
DEFAULT_TARGET_LANG = "en"

_BY_CODE = {language.code: language for language in LANGUAGES}


def find_language(code: str) -> Optional[Language]:
    """Return the catalog entry for a code, or None if unknown."""
    return _BY_CODE.get(code)


def is_supported(code: str) -> bool:
    return code in _BY_CODE


def display_name(code: str) -> str:
    """Display name for a code; unknown codes are shown as-is."""
    language = _BY_CODE.get(code)
    return language.name if language else code
