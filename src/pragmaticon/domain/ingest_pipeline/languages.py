"""Controlled vocabulary of citation languages.

Citations name their language with a Cyrillic shorthand; codes follow
ISO 639-2 (https://www.loc.gov/standards/iso639-2/php/code_list.php).
"""

from __future__ import annotations

from types import MappingProxyType
from typing import Final

SOURCE_LANGUAGE: Final[str] = "rus"

LANGUAGE_CODES: Final = MappingProxyType(
    {
        "тадж": "tgk",
        "англ": "eng",
        "фин": "fin",
        "бур": "bua",
        "ивр": "heb",
        "ит": "ita",
        "слвн": "slv",
        "русский": SOURCE_LANGUAGE,
    }
)


def language_code(name: str) -> str | None:
    return LANGUAGE_CODES.get(name.strip())


def is_source_language(code: str) -> bool:
    return code == SOURCE_LANGUAGE
