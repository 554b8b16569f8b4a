"""Locale codes found in content paths (``en-US``, ``fr_FR``, ``US``)."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import Enum
from typing import Any

FIVE_LETTER_PATTERN = re.compile(r"^[a-z]{2}[-_][a-z]{2}$", re.IGNORECASE)
TWO_LETTER_PATTERN = re.compile(r"^[a-z]{2}$", re.IGNORECASE)


class LocaleType(str, Enum):
    FIVE_LETTER_LOCALE = "FIVE_LETTER_LOCALE"
    TWO_LETTER_COUNTRY = "TWO_LETTER_COUNTRY"


@dataclass(frozen=True)
class Locale:
    """A locale code exactly as it appears in a path.

    ``code`` keeps the original spelling; ``language`` and ``country`` are
    the parsed parts (two-letter codes only carry a country).
    """

    code: str | None
    type: LocaleType | None = None
    language: str | None = None
    country: str | None = None

    @classmethod
    def from_code(cls, code: str | None) -> Locale | None:
        if not code:
            return None
        code = code.strip()

        if FIVE_LETTER_PATTERN.match(code):
            language, country = re.split(r"[-_]", code)
            return cls(code, LocaleType.FIVE_LETTER_LOCALE, language, country)
        if TWO_LETTER_PATTERN.match(code):
            return cls(code, LocaleType.TWO_LETTER_COUNTRY, None, code.upper())
        return None

    @classmethod
    def from_path(cls, path: str | None) -> Locale | None:
        """Return the first locale-looking segment of ``path``."""
        if not path:
            return None
        for segment in path.split("/"):
            locale = cls.from_code(segment)
            if locale is not None:
                return locale
        return None

    def is_valid(self) -> bool:
        return bool(self.code)

    def replace_in_path(self, path: str | None, new_code: str) -> str | None:
        """Swap the ``/code/`` segment of ``path`` for ``/new_code/``."""
        if not path or not self.code:
            return path
        return path.replace(f"/{self.code}/", f"/{new_code}/", 1)

    def to_dict(self) -> dict[str, Any]:
        return {
            "code": self.code,
            "type": self.type.value if self.type else None,
            "language": self.language,
            "country": self.country,
        }
