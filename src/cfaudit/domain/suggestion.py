"""
Suggestions: the outcome recorded for each broken path.

Each suggestion carries the path that was requested, the proposed
replacement (if any), the kind of fix and a human-readable reason.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, replace
from enum import Enum
from typing import Any


class SuggestionType(str, Enum):
    """Kind of fix proposed for a broken path."""

    PUBLISH = "PUBLISH"
    LOCALE = "LOCALE"
    SIMILAR = "SIMILAR"
    NOT_FOUND = "NOT_FOUND"


@dataclass(frozen=True)
class Suggestion:
    """Proposed fix for one broken path.

    NOT_FOUND suggestions never carry a suggested path; every other type
    must.
    """

    requested_path: str
    suggested_path: str | None
    type: SuggestionType
    reason: str | None = None

    def __post_init__(self) -> None:
        if self.type == SuggestionType.NOT_FOUND:
            if self.suggested_path is not None:
                raise ValueError("NOT_FOUND suggestions cannot have a suggested path")
        elif not self.suggested_path:
            raise ValueError(f"{self.type.value} suggestions need a suggested path")

    @classmethod
    def publish(
        cls,
        requested_path: str,
        suggested_path: str | None = None,
        reason: str = "Content exists on Author",
    ) -> Suggestion:
        """The content exists but is not published; the fix is to publish it."""
        return cls(
            requested_path=requested_path,
            suggested_path=suggested_path or requested_path,
            type=SuggestionType.PUBLISH,
            reason=reason,
        )

    @classmethod
    def locale(
        cls,
        requested_path: str,
        suggested_path: str,
        reason: str = "Locale fallback detected",
    ) -> Suggestion:
        return cls(requested_path, suggested_path, SuggestionType.LOCALE, reason)

    @classmethod
    def similar(
        cls,
        requested_path: str,
        suggested_path: str,
        reason: str = "Similar path found",
    ) -> Suggestion:
        return cls(requested_path, suggested_path, SuggestionType.SIMILAR, reason)

    @classmethod
    def not_found(cls, requested_path: str, reason: str = "Not found") -> Suggestion:
        return cls(requested_path, None, SuggestionType.NOT_FOUND, reason)

    def with_reason(self, reason: str) -> Suggestion:
        """Return a copy with only the reason changed."""
        return replace(self, reason=reason)

    def to_dict(self) -> dict[str, Any]:
        return {
            "requestedPath": self.requested_path,
            "suggestedPath": self.suggested_path,
            "type": self.type.value,
            "reason": self.reason,
        }

    def to_json(self) -> str:
        return json.dumps(self.to_dict())
