"""Content paths and their publish status."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass
from enum import Enum
from typing import Any


class ContentStatus(str, Enum):
    """Publish state of a piece of content on the author environment."""

    PUBLISHED = "PUBLISHED"
    MODIFIED = "MODIFIED"
    DRAFT = "DRAFT"
    ARCHIVED = "ARCHIVED"
    DELETED = "DELETED"
    UNKNOWN = "UNKNOWN"


def parse_content_status(metadata: Any) -> str:
    """Map upstream metadata to one of the ContentStatus tags.

    Accepts either a raw status string or a mapping with a ``status`` key.
    Missing, empty or unrecognised values map to UNKNOWN.
    """
    if isinstance(metadata, Mapping):
        metadata = metadata.get("status")
    if not isinstance(metadata, str) or not metadata.strip():
        return ContentStatus.UNKNOWN.value

    status = metadata.strip().upper()
    if status in ContentStatus.__members__:
        return ContentStatus[status].value
    return ContentStatus.UNKNOWN.value


@dataclass(frozen=True)
class ContentPath:
    """A known content path with its status tag and optional locale code."""

    path: str
    status: str = ContentStatus.UNKNOWN.value
    locale: str | None = None

    def is_valid(self) -> bool:
        return isinstance(self.path, str) and bool(self.path.strip())

    def is_published(self) -> bool:
        return self.status == ContentStatus.PUBLISHED.value

    def to_dict(self) -> dict[str, Any]:
        return {
            "path": self.path,
            "status": self.status,
            "locale": self.locale,
        }
