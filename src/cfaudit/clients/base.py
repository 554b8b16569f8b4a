"""Content client protocol used by the resolution rules."""

from __future__ import annotations

from typing import Protocol, runtime_checkable

from cfaudit.domain.content_path import ContentPath


@runtime_checkable
class ContentClient(Protocol):
    """Protocol for the live content lookups the rules need.

    Implemented by AuthorClient (HTTP) and InventoryClient (in-memory).
    """

    def is_available(self, path: str) -> bool:
        """Return True if content exists at ``path``."""
        ...

    def get_children_from_path(self, parent_path: str) -> list[ContentPath]:
        """Return the known children of ``parent_path``, or of its nearest
        ancestor that has any."""
        ...
