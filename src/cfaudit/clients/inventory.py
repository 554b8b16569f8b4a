"""Offline content client answering from a populated PathIndex."""

from __future__ import annotations

from cfaudit.domain.content_path import ContentPath
from cfaudit.domain.path_index import PathIndex
from cfaudit.paths.utils import DAM_PREFIX, get_parent_path


class InventoryClient:
    """Content client backed by an inventory export instead of the author API.

    A path is available when it, or anything below it, is in the index.
    """

    def __init__(self, path_index: PathIndex):
        self.path_index = path_index

    def is_available(self, path: str) -> bool:
        if not path:
            return False
        return self.path_index.contains(path) or self.path_index.has_descendants(path)

    def get_children_from_path(self, parent_path: str) -> list[ContentPath]:
        current: str | None = parent_path
        while current and current.startswith(DAM_PREFIX):
            children = self.path_index.find_children(current)
            if children:
                return children
            current = get_parent_path(current)
        return []
