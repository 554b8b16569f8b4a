"""
In-memory index of known content paths.

Built once per audit run from the content inventory (and from whatever the
author client learns while rules run), then queried by exact path.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator
from typing import Any

from cfaudit.domain.content_path import ContentPath, parse_content_status


class PathIndex:
    """Exact-match map from content path to ContentPath.

    Keys are stored as given; callers normalise paths before inserting or
    looking them up.
    """

    def __init__(
        self,
        status_parser: Callable[[Any], str] = parse_content_status,
    ):
        self.status_parser = status_parser
        self._entries: dict[str, ContentPath] = {}
        # parent path -> child paths in insertion order
        self._children: dict[str, dict[str, None]] = {}
        # folder path -> number of entries anywhere below it
        self._descendants: dict[str, int] = {}

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[ContentPath]:
        return iter(self._entries.values())

    def insert(self, content_path: ContentPath) -> None:
        """Insert or overwrite an entry. Invalid entries are ignored."""
        if not content_path.is_valid():
            return

        path = content_path.path
        is_new = path not in self._entries
        self._entries[path] = content_path
        if is_new:
            self._children.setdefault(_parent_key(path), {})[path] = None
            for folder in _ancestors(path):
                self._descendants[folder] = self._descendants.get(folder, 0) + 1

    def insert_content_path(
        self, path: str, metadata: Any = None, locale: str | None = None
    ) -> ContentPath:
        """Insert ``path`` with a status derived from ``metadata``."""
        content_path = ContentPath(
            path=path, status=self.status_parser(metadata), locale=locale
        )
        self.insert(content_path)
        return content_path

    def contains(self, path: str | None) -> bool:
        return bool(path) and path in self._entries

    def find(self, path: str | None) -> ContentPath | None:
        """Exact-match lookup; no prefix or fuzzy matching."""
        if not path:
            return None
        return self._entries.get(path)

    def delete(self, path: str | None) -> bool:
        if not path or path not in self._entries:
            return False
        siblings = self._children.get(_parent_key(path))
        if siblings is not None:
            siblings.pop(path, None)
        for folder in _ancestors(path):
            remaining = self._descendants.get(folder, 0) - 1
            if remaining > 0:
                self._descendants[folder] = remaining
            else:
                self._descendants.pop(folder, None)
        del self._entries[path]
        return True

    def find_children(self, parent: str | None) -> list[ContentPath]:
        """Return the direct children of ``parent`` in insertion order."""
        if not parent:
            return []
        child_paths = list(self._children.get(parent.rstrip("/"), {}))
        return [self._entries[path] for path in child_paths if path in self._entries]

    def has_descendants(self, folder: str | None) -> bool:
        """True if any entry lives somewhere below ``folder``."""
        if not folder:
            return False
        return folder.rstrip("/") in self._descendants

    def find_paths_with_prefix(self, prefix: str | None) -> list[ContentPath]:
        """Return every entry whose path starts with ``prefix``.

        An empty or None prefix returns the whole index.
        """
        if not prefix:
            return self.get_paths()
        return [entry for path, entry in self._entries.items() if path.startswith(prefix)]

    def get_paths(self) -> list[ContentPath]:
        return list(self._entries.values())


def _parent_key(path: str) -> str:
    trimmed = path.rstrip("/")
    return trimmed[: trimmed.rfind("/")] if "/" in trimmed else ""


def _ancestors(path: str) -> Iterator[str]:
    parent = _parent_key(path)
    while parent:
        yield parent
        parent = _parent_key(parent)
