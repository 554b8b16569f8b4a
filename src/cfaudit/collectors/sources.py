"""
Inputs to an audit run: the broken paths and the content inventory.

Both are narrow protocols so a run can be fed from files, a query engine or
test doubles. The file-backed implementations read:

Broken paths (text or JSON):
    /content/dam/site/en-US/hero.jpg        (one path per line, # comments)
    ["/content/dam/...", ...]               # JSON list of paths
    [{"url": "...", "requestCount": 12, "requestUserAgents": [...]}, ...]

Inventory (JSON):
    {"/content/dam/...": {"status": "PUBLISHED"}, ...}
    [{"path": "/content/dam/...", "status": "DRAFT"}, ...]
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Protocol, runtime_checkable

from cfaudit.core.errors import CollectorError, InventoryError
from cfaudit.domain.locale import Locale
from cfaudit.domain.path_index import PathIndex


@dataclass
class BrokenPath:
    """A broken path and how often it was requested."""

    url: str
    request_count: int = 0
    request_user_agents: list[str] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        return {
            "url": self.url,
            "requestCount": self.request_count,
            "requestUserAgents": self.request_user_agents,
        }

    @classmethod
    def from_raw(cls, raw: Any) -> BrokenPath:
        if isinstance(raw, str):
            return cls(url=raw.strip())
        if isinstance(raw, dict) and raw.get("url"):
            return cls(
                url=str(raw["url"]).strip(),
                request_count=int(raw.get("requestCount") or 0),
                request_user_agents=list(raw.get("requestUserAgents") or []),
            )
        raise CollectorError(f"Unrecognised broken path entry: {raw!r}")


@runtime_checkable
class BrokenPathSource(Protocol):
    """Anything that can list the broken paths for a run."""

    def fetch_broken_paths(self) -> list[BrokenPath]:
        ...


@runtime_checkable
class ContentInventory(Protocol):
    """Anything that can list known content as (path, metadata) pairs."""

    def entries(self) -> Iterable[tuple[str, Any]]:
        ...


class StaticBrokenPathSource:
    """Broken paths held in memory."""

    def __init__(self, paths: Iterable[str | BrokenPath]):
        self._paths = [
            path if isinstance(path, BrokenPath) else BrokenPath.from_raw(path)
            for path in paths
        ]

    def fetch_broken_paths(self) -> list[BrokenPath]:
        return list(self._paths)


class FileBrokenPathSource:
    """Broken paths read from a text or JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def fetch_broken_paths(self) -> list[BrokenPath]:
        try:
            text = self.path.read_text(encoding="utf-8")
        except OSError as e:
            raise CollectorError(f"Cannot read broken paths from {self.path}: {e}") from e

        stripped = text.strip()
        if not stripped:
            return []

        if stripped.startswith(("[", "{")):
            try:
                data = json.loads(stripped)
            except json.JSONDecodeError as e:
                raise CollectorError(f"Invalid JSON in {self.path}: {e}") from e
            if isinstance(data, dict):
                data = data.get("brokenPaths", [])
            if not isinstance(data, list):
                raise CollectorError(f"Expected a list of broken paths in {self.path}")
            return [BrokenPath.from_raw(entry) for entry in data]

        paths = []
        for line in text.splitlines():
            line = line.strip()
            if line and not line.startswith("#"):
                paths.append(BrokenPath(url=line))
        return paths


class FileContentInventory:
    """Known content read from a JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def entries(self) -> Iterator[tuple[str, Any]]:
        try:
            data = json.loads(self.path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise InventoryError(f"Cannot load inventory from {self.path}: {e}") from e

        if isinstance(data, dict):
            yield from data.items()
        elif isinstance(data, list):
            for entry in data:
                if not isinstance(entry, dict) or not entry.get("path"):
                    raise InventoryError(f"Inventory entry without a path: {entry!r}")
                yield entry["path"], entry
        else:
            raise InventoryError(f"Unsupported inventory format in {self.path}")


def populate_index(index: PathIndex, inventory: ContentInventory) -> int:
    """Load every inventory entry into ``index``.

    Returns:
        Number of entries inserted
    """
    count = 0
    for path, metadata in inventory.entries():
        locale = Locale.from_path(path)
        index.insert_content_path(path, metadata, locale=locale.code if locale else None)
        count += 1
    return count
