"""Broken-path sources and content inventories."""

from cfaudit.collectors.sources import (
    BrokenPath,
    BrokenPathSource,
    ContentInventory,
    FileBrokenPathSource,
    FileContentInventory,
    StaticBrokenPathSource,
    populate_index,
)

__all__ = [
    "BrokenPath",
    "BrokenPathSource",
    "ContentInventory",
    "FileBrokenPathSource",
    "FileContentInventory",
    "StaticBrokenPathSource",
    "populate_index",
]
