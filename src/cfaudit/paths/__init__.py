"""Content path string helpers."""

from cfaudit.paths.levenshtein import levenshtein_distance
from cfaudit.paths.utils import (
    DAM_ROOT,
    get_parent_path,
    has_double_slashes,
    is_locale_segment,
    remove_double_slashes,
    remove_locale_from_path,
)

__all__ = [
    "DAM_ROOT",
    "get_parent_path",
    "has_double_slashes",
    "is_locale_segment",
    "remove_double_slashes",
    "remove_locale_from_path",
    "levenshtein_distance",
]
