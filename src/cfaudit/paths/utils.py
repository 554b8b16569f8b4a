"""
String helpers for content paths under /content/dam.

All functions are pure and return falsy input (None, "") unchanged.
"""

from __future__ import annotations

import re

DAM_ROOT = "/content/dam"
DAM_PREFIX = DAM_ROOT + "/"

# xx, XX, xx-YY, xx_YY (any case)
LOCALE_SEGMENT = re.compile(r"^[A-Za-z]{2}(?:[-_][A-Za-z]{2})?$")

SCHEME_PREFIX = re.compile(r"^[A-Za-z][A-Za-z0-9+.-]*://")
SLASH_RUN = re.compile(r"/{2,}")


def is_locale_segment(segment: str | None) -> bool:
    """Return True if a single path segment looks like a locale code."""
    return bool(segment) and LOCALE_SEGMENT.match(segment) is not None


def remove_locale_from_path(path: str | None) -> str | None:
    """Strip every locale segment that follows /content/dam/.

    A trailing slash left behind by removing the last segment is dropped;
    paths with no locale segment come back untouched.

    Examples:
        >>> remove_locale_from_path("/content/dam/en-US/images/photo.jpg")
        '/content/dam/images/photo.jpg'
        >>> remove_locale_from_path("/content/dam/en-US/")
        '/content/dam'
    """
    if not path or not path.startswith(DAM_PREFIX):
        return path

    segments = path[len(DAM_PREFIX):].split("/")
    kept = [segment for segment in segments if not is_locale_segment(segment)]
    if len(kept) == len(segments):
        return path

    result = DAM_PREFIX + "/".join(kept)
    if result.endswith("/"):
        result = result[:-1]
    return result


def get_parent_path(path: str | None) -> str | None:
    """Return the path minus its last segment.

    Returns None at or above /content/dam and for paths outside it.
    """
    if not path:
        return None

    trimmed = path.rstrip("/")
    if not trimmed.startswith(DAM_PREFIX):
        return None

    return trimmed[: trimmed.rfind("/")]


def _split_scheme(path: str) -> tuple[str, str]:
    match = SCHEME_PREFIX.match(path)
    if match is None:
        return "", path
    return path[: match.end()], path[match.end():]


def has_double_slashes(path: str | None) -> bool:
    """Check for runs of two or more slashes, ignoring a leading scheme://."""
    if not path:
        return False
    _, rest = _split_scheme(path)
    return "//" in rest


def remove_double_slashes(path: str | None) -> str | None:
    """Collapse slash runs to a single slash, keeping any scheme:// intact."""
    if not path:
        return path
    scheme, rest = _split_scheme(path)
    return scheme + SLASH_RUN.sub("/", rest)
