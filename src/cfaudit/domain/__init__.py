"""
Domain model for broken-path resolution.

Provides:
- ContentPath / ContentStatus and the PathIndex they live in
- Suggestion records produced for each broken path
- Locale parsing and the language tree used for locale fallbacks
"""

from cfaudit.domain.content_path import ContentPath, ContentStatus, parse_content_status
from cfaudit.domain.locale import Locale, LocaleType
from cfaudit.domain.path_index import PathIndex
from cfaudit.domain.suggestion import Suggestion, SuggestionType

__all__ = [
    "ContentPath",
    "ContentStatus",
    "parse_content_status",
    "PathIndex",
    "Suggestion",
    "SuggestionType",
    "Locale",
    "LocaleType",
]
