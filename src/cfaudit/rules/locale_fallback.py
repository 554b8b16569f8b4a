"""
Rule: the same content exists under another locale.

``/content/dam/fr-FR/x.jpg`` may live at ``/content/dam/fr-fr/x.jpg``,
``/content/dam/fr-CA/x.jpg`` or ``/content/dam/en-US/x.jpg``. Paths that
lost their locale entirely (``/content/dam//x.jpg``) get English locales
tried in the empty segment.
"""

from __future__ import annotations

from cfaudit.clients.base import ContentClient
from cfaudit.core.context import AuditContext
from cfaudit.domain import language_tree
from cfaudit.domain.locale import Locale
from cfaudit.domain.suggestion import Suggestion
from cfaudit.paths.utils import has_double_slashes
from cfaudit.rules.base import BaseRule


class LocaleFallbackRule(BaseRule):
    """Suggest the first sibling locale that exists on the author host."""

    name = "LocaleFallbackRule"
    description = "Content exists under a related locale"

    def __init__(self, context: AuditContext, client: ContentClient | None = None):
        super().__init__(context, priority=2, client=client)

    def apply_rule(self, path: str) -> Suggestion | None:
        if not path:
            return None

        client = self.get_client()
        locale = Locale.from_path(path)

        if locale is not None:
            for code in language_tree.find_similar_language_roots(locale.code):
                candidate = locale.replace_in_path(path, code)
                if candidate != path and client.is_available(candidate):
                    return Suggestion.locale(path, candidate)
            return None

        if has_double_slashes(path):
            return self.try_locale_insertion(path)

        return None

    def try_locale_insertion(self, path: str) -> Suggestion | None:
        """Fill the first empty segment with each English fallback."""
        client = self.get_client()
        for code in language_tree.find_english_fallbacks():
            candidate = path.replace("//", f"/{code}/", 1)
            if client.is_available(candidate):
                return Suggestion.locale(path, candidate)
        return None
