"""Rule: the content exists on author and only needs publishing."""

from __future__ import annotations

from cfaudit.clients.base import ContentClient
from cfaudit.core.context import AuditContext
from cfaudit.domain.suggestion import Suggestion
from cfaudit.rules.base import BaseRule


class PublishRule(BaseRule):
    """Suggest publishing when the broken path exists on the author host."""

    name = "PublishRule"
    description = "Content exists on author but is not published"

    def __init__(self, context: AuditContext, client: ContentClient | None = None):
        super().__init__(context, priority=1, client=client)

    def apply_rule(self, path: str) -> Suggestion | None:
        if self.get_client().is_available(path):
            return Suggestion.publish(path)
        return None
