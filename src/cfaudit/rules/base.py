"""
Base class for resolution rules.

A rule looks at one broken path and either proposes a Suggestion or
declines with None. Errors propagate to the strategy, which logs them and
moves on to the next rule.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from cfaudit.clients.base import ContentClient
from cfaudit.core.context import AuditContext
from cfaudit.core.errors import RuleError
from cfaudit.domain.suggestion import Suggestion


class BaseRule(ABC):
    """Abstract base for all resolution rules.

    Subclasses set ``name`` and implement ``apply_rule``. Lower priority
    values are tried first.
    """

    name: str = ""
    description: str = ""

    def __init__(
        self,
        context: AuditContext,
        priority: int = 42,
        client: ContentClient | None = None,
    ):
        self.context = context
        self.priority = priority
        self.client = client

    def get_priority(self) -> int:
        return self.priority

    def get_client(self) -> ContentClient:
        """Return the injected content client.

        Raises:
            RuleError: If the rule was built without one.
        """
        if self.client is None:
            self.context.log.error("Content client not injected")
            raise RuleError(f"{self.name or type(self).__name__} needs a content client")
        return self.client

    def apply(self, path: str) -> Suggestion | None:
        self.context.log.debug("Applying %s to path: %s", self.name, path)
        return self.apply_rule(path)

    @abstractmethod
    def apply_rule(self, path: str) -> Suggestion | None:
        """Propose a fix for ``path`` or return None."""
        ...
