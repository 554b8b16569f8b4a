"""
Analysis strategy: turns broken paths into suggestions.

Each path is cleaned, then run through the rules in priority order until
one proposes a fix (first match wins). Paths no rule can fix become
NOT_FOUND. A final pass checks LOCALE and SIMILAR targets against the path
index and rewrites the reason when the target exists but is unpublished.
"""

from __future__ import annotations

import re
from collections.abc import Sequence

from cfaudit.clients.base import ContentClient
from cfaudit.core.context import AuditContext
from cfaudit.domain.path_index import PathIndex
from cfaudit.domain.suggestion import Suggestion, SuggestionType
from cfaudit.rules import BaseRule, LocaleFallbackRule, PublishRule, SimilarPathRule

# foo.cfm.json, foo.cfm.model.json, foo.cfm.<variant>.json
GRAPHQL_SUFFIX = re.compile(r"\.cfm(?:\.[^/.]+)*\.json$")

# Suggestion types whose target is checked against the index
VERIFIED_TYPES = (SuggestionType.LOCALE, SuggestionType.SIMILAR)


class AnalysisStrategy:
    """Runs the rule chain over broken paths and verifies the results."""

    def __init__(
        self,
        context: AuditContext,
        client: ContentClient | None,
        path_index: PathIndex,
        rules: Sequence[BaseRule] | None = None,
    ):
        """Initialize the strategy.

        Args:
            context: Run context (logger and settings)
            client: Content client handed to the rules
            path_index: Index consulted during post-processing
            rules: Override the default rule set (sorted by priority either way)
        """
        self.context = context
        self.client = client
        self.path_index = path_index
        if rules is None:
            rules = [
                PublishRule(context, client),
                LocaleFallbackRule(context, client),
                SimilarPathRule(context, client),
            ]
        # sorted() is stable, so equal priorities keep declaration order
        self.rules: list[BaseRule] = sorted(rules, key=lambda rule: rule.get_priority())

    @staticmethod
    def clean_path(path: str) -> str:
        """Strip a GraphQL delivery suffix (``.cfm[.variant].json``)."""
        if not path:
            return path
        return GRAPHQL_SUFFIX.sub("", path)

    def analyze(self, broken_paths: Sequence[str]) -> list[Suggestion]:
        """Return one suggestion per broken path, in input order.

        Paths are analyzed one at a time; each sees whatever earlier paths
        added to the path index.
        """
        if not broken_paths:
            return []

        results = [self.analyze_path(self.clean_path(path)) for path in broken_paths]
        suggestions = [suggestion for suggestion in results if suggestion is not None]
        return self.process_suggestions(suggestions)

    def analyze_path(self, path: str) -> Suggestion:
        """Try each rule in order; fall back to NOT_FOUND."""
        log = self.context.log
        log.info("Analyzing broken path: %s", path)

        for rule in self.rules:
            try:
                suggestion = rule.apply(path)
            except Exception as e:
                log.error("Error applying rule %s to %s: %s", rule.name, path, e)
                continue

            if suggestion is not None:
                log.info("Rule %s applied to %s", rule.name, path)
                return suggestion

        log.warning("No rules applied to %s", path)
        return Suggestion.not_found(path)

    def process_suggestions(self, suggestions: Sequence[Suggestion]) -> list[Suggestion]:
        """Check LOCALE/SIMILAR targets against the path index.

        Published targets keep their suggestion as-is. Unpublished targets
        get a reason naming their status. Targets missing from the index, or
        whose lookup fails, are left unchanged.
        """
        log = self.context.log
        log.info("Post-processing %d suggestions", len(suggestions))

        processed = []
        for suggestion in suggestions:
            if suggestion.type not in VERIFIED_TYPES:
                processed.append(suggestion)
                continue

            try:
                content = self.path_index.find(suggestion.suggested_path)
            except Exception as e:
                log.warning(
                    "Could not check status of %s: %s", suggestion.suggested_path, e
                )
                content = None

            if content is None:
                processed.append(suggestion)
            elif content.is_published():
                log.debug(
                    "Kept original suggestion type for %s with status: %s",
                    suggestion.suggested_path, content.status,
                )
                processed.append(suggestion)
            else:
                processed.append(
                    suggestion.with_reason(
                        f"Content is in {content.status} state. Suggest publishing."
                    )
                )

        return processed
