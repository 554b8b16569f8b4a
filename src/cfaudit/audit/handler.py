"""
Audit handler: fetch broken paths, analyze them, provide suggestions.

Each step takes the previous step's AuditResult. A failed fetch or analysis
is recorded in the result (success=False) rather than raised, and later
steps refuse to run on a failed result.
"""

from __future__ import annotations

import json
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

from cfaudit.analysis.strategy import AnalysisStrategy
from cfaudit.clients.author import AuthorClient
from cfaudit.clients.base import ContentClient
from cfaudit.collectors.sources import (
    BrokenPath,
    BrokenPathSource,
    ContentInventory,
    populate_index,
)
from cfaudit.core.context import AuditContext
from cfaudit.core.errors import CfAuditError
from cfaudit.domain.path_index import PathIndex
from cfaudit.domain.suggestion import Suggestion

ClientFactory = Callable[[AuditContext, PathIndex], ContentClient]


@dataclass
class AuditResult:
    """Outcome of an audit step."""

    broken_paths: list[BrokenPath] = field(default_factory=list)
    suggestions: list[Suggestion] = field(default_factory=list)
    success: bool = True
    error: str | None = None

    def enriched_suggestions(self) -> list[dict[str, Any]]:
        """Suggestions as dicts, with request stats of their broken path.

        Suggestions line up 1:1 with ``broken_paths``, so they are paired by
        position; distinct URLs that clean to the same path keep their own
        stats.
        """
        enriched = []
        for position, suggestion in enumerate(self.suggestions):
            data = suggestion.to_dict()
            broken = self.broken_paths[position] if position < len(self.broken_paths) else None
            data["requestCount"] = broken.request_count if broken else 0
            data["requestUserAgents"] = broken.request_user_agents if broken else []
            enriched.append(data)
        return enriched

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {
            "brokenPaths": [broken.to_dict() for broken in self.broken_paths],
            "suggestions": self.enriched_suggestions(),
            "success": self.success,
        }
        if self.error:
            data["error"] = self.error
        return data

    def to_json(self) -> str:
        return json.dumps(self.to_dict(), indent=2)


def fetch_broken_paths(context: AuditContext, source: BrokenPathSource) -> AuditResult:
    """Step 1: collect the broken paths."""
    try:
        broken_paths = source.fetch_broken_paths()
    except Exception as e:
        context.log.error("Failed to fetch broken content fragment paths: %s", e)
        return AuditResult(success=False, error=str(e))

    context.log.info("Found %d broken content fragment paths", len(broken_paths))
    return AuditResult(broken_paths=broken_paths)


def analyze_broken_paths(
    context: AuditContext,
    previous: AuditResult,
    inventory: ContentInventory | None = None,
    client_factory: ClientFactory | None = None,
) -> AuditResult:
    """Step 2: build the index and client, then run the analysis strategy.

    Args:
        context: Run context
        previous: Result of the fetch step
        inventory: Known content to preload into the index
        client_factory: Builds the content client (AuthorClient by default)

    Raises:
        CfAuditError: If the fetch step failed.
    """
    if not previous.success:
        raise CfAuditError("Audit failed, skipping content fragment path analysis")

    factory = client_factory or AuthorClient.create_from
    broken_paths = previous.broken_paths

    try:
        path_index = PathIndex()
        if inventory is not None:
            loaded = populate_index(path_index, inventory)
            context.log.info("Loaded %d inventory entries into the path index", loaded)

        client = factory(context, path_index)
        strategy = AnalysisStrategy(context, client, path_index)
        suggestions = strategy.analyze([broken.url for broken in broken_paths])
    except Exception as e:
        context.log.error("Failed to analyze broken content fragment paths: %s", e)
        return AuditResult(broken_paths=broken_paths, success=False, error=str(e))

    context.log.info("Found %d suggestions for broken content fragment paths", len(suggestions))
    return AuditResult(broken_paths=broken_paths, suggestions=suggestions)


def provide_suggestions(context: AuditContext, previous: AuditResult) -> AuditResult:
    """Step 3: hand the suggestions on.

    Raises:
        CfAuditError: If the analysis step failed.
    """
    if not previous.success:
        raise CfAuditError("Audit failed, skipping content fragment path suggestions generation")

    context.log.info("Providing %d content fragment path suggestions", len(previous.suggestions))
    return previous


def run_audit(
    context: AuditContext,
    source: BrokenPathSource,
    inventory: ContentInventory | None = None,
    client_factory: ClientFactory | None = None,
) -> AuditResult:
    """Run all three steps, stopping at the first failed one."""
    result = fetch_broken_paths(context, source)
    if not result.success:
        return result

    result = analyze_broken_paths(context, result, inventory, client_factory)
    if not result.success:
        return result

    return provide_suggestions(context, result)
