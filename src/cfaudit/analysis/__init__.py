"""Broken-path analysis."""

from cfaudit.analysis.strategy import GRAPHQL_SUFFIX, AnalysisStrategy

__all__ = ["AnalysisStrategy", "GRAPHQL_SUFFIX"]
