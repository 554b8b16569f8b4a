"""Audit run: fetch, analyze, provide."""

from cfaudit.audit.handler import (
    AuditResult,
    analyze_broken_paths,
    fetch_broken_paths,
    provide_suggestions,
    run_audit,
)

__all__ = [
    "AuditResult",
    "fetch_broken_paths",
    "analyze_broken_paths",
    "provide_suggestions",
    "run_audit",
]
