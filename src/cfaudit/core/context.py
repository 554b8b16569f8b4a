"""Run context shared by the strategy, rules and clients of one audit."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field

from cfaudit.core.config import AuditConfig


@dataclass
class AuditContext:
    """Logger and settings handed to every collaborator of a run."""

    log: logging.Logger = field(default_factory=lambda: logging.getLogger("cfaudit"))
    config: AuditConfig = field(default_factory=AuditConfig)
