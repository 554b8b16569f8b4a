"""Core utilities for cfaudit."""

from cfaudit.core.config import AuditConfig, load_config
from cfaudit.core.context import AuditContext
from cfaudit.core.errors import (
    AuthorAuthError,
    AuthorClientError,
    CfAuditError,
    CollectorError,
    ConfigError,
    InventoryError,
    RuleError,
)

__all__ = [
    # Config
    "AuditConfig",
    "load_config",
    "AuditContext",
    # Errors
    "CfAuditError",
    "ConfigError",
    "RuleError",
    "InventoryError",
    "CollectorError",
    "AuthorClientError",
    "AuthorAuthError",
]
