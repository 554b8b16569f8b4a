"""Exception hierarchy for cfaudit."""

from __future__ import annotations

from typing import Any


class CfAuditError(Exception):
    """Base exception for all cfaudit errors."""


class ConfigError(CfAuditError):
    """Configuration is missing or invalid."""


class RuleError(CfAuditError):
    """A resolution rule could not run."""


class InventoryError(CfAuditError):
    """The content inventory could not be loaded."""


class CollectorError(CfAuditError):
    """The broken-path source could not be read."""


class AuthorClientError(CfAuditError):
    """Error talking to the author environment."""

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
        response: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response = response


class AuthorAuthError(AuthorClientError):
    """Authentication against the author environment failed."""
