"""Shared test fixtures for cfaudit package."""

import json
import logging
from pathlib import Path
from unittest.mock import MagicMock

import pytest

from cfaudit.core.config import AuditConfig
from cfaudit.core.context import AuditContext
from cfaudit.domain.path_index import PathIndex


@pytest.fixture(autouse=True)
def isolated_config(tmp_path, monkeypatch):
    """Keep tests away from the real config file and AEM_* environment."""
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))
    for name in ("AEM_AUTHOR_URL", "AEM_AUTHOR_TOKEN", "CFAUDIT_MAX_DISTANCE"):
        monkeypatch.delenv(name, raising=False)

    return tmp_path / "xdg" / "cfaudit" / "config.yaml"


@pytest.fixture
def mock_log():
    """A logger double that records calls."""
    return MagicMock(spec=logging.Logger)


@pytest.fixture
def audit_config():
    """Config with no paging delay so tests do not sleep."""
    return AuditConfig(
        author_url="https://author.example.com",
        author_token="token-123",
        pagination_delay=0,
    )


@pytest.fixture
def context(mock_log, audit_config):
    """Run context wired to the mock logger."""
    return AuditContext(log=mock_log, config=audit_config)


@pytest.fixture
def path_index():
    """An empty path index."""
    return PathIndex()


@pytest.fixture
def mock_client():
    """Content client double: nothing available, no children."""
    client = MagicMock()
    client.is_available.return_value = False
    client.get_children_from_path.return_value = []
    return client


@pytest.fixture
def write_json(tmp_path):
    """Factory fixture for writing JSON files into tmp_path."""
    def _write(name: str, data) -> Path:
        file_path = tmp_path / name
        file_path.write_text(json.dumps(data, indent=2))
        return file_path

    return _write
