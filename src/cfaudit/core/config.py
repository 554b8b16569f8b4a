"""
Configuration loading.

Settings are resolved from, lowest to highest priority:
  1. Built-in defaults
  2. Global config file (~/.config/cfaudit/config.yaml)
  3. Environment variables (AEM_AUTHOR_URL, AEM_AUTHOR_TOKEN, ...)
  4. Explicit overrides (CLI flags)
"""

from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any

import yaml

from cfaudit.core.errors import ConfigError

# Environment variable -> config field
ENV_VARS = {
    "AEM_AUTHOR_URL": "author_url",
    "AEM_AUTHOR_TOKEN": "author_token",
    "CFAUDIT_MAX_DISTANCE": "max_distance",
}

INT_FIELDS = ("max_distance", "max_pages", "request_timeout")
FLOAT_FIELDS = ("pagination_delay",)


@dataclass(frozen=True)
class AuditConfig:
    """Resolved settings for an audit run."""

    author_url: str | None = None
    author_token: str | None = None

    # Similar-path matching
    max_distance: int = 1

    # Author API paging
    max_pages: int = 10
    pagination_delay: float = 0.1
    request_timeout: int = 30

    def to_dict(self, redact: bool = True) -> dict[str, Any]:
        data = {f.name: getattr(self, f.name) for f in fields(self)}
        if redact and data["author_token"]:
            data["author_token"] = "********"
        return data


def get_global_config_path() -> Path:
    """Return the path to the global cfaudit config file.

    Respects XDG_CONFIG_HOME if set, otherwise defaults to
    ~/.config/cfaudit/config.yaml.

    Returns:
        Path to global config file (may not exist).
    """
    xdg_config_home = os.environ.get("XDG_CONFIG_HOME")
    if xdg_config_home:
        base = Path(xdg_config_home)
    else:
        base = Path.home() / ".config"
    return base / "cfaudit" / "config.yaml"


def load_global_config() -> dict:
    """Load the global cfaudit configuration.

    Returns:
        Configuration dict, or empty dict if file is missing or invalid.
    """
    config_path = get_global_config_path()
    if not config_path.is_file():
        return {}
    try:
        text = config_path.read_text(encoding="utf-8")
        data = yaml.safe_load(text)
        if isinstance(data, dict):
            return data
        return {}
    except (OSError, yaml.YAMLError):
        return {}


def save_global_config(config: dict) -> Path:
    """Write ``config`` to the global config file (YAML).

    Returns:
        Path written to.
    """
    config_path = get_global_config_path()
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(yaml.dump(config, default_flow_style=False, sort_keys=False))
    return config_path


def _coerce(name: str, value: Any) -> Any:
    if value is None:
        return None
    try:
        if name in INT_FIELDS:
            return int(value)
        if name in FLOAT_FIELDS:
            return float(value)
    except (TypeError, ValueError) as e:
        raise ConfigError(f"Invalid value for {name}: {value!r}") from e
    return str(value)


def load_config(overrides: dict[str, Any] | None = None) -> AuditConfig:
    """Build an AuditConfig from defaults, global file, env and overrides.

    Args:
        overrides: Highest-priority values; None entries are ignored.

    Returns:
        Resolved AuditConfig.

    Raises:
        ConfigError: If a numeric setting cannot be parsed or is negative.
    """
    known = {f.name for f in fields(AuditConfig)}
    values: dict[str, Any] = {}

    for key, value in load_global_config().items():
        if key in known:
            values[key] = value

    for env_name, key in ENV_VARS.items():
        env_value = os.environ.get(env_name)
        if env_value:
            values[key] = env_value

    for key, value in (overrides or {}).items():
        if value is not None:
            if key not in known:
                raise ConfigError(f"Unknown setting: {key}")
            values[key] = value

    resolved = {key: _coerce(key, value) for key, value in values.items()}
    for key in INT_FIELDS + FLOAT_FIELDS:
        if key in resolved and resolved[key] is not None and resolved[key] < 0:
            raise ConfigError(f"{key} must not be negative")

    return replace(AuditConfig(), **resolved)
