"""
Configuration management CLI commands.

Manages cfaudit settings stored in the global config.yaml.
"""

from __future__ import annotations

from typing import Any

import click
from rich.console import Console
from rich.table import Table

from cfaudit.core.config import (
    ENV_VARS,
    AuditConfig,
    get_global_config_path,
    load_config,
    load_global_config,
    save_global_config,
)
from cfaudit.core.errors import ConfigError

console = Console()

# Settings with descriptions; defaults come from AuditConfig
CONFIG_SCHEMA: dict[str, dict[str, Any]] = {
    "author_url": {
        "type": str,
        "description": "Base URL of the author environment",
    },
    "author_token": {
        "type": str,
        "description": "Bearer token for the fragments API",
    },
    "max_distance": {
        "type": int,
        "description": "Maximum edit distance for similar-path matches",
    },
    "max_pages": {
        "type": int,
        "description": "Maximum pages fetched per folder listing",
    },
    "pagination_delay": {
        "type": float,
        "description": "Seconds to wait between listing pages",
    },
    "request_timeout": {
        "type": int,
        "description": "HTTP timeout in seconds",
    },
}


def _unknown_setting(key: str) -> None:
    console.print(f"[red]Unknown setting: {key}[/red]")
    console.print("\nAvailable settings:")
    for k in CONFIG_SCHEMA:
        console.print(f"  - {k}")


@click.group()
def config():
    """Manage cfaudit configuration.

    Settings are stored in ~/.config/cfaudit/config.yaml and can be
    overridden with environment variables.
    """
    pass


@config.command(name="show")
def show_cmd():
    """Show the effective configuration."""
    try:
        effective = load_config().to_dict()
    except ConfigError as e:
        console.print(f"[red]{e}[/red]")
        raise SystemExit(1)

    defaults = AuditConfig().to_dict()
    env_for = {key: env for env, key in ENV_VARS.items()}

    table = Table(title="Configuration", show_header=True, header_style="bold cyan")
    table.add_column("Setting")
    table.add_column("Value", style="green")
    table.add_column("Default", style="dim")
    table.add_column("Description", style="dim")

    for key, schema in CONFIG_SCHEMA.items():
        description = schema["description"]
        if key in env_for:
            description += f" (env: {env_for[key]})"
        table.add_row(key, str(effective[key]), str(defaults[key]), description)

    console.print(table)
    console.print(f"\n[dim]Config file: {get_global_config_path()}[/dim]")


@config.command(name="path")
def path_cmd():
    """Print the config file location."""
    click.echo(str(get_global_config_path()))


@config.command(name="get")
@click.argument("key")
def get_cmd(key: str):
    """Get a configuration value.

    Examples:
        cfaudit config get max_distance
    """
    if key not in CONFIG_SCHEMA:
        _unknown_setting(key)
        return

    value = load_config().to_dict()[key]
    default = AuditConfig().to_dict()[key]
    if value == default:
        console.print(f"{key} = {default} [dim](default)[/dim]")
    else:
        console.print(f"{key} = {value}")


@config.command(name="set")
@click.argument("key")
@click.argument("value")
def set_cmd(key: str, value: str):
    """Set a configuration value.

    Examples:
        cfaudit config set author_url https://author.example.com
        cfaudit config set max_distance 2
    """
    if key not in CONFIG_SCHEMA:
        _unknown_setting(key)
        return

    schema = CONFIG_SCHEMA[key]

    typed_value: int | float | str
    try:
        if schema["type"] is int:
            typed_value = int(value)
        elif schema["type"] is float:
            typed_value = float(value)
        else:
            typed_value = value
    except ValueError:
        console.print(f"[red]Invalid value type. Expected {schema['type'].__name__}[/red]")
        return

    stored = load_global_config()
    stored[key] = typed_value
    save_global_config(stored)

    shown = "********" if key == "author_token" else typed_value
    console.print(f"[green]Set {key} = {shown}[/green]")
