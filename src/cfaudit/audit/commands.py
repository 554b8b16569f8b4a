"""
Audit CLI commands.

Commands:
    analyze  - Resolve a file of broken paths into suggestions
    clean    - Show how paths are normalised before analysis
    locales  - Show the locales tried in place of a locale code
"""

from __future__ import annotations

import logging
from pathlib import Path

import click
from rich.console import Console
from rich.table import Table

from cfaudit.analysis.strategy import AnalysisStrategy
from cfaudit.audit.handler import AuditResult, run_audit
from cfaudit.clients.inventory import InventoryClient
from cfaudit.collectors.sources import FileBrokenPathSource, FileContentInventory
from cfaudit.core.config import load_config
from cfaudit.core.context import AuditContext
from cfaudit.core.errors import ConfigError
from cfaudit.domain import language_tree
from cfaudit.domain.suggestion import SuggestionType
from cfaudit.paths.utils import get_parent_path, remove_double_slashes, remove_locale_from_path

console = Console()

TYPE_STYLES = {
    SuggestionType.PUBLISH.value: "green",
    SuggestionType.LOCALE.value: "cyan",
    SuggestionType.SIMILAR.value: "yellow",
    SuggestionType.NOT_FOUND.value: "red",
}


def _print_result(result: AuditResult) -> None:
    if not result.success:
        console.print(f"[red]Audit failed:[/red] {result.error}")
        return

    suggestions = result.enriched_suggestions()
    if not suggestions:
        console.print("[green]No broken paths to analyze.[/green]")
        return

    table = Table(title="Suggestions", show_header=True, header_style="bold cyan")
    table.add_column("Requested")
    table.add_column("Type")
    table.add_column("Suggested")
    table.add_column("Reason", style="dim")
    table.add_column("Requests", justify="right")

    for item in suggestions:
        style = TYPE_STYLES.get(item["type"], "white")
        table.add_row(
            item["requestedPath"],
            f"[{style}]{item['type']}[/{style}]",
            item["suggestedPath"] or "-",
            item["reason"] or "",
            str(item["requestCount"]),
        )

    console.print(table)

    counts: dict[str, int] = {}
    for item in suggestions:
        counts[item["type"]] = counts.get(item["type"], 0) + 1
    summary = ", ".join(f"{name}: {count}" for name, count in sorted(counts.items()))
    console.print(f"\n[bold]{len(suggestions)} path(s)[/bold] ({summary})")


@click.command(name="analyze")
@click.argument(
    "broken_paths_file",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
)
@click.option(
    "--inventory", "-i",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="JSON export of known content and its status",
)
@click.option("--offline", is_flag=True, help="Resolve against the inventory instead of author")
@click.option("--author-url", help="Author environment URL (overrides AEM_AUTHOR_URL)")
@click.option("--token", help="Author API token (overrides AEM_AUTHOR_TOKEN)")
@click.option("--max-distance", type=int, help="Maximum edit distance for similar paths")
@click.option("--json", "as_json", is_flag=True, help="Print the result as JSON")
@click.option(
    "--output", "-o",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Also write the JSON result to this file",
)
def analyze(
    broken_paths_file: Path,
    inventory: Path | None,
    offline: bool,
    author_url: str | None,
    token: str | None,
    max_distance: int | None,
    as_json: bool,
    output: Path | None,
):
    """Suggest fixes for a file of broken content-fragment paths.

    BROKEN_PATHS_FILE holds one path per line, or a JSON list of paths or
    of {url, requestCount, requestUserAgents} objects.

    Examples:
        cfaudit analyze broken.txt
        cfaudit analyze broken.json --inventory content.json --offline
        cfaudit analyze broken.txt --json -o suggestions.json
    """
    if offline and inventory is None:
        raise click.UsageError("--offline needs --inventory")

    try:
        settings = load_config(
            {
                "author_url": author_url,
                "author_token": token,
                "max_distance": max_distance,
            }
        )
    except ConfigError as e:
        raise click.ClickException(str(e))

    context = AuditContext(log=logging.getLogger("cfaudit"), config=settings)
    source = FileBrokenPathSource(broken_paths_file)
    content = FileContentInventory(inventory) if inventory else None
    factory = (lambda ctx, index: InventoryClient(index)) if offline else None

    result = run_audit(context, source, content, client_factory=factory)

    if output:
        output.write_text(result.to_json())

    if as_json:
        click.echo(result.to_json())
    else:
        _print_result(result)
        if output:
            console.print(f"[dim]Wrote {output}[/dim]")

    if not result.success:
        raise SystemExit(1)


@click.command(name="clean")
@click.argument("paths", nargs=-1, required=True)
def clean(paths: tuple[str, ...]):
    """Show the normalised forms of PATHS.

    Examples:
        cfaudit clean /content/dam/en-US/hero.cfm.model.json
    """
    table = Table(show_header=True, header_style="bold cyan")
    table.add_column("Input")
    table.add_column("Cleaned")
    table.add_column("No locale")
    table.add_column("Parent", style="dim")

    for path in paths:
        cleaned = remove_double_slashes(AnalysisStrategy.clean_path(path))
        table.add_row(
            path,
            cleaned,
            remove_locale_from_path(cleaned) or "",
            get_parent_path(cleaned) or "-",
        )

    console.print(table)


@click.command(name="locales")
@click.argument("code")
def locales(code: str):
    """List the locale codes tried in place of CODE, in order."""
    candidates = language_tree.find_similar_language_roots(code)
    if not candidates:
        console.print(f"[yellow]No alternatives for {code!r}[/yellow]")
        return

    root = language_tree.find_root_for_locale(code)
    console.print(f"[bold]{code}[/bold] (group: {root or 'none'})")
    for candidate in candidates:
        click.echo(candidate)
