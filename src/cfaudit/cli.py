"""
Main CLI dispatcher for cfaudit.

Usage:
    cfaudit analyze broken.txt [--inventory content.json] [--offline]
    cfaudit clean PATH...
    cfaudit locales CODE
    cfaudit config [show|path|get|set]
"""

import logging

import click
from rich.console import Console
from rich.logging import RichHandler

from cfaudit import __version__


def configure_logging(verbose: bool = False, quiet: bool = False) -> None:
    """Send cfaudit log records to stderr through rich."""
    if verbose:
        level = logging.DEBUG
    elif quiet:
        level = logging.ERROR
    else:
        level = logging.WARNING

    handler = RichHandler(
        console=Console(stderr=True),
        show_path=False,
        rich_tracebacks=verbose,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))

    logger = logging.getLogger("cfaudit")
    logger.handlers[:] = [handler]
    logger.setLevel(level)
    logger.propagate = False


@click.group()
@click.version_option(version=__version__, prog_name="cfaudit")
@click.option("-v", "--verbose", is_flag=True, help="Log every rule decision")
@click.option("-q", "--quiet", is_flag=True, help="Only log errors")
def main(verbose: bool, quiet: bool) -> None:
    """Broken content-fragment path resolution.

    Suggests a fix for every broken path: publish it, use another locale,
    or point at a similarly named sibling.
    """
    configure_logging(verbose=verbose, quiet=quiet)


# Import and register commands (imports after main definition intentional)
from cfaudit.audit.commands import analyze, clean, locales  # noqa: E402
from cfaudit.config.commands import config  # noqa: E402

main.add_command(analyze)
main.add_command(clean)
main.add_command(locales)
main.add_command(config)


if __name__ == "__main__":
    main()
