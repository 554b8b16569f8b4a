"""Tests for the top-level cfaudit CLI."""

import logging
from unittest.mock import patch

import pytest
from click.testing import CliRunner

from cfaudit import __version__
from cfaudit.cli import configure_logging, main


@pytest.fixture
def runner():
    """Create a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def restore_logger():
    logger = logging.getLogger("cfaudit")
    saved = (logger.handlers[:], logger.level, logger.propagate)
    yield logger
    logger.handlers[:], logger.level, logger.propagate = saved


def test_version(runner):
    result = runner.invoke(main, ["--version"])
    assert result.exit_code == 0
    assert f"cfaudit, version {__version__}" in result.output


def test_help_lists_commands(runner):
    result = runner.invoke(main, ["--help"])
    assert result.exit_code == 0
    for name in ("analyze", "clean", "locales", "config"):
        assert name in result.output


@pytest.mark.parametrize(
    "verbose, quiet, level",
    [
        (False, False, logging.WARNING),
        (True, False, logging.DEBUG),
        (False, True, logging.ERROR),
    ],
)
def test_configure_logging(restore_logger, verbose, quiet, level):
    configure_logging(verbose=verbose, quiet=quiet)
    assert restore_logger.level == level
    assert len(restore_logger.handlers) == 1
    assert restore_logger.propagate is False


def test_subcommand_runs_through_main(runner, restore_logger):
    result = runner.invoke(main, ["-q", "locales", "de-DE"])
    assert result.exit_code == 0
    assert "de-AT" in result.output.splitlines()
    assert restore_logger.level == logging.ERROR


def test_flags_reach_logging_setup(runner):
    with patch("cfaudit.cli.configure_logging") as mock_configure:
        result = runner.invoke(main, ["-v", "locales", "fr-FR"])

    assert result.exit_code == 0
    mock_configure.assert_called_once_with(verbose=True, quiet=False)
