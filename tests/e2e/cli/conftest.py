"""Fixtures and test helpers for end-to-end CLI tests.

Provides a test-only `log-demo` Click command that emits structured log
messages, fixtures to register that command, a CliRunner pointed at a
migrated SQLite database, and an isolated filesystem per test.
"""

import logging
from collections.abc import Callable
from typing import Any

import click
import pytest
from click.testing import CliRunner, Result

from caseflow.entrypoints.cli.main import caseflow

# pylint: disable=redefined-outer-name


@click.command()
def log_demo():
    """Emit representative log messages for CLI/flight-recorder tests.

    Emits DEBUG/INFO/WARNING/ERROR/CRITICAL messages on the 'caseflow.demo'
    logger and additional messages on a 'some.thirdparty' logger to exercise
    logger-level filtering and flight-recorder behavior.
    """
    logger = logging.getLogger("caseflow.demo")
    logger.debug("This is a debug-level test message.")
    logger.info("This is an info-level test message.")
    logger.warning("This is a warning-level test message.")
    logger.error("This is an error-level test message.")
    logger.critical("This is a critical-level test message.")
    third_party_logger = logging.getLogger("some.thirdparty")
    third_party_logger.debug("This is a debug-level third-party test message.")
    third_party_logger.info("This is an info-level third-party test message.")
    third_party_logger.warning("This is a warning-level third-party test message.")
    logger.debug("This is a final debug-level test message.")


def _remove_command_everywhere(group, name: str) -> None:
    """Remove a command from a Click group and its internal sections."""
    group.commands.pop(name, None)
    if hasattr(group, "_default_section"):
        group._default_section.commands.pop(name, None)  # pylint: disable=protected-access
    for sec in getattr(group, "_sections", []):
        getattr(sec, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Register the 'log-demo' command on `caseflow` for the duration of a test."""
    caseflow.add_command(log_demo, name="log-demo")
    try:
        yield
    finally:
        _remove_command_everywhere(caseflow, "log-demo")


@pytest.fixture
def runner():
    """Return a Click CliRunner for invoking CLI commands in tests."""
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Provide an isolated filesystem context for tests using CliRunner."""
    with runner.isolated_filesystem():
        yield


@pytest.fixture
def db_runner(migrated_sqlite_url: str) -> CliRunner:
    """CliRunner whose environment points at a migrated SQLite database.

    The flight recorder is switched off so nothing is written under the
    user's log directory.
    """
    return CliRunner(
        env={"CASEFLOW_DB_URL": migrated_sqlite_url, "CASEFLOW_FLIGHT_RECORDER": "0"}
    )


@pytest.fixture
def cli(db_runner: CliRunner) -> Callable[..., Result]:
    """Invoke `caseflow` with the given arguments through `db_runner`."""

    def _invoke(*args: str, **kwargs: Any) -> Result:
        return db_runner.invoke(caseflow, list(args), **kwargs)

    return _invoke
