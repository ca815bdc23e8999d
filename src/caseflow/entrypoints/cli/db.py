"""CASEFLOW DB CLI: forward-only Alembic wrappers.

A minimal interface over Alembic. Destructive operations (``downgrade``,
``stamp``) are intentionally omitted.

Behavior
- Alembic is configured programmatically (``config.build_alembic_config``);
  human-oriented notices go to **stderr**, Alembic output to **stdout**.
- ``upgrade`` asks for confirmation unless ``--force`` or ``--sql`` is given.

Failure modes
- Missing/invalid ``CASEFLOW_DB_URL`` or unreachable DB → ``ClickException``
  with guidance.
"""

from __future__ import annotations

import sys
from enum import Enum
from typing import TYPE_CHECKING

import click
import click_extra as clickx
from alembic import command
from alembic.runtime.migration import MigrationContext
from alembic.script import ScriptDirectory
from sqlalchemy import text
from sqlalchemy.exc import ArgumentError, OperationalError

from caseflow import config
from caseflow.adapters.db.engine import make_engine

from .helpers import error, sanitize_url, success, warn

if TYPE_CHECKING:
    from alembic.config import Config
    from sqlalchemy.engine import Engine

MISSING_DB_URL_MSG = (
    "CASEFLOW_DB_URL is not set.\n\n"
    "Set it before running this command, e.g.:\n"
    "  export CASEFLOW_DB_URL='sqlite:///cases.db'\n"
    "  or in PowerShell:\n"
    "  $env:CASEFLOW_DB_URL='sqlite:///cases.db'"
)

INVALID_URL_FORMAT_MSG = (
    "The value of CASEFLOW_DB_URL is not a valid SQLAlchemy database URL."
)

CANNOT_CONNECT_MSG = (
    "CASEFLOW_DB_URL is set, but the database is not reachable.\n"
    "Please ensure the database is running and the URL is correct."
)

UPGRADE_SCHEMA_WARNING = (
    "This will upgrade the database schema to the latest version.\n"
    "Please ensure you have a backup before proceeding."
)

UPGRADE_SCHEMA_INSTRUCTIONS = "Run 'caseflow db upgrade' to update the schema."


class MigrationStatus(Enum):
    """Describes the migration status of the database schema."""

    UP_TO_DATE = "up to date"
    OUT_OF_DATE = "out of date"
    UNINITIALIZED = "uninitialized"


def _check_connection(url: str) -> None:
    engine = make_engine(url)
    try:
        with engine.connect() as conn:
            conn.execute(text("SELECT 1"))  # pragma: no mutate
    finally:
        engine.dispose()


def get_checked_url() -> str:
    """Return ``CASEFLOW_DB_URL`` after checking the database answers.

    Raises:
        click.ClickException: If the URL is missing, malformed or unreachable.
    """
    try:
        url = config.get_db_url()
    except config.DatabaseUrlNotSetError as e:
        raise click.ClickException(MISSING_DB_URL_MSG) from e
    try:
        _check_connection(url)
    except OperationalError as e:
        raise click.ClickException(CANNOT_CONNECT_MSG) from e
    except ArgumentError as e:
        raise click.ClickException(INVALID_URL_FORMAT_MSG) from e
    return url


def _get_current_revision(engine: Engine) -> str | None:
    with engine.connect() as conn:
        return MigrationContext.configure(conn).get_current_revision()


def _get_head_revision(cfg: Config) -> str | None:
    heads = ScriptDirectory.from_config(cfg).get_heads()
    return heads[0] if heads else None


def migration_status(current: str | None, head: str | None) -> MigrationStatus:
    """Classify the schema given the current and head revisions."""
    if current is None:
        return MigrationStatus.UNINITIALIZED
    if current == head:
        return MigrationStatus.UP_TO_DATE
    return MigrationStatus.OUT_OF_DATE


@click.group(cls=clickx.ExtraGroup)
def db() -> None:
    """Database management commands."""


@db.command()
@click.option(
    "--verbose", "-v", is_flag=True, help="Show alembic's more verbose output."
)
def current(verbose: bool) -> None:
    """Show current DB revision."""
    cfg = config.build_alembic_config(db_url=get_checked_url(), stdout=sys.stdout)
    command.current(cfg, verbose=verbose)


@db.command()
@click.option(
    "--verbose", "-v", is_flag=True, help="Show alembic's more verbose output."
)
def heads(verbose: bool) -> None:
    """Show available head revisions."""
    cfg = config.build_alembic_config(stdout=sys.stdout)
    command.heads(cfg, verbose=verbose)


@db.command()
@click.option(
    "--verbose", "-v", is_flag=True, help="Show alembic's more verbose output."
)
@click.option(
    "--indicate-current",
    "-i",
    is_flag=True,
    help="Indicate the current revision (requires a reachable database).",
)
def history(verbose: bool, indicate_current: bool) -> None:
    """Show revision history."""
    url = get_checked_url() if indicate_current else None
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    command.history(cfg, verbose=verbose, indicate_current=indicate_current)


@db.command()
@click.option("--sql", is_flag=True, help="Generate SQL without executing.")
@click.option("--force", is_flag=True, help="Upgrade without confirmation.")
def upgrade(sql: bool, force: bool) -> None:
    """Upgrade the database to the head revision."""
    url = get_checked_url()
    cfg = config.build_alembic_config(db_url=url, stdout=sys.stdout)
    if not force and not sql:
        warn(UPGRADE_SCHEMA_WARNING)
        click.echo(f"db: {click.style(sanitize_url(url), underline=True)}", err=True)
        click.confirm("Are you sure you want to proceed?", abort=True, err=True)
    command.upgrade(cfg, revision="head", sql=sql)
    if not sql:
        success("Upgrade complete!")


@db.command()
def status() -> None:
    """Show database connection and schema status."""
    try:
        url = get_checked_url()
    except click.ClickException as e:
        error("Cannot connect to database")
        click.echo(e.format_message())
        return

    success("Database reachable")
    engine = make_engine(url)
    try:
        click.echo(f"Backend : {engine.dialect.name}")
        click.echo(f"URL     : {sanitize_url(url)}")
        rev = _get_current_revision(engine)
    finally:
        engine.dispose()

    head = _get_head_revision(config.build_alembic_config(db_url=url))
    state = migration_status(rev, head)
    click.echo(f"Schema  : {f'{rev} ({state.value})' if rev else state.value}")

    if state is not MigrationStatus.UP_TO_DATE:
        warn(UPGRADE_SCHEMA_INSTRUCTIONS)
