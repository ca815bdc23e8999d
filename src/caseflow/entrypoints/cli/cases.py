"""CASEFLOW cases CLI.

Thin wrappers that turn command-line arguments into commands/queries on the
message bus. Results are printed to **stdout** as JSON (one document per
invocation); errors go to **stderr** and set the exit status:

| Exit | Cause                                              |
|------|----------------------------------------------------|
| 0    | success                                            |
| 1    | unexpected failure                                 |
| 2    | invalid input or unknown status (also click usage) |
| 3    | case not found                                     |
| 4    | transition rejected or concurrent modification     |
"""

from __future__ import annotations

import json
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

import click
import click_extra as clickx

from caseflow import config
from caseflow.bootstrap import AppContainer, bootstrap
from caseflow.domain.errors import (
    CaseNotFoundError,
    InvalidInputError,
    InvalidStatusValueError,
    StatusTransitionRejectedError,
)
from caseflow.interfaces.case_repository import CaseVersionConflictError
from caseflow.service_layer import commands, queries
from caseflow.service_layer.messagebus import Message, MessageBus

from .db import MISSING_DB_URL_MSG

EXIT_UNEXPECTED = 1
EXIT_INVALID = 2
EXIT_NOT_FOUND = 3
EXIT_CONFLICT = 4

EXIT_CODES: dict[type[Exception], int] = {
    InvalidInputError: EXIT_INVALID,
    InvalidStatusValueError: EXIT_INVALID,
    CaseNotFoundError: EXIT_NOT_FOUND,
    StatusTransitionRejectedError: EXIT_CONFLICT,
    CaseVersionConflictError: EXIT_CONFLICT,
}


class CaseCommandError(click.ClickException):
    """A failed case operation, reported on stderr with a specific exit code."""

    def __init__(self, message: str, exit_code: int) -> None:
        super().__init__(message)
        self.exit_code = exit_code


def exit_code_for(exc: Exception) -> int:
    """Return the exit status for an exception raised by the bus."""
    for exc_type, code in EXIT_CODES.items():
        if isinstance(exc, exc_type):
            return code
    return EXIT_UNEXPECTED


@contextmanager
def _reported_errors() -> Iterator[None]:
    try:
        yield
    except click.ClickException:
        raise
    except Exception as e:  # pylint: disable=broad-except
        code = exit_code_for(e)
        message = str(e) if code != EXIT_UNEXPECTED else "Unexpected error"
        raise CaseCommandError(message, code) from e


def _get_bus(ctx: click.Context) -> MessageBus:
    """Return the bus from ``ctx.obj``, bootstrapping one on first use."""
    if not isinstance(ctx.obj, AppContainer):
        try:
            ctx.obj = bootstrap()
        except config.DatabaseUrlNotSetError as e:
            raise click.ClickException(MISSING_DB_URL_MSG) from e
    return ctx.obj.message_bus


def _dispatch(ctx: click.Context, message: Message) -> Any:
    bus = _get_bus(ctx)
    with _reported_errors():
        return bus.handle(message)


def _emit(document: Any) -> None:
    click.echo(json.dumps(document, indent=2))


@click.group(cls=clickx.ExtraGroup)
def cases() -> None:
    """Create, inspect and move cases through their lifecycle."""


@cases.command()
@click.argument("title")
@click.option(
    "--priority",
    "-p",
    required=True,
    help="LOW, MEDIUM, HIGH or CRITICAL (case-insensitive).",
)
@click.option("--description", "-d", default=None, help="Free-text description.")
@click.pass_context
def create(ctx: click.Context, title: str, priority: str, description: str | None):
    """Open a new case titled TITLE."""
    view = _dispatch(
        ctx,
        commands.CreateCase(title=title, priority=priority, description=description),
    )
    _emit(view.to_dict())


@cases.command()
@click.argument("case_id")
@click.pass_context
def get(ctx: click.Context, case_id: str):
    """Show the case CASE_ID."""
    _emit(_dispatch(ctx, queries.GetCase(case_id=case_id)).to_dict())


@cases.command(name="list")
@click.option("--status", "-s", default=None, help="Only cases with this status.")
@click.option("--priority", "-p", default=None, help="Only cases with this priority.")
@click.pass_context
def list_(ctx: click.Context, status: str | None, priority: str | None):
    """List cases, newest first."""
    views = _dispatch(ctx, queries.ListCases(status=status, priority=priority))
    _emit([view.to_dict() for view in views])


@cases.command(name="set-status")
@click.argument("case_id")
@click.argument("status")
@click.pass_context
def set_status(ctx: click.Context, case_id: str, status: str):
    """Move the case CASE_ID to STATUS."""
    view = _dispatch(ctx, commands.UpdateCaseStatus(case_id=case_id, status=status))
    _emit(view.to_dict())
