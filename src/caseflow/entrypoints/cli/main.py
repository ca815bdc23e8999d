"""CASEFLOW CLI entry point.

Defines the top-level ``caseflow`` command (via Click-Extra) and registers
its subcommands:

- ``caseflow db``: forward-only database management (upgrade/current/heads/history/status).
- ``caseflow cases``: create, show, list and move cases (JSON on stdout).
- ``caseflow serve``: run the HTTP API.

The group itself only configures logging; each subcommand wires the
application on demand.

Examples
    $ caseflow --version
    $ caseflow db upgrade --force
    $ caseflow cases create "Printer on fire" --priority critical
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from caseflow import __version__
from caseflow.logging import configure_logging, log_startup

from .cases import cases as cases_group
from .db import db as db_group
from .helpers.log_level_parser import parse_log_level
from .serve import serve as serve_command

logger = logging.getLogger(__name__)


HELP = """CASEFLOW command-line interface.

    CASEFLOW tracks work items ("cases") through a fixed lifecycle:
    OPEN, IN_PROGRESS, DONE, CLOSED. Status changes only ever move forward,
    and every change is checked before it is stored.
    """


def default_log_path() -> Path:
    """Default flight-recorder file under the platform's user log directory."""
    return Path(user_log_dir("caseflow", appauthor=False)) / "latest.log"


@clickx.extra_group(
    version=__version__,
    help=HELP,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "--verbose",
    "-v",
    "verbose_count",
    count=True,
    help=(
        "Increase the default WARNING verbosity by one level "
        "for each repetition of the option."
    ),
    default=0,
)
@click.option(
    "--quiet",
    "-q",
    "quiet_count",
    count=True,
    help=(
        "Decrease the default WARNING verbosity by one level "
        "for each repetition of the option."
    ),
    default=0,
)
@click.option(
    "--debug/--no-debug",
    help="Enable debug mode (timestamps, logger names and source locations).",
    default=False,
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Flight-recorder file (defaults to the user log directory).",
    default=None,
    envvar="CASEFLOW_LOG_PATH",
    show_envvar=True,
)
@click.option(
    "--flight-recorder-capacity",
    type=int,
    default=2000,
    hidden=True,
    envvar="CASEFLOW_FLIGHT_RECORDER_CAPACITY",
    show_envvar=True,
    help="Capacity of the flight recorder (in number of log records).",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    "flight_recorder",
    help=(
        "Keep the last N log records at DEBUG granularity (unaffected by -v/-q) "
        "and write them to --log-path when a WARNING/ERROR occurs, or on clean "
        "exit if --force-flush is set."
    ),
    default=True,
    envvar="CASEFLOW_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "--force-flush/--no-force-flush",
    "force_flush_flight_recorder",
    help="Also write the flight recorder to --log-path on clean exit.",
    default=False,
    show_default=True,
    envvar="CASEFLOW_FORCE_FLUSH_FLIGHT_RECORDER",
    show_envvar=True,
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    help=(
        "Set the minimum LEVEL of a logger NAME (NAME=LEVEL). Applies to both "
        "console and flight recorder. Repeatable (e.g. -L sqlalchemy=INFO) or "
        "via CASEFLOW_LOGGER_LEVELS (comma/space list)."
    ),
    envvar="CASEFLOW_LOGGER_LEVELS",
    show_envvar=True,
)
@clickx.pass_context
def caseflow(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose_count: int,
    quiet_count: int,
    debug: bool,
    log_path: Path | None,
    flight_recorder_capacity: int,
    flight_recorder: bool,
    force_flush_flight_recorder: bool,
    logger_levels: dict[str, int],
) -> None:
    """CASEFLOW command-line interface."""

    level = logging.WARNING - (10 * verbose_count) + (10 * quiet_count)
    level = max(logging.DEBUG, min(logging.CRITICAL, level))

    if flight_recorder and log_path is None:
        log_path = default_log_path()
    recorder_path = log_path if flight_recorder else None

    handlers = configure_logging(
        level=level,
        debug_mode=debug,
        color=ctx.color is not False,  # None or True => allow color
        log_path=recorder_path,
        flight_capacity=flight_recorder_capacity,
        flush_on_close=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    log_startup(
        logger,
        app_version=__version__,
        level=logging.DEBUG if debug else level,
        handlers=handlers,
        log_path=recorder_path,
        flight_capacity=flight_recorder_capacity if flight_recorder else None,
        force_flush_fr=force_flush_flight_recorder,
        logger_levels=logger_levels,
    )

    # runs after the subcommand returns
    ctx.call_on_close(logging.shutdown)


caseflow.add_command(db_group)
caseflow.add_command(cases_group)
caseflow.add_command(serve_command)
