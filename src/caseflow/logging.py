"""Logging setup for the CASEFLOW CLI and HTTP server.

Console output goes through Rich on stderr. Alongside it an in-memory
"flight recorder" keeps recent DEBUG records and dumps them to a file once
something goes wrong, so a failed run can be diagnosed after the fact even
when the console was quiet.
"""

from __future__ import annotations

import logging
import os
import platform
import sys
from logging.handlers import MemoryHandler
from pathlib import Path
from typing import TYPE_CHECKING, Literal, TypeAlias

import alembic
import sqlalchemy
from rich.console import Console
from rich.logging import RichHandler

if TYPE_CHECKING:
    from logging import Logger

# pylint: disable=too-few-public-methods

PROJECT_PREFIX = "caseflow"

ColorSystem: TypeAlias = Literal["auto", "standard", "256", "truecolor", "windows"]

CONSOLE_FORMAT = "%(prefix)s %(message)s"
DEBUG_CONSOLE_FORMAT = "%(asctime)s %(name)s: %(message)s"
RECORDER_FORMAT = (
    "[%(asctime)s] [%(process)d:%(threadName)s] "
    "%(levelname)s %(name)s:%(lineno)d: %(message)s"
)


class ThirdPartyPrefixFilter(logging.Filter):
    """Tag records from other libraries with a short ``[libname]`` prefix.

    Records from ``caseflow.*`` loggers get an empty prefix. The filter never
    drops a record.
    """

    def filter(self, record: logging.LogRecord) -> bool:
        if record.name.startswith(PROJECT_PREFIX):
            record.prefix = ""
        else:
            # "uvicorn.error" -> "[uvicorn]"
            record.prefix = f"[{record.name.split('.')[0]}]"
        return True


def config_console_handler(
    level: int = logging.INFO, debug_mode: bool = False, color: bool = True
) -> RichHandler:
    """Configure and return a RichHandler writing to stderr.

    Args:
        level: Minimum level for console output (forced to DEBUG in debug mode).
        debug_mode: Show timestamps, logger names and source locations.
        color: Enable color output. Mirrors click-extra's ``--color/--no-color``.

    Returns:
        RichHandler: Handler suitable for the root logger.
    """

    color_system: ColorSystem | None = "auto" if color else None
    console = Console(color_system=color_system, stderr=True)

    if debug_mode:
        level = logging.DEBUG

    handler = RichHandler(
        level=level,
        console=console,
        rich_tracebacks=True,
        show_time=False,
        show_path=debug_mode,
        enable_link_path=debug_mode,
    )
    handler.setFormatter(
        logging.Formatter(fmt=DEBUG_CONSOLE_FORMAT if debug_mode else CONSOLE_FORMAT)
    )

    # the plain format references %(prefix)s, which only this filter sets
    if not debug_mode:
        handler.addFilter(ThirdPartyPrefixFilter())

    return handler


def config_flight_recorder(
    path: Path,
    capacity: int = 2000,
    flush_level: int = logging.WARNING,
    flush_on_close: bool = False,
) -> MemoryHandler:
    """Configure and return an in-memory flight recorder backed by a file.

    Up to `capacity` records are buffered. The buffer is written to `path`
    when a record at `flush_level` or above arrives, when it fills up, or on
    close if `flush_on_close` is set.

    Args:
        path: Destination file for flushed records. Truncated on open.
        capacity: Number of records to buffer in memory.
        flush_level: Level at or above which the buffer is flushed.
        flush_on_close: Flush the buffer when the handler is closed.

    Returns:
        MemoryHandler: A memory-backed handler with a FileHandler target.
    """

    path.parent.mkdir(parents=True, exist_ok=True)
    file_handler = logging.FileHandler(path, mode="w", encoding="utf-8")
    file_handler.setLevel(logging.DEBUG)
    file_handler.setFormatter(logging.Formatter(RECORDER_FORMAT))

    return MemoryHandler(
        capacity=capacity,
        flushLevel=flush_level,
        target=file_handler,
        flushOnClose=flush_on_close,
    )


def configure_logging(  # pylint: disable=too-many-arguments
    *,
    level: int,
    debug_mode: bool = False,
    color: bool = True,
    log_path: Path | None = None,
    flight_capacity: int = 2000,
    flush_on_close: bool = False,
    logger_levels: dict[str, int] | None = None,
) -> list[logging.Handler]:
    """Install the console handler (and optionally the flight recorder) on the root logger.

    The root logger itself is opened up to DEBUG; each handler filters on its
    own level. Per-logger overrides in `logger_levels` apply to both handlers.

    Args:
        level: Console level.
        debug_mode: See `config_console_handler`.
        color: See `config_console_handler`.
        log_path: Flight-recorder file. No flight recorder when None.
        flight_capacity: Flight-recorder buffer size.
        flush_on_close: Dump the flight recorder on clean exit too.
        logger_levels: Logger name to minimum level.

    Returns:
        The handlers that were installed.
    """

    handlers: list[logging.Handler] = [
        config_console_handler(level=level, debug_mode=debug_mode, color=color)
    ]
    if log_path is not None:
        handlers.append(
            config_flight_recorder(
                path=log_path, capacity=flight_capacity, flush_on_close=flush_on_close
            )
        )

    logging.basicConfig(level=logging.DEBUG, handlers=handlers, force=True)

    for name, lvl in (logger_levels or {}).items():
        logging.getLogger(name).setLevel(lvl)

    return handlers


def log_startup(  # pylint: disable=too-many-arguments
    logger: Logger,
    *,
    app_version: str,
    level: int,
    handlers: list[logging.Handler],
    log_path: Path | None,
    flight_capacity: int | None,
    force_flush_fr: bool,
    logger_levels: dict[str, int],
) -> None:
    """Log a one-line INFO summary followed by DEBUG diagnostics.

    The flight recorder counts as enabled when `log_path` is given.
    """

    flight_recorder = log_path is not None

    logger.info(
        "CASEFLOW %s: console=%s, flight-recorder=%s",
        app_version,
        logging.getLevelName(level),
        "ON" if flight_recorder else "OFF",
    )

    logger.debug("Python: %s", sys.version.split()[0])
    logger.debug("Platform: %s %s", platform.system(), platform.release())
    logger.debug("PID: %s", os.getpid())
    logger.debug("CWD: %s", Path.cwd())
    logger.debug("Alembic: %s", alembic.__version__)
    logger.debug("SQLAlchemy: %s", sqlalchemy.__version__)
    logger.debug("Handlers: %s", [type(h).__name__ for h in handlers])
    if flight_recorder:
        logger.debug(
            "Flight recorder: path=%s, capacity=%s, flush_on_close=%s",
            log_path,
            flight_capacity,
            force_flush_fr,
        )
    logger.debug(
        "Per-logger overrides: %s",
        {name: logging.getLevelName(lvl) for name, lvl in logger_levels.items()}
        or "<none>",
    )
