"""Configuration utilities for CASEFLOW.

This module centralizes small helpers and constants related to application
configuration. Everything is read from ``CASEFLOW_*`` environment variables.
"""

import os
import sys
from importlib.resources import files
from typing import TextIO

from alembic.config import Config

DB_URL_ENV = "CASEFLOW_DB_URL"
ID_SCHEME_ENV = "CASEFLOW_ID_SCHEME"
DEFAULT_ID_SCHEME = "uuid4"

ALEMBIC_URL_KEY = "sqlalchemy.url"  # pragma: no mutate
ALEMBIC_SCRIPT_LOCATION_KEY = "script_location"  # pragma: no mutate


class DatabaseUrlNotSetError(Exception):
    """Raised when the CASEFLOW_DB_URL environment variable is not set."""


def get_db_url() -> str:
    """Get the database URL from the environment.

    Returns:
        The value of the `CASEFLOW_DB_URL` environment variable.

    Raises:
        DatabaseUrlNotSetError: If `CASEFLOW_DB_URL` is unset or empty.
    """
    if not (url := os.environ.get(DB_URL_ENV)):
        raise DatabaseUrlNotSetError
    return url


def get_id_scheme() -> str:
    """Return the case id scheme name (``CASEFLOW_ID_SCHEME``, default ``uuid4``)."""
    return os.environ.get(ID_SCHEME_ENV) or DEFAULT_ID_SCHEME


def build_alembic_config(
    db_url: str | None = None, stdout: TextIO = sys.stdout
) -> Config:
    """Build an Alembic `Config` object for CASEFLOW's migrations.

    Sets only Alembic "main" options:
    - `sqlalchemy.url` → the database URL you pass
    - `script_location` → CASEFLOW's packaged Alembic scripts

    Args:
        db_url: SQLAlchemy database URL (e.g., `sqlite:///cases.db`). Can be
            `None` (default) only where Alembic won't need to connect.
        stdout: Text stream Alembic will write status lines to. Defaults to
            `sys.stdout`; override in tests to capture output.

    Returns:
        An `alembic.config.Config` pointing to CASEFLOW's migration scripts.
    """
    cfg = Config(stdout=stdout)
    if db_url is not None:
        cfg.set_main_option(ALEMBIC_URL_KEY, db_url)
    cfg.set_main_option(
        ALEMBIC_SCRIPT_LOCATION_KEY,
        str(files("caseflow.adapters.db.alembic")),
    )
    return cfg
