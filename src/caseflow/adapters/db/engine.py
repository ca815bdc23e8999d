"""Database engine factory.

All engines are created here so that every connection is configured the same
way. SQLite connections get PRAGMAs enforcing foreign keys and enabling WAL;
other backends are used as-is.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from sqlalchemy import create_engine, event
from sqlalchemy.engine import URL, make_url
from sqlalchemy.pool import StaticPool

if TYPE_CHECKING:
    from sqlite3 import Connection as SQLiteConnection

    from sqlalchemy.engine import Engine


def is_sqlite(url: str | URL) -> bool:
    """Return True if the URL points at a SQLite database."""
    return make_url(str(url)).get_backend_name() == "sqlite"


def is_memory_sqlite(url: str | URL) -> bool:
    """Return True for in-memory SQLite URLs (``sqlite://`` or ``:memory:``)."""
    u = make_url(str(url))
    return is_sqlite(u) and u.database in (None, "", ":memory:")


def make_engine(url: str | URL, *, echo: bool = False) -> Engine:
    """Create a SQLAlchemy Engine for the given URL.

    For SQLite the following PRAGMAs are applied on connect:
        - ``foreign_keys=ON``
        - ``journal_mode=WAL``
        - ``synchronous=NORMAL``
        - ``temp_store=MEMORY``

    In-memory SQLite engines share a single connection (``StaticPool``) so
    every unit of work sees the same database.

    Args:
        url: Database connection URL.
        echo: If True, log SQL statements.

    Returns:
        Engine: Configured SQLAlchemy Engine.
    """

    if is_memory_sqlite(url):
        engine = create_engine(
            url,
            echo=echo,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    else:
        engine = create_engine(url, echo=echo)

    if is_sqlite(url):

        @event.listens_for(engine, "connect")
        def _sqlite_pragmas(dbapi_conn: SQLiteConnection, conn_record):  # type: ignore # pylint: disable=W0613
            cur = dbapi_conn.cursor()
            cur.execute("PRAGMA foreign_keys=ON;")
            cur.execute("PRAGMA journal_mode=WAL;")
            cur.execute("PRAGMA synchronous=NORMAL;")
            cur.execute("PRAGMA temp_store=MEMORY;")
            cur.close()

    return engine
