"""SQLAlchemy-backed Unit of Work for caseflow.

Provides a context-managed UnitOfWork using a SQLAlchemy Connection
and the SqlAlchemyCaseRepository.
"""

from __future__ import annotations

import threading
from typing import TYPE_CHECKING

from sqlalchemy.pool import StaticPool

from caseflow.adapters.case_repository import SqlAlchemyCaseRepository
from caseflow.interfaces.unit_of_work import AbstractUnitOfWork

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Engine


class SqlAlchemyUnitOfWork(AbstractUnitOfWork):
    """SQLAlchemy-backed Unit of Work.

    Each `with uow:` block runs on its own connection; anything not committed
    when the block exits is rolled back. The connection and repository of an
    open block belong to the thread that opened it, so one instance can serve
    concurrent callers such as FastAPI's threadpool.

    Engines on a `StaticPool` (in-memory SQLite) hand every thread the same
    DBAPI connection; blocks on those are run one at a time.
    """

    def __init__(self, engine: Engine):
        self.engine = engine
        self._local = threading.local()
        self._shared_connection_lock = (
            threading.Lock() if isinstance(engine.pool, StaticPool) else None
        )

    @property
    def connection(self) -> Connection:
        return self._local.connection

    @property
    def cases(self) -> SqlAlchemyCaseRepository:  # type: ignore[override]
        return self._local.cases

    def __enter__(self):
        if self._shared_connection_lock is not None:
            self._shared_connection_lock.acquire()
        try:
            connection = self.engine.connect()
        except BaseException:
            self._release_shared_connection()
            raise
        self._local.connection = connection
        self._local.cases = SqlAlchemyCaseRepository(connection)
        return super().__enter__()

    def __exit__(self, *args):
        try:
            super().__exit__(*args)
        finally:
            try:
                self._local.connection.close()
            finally:
                del self._local.connection, self._local.cases
                self._release_shared_connection()

    def _release_shared_connection(self) -> None:
        if self._shared_connection_lock is not None:
            self._shared_connection_lock.release()

    def commit(self):
        self.connection.commit()

    def rollback(self):
        self.connection.rollback()
