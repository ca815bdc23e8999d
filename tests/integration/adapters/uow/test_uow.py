"""Integration tests for the SQLAlchemy-backed Unit of Work adapter.

Verifies commit and rollback behavior of SqlAlchemyUnitOfWork.
"""

import threading
from dataclasses import replace

import pytest

from caseflow.adapters.unit_of_work import SqlAlchemyUnitOfWork
from caseflow.domain.value_objects import CaseStatus
from caseflow.interfaces.case_repository import CaseVersionConflictError


@pytest.mark.parametrize(
    "engine", ["sqlite_engine_memory", "sqlite_engine_file"], indirect=True
)
def test_commit_persists(engine, make_case):
    """Committed cases are visible to the next unit of work."""
    uow = SqlAlchemyUnitOfWork(engine)
    with uow:
        saved = uow.cases.save(make_case(title="Kept"))
        uow.commit()

    with uow:
        assert uow.cases.get(saved.case_id) == saved


@pytest.mark.parametrize(
    "engine", ["sqlite_engine_memory", "sqlite_engine_file"], indirect=True
)
def test_exit_without_commit_rolls_back(engine, make_case):
    """Work that is not committed is discarded on exit."""
    uow = SqlAlchemyUnitOfWork(engine)
    with uow:
        case = uow.cases.save(make_case())

    with uow:
        assert uow.cases.get(case.case_id) is None


def test_rolls_back_on_error(sqlite_engine_memory, make_case):
    """An exception inside the block triggers a rollback and propagates."""

    class MyException(Exception):
        """Custom exception for testing."""

    uow = SqlAlchemyUnitOfWork(sqlite_engine_memory)
    case = make_case()
    with pytest.raises(MyException):
        with uow:
            uow.cases.save(case)
            raise MyException()

    with uow:
        assert uow.cases.find_all() == []


def test_concurrent_writers_first_commit_wins(sqlite_engine_file, make_case):
    """Two units of work load version 1; the later save conflicts."""
    seed = SqlAlchemyUnitOfWork(sqlite_engine_file)
    with seed:
        v1 = seed.cases.save(make_case())
        seed.commit()

    first = SqlAlchemyUnitOfWork(sqlite_engine_file)
    with first:
        loaded = first.cases.get(v1.case_id)
        first.cases.save(loaded.transition_to(CaseStatus.IN_PROGRESS))
        first.commit()

    second = SqlAlchemyUnitOfWork(sqlite_engine_file)
    with second:
        with pytest.raises(CaseVersionConflictError) as exc_info:
            second.cases.save(replace(v1, title="Stale"))
    assert exc_info.value.actual == 2

    with seed:
        stored = seed.cases.get(v1.case_id)
    assert stored is not None
    assert (stored.status, stored.title, stored.version) == (
        CaseStatus.IN_PROGRESS,
        v1.title,
        2,
    )


def test_blocks_on_other_threads_get_their_own_connection(sqlite_engine_file):
    """A block opened on another thread leaves this thread's connection alone."""
    uow = SqlAlchemyUnitOfWork(sqlite_engine_file)
    seen = {}

    def enter_on_worker():
        with uow:
            seen["worker"] = uow.connection

    with uow:
        mine = uow.connection
        worker = threading.Thread(target=enter_on_worker)
        worker.start()
        worker.join()
        assert uow.connection is mine

    assert seen["worker"] is not mine
