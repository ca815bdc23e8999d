"""Pytest fixtures for CaseRepository contract tests.

Provided fixtures
-----------------
- **case_repository**: Parametrized fixture yielding a **fresh**
  `CaseRepository` per test, for every backend:
  `"memory"`, `"sqlite_memory"` (schema from `metadata.create_all()`) and
  `"sqlite_file"` (schema from Alembic migrations).
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import TYPE_CHECKING

import pytest

from caseflow.adapters.case_repository import (
    InMemoryCaseData,
    InMemoryCaseRepository,
    SqlAlchemyCaseRepository,
)

if TYPE_CHECKING:
    from caseflow.interfaces.case_repository import CaseRepository


@pytest.fixture(params=["memory", "sqlite_memory", "sqlite_file"])
def case_repository(request: pytest.FixtureRequest) -> Iterator[CaseRepository]:
    """Return a fresh case repository for the requested backend.

    SQL backends run inside a single connection-level transaction that is
    rolled back after the test.
    """
    match request.param:
        case "memory":
            yield InMemoryCaseRepository(InMemoryCaseData())
        case "sqlite_memory" | "sqlite_file":
            engine_fixture = {
                "sqlite_memory": "sqlite_engine_memory",
                "sqlite_file": "sqlite_engine_file",
            }[request.param]
            test_engine = request.getfixturevalue(engine_fixture)
            with test_engine.connect() as conn:
                yield SqlAlchemyCaseRepository(conn)
                conn.rollback()
        case _:
            raise ValueError(f"unknown repository type: {request.param}")
