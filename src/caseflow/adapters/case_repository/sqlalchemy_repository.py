"""Implementation of CaseRepository using SQLAlchemy Core."""

from __future__ import annotations

from dataclasses import replace
from typing import TYPE_CHECKING, Any

from sqlalchemy import insert, select, update

from caseflow.adapters.db.schema import cases
from caseflow.domain.case import Case
from caseflow.domain.value_objects import CaseStatus, Priority
from caseflow.interfaces.case_repository import (
    CaseRepository,
    CaseVersionConflictError,
)

if TYPE_CHECKING:
    from sqlalchemy.engine import Connection, Row


class SqlAlchemyCaseRepository(CaseRepository):
    """CaseRepository backed by the ``cases`` table.

    Operates on a caller-owned Connection; transaction boundaries belong to
    the unit of work.
    """

    def __init__(self, connection: Connection):
        self.connection = connection

    # --- writes ---

    def save(self, case: Case) -> Case:
        persisted = replace(case, version=case.version + 1)
        values = self._to_row(persisted)

        if case.version == 0:
            if (stored := self._stored_version(case.case_id)) is not None:
                raise CaseVersionConflictError(case.case_id, 0, stored)
            self.connection.execute(insert(cases).values(**values))
            return persisted

        result = self.connection.execute(
            update(cases)
            .where(cases.c.id == case.case_id, cases.c.version == case.version)
            .values(**values)
        )
        if result.rowcount != 1:
            raise CaseVersionConflictError(
                case.case_id, case.version, self._stored_version(case.case_id)
            )
        return persisted

    # --- reads ---

    def get(self, case_id: str) -> Case | None:
        row = self.connection.execute(
            select(cases).where(cases.c.id == case_id)
        ).fetchone()
        return self._from_row(row) if row is not None else None

    def find_all(
        self, status: str | None = None, priority: str | None = None
    ) -> list[Case]:
        stmt = select(cases)
        if status is not None:
            stmt = stmt.where(cases.c.status == status)
        if priority is not None:
            stmt = stmt.where(cases.c.priority == priority)
        stmt = stmt.order_by(cases.c.created_at.desc())
        return [self._from_row(row) for row in self.connection.execute(stmt)]

    # --- mapping ---

    def _stored_version(self, case_id: str) -> int | None:
        return self.connection.execute(
            select(cases.c.version).where(cases.c.id == case_id)
        ).scalar_one_or_none()

    @staticmethod
    def _to_row(case: Case) -> dict[str, Any]:
        return {
            "id": case.case_id,
            "title": case.title,
            "description": case.description,
            "status": case.status.name,
            "priority": case.priority.name,
            "assignee_id": case.assignee_id,
            "created_at": case.created_at,
            "updated_at": case.updated_at,
            "version": case.version,
        }

    @staticmethod
    def _from_row(row: Row) -> Case:
        return Case(
            case_id=row.id,
            title=row.title,
            description=row.description,
            status=CaseStatus[row.status],
            priority=Priority[row.priority],
            assignee_id=row.assignee_id,
            created_at=row.created_at,
            updated_at=row.updated_at,
            version=int(row.version),
        )
