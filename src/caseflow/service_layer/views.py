"""Read-only projections returned by the service layer."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Any

from caseflow.domain.case import Case
from caseflow.domain.value_objects import CaseStatus, Priority

# pylint: disable=too-many-instance-attributes


@dataclass(frozen=True, slots=True)
class CaseView:
    """API-facing projection of a case.

    Carries no framework types so entrypoints can serialise it however they
    like. `version` is exposed so clients can detect concurrent changes.
    """

    case_id: str
    title: str
    description: str | None
    status: CaseStatus
    priority: Priority
    assignee_id: str | None
    created_at: datetime
    updated_at: datetime
    version: int

    @classmethod
    def from_case(cls, case: Case) -> CaseView:
        """Project a case entity."""
        return cls(
            case_id=case.case_id,
            title=case.title,
            description=case.description,
            status=case.status,
            priority=case.priority,
            assignee_id=case.assignee_id,
            created_at=case.created_at,
            updated_at=case.updated_at,
            version=case.version,
        )

    def to_dict(self) -> dict[str, Any]:
        """Return a JSON-ready mapping (enum names, ISO-8601 timestamps)."""
        return {
            "id": self.case_id,
            "title": self.title,
            "description": self.description,
            "status": self.status.name,
            "priority": self.priority.name,
            "assigneeId": self.assignee_id,
            "createdAt": self.created_at.isoformat(),
            "updatedAt": self.updated_at.isoformat(),
            "version": self.version,
        }
