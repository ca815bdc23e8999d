"""In-memory CaseRepository implementation for testing purposes."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from caseflow.domain.case import Case
from caseflow.interfaces.case_repository import (
    CaseRepository,
    CaseVersionConflictError,
)

# pylint: disable=consider-using-assignment-expr


@dataclass(slots=True)
class InMemoryCaseData:
    """Shared backing store for in-memory case repositories.

    A single instance can be handed to several repositories (one per unit of
    work) so they all see the same cases. Cases are keyed by `case_id`;
    insertion order of the dict is the order in which cases were first saved.
    """

    cases: dict[str, Case] = field(default_factory=dict)


class InMemoryCaseRepository(CaseRepository):
    """In-memory implementation of the CaseRepository interface."""

    def __init__(self, data: InMemoryCaseData | None = None) -> None:
        self._data = data if data is not None else InMemoryCaseData()

    def save(self, case: Case) -> Case:
        stored = self._data.cases.get(case.case_id)
        stored_version = stored.version if stored is not None else None

        if case.version == 0:
            if stored is not None:
                raise CaseVersionConflictError(case.case_id, 0, stored_version)
        elif stored_version != case.version:
            raise CaseVersionConflictError(case.case_id, case.version, stored_version)

        persisted = replace(case, version=case.version + 1)
        self._data.cases[case.case_id] = persisted
        return persisted

    def get(self, case_id: str) -> Case | None:
        return self._data.cases.get(case_id)

    def find_all(
        self, status: str | None = None, priority: str | None = None
    ) -> list[Case]:
        matches = [
            case
            for case in reversed(self._data.cases.values())
            if (status is None or case.status.name == status)
            and (priority is None or case.priority.name == priority)
        ]
        # sorted() is stable, so equal timestamps keep newest-saved first
        return sorted(matches, key=lambda c: c.created_at, reverse=True)
