"""Interface for the case repository (the storage port).

Use cases depend on this contract only; concrete adapters live in
`caseflow.adapters.case_repository`.
"""

from __future__ import annotations

import abc
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from caseflow.domain.case import Case


class RepositoryError(Exception):
    """Base class for case repository errors."""


class CaseVersionConflictError(RepositoryError):
    """Raised when the optimistic version check fails on save.

    Attributes:
        case_id: The id of the case being saved.
        expected: The version carried by the case being saved.
        actual: The version currently stored, or None if no row exists.
    """

    def __init__(self, case_id: str, expected: int, actual: int | None) -> None:
        super().__init__(
            f"Case ({case_id}) version conflict: stored={actual}, expected={expected}"
        )
        self.case_id = case_id
        self.expected = expected
        self.actual = actual


class CaseRepository(abc.ABC):
    """Persistence contract for cases."""

    @abc.abstractmethod
    def save(self, case: Case) -> Case:
        """Insert or update a case.

        A case with `version == 0` is inserted; otherwise the stored row is
        updated only if its version equals `case.version`.

        Args:
            case: The case to persist.

        Returns:
            The persisted case, with `version` incremented by one.

        Raises:
            CaseVersionConflictError: If the stored version does not match, or
                an insert targets an id that already exists.
        """

    @abc.abstractmethod
    def get(self, case_id: str) -> Case | None:
        """Get a case by its id.

        Returns:
            The case if found, otherwise None.
        """

    @abc.abstractmethod
    def find_all(
        self, status: str | None = None, priority: str | None = None
    ) -> list[Case]:
        """List cases, optionally filtered, newest-created first.

        Args:
            status: Exact status name to filter on, or None for no filter.
            priority: Exact priority name to filter on, or None for no filter.

        Returns:
            Matching cases ordered by `created_at` descending. A filter value
            that names no known member simply matches nothing.
        """
