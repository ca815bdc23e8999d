"""Domain-layer error definitions."""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .value_objects import CaseStatus

# ============================================================================
#                           General domain errors
# ============================================================================


class DomainError(Exception):
    """Base class for domain-layer errors."""


class InvalidInputError(DomainError, ValueError):
    """Raised when a required input is missing or malformed.

    Attributes:
        field: Name of the offending input, or None when the whole input is missing.
        reason: Human-readable explanation.
    """

    def __init__(self, reason: str, field: str | None = None) -> None:
        super().__init__(reason if field is None else f"{field}: {reason}")
        self.field = field
        self.reason = reason


# ============================================================================
#                           Case related errors
# ============================================================================


class CaseNotFoundError(DomainError, LookupError):
    """Raised when a case id has no corresponding stored case."""

    def __init__(self, case_id: str) -> None:
        super().__init__(f"Case not found: {case_id}")
        self.case_id = case_id


class InvalidStatusValueError(DomainError, ValueError):
    """Raised when a status string does not map to a known case status."""

    def __init__(self, raw: str | None) -> None:
        shown = "<null>" if raw is None else raw
        super().__init__(f"Invalid case status: {shown}")
        self.raw = raw


class StatusTransitionRejectedError(DomainError):
    """Raised when a status is valid but not reachable from the current status."""

    def __init__(self, case_id: str, current: CaseStatus, target: CaseStatus) -> None:
        super().__init__(
            f"Invalid status transition for case {case_id}: "
            f"{current.name} -> {target.name}"
        )
        self.case_id = case_id
        self.current = current
        self.target = target
