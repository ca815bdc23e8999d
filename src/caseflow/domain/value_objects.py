"""Module including value objects used across the domain layer."""

from __future__ import annotations

from enum import Enum


class CaseStatus(Enum):
    """Lifecycle states of a case.

    The lifecycle is a strict forward chain:
    OPEN → IN_PROGRESS → DONE → CLOSED. CLOSED is terminal.
    """

    OPEN = "OPEN"
    IN_PROGRESS = "IN_PROGRESS"
    DONE = "DONE"
    CLOSED = "CLOSED"

    def can_transition_to(self, target: CaseStatus | None) -> bool:
        """Return True if moving from this status to `target` is allowed.

        Self-transitions are not listed and therefore rejected here; the
        entity short-circuits them before consulting this table.
        """
        if target is None:
            return False
        return target in ALLOWED_TRANSITIONS.get(self, frozenset())

    @classmethod
    def initial(cls) -> CaseStatus:
        """The status every new case starts in."""
        return cls.OPEN


class Priority(Enum):
    """Case priority. Order carries no business meaning."""

    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


ALLOWED_TRANSITIONS: dict[CaseStatus, frozenset[CaseStatus]] = {
    CaseStatus.OPEN: frozenset({CaseStatus.IN_PROGRESS}),
    CaseStatus.IN_PROGRESS: frozenset({CaseStatus.DONE}),
    CaseStatus.DONE: frozenset({CaseStatus.CLOSED}),
    CaseStatus.CLOSED: frozenset(),
}
