"""Module defining Commands (state-changing requests)."""

from dataclasses import dataclass

from caseflow.domain.value_objects import Priority


@dataclass(frozen=True)
class Command:
    """Base class for all commands."""


@dataclass(frozen=True)
class CreateCase(Command):
    """Command to open a new case.

    `priority` may be a `Priority` member or its name; names are matched
    case-insensitively after trimming.
    """

    title: str
    priority: Priority | str
    description: str | None = None


@dataclass(frozen=True)
class UpdateCaseStatus(Command):
    """Command to move an existing case to another status.

    `status` is the raw, caller-supplied status string.
    """

    case_id: str
    status: str | None
