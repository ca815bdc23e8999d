"""Relational schema for cases.

One row per case. Status and priority are stored as enum *names* so the domain
enums stay independent of the database.

Constraints (enforced here):

| Constraint                    | Purpose                                  |
|-------------------------------|------------------------------------------|
| PRIMARY KEY(id)               | case identity                            |
| CHECK(status IN (...))        | status is a lifecycle member             |
| CHECK(priority IN (...))      | priority is a known member               |
| CHECK(version >= 1)           | optimistic version starts at 1           |
| CHECK(created_at <= updated_at) | timestamps never run backwards         |

Keep this module and the Alembic migrations in step.
"""

from __future__ import annotations

from sqlalchemy import CheckConstraint, Column, Index, Integer, String, Table

from caseflow.domain.case import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from caseflow.domain.value_objects import CaseStatus, Priority

from .metadata import metadata
from .sa_types import UTCDateTime

__all__ = ["cases"]


def _in_list(column: str, members: list[str]) -> str:
    quoted = ", ".join(f"'{m}'" for m in members)
    return f"{column} IN ({quoted})"


STATUS_NAMES = [s.name for s in CaseStatus]
PRIORITY_NAMES = [p.name for p in Priority]

cases = Table(
    "cases",
    metadata,
    Column("id", String(36), primary_key=True, comment="Case identifier."),
    Column("title", String(TITLE_MAX_LENGTH), nullable=False),
    Column(
        "description",
        String(DESCRIPTION_MAX_LENGTH),
        nullable=True,
        comment="Stored verbatim.",
    ),
    Column("status", String(30), nullable=False, comment="CaseStatus name."),
    Column("priority", String(30), nullable=False, comment="Priority name."),
    Column("assignee_id", String(36), nullable=True),
    Column("created_at", UTCDateTime(), nullable=False),
    Column("updated_at", UTCDateTime(), nullable=False),
    Column(
        "version",
        Integer,
        nullable=False,
        comment="Optimistic concurrency token; incremented on every save.",
    ),
    CheckConstraint(_in_list("status", STATUS_NAMES), name="valid_status"),
    CheckConstraint(_in_list("priority", PRIORITY_NAMES), name="valid_priority"),
    CheckConstraint("version >= 1", name="positive_version"),
    CheckConstraint("created_at <= updated_at", name="ordered_timestamps"),
    Index(None, "created_at"),
    Index(None, "status", "priority"),
    comment="Case records. One row per case.",
)
