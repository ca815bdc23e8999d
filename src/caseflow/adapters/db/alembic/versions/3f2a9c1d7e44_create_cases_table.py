"""create cases table

Revision ID: 3f2a9c1d7e44
Revises:
Create Date: 2026-01-12 09:14:03.512204

"""

# pylint: disable=invalid-name,no-member

from collections.abc import Sequence

import sqlalchemy as sa
from alembic import op

from caseflow.adapters.db.sa_types import UTCDateTime

# revision identifiers, used by Alembic.
revision: str = "3f2a9c1d7e44"
down_revision: str | Sequence[str] | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    """Upgrade schema."""

    op.create_table(
        "cases",
        sa.Column("id", sa.String(length=36), nullable=False, comment="Case identifier."),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column(
            "description",
            sa.String(length=4000),
            nullable=True,
            comment="Stored verbatim.",
        ),
        sa.Column("status", sa.String(length=30), nullable=False, comment="CaseStatus name."),
        sa.Column("priority", sa.String(length=30), nullable=False, comment="Priority name."),
        sa.Column("assignee_id", sa.String(length=36), nullable=True),
        sa.Column("created_at", UTCDateTime(), nullable=False),
        sa.Column("updated_at", UTCDateTime(), nullable=False),
        sa.Column(
            "version",
            sa.Integer(),
            nullable=False,
            comment="Optimistic concurrency token; incremented on every save.",
        ),
        sa.CheckConstraint(
            "status IN ('OPEN', 'IN_PROGRESS', 'DONE', 'CLOSED')",
            name=op.f("ck_cases_valid_status"),
        ),
        sa.CheckConstraint(
            "priority IN ('LOW', 'MEDIUM', 'HIGH', 'CRITICAL')",
            name=op.f("ck_cases_valid_priority"),
        ),
        sa.CheckConstraint("version >= 1", name=op.f("ck_cases_positive_version")),
        sa.CheckConstraint(
            "created_at <= updated_at", name=op.f("ck_cases_ordered_timestamps")
        ),
        sa.PrimaryKeyConstraint("id", name=op.f("pk_cases")),
        comment="Case records. One row per case.",
    )
    op.create_index(op.f("ix_cases_created_at"), "cases", ["created_at"], unique=False)
    op.create_index(
        op.f("ix_cases_status_priority"), "cases", ["status", "priority"], unique=False
    )


def downgrade() -> None:
    """Downgrade schema."""

    op.drop_index(op.f("ix_cases_status_priority"), table_name="cases")
    op.drop_index(op.f("ix_cases_created_at"), table_name="cases")
    op.drop_table("cases")
