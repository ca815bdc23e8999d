"""Case entity."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from datetime import datetime, timedelta, timezone

from .errors import InvalidInputError, StatusTransitionRejectedError
from .value_objects import CaseStatus, Priority

# pylint: disable=too-many-instance-attributes

logger = logging.getLogger(__name__)

TITLE_MAX_LENGTH = 200
DESCRIPTION_MAX_LENGTH = 4000


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


def _require_utc(name: str, value: datetime) -> None:
    if value.tzinfo is None or value.utcoffset() != timedelta(0):
        raise InvalidInputError("must be timezone-aware UTC", field=name)


@dataclass(frozen=True, slots=True)
class Case:
    """Immutable value representing one case.

    Conventions:
      - `case_id` is assigned once at creation and never changes.
      - `title` is non-blank; callers trim it before construction.
      - `description` is stored verbatim (never trimmed), None if absent.
      - `created_at` / `updated_at` are tz-aware UTC; `created_at <= updated_at`.
      - `version` is the optimistic-concurrency token managed by repositories.
        0 means the case has never been persisted.

    Status changes never mutate an instance; `transition_to` returns a new one.
    """

    case_id: str
    title: str
    status: CaseStatus
    priority: Priority
    created_at: datetime
    updated_at: datetime
    description: str | None = None
    assignee_id: str | None = None
    version: int = 0

    def __post_init__(self) -> None:
        if not self.title or not self.title.strip():
            raise InvalidInputError("must not be blank", field="title")
        if len(self.title) > TITLE_MAX_LENGTH:
            raise InvalidInputError(
                f"must be at most {TITLE_MAX_LENGTH} characters", field="title"
            )
        if (
            self.description is not None
            and len(self.description) > DESCRIPTION_MAX_LENGTH
        ):
            raise InvalidInputError(
                f"must be at most {DESCRIPTION_MAX_LENGTH} characters",
                field="description",
            )
        if not isinstance(self.status, CaseStatus):
            raise InvalidInputError("must be a CaseStatus member", field="status")
        if not isinstance(self.priority, Priority):
            raise InvalidInputError("must be a Priority member", field="priority")
        _require_utc("created_at", self.created_at)
        _require_utc("updated_at", self.updated_at)
        if self.created_at > self.updated_at:
            raise InvalidInputError(
                "must not be earlier than created_at", field="updated_at"
            )
        if self.version < 0:
            raise InvalidInputError("must not be negative", field="version")

    # --- Construction Paths ---

    @classmethod
    def open(  # pylint: disable=too-many-arguments
        cls,
        case_id: str,
        title: str,
        priority: Priority,
        *,
        description: str | None = None,
        now: datetime | None = None,
    ) -> Case:
        """Open a new case in the initial status with equal timestamps."""
        opened_at = now or _utcnow()
        return cls(
            case_id=case_id,
            title=title,
            description=description,
            status=CaseStatus.initial(),
            priority=priority,
            created_at=opened_at,
            updated_at=opened_at,
        )

    # --- Behaviour ---

    def transition_to(self, target: CaseStatus, *, now: datetime | None = None) -> Case:
        """Return a case moved to `target`.

        Args:
            target: The requested status. Must not be None.
            now: Timestamp for `updated_at`; defaults to the current UTC time.
                Never moves `updated_at` backwards.

        Returns:
            `self` when `target` equals the current status, otherwise a new
            case with the new status and a refreshed `updated_at`.

        Raises:
            InvalidInputError: If `target` is None.
            StatusTransitionRejectedError: If the rule table forbids the move.
        """
        if target is None:
            raise InvalidInputError("must not be None", field="target")

        if target is self.status:
            logger.debug("Case %s already %s; noop", self.case_id, target.name)
            return self

        if not self.status.can_transition_to(target):
            raise StatusTransitionRejectedError(self.case_id, self.status, target)

        changed_at = max(now or _utcnow(), self.updated_at)
        return replace(self, status=target, updated_at=changed_at)
