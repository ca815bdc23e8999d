"""Handlers implementing the case use cases."""

from __future__ import annotations

import logging
from collections.abc import Callable
from enum import Enum
from typing import TypeVar

from caseflow.domain.case import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH, Case
from caseflow.domain.errors import (
    CaseNotFoundError,
    InvalidInputError,
    InvalidStatusValueError,
)
from caseflow.domain.value_objects import CaseStatus, Priority
from caseflow.interfaces.clock import Clock
from caseflow.interfaces.id_generator import IdGenerator
from caseflow.interfaces.unit_of_work import AbstractUnitOfWork
from caseflow.service_layer import commands, queries
from caseflow.service_layer.views import CaseView

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)


# ============================================================================
#                               Parsing helpers
# ============================================================================


def _normalize(raw: str) -> str:
    return raw.strip().upper()


def _lookup_member(enum_type: type[E], raw: str) -> E | None:
    try:
        return enum_type[_normalize(raw)]
    except KeyError:
        return None


def parse_status(raw: str | None) -> CaseStatus:
    """Parse a raw status string (case- and whitespace-insensitive).

    Raises:
        InvalidStatusValueError: If `raw` is None, blank, or names no status.
    """
    if raw is None or not raw.strip():
        raise InvalidStatusValueError(raw)
    if (status := _lookup_member(CaseStatus, raw)) is None:
        raise InvalidStatusValueError(raw)
    return status


def parse_priority(raw: Priority | str | None) -> Priority:
    """Parse a priority given as a member or a name.

    Raises:
        InvalidInputError: If `raw` is missing or names no priority.
    """
    if isinstance(raw, Priority):
        return raw
    if raw is None or not str(raw).strip():
        raise InvalidInputError("is required", field="priority")
    if (priority := _lookup_member(Priority, str(raw))) is None:
        raise InvalidInputError(f"unknown priority {raw!r}", field="priority")
    return priority


def _validate_create(
    cmd: commands.CreateCase | None,
) -> tuple[str, Priority, str | None]:
    if cmd is None:
        raise InvalidInputError("request must not be None")
    if cmd.title is None or not cmd.title.strip():
        raise InvalidInputError("must not be blank", field="title")
    title = cmd.title.strip()
    if len(title) > TITLE_MAX_LENGTH:
        raise InvalidInputError(
            f"must be at most {TITLE_MAX_LENGTH} characters", field="title"
        )
    if cmd.description is not None and len(cmd.description) > DESCRIPTION_MAX_LENGTH:
        raise InvalidInputError(
            f"must be at most {DESCRIPTION_MAX_LENGTH} characters", field="description"
        )
    return title, parse_priority(cmd.priority), cmd.description


# ============================================================================
#                               Command handlers
# ============================================================================


def create_case(
    cmd: commands.CreateCase | None,
    uow: AbstractUnitOfWork,
    id_generator: IdGenerator,
    clock: Clock,
) -> CaseView:
    """Open a new case with a trimmed title, status OPEN and equal timestamps."""

    title, priority, description = _validate_create(cmd)

    case = Case.open(
        case_id=id_generator.new_id(),
        title=title,
        priority=priority,
        description=description,
        now=clock.now(),
    )

    with uow:
        saved = uow.cases.save(case)
        uow.commit()

    logger.info("CreateCase %s: opened (%s)", saved.case_id, saved.priority.name)
    return CaseView.from_case(saved)


def update_case_status(
    cmd: commands.UpdateCaseStatus, uow: AbstractUnitOfWork, clock: Clock
) -> CaseView:
    """Move an existing case to the requested status."""

    with uow:
        if (existing := uow.cases.get(cmd.case_id)) is None:
            raise CaseNotFoundError(cmd.case_id)

        target = parse_status(cmd.status)
        updated = existing.transition_to(target, now=clock.now())
        if updated is existing:
            logger.debug("UpdateCaseStatus %s: already %s", cmd.case_id, target.name)

        saved = uow.cases.save(updated)
        uow.commit()

    logger.info(
        "UpdateCaseStatus %s: %s -> %s",
        saved.case_id,
        existing.status.name,
        saved.status.name,
    )
    return CaseView.from_case(saved)


# ============================================================================
#                               Query handlers
# ============================================================================


def get_case(query: queries.GetCase, uow: AbstractUnitOfWork) -> CaseView:
    """Return the projection of a single case."""

    with uow:
        if (case := uow.cases.get(query.case_id)) is None:
            raise CaseNotFoundError(query.case_id)
    return CaseView.from_case(case)


def list_cases(query: queries.ListCases, uow: AbstractUnitOfWork) -> list[CaseView]:
    """Return projections of all matching cases in repository order."""

    with uow:
        cases = uow.cases.find_all(status=query.status, priority=query.priority)
    logger.debug(
        "ListCases status=%s priority=%s: %d result(s)",
        query.status,
        query.priority,
        len(cases),
    )
    return [CaseView.from_case(case) for case in cases]


# ============================================================================
#                               Handler Registry
# ============================================================================


HANDLERS: dict[type, Callable[..., object]] = {
    commands.CreateCase: create_case,
    commands.UpdateCaseStatus: update_case_status,
    queries.GetCase: get_case,
    queries.ListCases: list_cases,
}
