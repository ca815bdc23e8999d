"""Case endpoints.

Every route turns its input into a command or query and hands it to the
message bus stored on ``app.state``. Routes are plain functions: the handlers
do blocking database I/O, so FastAPI runs them in its threadpool and the
unit of work keeps each thread on its own connection.
"""

from __future__ import annotations

from typing import Annotated

from fastapi import APIRouter, Depends, Request, Response, status

from caseflow.service_layer import commands, queries
from caseflow.service_layer.messagebus import MessageBus

from .schemas import CaseResponse, CreateCaseRequest, UpdateStatusRequest

router = APIRouter(prefix="/cases", tags=["cases"])


def get_bus(request: Request) -> MessageBus:
    """Dependency returning the application's message bus."""
    return request.app.state.bus


Bus = Annotated[MessageBus, Depends(get_bus)]


@router.post("", status_code=status.HTTP_201_CREATED)
def create_case(
    body: CreateCaseRequest, response: Response, bus: Bus
) -> CaseResponse:
    """Open a new case."""
    view = bus.handle(
        commands.CreateCase(
            title=body.title, priority=body.priority, description=body.description
        )
    )
    response.headers["Location"] = f"/cases/{view.case_id}"
    return CaseResponse.from_view(view)


@router.get("/{case_id}")
def get_case(case_id: str, bus: Bus) -> CaseResponse:
    """Fetch a single case."""
    return CaseResponse.from_view(bus.handle(queries.GetCase(case_id=case_id)))


@router.get("")
def list_cases(  # pylint: disable=redefined-outer-name
    bus: Bus, status: str | None = None, priority: str | None = None
) -> list[CaseResponse]:
    """List cases, newest first, optionally filtered by exact status/priority name."""
    views = bus.handle(queries.ListCases(status=status, priority=priority))
    return [CaseResponse.from_view(view) for view in views]


@router.patch("/{case_id}/status")
def update_case_status(
    case_id: str, body: UpdateStatusRequest, bus: Bus
) -> CaseResponse:
    """Move a case to another status."""
    view = bus.handle(commands.UpdateCaseStatus(case_id=case_id, status=body.status))
    return CaseResponse.from_view(view)
