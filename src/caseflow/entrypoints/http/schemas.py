"""Request and response bodies of the HTTP API."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from caseflow.domain.case import DESCRIPTION_MAX_LENGTH, TITLE_MAX_LENGTH
from caseflow.service_layer.views import CaseView

# pylint: disable=too-few-public-methods


class CreateCaseRequest(BaseModel):
    """Body of ``POST /cases``.

    Blank titles and unknown priorities are rejected by the service layer,
    which reports the same field names.
    """

    title: str = Field(max_length=TITLE_MAX_LENGTH)
    priority: str
    description: str | None = Field(default=None, max_length=DESCRIPTION_MAX_LENGTH)


class UpdateStatusRequest(BaseModel):
    """Body of ``PATCH /cases/{id}/status``.

    `status` is parsed by the service layer so that a missing or unknown value
    is reported as an invalid status rather than a validation failure.
    """

    status: str | None = None


class CaseResponse(BaseModel):
    """A case as returned by every endpoint (camelCase keys)."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: str
    title: str
    description: str | None
    status: str
    priority: str
    assignee_id: str | None
    created_at: datetime
    updated_at: datetime
    version: int

    @classmethod
    def from_view(cls, view: CaseView) -> CaseResponse:
        """Build the response body for a case view."""
        return cls(
            id=view.case_id,
            title=view.title,
            description=view.description,
            status=view.status.name,
            priority=view.priority.name,
            assignee_id=view.assignee_id,
            created_at=view.created_at,
            updated_at=view.updated_at,
            version=view.version,
        )
