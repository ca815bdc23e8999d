"""Module defining Queries (read-only requests)."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Query:
    """Base class for all queries."""


@dataclass(frozen=True)
class GetCase(Query):
    """Query for a single case by id."""

    case_id: str


@dataclass(frozen=True)
class ListCases(Query):
    """Query for cases, optionally filtered by status and/or priority name."""

    status: str | None = None
    priority: str | None = None
