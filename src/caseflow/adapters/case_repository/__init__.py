"""Case repository adapters.

Two implementations of `caseflow.interfaces.case_repository.CaseRepository`:
an in-memory one for tests and demos, and a SQLAlchemy one for SQLite and
PostgreSQL.
"""

from .memory import InMemoryCaseData, InMemoryCaseRepository
from .sqlalchemy_repository import SqlAlchemyCaseRepository

__all__ = ["InMemoryCaseData", "InMemoryCaseRepository", "SqlAlchemyCaseRepository"]
