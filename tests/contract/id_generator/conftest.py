"""Fixtures for id_generator contract tests."""

from collections.abc import Iterable

import pytest

from caseflow.adapters.id_generators import ID_GENERATORS, make_id_generator
from caseflow.interfaces.id_generator import IdGenerator


@pytest.fixture(params=sorted(ID_GENERATORS))
def id_generator(request: pytest.FixtureRequest) -> Iterable[IdGenerator]:
    """Yield a fresh IdGenerator for every registered scheme."""
    yield make_id_generator(request.param)
