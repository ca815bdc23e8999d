"""Fixtures for end-to-end HTTP API tests."""

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from caseflow.bootstrap import bootstrap
from caseflow.entrypoints.http import create_app

# pylint: disable=redefined-outer-name


@pytest.fixture
def client(migrated_sqlite_url: str) -> Iterator[TestClient]:
    """TestClient for an app wired to a freshly migrated SQLite file.

    Server exceptions are turned into responses so 500 bodies can be checked.
    """
    app = create_app(bootstrap(migrated_sqlite_url).message_bus)
    with TestClient(app, raise_server_exceptions=False) as test_client:
        yield test_client


@pytest.fixture
def new_case(client: TestClient):
    """POST a case and return its JSON body."""

    def _create(title: str = "Bug", priority: str = "MEDIUM", **extra) -> dict:
        response = client.post(
            "/cases", json={"title": title, "priority": priority, **extra}
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _create
