"""
Pytest configuration and fixtures
"""
import pytest
from fastapi.testclient import TestClient

from movie_catalog.app import create_app
from movie_catalog.config import Settings
from movie_catalog.seed import seeded_store


@pytest.fixture
def store():
    """Fresh seeded store per test (3 directors, 6 movies)"""
    return seeded_store()


@pytest.fixture
def client(store):
    app = create_app(Settings(), store=store)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def gql(client):
    """POST a GraphQL document and return the decoded response body"""

    def _run(query: str, variables: dict | None = None) -> dict:
        payload = {"query": query}
        if variables is not None:
            payload["variables"] = variables
        response = client.post("/graphql", json=payload)
        return response.json()

    return _run
