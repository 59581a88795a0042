"""
Global test fixtures for MovieTickets.

This module provides shared fixtures for all tests including:
- Mock MongoDB (mongomock-motor)
- In-memory search index standing in for Elasticsearch
- Test user and movie factories
- FastAPI test clients wired to the mocks
"""

import sys
from pathlib import Path
from typing import Any, Generator, Optional
from unittest.mock import AsyncMock, patch

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "backend"))


# =============================================================================
# Search Index Fake
# =============================================================================

class InMemorySearchIndex:
    """
    Search collaborator kept in a dict.

    Scores a document by how many query words occur in its name or
    description, plus 2 when its genre equals the requested genre.
    """

    def __init__(self):
        self.documents: dict[str, dict[str, Any]] = {}
        self.calls: list[tuple] = []
        self.fail = False

    def _record(self, *call):
        self.calls.append(call)
        if self.fail:
            raise ConnectionError("search index unavailable")

    async def index_document(self, doc_id: str, fields: dict[str, Any]) -> None:
        self._record("index", doc_id)
        self.documents[doc_id] = dict(fields)

    async def update_document(self, doc_id: str, fields: dict[str, Any]) -> None:
        self._record("update", doc_id)
        self.documents.setdefault(doc_id, {}).update(fields)

    async def delete_document(self, doc_id: str) -> None:
        self._record("delete", doc_id)
        self.documents.pop(doc_id, None)

    async def search(self, query: str, genre: Optional[str] = None) -> list[dict[str, Any]]:
        self._record("search", query, genre)
        words = query.lower().split()
        scored = []
        for doc_id, doc in self.documents.items():
            text = f"{doc.get('name') or ''} {doc.get('description') or ''}".lower()
            score = sum(1 for word in words if word in text)
            if score == 0:
                continue
            if genre and doc.get("genre") == genre:
                score += 2
            scored.append((score, doc_id, doc))
        scored.sort(key=lambda item: item[0], reverse=True)
        return [{**doc, "id": doc_id} for _, doc_id, doc in scored]


@pytest.fixture
def search_index() -> InMemorySearchIndex:
    """Fresh in-memory search index."""
    return InMemorySearchIndex()


# =============================================================================
# MongoDB Fixtures (mongomock-motor)
# =============================================================================

@pytest_asyncio.fixture
async def mock_async_mongo_client():
    """
    Create an async mock MongoDB client using mongomock-motor.
    """
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest_asyncio.fixture
async def mock_auth_db(mock_async_mongo_client):
    """Provide mock auth_db database with the real unique indexes."""
    from app.database.databases import auth_db
    from app.database.indexes import create_collection_indexes

    db = mock_async_mongo_client[auth_db.DB_NAME]
    await create_collection_indexes(db, auth_db.Collections.INDEXES)
    yield db


@pytest_asyncio.fixture
async def mock_catalog_db(mock_async_mongo_client):
    """Provide mock catalog_db database."""
    from app.database.databases import catalog_db
    from app.database.indexes import create_collection_indexes

    db = mock_async_mongo_client[catalog_db.DB_NAME]
    await create_collection_indexes(db, catalog_db.Collections.INDEXES)
    yield db


# =============================================================================
# User Fixtures
# =============================================================================

@pytest.fixture
def test_user_data() -> dict:
    """Registration payload as sent over the wire."""
    return {
        "firstName": "Test",
        "lastName": "User",
        "email": "testuser@example.com",
        "username": "testuser",
        "password": "SecurePassword123!",
    }


@pytest.fixture
def other_user_data() -> dict:
    """A second, unrelated user."""
    return {
        "firstName": "Other",
        "lastName": "Person",
        "email": "other@example.com",
        "username": "otheruser",
        "password": "AnotherPassword456!",
    }


@pytest.fixture
def token_user():
    """Identity decoded from a valid token."""
    from app.schemas.auth import TokenUser
    return TokenUser(user_id="507f1f77bcf86cd799439011", username="testuser")


@pytest.fixture
def other_token_user():
    from app.schemas.auth import TokenUser
    return TokenUser(user_id="507f1f77bcf86cd799439012", username="otheruser")


@pytest.fixture
def make_token():
    """Factory issuing real signed tokens."""
    from app.core.security import create_access_token

    def _make(user_id: str = "507f1f77bcf86cd799439011", username: str = "testuser", **kwargs):
        return create_access_token(user_id=user_id, username=username, **kwargs)

    return _make


# =============================================================================
# Movie Fixtures
# =============================================================================

@pytest.fixture
def movie_data() -> dict:
    """A complete movie payload."""
    return {
        "name": "Night Drama",
        "description": "A long drama that unfolds over one night",
        "release_date": "2023-05-01",
        "ticket_price": 1200.0,
        "country": "Pakistan",
        "genre": "drama",
        "photo_uri": "https://example.com/night-drama.jpg",
    }


# =============================================================================
# FastAPI Test Client Fixtures
# =============================================================================

@pytest.fixture
def route_mongo_client():
    """Mock MongoDB client shared by the app and the route tests."""
    from mongomock_motor import AsyncMongoMockClient
    client = AsyncMongoMockClient()
    yield client
    client.close()


@pytest.fixture
def app(route_mongo_client, search_index):
    """
    FastAPI app with its store and search dependencies pointed at the mocks.
    """
    from app.main import app
    from app.routers.auth import get_auth_service
    from app.routers.movies import get_movie_service
    from app.services.auth_service import AuthService
    from app.services.movie_service import MovieService

    app.dependency_overrides[get_auth_service] = lambda: AuthService(
        route_mongo_client["auth_db"]
    )
    app.dependency_overrides[get_movie_service] = lambda: MovieService(
        route_mongo_client["catalog_db"], search_index
    )
    yield app
    app.dependency_overrides.clear()


@pytest.fixture
def client(app, route_mongo_client) -> Generator:
    """
    Create a TestClient for the FastAPI app.

    The lifespan runs against the mock MongoDB and skips Elasticsearch.
    """
    with patch("app.main.get_mongo_client", AsyncMock(return_value=route_mongo_client)), \
         patch("app.routers.movies.get_search_service", AsyncMock(return_value=None)):
        with TestClient(app) as c:
            yield c


@pytest.fixture
def auth_headers(make_token) -> dict:
    """Authorization header for the default test identity."""
    return {"Authorization": f"Bearer {make_token()}"}


# =============================================================================
# Response Assertion Helpers
# =============================================================================

@pytest.fixture
def assert_error_response():
    """Helper to assert error response structure."""
    def _assert(response, status_code: int, detail_contains: str = None):
        assert response.status_code == status_code
        data = response.json()
        assert "detail" in data
        if detail_contains:
            assert detail_contains.lower() in data["detail"].lower()
    return _assert
