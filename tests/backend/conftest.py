"""
Backend-specific test fixtures and configuration.

These fixtures extend the global fixtures with fully mocked services for
testing FastAPI routes in isolation from the store.
"""

import sys
from pathlib import Path
from unittest.mock import AsyncMock, MagicMock

import pytest

# Add backend to path
sys.path.insert(0, str(Path(__file__).parent.parent.parent / "backend"))


# =============================================================================
# Auth Service Fixtures
# =============================================================================

@pytest.fixture
def mock_auth_service():
    """
    Create a fully mocked AuthService.

    Async methods are AsyncMock, allowing you to configure return values:

        mock_auth_service.validate_credentials.return_value = None
    """
    service = MagicMock()
    service.register = AsyncMock()
    service.validate_credentials = AsyncMock()
    service.login = MagicMock()
    return service


@pytest.fixture
def mocked_auth_client(client, app, mock_auth_service):
    """TestClient whose auth routes talk to mock_auth_service."""
    from app.routers.auth import get_auth_service

    app.dependency_overrides[get_auth_service] = lambda: mock_auth_service
    return client


# =============================================================================
# Movie Service Fixtures
# =============================================================================

@pytest.fixture
def mock_movie_service():
    """Create a fully mocked MovieService."""
    service = MagicMock()
    service.create_movie = AsyncMock()
    service.get_all_movies = AsyncMock()
    service.get_movie_by_id = AsyncMock()
    service.update_movie = AsyncMock()
    service.delete_movie = AsyncMock()
    service.rate_movie = AsyncMock()
    service.comment_on_movie = AsyncMock()
    service.search_movies = AsyncMock()
    return service


@pytest.fixture
def mocked_movie_client(client, app, mock_movie_service):
    """TestClient whose movie routes talk to mock_movie_service."""
    from app.routers.movies import get_movie_service

    app.dependency_overrides[get_movie_service] = lambda: mock_movie_service
    return client
