"""
Service layer for business logic.
"""
from app.services.auth_service import AuthService
from app.services.movie_service import MovieService
from app.services.search_service import SearchService

__all__ = [
    "AuthService",
    "MovieService",
    "SearchService",
]
