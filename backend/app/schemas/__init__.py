"""
Request and response schemas for API endpoints.
"""
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    TokenUser,
    UserResponse,
)
from app.schemas.movie import (
    CommentCreate,
    CommentResponse,
    MovieCreate,
    MovieResponse,
    RatingCreate,
    RatingResponse,
)

__all__ = [
    # Auth
    "LoginRequest",
    "LoginResponse",
    "RegisterRequest",
    "TokenUser",
    "UserResponse",
    # Movie
    "CommentCreate",
    "CommentResponse",
    "MovieCreate",
    "MovieResponse",
    "RatingCreate",
    "RatingResponse",
]
