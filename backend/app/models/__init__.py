"""
Pydantic models for database documents and data structures.
"""
from app.models.user import User
from app.models.movie import Movie, Rating, Comment

__all__ = [
    "User",
    "Movie",
    "Rating",
    "Comment",
]
