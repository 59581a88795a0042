"""
API Routers module.
"""
from app.routers import auth, health, movies

__all__ = ["auth", "health", "movies"]
