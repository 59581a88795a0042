"""
Core module - Security and error types shared by services and routers.
"""
from app.core.exceptions import (
    CatalogError,
    BadRequestError,
    NotFoundError,
    ConflictError,
)
from app.core.security import (
    hash_password,
    verify_password,
    create_access_token,
    decode_token,
)

__all__ = [
    "CatalogError",
    "BadRequestError",
    "NotFoundError",
    "ConflictError",
    "hash_password",
    "verify_password",
    "create_access_token",
    "decode_token",
]
