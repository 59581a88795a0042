"""
Authentication router for registration, login and identity lookup.
"""
import logging

from fastapi import APIRouter, Depends, HTTPException, status

from app.core.exceptions import ConflictError
from app.database.connections import get_database
from app.database.databases import auth_db
from app.dependencies.auth import CurrentUser
from app.schemas.auth import (
    LoginRequest,
    LoginResponse,
    RegisterRequest,
    TokenUser,
    UserResponse,
)
from app.services.auth_service import AuthService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["Authentication"])


async def get_auth_service() -> AuthService:
    """Dependency to get AuthService instance."""
    db = await get_database(auth_db.DB_NAME)
    return AuthService(db)


@router.post(
    "/register",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register(
    body: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Register a new user account.

    - **firstName**, **lastName**: Required
    - **email**: Valid email address (must be unique)
    - **username**: Must be unique
    - **password**: Required, stored only as a bcrypt hash
    """
    try:
        return await auth_service.register(body)
    except ConflictError as e:
        raise HTTPException(
            status_code=status.HTTP_409_CONFLICT,
            detail=str(e),
        )


@router.post(
    "/login",
    response_model=LoginResponse,
    summary="Login and get access token",
)
async def login(
    body: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
):
    """
    Authenticate with username and password to receive a JWT token.

    Send the token to protected endpoints as `Authorization: Bearer <token>`.
    Unknown users and wrong passwords get the same answer.
    """
    user = await auth_service.validate_credentials(body.username, body.password)
    if user is None:
        logger.warning(f"Failed login for '{body.username}'")
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Invalid credentials",
            headers={"WWW-Authenticate": "Bearer"},
        )

    return auth_service.login(user)


@router.get(
    "/me",
    response_model=TokenUser,
    summary="Get current user identity",
)
async def get_current_user_info(current_user: CurrentUser):
    """
    Return the identity carried by the bearer token.

    Requires `Authorization: Bearer <token>`.
    """
    return current_user
