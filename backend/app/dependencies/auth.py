"""
Authentication dependencies for route protection.
"""
from typing import Annotated, Optional

from fastapi import Depends, HTTPException, status
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from jose import JWTError

from app.core.security import decode_token
from app.schemas.auth import TokenUser

bearer_scheme = HTTPBearer(auto_error=False, description="JWT access token")


async def get_current_user(
    credentials: Annotated[Optional[HTTPAuthorizationCredentials], Depends(bearer_scheme)],
) -> TokenUser:
    """
    Dependency to get the current authenticated user from a JWT token.

    Token is passed as a header: ``Authorization: Bearer <token>``.
    The claim is trusted as issued; the user store is not consulted.

    Raises:
        HTTPException 401: If the header is missing or malformed
        HTTPException 401: If the token is invalid or expired
    """
    credentials_exception = HTTPException(
        status_code=status.HTTP_401_UNAUTHORIZED,
        detail="Could not validate credentials",
        headers={"WWW-Authenticate": "Bearer"},
    )

    if credentials is None or not credentials.credentials:
        raise credentials_exception

    try:
        payload = decode_token(credentials.credentials)
    except JWTError:
        raise credentials_exception

    user_id = payload.get("sub")
    username = payload.get("username")
    if user_id is None or username is None:
        raise credentials_exception

    return TokenUser(user_id=user_id, username=username)


# Type alias for cleaner route signatures
CurrentUser = Annotated[TokenUser, Depends(get_current_user)]
