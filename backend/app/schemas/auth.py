"""
Authentication request/response schemas.
"""
from pydantic import BaseModel, EmailStr, Field


class RegisterRequest(BaseModel):
    """Registration request body."""
    first_name: str = Field(..., alias="firstName", min_length=1, description="Given name")
    last_name: str = Field(..., alias="lastName", min_length=1, description="Family name")
    email: EmailStr = Field(..., description="User email address (must be unique)")
    username: str = Field(..., min_length=1, description="Username (must be unique)")
    password: str = Field(..., min_length=1, description="User password")

    class Config:
        populate_by_name = True


class LoginRequest(BaseModel):
    """Login request body."""
    username: str = Field(..., min_length=1, description="Username")
    password: str = Field(..., min_length=1, description="User password")


class LoginResponse(BaseModel):
    """Login response with JWT token."""
    access_token: str = Field(..., alias="accessToken", description="JWT access token")
    token_type: str = Field(default="bearer", alias="tokenType", description="Token type")
    expires_in: int = Field(..., alias="expiresIn", description="Token lifetime in seconds")

    class Config:
        populate_by_name = True


class UserResponse(BaseModel):
    """Public user view (never includes the password hash)."""
    id: str = Field(..., description="User ID")
    username: str = Field(..., description="Username")
    email: EmailStr = Field(..., description="User email")
    first_name: str = Field(..., alias="firstName", description="Given name")
    last_name: str = Field(..., alias="lastName", description="Family name")

    class Config:
        populate_by_name = True


class TokenUser(BaseModel):
    """Identity carried by a verified access token."""
    user_id: str = Field(..., alias="userId", description="Subject (user ID)")
    username: str = Field(..., description="Username at issuance time")

    class Config:
        populate_by_name = True
