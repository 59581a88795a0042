"""
Authentication service for user registration and login.
"""
import logging
from typing import Optional

from motor.motor_asyncio import AsyncIOMotorDatabase
from pymongo.errors import DuplicateKeyError

from app.core.exceptions import ConflictError
from app.core.security import (
    create_access_token,
    dummy_verify,
    hash_password,
    verify_password,
)
from app.config import get_settings
from app.database.databases import auth_db
from app.models.user import User
from app.schemas.auth import (
    LoginResponse,
    RegisterRequest,
    TokenUser,
    UserResponse,
)

logger = logging.getLogger(__name__)


class AuthService:
    """Service for authentication operations."""

    def __init__(self, db: AsyncIOMotorDatabase):
        """Initialize with auth database."""
        self.db = db
        self.users_collection = db[auth_db.Collections.USERS]
        self.settings = get_settings()

    async def register(self, request: RegisterRequest) -> UserResponse:
        """
        Register a new user.

        Args:
            request: Registration request with identity fields and password

        Returns:
            Public view of the created user

        Raises:
            ConflictError: If the username or the email is already taken
        """
        existing = await self.users_collection.find_one(
            {"$or": [{"username": request.username}, {"email": request.email}]}
        )
        if existing:
            logger.info(f"Registration rejected, '{request.username}' or its email is taken")
            raise ConflictError("User already exists")

        user_doc = User(
            username=request.username,
            email=request.email,
            first_name=request.first_name,
            last_name=request.last_name,
            hashed_password=hash_password(request.password),
        ).model_dump(exclude={"id"})

        # The unique indexes settle concurrent registrations of the same identity
        try:
            result = await self.users_collection.insert_one(user_doc)
        except DuplicateKeyError:
            logger.info(f"Registration for '{request.username}' lost a uniqueness race")
            raise ConflictError("User already exists")

        user_doc["_id"] = str(result.inserted_id)
        logger.info(f"Registered user '{request.username}'")
        return self._user_to_response(User(**user_doc))

    async def validate_credentials(
        self, username: str, password: str
    ) -> Optional[UserResponse]:
        """
        Check a username/password pair.

        Returns:
            Public user view on a match, None for an unknown user or a
            wrong password. Never raises for bad credentials.
        """
        user_doc = await self.users_collection.find_one({"username": username})

        if not user_doc:
            dummy_verify()
            return None

        user_doc["_id"] = str(user_doc["_id"])
        user = User(**user_doc)

        if not verify_password(password, user.hashed_password):
            return None

        return self._user_to_response(user)

    def login(self, user: UserResponse | TokenUser) -> LoginResponse:
        """
        Issue an access token for an already validated identity.

        No session is stored; the token alone carries the identity.
        """
        user_id = user.user_id if isinstance(user, TokenUser) else user.id
        access_token = create_access_token(user_id=user_id, username=user.username)

        return LoginResponse(
            access_token=access_token,
            token_type="bearer",
            expires_in=self.settings.jwt_access_token_expire_minutes * 60,
        )

    @staticmethod
    def _user_to_response(user: User) -> UserResponse:
        return UserResponse(
            id=user.id,
            username=user.username,
            email=user.email,
            first_name=user.first_name,
            last_name=user.last_name,
        )
