"""Authentication service implementation."""

from uuid import UUID

from ...security import TokenService, dummy_verify, hash_password, verify_password
from ..exceptions import InvalidCredentialsError, NotFoundError, ValidationError
from ..logging import get_logger
from ..models.user import USERNAME_MAX_LENGTH
from ..repositories.interfaces import ICredentialStore
from ..schemas.auth import LoginResponse, UserResponse
from .interfaces import IAuthService

MIN_PASSWORD_LENGTH = 6

logger = get_logger("services.auth")


class AuthService(IAuthService):
    """Signup and login on top of a credential store and a token service."""

    def __init__(self, user_repo: ICredentialStore, token_service: TokenService):
        self.user_repo = user_repo
        self.token_service = token_service

    async def signup(self, username: str, password: str) -> UserResponse:
        """Register new user.

        Input is validated before the store is touched. The password is
        hashed with a salted bcrypt-based scheme and never returned.
        """
        if not username or not username.strip():
            raise ValidationError("username", "is required")
        if len(username) > USERNAME_MAX_LENGTH:
            raise ValidationError(
                "username", f"must be at most {USERNAME_MAX_LENGTH} characters"
            )
        if not password:
            raise ValidationError("password", "is required")
        if len(password) < MIN_PASSWORD_LENGTH:
            raise ValidationError(
                "password", f"must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        user = await self.user_repo.create_user(
            {"username": username, "password_hash": hash_password(password)}
        )
        logger.info("User signed up", extra={"user_id": str(user.id)})

        return UserResponse.model_validate(user)

    async def login(self, username: str, password: str) -> LoginResponse:
        """Verify credentials and mint a bearer token."""
        if not username or not username.strip():
            raise ValidationError("username", "is required")
        if not password:
            raise ValidationError("password", "is required")

        user = await self.user_repo.get_by_username(username)
        if not user:
            dummy_verify()
            logger.warning("Login failed")
            raise InvalidCredentialsError()

        if not verify_password(password, user.password_hash):
            logger.warning("Login failed", extra={"user_id": str(user.id)})
            raise InvalidCredentialsError()

        token = self.token_service.issue(user.id)
        logger.info("User logged in", extra={"user_id": str(user.id)})

        return LoginResponse(
            user=UserResponse.model_validate(user),
            token=token,
            token_type="bearer",
            expires_in=self.token_service.expires_in,
        )

    async def get_user(self, user_id: UUID) -> UserResponse:
        """Get user by ID."""
        user = await self.user_repo.get_by_id(user_id)
        if not user:
            raise NotFoundError("User")
        return UserResponse.model_validate(user)
