"""Authentication middleware."""

from typing import Optional
from uuid import UUID

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer

from ..core.exceptions import InvalidTokenError
from ..security import TokenService


class JWTBearer(HTTPBearer):
    """JWT Bearer token authentication.

    Resolves to the verified user id. Every failure raises a TokenError,
    which the app turns into 401.
    """

    def __init__(self):
        # auto_error off so a missing header is reported as 401, not 403
        super().__init__(auto_error=False)

    async def __call__(self, request: Request) -> UUID:
        credentials: Optional[HTTPAuthorizationCredentials] = await super().__call__(request)
        if not credentials or not credentials.credentials:
            raise InvalidTokenError("Missing bearer token")

        token_service: TokenService = request.app.state.token_service
        user_id = token_service.verify(credentials.credentials)
        request.state.user_id = user_id
        return user_id


# Dependency for getting current user ID from JWT
async def get_current_user_id(user_id: UUID = Depends(JWTBearer())) -> UUID:
    """Get current authenticated user ID."""
    return user_id
