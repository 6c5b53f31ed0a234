"""User repository for database operations."""

from typing import Any, Dict, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError

from ..exceptions import DuplicateUsernameError
from ..models.user import User
from .base import SQLRepository, storage_operation
from .interfaces import ICredentialStore


class UserRepository(SQLRepository, ICredentialStore):
    """Credential store backed by the users table."""

    @storage_operation("create_user")
    async def create_user(self, user_data: Dict[str, Any]) -> User:
        """Create new user."""
        user = User(**user_data)
        self.session.add(user)
        try:
            await self.session.commit()
        except IntegrityError as e:
            # username is the only unique column besides the generated id
            await self._rollback()
            raise DuplicateUsernameError(user_data.get("username", "")) from e
        await self.session.refresh(user)
        return user

    @storage_operation("get_user_by_id")
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        stmt = select(User).where(User.id == user_id)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()

    @storage_operation("get_user_by_username")
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        stmt = select(User).where(User.username == username)
        result = await self.session.execute(stmt)
        return result.scalar_one_or_none()
