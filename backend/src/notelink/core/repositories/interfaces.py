"""
Storage interfaces used by the service layer.

Each store is a narrow capability: identifier- and owner-scoped lookups,
inserts, in-place field updates and one free-text search predicate.
Every method may block on I/O and raises ``StorageError`` on failure.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
from uuid import UUID

from ..models.note import Note
from ..models.user import User


class ICredentialStore(ABC):
    """Username + password-hash records."""

    @abstractmethod
    async def create_user(self, user_data: Dict[str, Any]) -> User:
        """Persist a new user. Raises DuplicateUsernameError if the name is taken."""
        pass

    @abstractmethod
    async def get_by_username(self, username: str) -> Optional[User]:
        """Get user by username."""
        pass

    @abstractmethod
    async def get_by_id(self, user_id: UUID) -> Optional[User]:
        """Get user by ID."""
        pass


class INoteRepository(ABC):
    """Owner-scoped note records."""

    @abstractmethod
    async def list_user_notes(self, user_id: UUID) -> List[Note]:
        """All notes owned by the user."""
        pass

    @abstractmethod
    async def get_by_id_and_user(self, note_id: UUID, user_id: UUID) -> Optional[Note]:
        """Get note by ID if owned by user."""
        pass

    @abstractmethod
    async def create_note(self, note_data: Dict[str, Any]) -> Note:
        """Insert a new note."""
        pass

    @abstractmethod
    async def update_note(
        self, note_id: UUID, user_id: UUID, update_data: Dict[str, Any]
    ) -> Optional[Note]:
        """Update fields of a note owned by user, None if there is no such note."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: UUID, user_id: UUID) -> bool:
        """Delete note if owned by user, False if there is no such note."""
        pass

    @abstractmethod
    async def search_notes(self, user_id: UUID, query: str) -> List[Note]:
        """Text search within the user's notes."""
        pass
