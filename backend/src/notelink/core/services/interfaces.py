"""
Service interfaces for NoteLink application.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List
from uuid import UUID

from ..schemas.auth import LoginResponse, UserResponse
from ..schemas.common import HealthCheckResponse
from ..schemas.notes import NoteResponse


class IAuthService(ABC):
    """Auth service for signup and login."""

    @abstractmethod
    async def signup(self, username: str, password: str) -> UserResponse:
        """Register new user."""
        pass

    @abstractmethod
    async def login(self, username: str, password: str) -> LoginResponse:
        """Check credentials and return the user with a fresh token."""
        pass

    @abstractmethod
    async def get_user(self, user_id: UUID) -> UserResponse:
        """Get user by ID."""
        pass


class INoteService(ABC):
    """Owner-scoped note operations."""

    @abstractmethod
    async def list_notes(self, owner_id: UUID) -> List[NoteResponse]:
        """List all notes of the owner."""
        pass

    @abstractmethod
    async def get_note(self, note_id: UUID, owner_id: UUID) -> NoteResponse:
        """Get note by ID."""
        pass

    @abstractmethod
    async def create_note(self, title: str, content: str, owner_id: UUID) -> NoteResponse:
        """Create new note."""
        pass

    @abstractmethod
    async def update_note(
        self, note_id: UUID, owner_id: UUID, title: str, content: str
    ) -> NoteResponse:
        """Replace title and content of a note."""
        pass

    @abstractmethod
    async def delete_note(self, note_id: UUID, owner_id: UUID) -> None:
        """Delete note."""
        pass

    @abstractmethod
    async def share_note(
        self, note_id: UUID, owner_id: UUID, target_user_id: UUID
    ) -> NoteResponse:
        """Copy a note to another user."""
        pass

    @abstractmethod
    async def search_notes(self, owner_id: UUID, query: str) -> List[NoteResponse]:
        """Text search within the owner's notes."""
        pass


class IHealthService(ABC):
    """Health check service."""

    @abstractmethod
    async def get_health_status(self) -> HealthCheckResponse:
        """Get app health status."""
        pass

    @abstractmethod
    async def check_database_health(self) -> Dict[str, Any]:
        """Check DB connection."""
        pass

    @abstractmethod
    async def check_redis_health(self) -> Dict[str, Any]:
        """Check Redis connection."""
        pass
