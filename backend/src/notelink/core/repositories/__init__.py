"""Repository layer for data access."""

from .interfaces import ICredentialStore, INoteRepository
from .note_repository import NoteRepository
from .user_repository import UserRepository

__all__ = [
    "ICredentialStore",
    "INoteRepository",
    "UserRepository",
    "NoteRepository",
]
