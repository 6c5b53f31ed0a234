"""
Database models for NoteLink.

Models included:
    - User: account with username/password authentication
    - Note: owner-scoped note content
"""

from .base import BaseModel
from .note import Note
from .user import User

__all__ = [
    "BaseModel",
    "User",
    "Note",
]
