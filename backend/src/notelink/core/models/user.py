"""
User model for authentication.
"""

from sqlalchemy import String
from sqlalchemy.orm import Mapped, mapped_column

from .base import BaseModel

USERNAME_MAX_LENGTH = 50


class User(BaseModel):
    """Credentials only: no profile fields, nothing changes after signup."""

    __tablename__ = "users"

    username: Mapped[str] = mapped_column(
        String(USERNAME_MAX_LENGTH), unique=True, index=True
    )
    password_hash: Mapped[str] = mapped_column(String(255))

    def __repr__(self) -> str:
        return f"<User(username='{self.username}')>"
