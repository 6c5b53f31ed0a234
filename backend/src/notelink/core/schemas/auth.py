"""
Authentication schemas.

Length rules live in AuthService so that violations surface as
ValidationError (400) naming the field, not as a schema error.
"""

import uuid
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class SignupRequest(BaseModel):
    """User signup request schema."""

    username: str = Field(description="Unique username")
    password: str = Field(description="Password, at least 6 characters")

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "alice", "password": "secret1"}}
    )


class LoginRequest(BaseModel):
    """User login request schema."""

    username: str = Field(description="Username")
    password: str = Field(description="User password")

    model_config = ConfigDict(
        json_schema_extra={"example": {"username": "alice", "password": "secret1"}}
    )


class UserResponse(BaseModel):
    """User information. Never carries the password hash."""

    id: uuid.UUID = Field(description="User unique identifier")
    username: str = Field(description="Username")
    created_at: datetime = Field(description="Account creation timestamp")

    model_config = ConfigDict(from_attributes=True)


class LoginResponse(BaseModel):
    """Successful login: the sanitized user and the bearer token, side by side."""

    user: UserResponse = Field(description="User information")
    token: str = Field(description="JWT access token")
    token_type: str = Field(default="bearer", description="Token type")
    expires_in: int = Field(description="Token lifetime in seconds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "user": {
                    "id": "123e4567-e89b-12d3-a456-426614174000",
                    "username": "alice",
                    "created_at": "2025-09-13T10:30:00Z",
                },
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 86400,
            }
        }
    )
