"""
Pydantic schemas for validating and documenting API requests and responses.
"""

from .auth import LoginRequest, LoginResponse, SignupRequest, UserResponse
from .common import ErrorResponse, HealthCheckResponse
from .notes import NoteCreate, NoteResponse, NoteUpdate, ShareRequest

__all__ = [
    # Auth schemas
    "SignupRequest",
    "LoginRequest",
    "LoginResponse",
    "UserResponse",
    # Note schemas
    "NoteCreate",
    "NoteUpdate",
    "NoteResponse",
    "ShareRequest",
    # Common schemas
    "ErrorResponse",
    "HealthCheckResponse",
]
