"""Security utilities."""

from .jwt import TokenService
from .password import dummy_verify, hash_password, verify_password

__all__ = [
    "hash_password",
    "verify_password",
    "dummy_verify",
    "TokenService",
]
