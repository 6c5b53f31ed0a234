"""Error kinds raised by the service and storage layers.

The HTTP layer maps each kind to a status code; services never build
HTTP responses themselves.
"""

from typing import Optional


class NoteLinkError(Exception):
    """Base class for all domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class ValidationError(NoteLinkError):
    """Bad caller input. Raised before any storage access."""

    def __init__(self, field: str, message: str) -> None:
        self.field = field
        super().__init__(f"{field}: {message}")


class InvalidCredentialsError(NoteLinkError):
    """Login failed. Unknown user and wrong password are not told apart."""

    def __init__(self) -> None:
        super().__init__("Invalid username or password")


class DuplicateUsernameError(NoteLinkError):
    """Raised when the username is already registered."""

    def __init__(self, username: str) -> None:
        self.username = username
        super().__init__(f"Username '{username}' is already taken")


class NotFoundError(NoteLinkError):
    """
    Raised when a record does not exist for the caller.

    Missing records and records owned by someone else produce the same
    error so that existence never leaks across users.
    """

    def __init__(self, resource: str = "Note") -> None:
        self.resource = resource
        super().__init__(f"{resource} not found")


class TokenError(NoteLinkError):
    """Base class for bearer token verification failures."""


class InvalidTokenError(TokenError):
    """Token is malformed or carries unusable claims."""

    def __init__(self, message: str = "Invalid token") -> None:
        super().__init__(message)


class ExpiredTokenError(TokenError):
    def __init__(self) -> None:
        super().__init__("Token has expired")


class InvalidSignatureError(TokenError):
    def __init__(self) -> None:
        super().__init__("Token signature verification failed")


class StorageError(NoteLinkError):
    """Opaque storage failure. The cause is kept for logging only."""

    def __init__(self, operation: str, cause: Optional[BaseException] = None) -> None:
        self.operation = operation
        self.cause = cause
        super().__init__(f"Storage operation '{operation}' failed")


class SigningError(NoteLinkError):
    """Token could not be signed. Points at a configuration problem."""

    def __init__(self, cause: Optional[BaseException] = None) -> None:
        self.cause = cause
        super().__init__("Token signing failed")


class RateLimitExceededError(NoteLinkError):
    """Raised when a client exceeds its request allowance."""

    def __init__(self, limit: int, retry_after: int) -> None:
        self.limit = limit
        self.retry_after = retry_after
        super().__init__("Rate limit exceeded. Please try again later.")
