"""JWT token utilities."""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Any, Callable, Dict, Optional
from uuid import UUID

from jose import JWTError, jwt
from jose.exceptions import JWTClaimsError

from ..config import Settings
from ..core.exceptions import (
    ExpiredTokenError,
    InvalidSignatureError,
    InvalidTokenError,
    SigningError,
)

TOKEN_TYPE = "access"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class TokenService:
    """Issues and verifies signed, time-limited access tokens.

    The service holds no mutable state: a token's validity is recomputed
    from its signed payload and the current time on every call.
    """

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        lifetime: timedelta = timedelta(hours=24),
        clock: Optional[Callable[[], datetime]] = None,
    ):
        self._secret_key = secret_key
        self._algorithm = algorithm
        self._lifetime = lifetime
        self._clock = clock or _utcnow

    @classmethod
    def from_settings(cls, settings: Settings) -> "TokenService":
        return cls(
            secret_key=settings.secret_key,
            algorithm=settings.algorithm,
            lifetime=timedelta(minutes=settings.access_token_expire_minutes),
        )

    @property
    def expires_in(self) -> int:
        """Token lifetime in seconds."""
        return int(self._lifetime.total_seconds())

    def issue(self, user_id: UUID) -> str:
        """Create a signed token whose subject is the given user id."""
        issued_at = self._clock()
        claims = {
            "sub": str(user_id),
            "iat": int(issued_at.timestamp()),
            "exp": int((issued_at + self._lifetime).timestamp()),
            "type": TOKEN_TYPE,
            "jti": str(uuid.uuid4()),
        }
        try:
            return jwt.encode(claims, self._secret_key, algorithm=self._algorithm)
        except JWTError as e:
            raise SigningError(e) from e

    def verify(self, token: str) -> UUID:
        """Validate signature and expiry, then return the subject.

        Raises:
            InvalidTokenError: token cannot be parsed, uses another algorithm
                or lacks usable claims
            InvalidSignatureError: signature does not match the secret
            ExpiredTokenError: current time is at or past the expiry
        """
        if not token:
            raise InvalidTokenError("Token is empty")

        # Structural check first so garbage is not reported as a bad signature
        try:
            header = jwt.get_unverified_header(token)
            jwt.get_unverified_claims(token)
        except JWTError as e:
            raise InvalidTokenError("Token is malformed") from e

        # unsigned tokens and foreign algorithms are never acceptable
        if header.get("alg") != self._algorithm:
            raise InvalidTokenError("Unexpected token algorithm")

        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self._algorithm],
                options={"verify_exp": False},
            )
        except JWTClaimsError as e:
            raise InvalidTokenError(str(e)) from e
        except JWTError as e:
            raise InvalidSignatureError() from e

        return self._subject_from_payload(payload)

    def _subject_from_payload(self, payload: Dict[str, Any]) -> UUID:
        if payload.get("type") != TOKEN_TYPE:
            raise InvalidTokenError("Unexpected token type")

        exp = payload.get("exp")
        if not isinstance(exp, (int, float)):
            raise InvalidTokenError("Token has no expiry")
        if self._clock().timestamp() >= exp:
            raise ExpiredTokenError()

        subject = payload.get("sub")
        if not subject:
            raise InvalidTokenError("Token has no subject")
        try:
            return UUID(str(subject))
        except ValueError as e:
            raise InvalidTokenError("Token subject is not a user id") from e
