"""Middleware for authentication and other cross-cutting concerns."""

from .auth import JWTBearer, get_current_user_id
from .deadline import DeadlineMiddleware
from .rate_limit import RateLimiter, enforce_rate_limit

__all__ = [
    "get_current_user_id",
    "JWTBearer",
    "DeadlineMiddleware",
    "RateLimiter",
    "enforce_rate_limit",
]
