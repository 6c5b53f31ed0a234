"""Fixed-window rate limiting backed by Redis."""

import logging
import time
from typing import Callable, Optional

from fastapi import Request

from ..config import Settings
from ..core.exceptions import RateLimitExceededError
from ..core.redis_client import RedisClient

logger = logging.getLogger(__name__)


class RateLimiter:
    """Per-client request counter.

    Built once at startup from settings; the counters themselves live in
    Redis. When Redis is unavailable requests are allowed through.
    """

    def __init__(
        self,
        redis_client: RedisClient,
        limit: int,
        window_seconds: int,
        clock: Optional[Callable[[], float]] = None,
    ):
        self.redis_client = redis_client
        self.limit = limit
        self.window_seconds = window_seconds
        self._clock = clock or time.time

    @classmethod
    def from_settings(cls, settings: Settings, redis_client: RedisClient) -> "RateLimiter":
        return cls(
            redis_client=redis_client,
            limit=settings.rate_limit_requests,
            window_seconds=settings.rate_limit_window_seconds,
        )

    async def check(self, client_key: str) -> None:
        """Count one request for the client; raise once over the limit."""
        now = int(self._clock())
        window = now // self.window_seconds
        key = f"rate:{client_key}:{window}"

        count = await self.redis_client.increment_rate_limit(key, expire=self.window_seconds)
        if count is None:
            logger.debug("Redis unavailable, rate limit not enforced")
            return

        if count > self.limit:
            retry_after = (window + 1) * self.window_seconds - now
            logger.warning(
                "Rate limit exceeded", extra={"client": client_key, "limit": self.limit}
            )
            raise RateLimitExceededError(self.limit, retry_after)


async def enforce_rate_limit(request: Request) -> None:
    """Router dependency applying the app's rate limiter, if one is configured."""
    limiter: Optional[RateLimiter] = getattr(request.app.state, "rate_limiter", None)
    if limiter is None:
        return
    client = request.client.host if request.client else "unknown"
    await limiter.check(client)
