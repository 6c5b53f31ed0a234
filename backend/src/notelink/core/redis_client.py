"""Redis client for rate limiting state."""

import logging
from typing import Optional

import redis.asyncio as redis

from ..config import Settings

logger = logging.getLogger(__name__)


class RedisClient:
    """Thin wrapper around a pooled ``redis.asyncio`` connection.

    All calls degrade to "no data" when Redis is down so callers can fail open.
    """

    def __init__(self, settings: Settings):
        self.settings = settings
        self.redis: Optional[redis.Redis] = None

    @property
    def is_connected(self) -> bool:
        return self.redis is not None

    async def connect(self) -> None:
        """Connect to Redis."""
        client = redis.from_url(
            self.settings.redis_url,
            max_connections=self.settings.redis_max_connections,
            decode_responses=True,
        )
        try:
            await client.ping()
        except redis.RedisError as e:
            await client.aclose()
            logger.error(f"Failed to connect to Redis: {e}")
            raise
        self.redis = client
        logger.info("Connected to Redis successfully")

    async def disconnect(self) -> None:
        """Disconnect from Redis."""
        if self.redis:
            await self.redis.aclose()
            self.redis = None
            logger.info("Disconnected from Redis")

    async def ping(self) -> bool:
        if not self.redis:
            return False
        try:
            return bool(await self.redis.ping())
        except redis.RedisError as e:
            logger.error(f"Redis PING error: {e}")
            return False

    # Rate limiting
    async def increment_rate_limit(self, key: str, expire: int = 60) -> Optional[int]:
        """Increment a fixed-window counter, None when Redis is unavailable."""
        if not self.redis:
            return None
        try:
            # Use pipeline for atomic operation
            async with self.redis.pipeline(transaction=True) as pipe:
                pipe.incr(key)
                pipe.expire(key, expire)
                results = await pipe.execute()
            return int(results[0]) if results else None
        except redis.RedisError as e:
            logger.error(f"Rate limit error for key {key}: {e}")
            return None
