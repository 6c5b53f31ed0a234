"""RedisClient tests using an in-process stand-in for redis.asyncio."""

import pytest
import redis.asyncio as redis

from notelink.config import Settings
from notelink.core.redis_client import RedisClient


class FakePipeline:
    def __init__(self, store, fail=False):
        self.store = store
        self.fail = fail
        self.ops = []

    async def __aenter__(self):
        return self

    async def __aexit__(self, *exc):
        return False

    def incr(self, key):
        self.ops.append(("incr", key))

    def expire(self, key, seconds):
        self.ops.append(("expire", key, seconds))

    async def execute(self):
        if self.fail:
            raise redis.ConnectionError("connection lost")
        results = []
        for op in self.ops:
            if op[0] == "incr":
                self.store[op[1]] = self.store.get(op[1], 0) + 1
                results.append(self.store[op[1]])
            else:
                results.append(True)
        return results


class FakeRedis:
    def __init__(self, fail=False):
        self.store = {}
        self.fail = fail

    def pipeline(self, transaction=True):
        return FakePipeline(self.store, self.fail)

    async def ping(self):
        if self.fail:
            raise redis.ConnectionError("connection lost")
        return True


@pytest.fixture
def client():
    return RedisClient(Settings(_env_file=None))


@pytest.mark.asyncio
async def test_not_connected_returns_none(client):
    assert client.is_connected is False
    assert await client.increment_rate_limit("k") is None
    assert await client.ping() is False


@pytest.mark.asyncio
async def test_increment_counts(client):
    client.redis = FakeRedis()

    assert await client.increment_rate_limit("k", expire=60) == 1
    assert await client.increment_rate_limit("k", expire=60) == 2
    assert await client.ping() is True


@pytest.mark.asyncio
async def test_errors_degrade_to_none(client):
    client.redis = FakeRedis(fail=True)

    assert await client.increment_rate_limit("k") is None
    assert await client.ping() is False
