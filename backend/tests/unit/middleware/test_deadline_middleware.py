"""Unit tests for the request deadline middleware."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient

from notelink.core.deadline import remaining_time, request_deadline
from notelink.middleware import DeadlineMiddleware


@pytest.mark.asyncio
async def test_deadline_is_set_for_request_and_cleared_after():
    app = FastAPI()
    app.add_middleware(DeadlineMiddleware, timeout=5.0)

    @app.get("/remaining")
    async def remaining():
        return {"remaining": remaining_time(default=-1.0)}

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        resp = await ac.get("/remaining")

    assert 0 < resp.json()["remaining"] <= 5.0
    assert request_deadline.get() is None


def test_remaining_time_defaults_without_deadline():
    assert remaining_time(default=7.5) == 7.5
