"""Unit tests for the domain error to HTTP response mapping."""

import pytest
from fastapi import FastAPI
from httpx import ASGITransport, AsyncClient
from pydantic import BaseModel

from notelink.api.errors import register_exception_handlers
from notelink.core.exceptions import (
    DuplicateUsernameError,
    ExpiredTokenError,
    InvalidCredentialsError,
    NotFoundError,
    RateLimitExceededError,
    SigningError,
    StorageError,
    ValidationError,
)

RAISED = {
    "validation": ValidationError("password", "must be at least 6 characters"),
    "credentials": InvalidCredentialsError(),
    "expired": ExpiredTokenError(),
    "not-found": NotFoundError(),
    "duplicate": DuplicateUsernameError("alice"),
    "rate": RateLimitExceededError(limit=10, retry_after=42),
    "storage": StorageError("list_notes", RuntimeError("connection refused on db-1")),
    "signing": SigningError(RuntimeError("bad key")),
}


class Payload(BaseModel):
    title: str


def build_app() -> FastAPI:
    app = FastAPI()
    register_exception_handlers(app)

    @app.get("/raise/{kind}")
    async def raise_error(kind: str):
        raise RAISED[kind]

    @app.post("/payload")
    async def payload(body: Payload):
        return body

    return app


@pytest.fixture
async def client():
    async with AsyncClient(transport=ASGITransport(app=build_app()), base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "kind,status_code",
    [
        ("validation", 400),
        ("credentials", 401),
        ("expired", 401),
        ("not-found", 404),
        ("duplicate", 409),
        ("rate", 429),
        ("storage", 500),
        ("signing", 500),
    ],
)
async def test_status_codes(client, kind, status_code):
    resp = await client.get(f"/raise/{kind}")

    assert resp.status_code == status_code
    assert resp.json()["error"] == type(RAISED[kind]).__name__


@pytest.mark.asyncio
async def test_validation_error_names_field(client):
    body = (await client.get("/raise/validation")).json()

    assert body["field"] == "password"
    assert body["message"] == "password: must be at least 6 characters"


@pytest.mark.asyncio
async def test_server_errors_hide_cause(client):
    resp = await client.get("/raise/storage")

    assert resp.json()["message"] == "Internal server error"
    assert "db-1" not in resp.text


@pytest.mark.asyncio
async def test_token_errors_carry_challenge(client):
    resp = await client.get("/raise/expired")
    assert resp.headers["WWW-Authenticate"] == "Bearer"


@pytest.mark.asyncio
async def test_rate_limit_carries_retry_after(client):
    resp = await client.get("/raise/rate")
    assert resp.headers["Retry-After"] == "42"


@pytest.mark.asyncio
async def test_malformed_body_is_400(client):
    resp = await client.post("/payload", json={})

    assert resp.status_code == 400
    assert resp.json()["error"] == "ValidationError"
    assert resp.json()["field"] == "title"
