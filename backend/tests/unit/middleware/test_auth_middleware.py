"""Unit tests for bearer token authentication."""

import uuid
from datetime import datetime, timedelta, timezone
from typing import Optional

import pytest
from fastapi import Depends, FastAPI
from httpx import ASGITransport, AsyncClient

from notelink.api.errors import register_exception_handlers
from notelink.middleware.auth import get_current_user_id
from notelink.security import TokenService

SECRET = "test-secret-key"


def build_app(token_service: TokenService) -> FastAPI:
    app = FastAPI()
    app.state.token_service = token_service
    register_exception_handlers(app)

    @app.get("/protected")
    async def protected(user_id=Depends(get_current_user_id)):
        return {"user_id": str(user_id)}

    return app


def _make_bearer(token: Optional[str]) -> dict[str, str]:
    return {"Authorization": f"Bearer {token}"} if token is not None else {}


@pytest.fixture
async def client():
    app = build_app(TokenService(SECRET))
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_accepts_valid_token(client):
    uid = uuid.uuid4()
    resp = await client.get("/protected", headers=_make_bearer(TokenService(SECRET).issue(uid)))

    assert resp.status_code == 200
    assert resp.json() == {"user_id": str(uid)}


@pytest.mark.asyncio
async def test_missing_header_is_401(client):
    resp = await client.get("/protected")

    assert resp.status_code == 401
    assert resp.headers["WWW-Authenticate"] == "Bearer"
    assert resp.json()["error"] == "InvalidTokenError"


@pytest.mark.asyncio
async def test_wrong_scheme_is_401(client):
    resp = await client.get("/protected", headers={"Authorization": "Basic abc"})
    assert resp.status_code == 401


@pytest.mark.asyncio
async def test_garbage_token_is_401(client):
    resp = await client.get("/protected", headers=_make_bearer("not-a-jwt"))

    assert resp.status_code == 401
    assert resp.json()["error"] == "InvalidTokenError"


@pytest.mark.asyncio
async def test_foreign_signature_is_401(client):
    token = TokenService("some-other-secret").issue(uuid.uuid4())
    resp = await client.get("/protected", headers=_make_bearer(token))

    assert resp.status_code == 401
    assert resp.json()["error"] == "InvalidSignatureError"


@pytest.mark.asyncio
async def test_expired_token_is_401(client):
    issued = datetime.now(timezone.utc) - timedelta(days=2)
    token = TokenService(SECRET, clock=lambda: issued).issue(uuid.uuid4())
    resp = await client.get("/protected", headers=_make_bearer(token))

    assert resp.status_code == 401
    assert resp.json()["error"] == "ExpiredTokenError"
