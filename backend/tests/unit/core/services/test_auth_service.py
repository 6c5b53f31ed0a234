"""Unit tests for AuthService with an in-memory credential store."""

import uuid
from datetime import datetime, timezone

import pytest

from notelink.core.exceptions import (
    DuplicateUsernameError,
    InvalidCredentialsError,
    NotFoundError,
    ValidationError,
)
from notelink.core.services.auth_service import AuthService
from notelink.security import TokenService, hash_password


class DummyUser:
    def __init__(self, **kwargs):
        self.__dict__.update(kwargs)


class FakeUserRepo:
    """Credential store keeping users in a dict; counts every call."""

    def __init__(self):
        self.users = {}
        self.calls = 0

    async def create_user(self, user_data):
        self.calls += 1
        if any(u.username == user_data["username"] for u in self.users.values()):
            raise DuplicateUsernameError(user_data["username"])
        user = DummyUser(
            id=uuid.uuid4(),
            created_at=datetime.now(timezone.utc),
            **user_data,
        )
        self.users[user.id] = user
        return user

    async def get_by_username(self, username):
        self.calls += 1
        return next((u for u in self.users.values() if u.username == username), None)

    async def get_by_id(self, user_id):
        self.calls += 1
        return self.users.get(user_id)


@pytest.fixture
def repo():
    return FakeUserRepo()


@pytest.fixture
def svc(repo):
    return AuthService(repo, TokenService("test-secret-key"))


@pytest.mark.asyncio
async def test_signup_returns_user_without_hash(svc, repo):
    user = await svc.signup("alice", "secret1")

    assert user.username == "alice"
    assert "password_hash" not in user.model_dump()
    stored = repo.users[user.id]
    assert stored.password_hash != "secret1"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "username,password,field",
    [
        ("", "secret1", "username"),
        ("   ", "secret1", "username"),
        ("a" * 51, "secret1", "username"),
        ("alice", "", "password"),
        ("alice", "12345", "password"),
    ],
)
async def test_signup_validates_before_storage(svc, repo, username, password, field):
    with pytest.raises(ValidationError) as exc_info:
        await svc.signup(username, password)

    assert exc_info.value.field == field
    assert repo.calls == 0


@pytest.mark.asyncio
async def test_signup_accepts_six_character_password(svc):
    user = await svc.signup("bob", "123456")
    assert user.username == "bob"


@pytest.mark.asyncio
async def test_signup_duplicate_username(svc):
    await svc.signup("alice", "secret1")
    with pytest.raises(DuplicateUsernameError):
        await svc.signup("alice", "another1")


@pytest.mark.asyncio
async def test_login_success_returns_user_and_token(svc):
    created = await svc.signup("alice", "secret1")

    result = await svc.login("alice", "secret1")

    assert result.user.id == created.id
    assert result.token_type == "bearer"
    assert result.expires_in == 24 * 60 * 60
    assert svc.token_service.verify(result.token) == created.id


@pytest.mark.asyncio
async def test_login_unknown_user_and_wrong_password_look_the_same(svc):
    await svc.signup("alice", "secret1")

    with pytest.raises(InvalidCredentialsError) as unknown:
        await svc.login("mallory", "secret1")
    with pytest.raises(InvalidCredentialsError) as wrong:
        await svc.login("alice", "wrong-password")

    assert unknown.value.message == wrong.value.message


@pytest.mark.asyncio
async def test_login_requires_both_fields(svc, repo):
    with pytest.raises(ValidationError):
        await svc.login("", "secret1")
    with pytest.raises(ValidationError):
        await svc.login("alice", "")
    assert repo.calls == 0


@pytest.mark.asyncio
async def test_login_checks_stored_hash(repo):
    user = DummyUser(
        id=uuid.uuid4(),
        username="carol",
        password_hash=hash_password("hunter22"),
        created_at=datetime.now(timezone.utc),
    )
    repo.users[user.id] = user
    svc = AuthService(repo, TokenService("test-secret-key"))

    result = await svc.login("carol", "hunter22")
    assert result.user.username == "carol"


@pytest.mark.asyncio
async def test_get_user(svc):
    created = await svc.signup("alice", "secret1")

    assert (await svc.get_user(created.id)).username == "alice"
    with pytest.raises(NotFoundError):
        await svc.get_user(uuid.uuid4())
