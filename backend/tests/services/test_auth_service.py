"""Auth Service — registration and login against in-memory fakes.

Tests cover:
    - successful registration normalizes and hashes, one write
    - invalid email / weak password: BadRequest, no hash call, no write
    - duplicate username / email rejected
    - login failures share one generic message (no identifier oracle)
"""

import pytest

from app.core.errors import BadRequestError
from app.schemas.auth import LoginRequest, RegisterRequest


def _register_request(**overrides) -> RegisterRequest:
    fields = dict(
        username="alice", email="alice@x.com",
        password="Pass123", full_name="Alice A",
    )
    fields.update(overrides)
    return RegisterRequest(**fields)


async def test_register_persists_normalized_user(auth_service, users, hasher):
    user = await auth_service.register(
        _register_request(
            username=" alice ", email="  Alice@X.com ", full_name=" Alice A ",
        ),
    )
    assert user.id == 1
    assert user.username == "alice"
    assert user.email == "alice@x.com"
    assert user.full_name == "Alice A"
    assert user.password_hash != "Pass123"
    assert hasher.verify("Pass123", user.password_hash)
    assert users.writes == 1


@pytest.mark.parametrize("email", ["not-an-email", "a@b", "alice@x.c", "@x.com"])
async def test_register_invalid_email_writes_nothing(
    auth_service, users, hasher, email,
):
    with pytest.raises(BadRequestError, match="Invalid email format"):
        await auth_service.register(_register_request(email=email))
    assert users.writes == 0
    assert hasher.hash_calls == 0


@pytest.mark.parametrize("password,message", [
    ("Pa1", "at least 6 characters"),
    ("password", "at least one number"),
    ("12345678", "at least one letter"),
])
async def test_register_weak_password_rejected_before_uniqueness_and_hash(
    auth_service, users, hasher, password, message,
):
    await auth_service.register(_register_request())
    hash_calls_before = hasher.hash_calls

    # same username would fail uniqueness; the password rule must fire first
    with pytest.raises(BadRequestError, match=message):
        await auth_service.register(_register_request(password=password))
    assert hasher.hash_calls == hash_calls_before
    assert users.writes == 1


async def test_register_duplicate_username(auth_service):
    await auth_service.register(_register_request())
    with pytest.raises(BadRequestError, match="Username already exists"):
        await auth_service.register(_register_request(email="other@x.com"))


async def test_register_duplicate_email_case_insensitive(auth_service, users):
    await auth_service.register(_register_request())
    with pytest.raises(BadRequestError, match="Email already exists"):
        await auth_service.register(
            _register_request(username="alice2", email="ALICE@X.COM"),
        )
    assert users.writes == 1


async def test_register_requires_full_name(auth_service):
    with pytest.raises(BadRequestError, match="Full name is required"):
        await auth_service.register(_register_request(full_name="   "))


async def test_login_with_email(auth_service):
    registered = await auth_service.register(_register_request())
    user = await auth_service.login(
        LoginRequest(email=" ALICE@x.com ", password="Pass123"),
    )
    assert user.id == registered.id


async def test_login_with_username(auth_service):
    await auth_service.register(_register_request())
    user = await auth_service.login(
        LoginRequest(username="alice", password="Pass123"),
    )
    assert user.email == "alice@x.com"


async def test_login_wrong_password_is_generic(auth_service):
    await auth_service.register(_register_request())
    with pytest.raises(BadRequestError) as exc_info:
        await auth_service.login(
            LoginRequest(email="alice@x.com", password="Wrong123"),
        )
    assert exc_info.value.message == "Invalid email or password"


async def test_login_unknown_email_is_same_generic_error(auth_service):
    with pytest.raises(BadRequestError) as exc_info:
        await auth_service.login(
            LoginRequest(email="nobody@x.com", password="Pass123"),
        )
    assert exc_info.value.message == "Invalid email or password"
    assert exc_info.value.http_status == 400


async def test_login_unknown_username_names_username(auth_service):
    with pytest.raises(BadRequestError, match="Invalid username or password"):
        await auth_service.login(LoginRequest(username="ghost", password="x1"))


async def test_login_missing_fields(auth_service):
    with pytest.raises(BadRequestError, match="Email is required"):
        await auth_service.login(LoginRequest(password="Pass123"))
    with pytest.raises(BadRequestError, match="Password is required"):
        await auth_service.login(LoginRequest(email="alice@x.com"))


async def test_login_is_read_only(auth_service, users):
    await auth_service.register(_register_request())
    with pytest.raises(BadRequestError):
        await auth_service.login(LoginRequest(email="alice@x.com", password="bad1"))
    await auth_service.login(LoginRequest(email="alice@x.com", password="Pass123"))
    assert users.writes == 1


async def test_register_email_only_then_login_by_email(auth_service, users):
    first = await auth_service.register(_register_request(username=None))
    second = await auth_service.register(
        _register_request(username="  ", email="bob@x.com"),
    )
    assert first.username is None
    assert second.username is None
    assert users.writes == 2

    user = await auth_service.login(
        LoginRequest(email="alice@x.com", password="Pass123"),
    )
    assert user.id == first.id
