"""Auth Routes — register/login over HTTP against an in-memory SQLite store.

Tests cover:
    - register → 201 with lowercase email; stored password is hashed
    - duplicate email → 400 "Email already exists"
    - wrong password and unknown email → 400 "Invalid email or password"
    - login returns the placeholder token
    - non-JSON body → 415
    - email-only registration (no username) then login by email
"""

from sqlalchemy import select

from app.models.user import User

REGISTER = {
    "username": "alice",
    "email": "alice@x.com",
    "password": "Pass123",
    "fullName": "Alice A",
}


async def test_register_returns_201(client, db_manager):
    res = await client.post(
        "/api/auth/register", json={**REGISTER, "email": " Alice@X.com "},
    )
    assert res.status_code == 201
    body = res.json()
    assert body["message"] == "User registered successfully"
    assert body["email"] == "alice@x.com"
    assert body["fullName"] == "Alice A"
    assert isinstance(body["userId"], int)
    assert "password" not in body

    async with db_manager.session() as db:
        stored = (
            await db.execute(select(User).where(User.id == body["userId"]))
        ).scalar_one()
    assert stored.email == "alice@x.com"
    assert stored.password_hash != "Pass123"
    assert "Pass123" not in stored.password_hash


async def test_register_invalid_email(client, db_manager):
    res = await client.post(
        "/api/auth/register", json={**REGISTER, "email": "alice-at-x"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid email format"

    async with db_manager.session() as db:
        count = len((await db.execute(select(User))).scalars().all())
    assert count == 0


async def test_register_duplicate_email(client):
    await client.post("/api/auth/register", json=REGISTER)
    res = await client.post(
        "/api/auth/register",
        json={**REGISTER, "username": "alice2", "email": "ALICE@x.com"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Email already exists"


async def test_register_error_does_not_echo_password(client):
    res = await client.post(
        "/api/auth/register", json={**REGISTER, "password": "nodigits"},
    )
    assert res.status_code == 400
    assert "nodigits" not in res.text


async def test_login_success(client):
    registered = (await client.post("/api/auth/register", json=REGISTER)).json()
    res = await client.post(
        "/api/auth/login", json={"email": "ALICE@x.com", "password": "Pass123"},
    )
    assert res.status_code == 200
    body = res.json()
    assert body["message"] == "Login successful"
    assert body["userId"] == registered["userId"]
    assert body["token"] == f"mock-jwt-token-{registered['userId']}"


async def test_login_by_username(client):
    await client.post("/api/auth/register", json=REGISTER)
    res = await client.post(
        "/api/auth/login", json={"username": "alice", "password": "Pass123"},
    )
    assert res.status_code == 200


async def test_login_wrong_password(client):
    await client.post("/api/auth/register", json=REGISTER)
    res = await client.post(
        "/api/auth/login", json={"email": "alice@x.com", "password": "Wrong999"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid email or password"


async def test_login_unknown_email_same_response(client):
    res = await client.post(
        "/api/auth/login", json={"email": "ghost@x.com", "password": "Pass123"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Invalid email or password"


async def test_login_rejects_non_json(client):
    res = await client.post(
        "/api/auth/login", content="email=alice@x.com",
        headers={"Content-Type": "application/x-www-form-urlencoded"},
    )
    assert res.status_code == 415


async def test_malformed_json_is_bad_request(client):
    res = await client.post(
        "/api/auth/login", content="{not json",
        headers={"Content-Type": "application/json"},
    )
    assert res.status_code == 400
    assert res.json()["message"] == "Malformed JSON request body"


async def test_register_email_only_then_login(client):
    payload = {"email": "bob@x.com", "password": "Pass1234", "fullName": "Bob"}
    res = await client.post("/api/auth/register", json=payload)
    assert res.status_code == 201
    assert res.json()["username"] is None

    second = await client.post(
        "/api/auth/register",
        json={**payload, "email": "carol@x.com", "fullName": "Carol"},
    )
    assert second.status_code == 201

    res = await client.post(
        "/api/auth/login", json={"email": "bob@x.com", "password": "Pass1234"},
    )
    assert res.status_code == 200
    assert res.json()["token"] == f"mock-jwt-token-{res.json()['userId']}"
