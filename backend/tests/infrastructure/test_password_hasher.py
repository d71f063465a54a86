"""Password Hasher — one-way hashing through passlib."""

from app.infrastructure.password_hasher import PasswordHasher


def test_hash_is_not_plaintext_and_salted():
    hasher = PasswordHasher()
    first = hasher.hash("Pass123")
    second = hasher.hash("Pass123")
    assert first != "Pass123"
    assert "Pass123" not in first
    assert first != second


def test_verify():
    hasher = PasswordHasher()
    stored = hasher.hash("Pass123")
    assert hasher.verify("Pass123", stored)
    assert not hasher.verify("Pass124", stored)


def test_verify_malformed_hash_returns_false():
    assert not PasswordHasher().verify("Pass123", "not-a-hash")
