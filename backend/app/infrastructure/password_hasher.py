"""Password Hashing — one-way hash/verify behind a passlib CryptContext.

Invariants:
    - hash() output never equals its input and embeds its own salt
    - verify() never raises on a malformed stored hash; it returns False

Design Decisions:
    - passlib CryptContext: scheme chosen by settings, deprecated schemes
      still verify so stored hashes survive a scheme change
    - pbkdf2_sha256 default: pure-Python backend, no native build dependency
"""

import logging

from passlib.context import CryptContext
from passlib.exc import UnknownHashError

logger = logging.getLogger(__name__)


class PasswordHasher:
    """Opaque one-way password transformation."""

    def __init__(self, scheme: str = "pbkdf2_sha256"):
        self._context = CryptContext(schemes=[scheme], deprecated="auto")

    def hash(self, raw_password: str) -> str:
        return self._context.hash(raw_password)

    def verify(self, raw_password: str, password_hash: str) -> bool:
        try:
            return self._context.verify(raw_password, password_hash)
        except (UnknownHashError, ValueError):
            logger.warning("Stored password hash is not recognised")
            return False
