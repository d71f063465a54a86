"""Auth Service — registration and login orchestration.

Invariants:
    - register: normalize -> validate -> uniqueness (username, then email) ->
      hash -> persist; nothing is hashed or written before validation passes
    - username is optional; uniqueness is checked only when one is supplied
    - login: normalize -> presence check -> lookup -> verify hash; read-only
    - Unknown identifier and wrong password produce the same BadRequestError
      ("Invalid <identifier> or password") so responses do not reveal which part failed
    - Raw passwords never appear in logs, errors or return values

Design Decisions:
    - Collaborators injected through the constructor (repository + hasher
      Protocols); routes compose them per request
    - Uniqueness is check-then-insert; the UNIQUE constraints on users are the
      real guarantee and a lost race surfaces as ConflictError from the session
"""

import logging

from app.core.domain_types import LoginIdentifier
from app.core.errors import BadRequestError, ErrorCategory
from app.core.repository_protocols import (
    PasswordHasherLike, UserLike, UserRepository,
)
from app.core.validation_rules import validate_login, validate_registration
from app.models.user import User
from app.schemas.auth import LoginRequest, RegisterRequest

logger = logging.getLogger(__name__)


def placeholder_token(user: UserLike) -> str:
    """Stand-in credential until token issuance exists."""
    return f"mock-jwt-token-{user.id}"


class AuthService:
    """Registers and authenticates users."""

    def __init__(self, users: UserRepository, hasher: PasswordHasherLike):
        self.users = users
        self.hasher = hasher

    async def register(self, request: RegisterRequest) -> UserLike:
        valid = validate_registration(
            username=request.username,
            email=request.email,
            password=request.password,
            full_name=request.full_name,
        )
        if valid.username is not None and await self.users.exists_by_username(
            valid.username,
        ):
            raise BadRequestError(
                "Username already exists", "username",
                ErrorCategory.BUSINESS_RULE,
            )
        if await self.users.exists_by_email(valid.email):
            raise BadRequestError(
                "Email already exists", "email", ErrorCategory.BUSINESS_RULE,
            )

        user = User(
            username=valid.username,
            email=valid.email,
            password_hash=self.hasher.hash(valid.password),
            full_name=valid.full_name,
        )
        saved = await self.users.add(user)
        logger.info("User registered", extra={"user_id": saved.id})
        return saved

    async def login(self, request: LoginRequest) -> UserLike:
        credentials = validate_login(
            email=request.email,
            username=request.username,
            password=request.password,
        )
        failure = BadRequestError(
            f"Invalid {credentials.identifier_type.value} or password",
            None, ErrorCategory.BUSINESS_RULE,
        )

        if credentials.identifier_type is LoginIdentifier.EMAIL:
            user = await self.users.get_by_email(credentials.identifier)
        else:
            user = await self.users.get_by_username(credentials.identifier)

        if user is None or not self.hasher.verify(
            credentials.password, user.password_hash,
        ):
            logger.warning(
                "Login rejected",
                extra={"identifier_type": credentials.identifier_type.value},
            )
            raise failure
        return user
