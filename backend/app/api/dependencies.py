"""Dependencies — per-request composition of services and request guards.

Invariants:
    - Every service instance shares the request's single AsyncSession (one unit of work)
    - Write endpoints reject non-JSON bodies with 415 before the body is validated

Design Decisions:
    - Explicit constructor composition instead of a container: each service's
      collaborators are visible here
    - PasswordHasher cached per process: CryptContext setup is not free
"""

from functools import lru_cache

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import get_settings
from app.core.errors import UnsupportedMediaTypeError
from app.infrastructure.database import get_db
from app.infrastructure.password_hasher import PasswordHasher
from app.infrastructure.repositories import (
    SqlCategoryRepository, SqlProductRepository, SqlUserRepository,
)
from app.services.auth_service import AuthService
from app.services.category_service import CategoryService
from app.services.product_service import ProductService


@lru_cache
def get_password_hasher() -> PasswordHasher:
    return PasswordHasher(get_settings().password_hash_scheme)


async def require_json(request: Request) -> None:
    """Reject write requests whose Content-Type is not application/json."""
    content_type = request.headers.get("content-type")
    media_type = (content_type or "").split(";")[0].strip().lower()
    if media_type != "application/json":
        raise UnsupportedMediaTypeError(content_type)


def get_auth_service(
    db: AsyncSession = Depends(get_db),
    hasher: PasswordHasher = Depends(get_password_hasher),
) -> AuthService:
    return AuthService(SqlUserRepository(db), hasher)


def get_product_service(db: AsyncSession = Depends(get_db)) -> ProductService:
    return ProductService(SqlProductRepository(db), SqlCategoryRepository(db))


def get_category_service(db: AsyncSession = Depends(get_db)) -> CategoryService:
    return CategoryService(SqlCategoryRepository(db), SqlProductRepository(db))
