"""Boundary Protocols — contracts between services and persistence.

Invariants:
    - Core NEVER imports from shell — dependency arrows point inward only
    - All IO operations accessed through Protocol types
    - Implementations provided by shell via constructor injection
      (SQLAlchemy in infrastructure/repositories.py, in-memory fakes in tests)

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Async in Protocol: implementations do IO; the validation rules that
      services run around these calls stay synchronous and pure
    - add()/save() return the record with id and timestamps populated, so
      services can map the response inside the same unit of work
"""

from datetime import datetime
from decimal import Decimal
from typing import Protocol

from app.core.domain_types import CategoryId, ProductId, UserId


class UserLike(Protocol):
    """Structural contract for persisted users."""
    id: UserId
    username: str | None
    email: str
    password_hash: str
    full_name: str
    created_at: datetime
    updated_at: datetime


class CategoryLike(Protocol):
    """Structural contract for persisted categories."""
    id: CategoryId
    name: str
    description: str | None
    created_at: datetime
    updated_at: datetime


class ProductLike(Protocol):
    """Structural contract for persisted products."""
    id: ProductId
    name: str
    description: str | None
    price: Decimal
    quantity: int
    category_id: CategoryId
    category: CategoryLike | None
    created_at: datetime
    updated_at: datetime


class UserRepository(Protocol):
    """Contract for user persistence."""
    async def get_by_email(self, email: str) -> UserLike | None: ...
    async def get_by_username(self, username: str) -> UserLike | None: ...
    async def exists_by_email(self, email: str) -> bool: ...
    async def exists_by_username(self, username: str) -> bool: ...
    async def add(self, user: UserLike) -> UserLike: ...


class CategoryRepository(Protocol):
    """Contract for category persistence."""
    async def get_by_id(self, category_id: CategoryId) -> CategoryLike | None: ...
    async def get_by_name(self, name: str) -> CategoryLike | None: ...
    async def list_all(self) -> list[CategoryLike]: ...
    async def exists_by_id(self, category_id: CategoryId) -> bool: ...
    async def exists_by_name(self, name: str) -> bool: ...
    async def add(self, category: CategoryLike) -> CategoryLike: ...
    async def save(self, category: CategoryLike) -> CategoryLike: ...
    async def delete_by_id(self, category_id: CategoryId) -> None: ...


class ProductRepository(Protocol):
    """Contract for product persistence."""
    async def get_by_id(self, product_id: ProductId) -> ProductLike | None: ...
    async def list_all(self) -> list[ProductLike]: ...
    async def search_by_name(self, keyword: str) -> list[ProductLike]: ...
    async def exists_by_id(self, product_id: ProductId) -> bool: ...
    async def count_by_category(self, category_id: CategoryId) -> int: ...
    async def add(self, product: ProductLike) -> ProductLike: ...
    async def save(self, product: ProductLike) -> ProductLike: ...
    async def delete_by_id(self, product_id: ProductId) -> None: ...


class PasswordHasherLike(Protocol):
    """One-way password transformation; treated as opaque by services."""
    def hash(self, raw_password: str) -> str: ...
    def verify(self, raw_password: str, password_hash: str) -> bool: ...
