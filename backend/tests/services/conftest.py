"""Service test fixtures — services wired to in-memory fakes.

Invariants:
    - No database: repositories are tests/fakes.py implementations
    - Default categories are seeded through the real seeding function
"""

import pytest

from app.services.auth_service import AuthService
from app.services.category_service import CategoryService, seed_default_categories
from app.services.product_service import ProductService
from tests.fakes import (
    CountingHasher,
    InMemoryCategoryRepository,
    InMemoryProductRepository,
    InMemoryUserRepository,
)


@pytest.fixture
def users():
    return InMemoryUserRepository()


@pytest.fixture
def hasher():
    return CountingHasher()


@pytest.fixture
async def categories():
    repo = InMemoryCategoryRepository()
    await seed_default_categories(repo)
    repo.writes = 0
    return repo


@pytest.fixture
def products():
    return InMemoryProductRepository()


@pytest.fixture
def auth_service(users, hasher):
    return AuthService(users, hasher)


@pytest.fixture
def product_service(products, categories):
    return ProductService(products, categories)


@pytest.fixture
def category_service(categories, products):
    return CategoryService(categories, products)
