"""SQLAlchemy Repositories — queries against in-memory SQLite.

Tests cover:
    - add() populates id and timestamps inside the unit of work
    - search_by_name is case-insensitive
    - count_by_category and delete_by_id
    - a duplicate email that slips past the service check maps to ConflictError
"""

from datetime import timedelta
from decimal import Decimal

import pytest

from app.core.errors import ConflictError
from app.infrastructure.repositories import (
    SqlCategoryRepository, SqlProductRepository, SqlUserRepository,
)
from app.models.category import Category
from app.models.product import Product
from app.models.user import User


async def test_user_repository_round_trip(sqlite_manager):
    async with sqlite_manager.session() as db:
        users = SqlUserRepository(db)
        saved = await users.add(
            User(username="bob", email="bob@x.com",
                 password_hash="h", full_name="Bob"),
        )
        assert saved.id is not None
        assert saved.created_at is not None

    async with sqlite_manager.session() as db:
        users = SqlUserRepository(db)
        assert await users.exists_by_email("bob@x.com")
        assert await users.exists_by_username("bob")
        assert not await users.exists_by_email("BOB@x.com")
        assert (await users.get_by_username("bob")).email == "bob@x.com"


async def test_duplicate_email_maps_to_conflict(sqlite_manager):
    async with sqlite_manager.session() as db:
        await SqlUserRepository(db).add(
            User(email="dup@x.com", password_hash="h", full_name="A"),
        )
    with pytest.raises(ConflictError) as caught:
        async with sqlite_manager.session() as db:
            await SqlUserRepository(db).add(
                User(email="dup@x.com", password_hash="h", full_name="B"),
            )
    assert caught.value.message == "Email already exists"
    assert caught.value.field == "email"


async def test_product_repository_search_and_count(sqlite_manager):
    async with sqlite_manager.session() as db:
        category = await SqlCategoryRepository(db).add(Category(name="TOOLS"))
        products = SqlProductRepository(db)
        for name in ("Hammer", "Sledgehammer", "Saw"):
            await products.add(
                Product(name=name, price=Decimal("5.00"), quantity=1,
                        category=category),
            )

    async with sqlite_manager.session() as db:
        products = SqlProductRepository(db)
        found = await products.search_by_name("HAMMER")
        assert [p.name for p in found] == ["Hammer", "Sledgehammer"]
        assert found[0].category.name == "TOOLS"
        assert await products.count_by_category(category.id) == 3

        await products.delete_by_id(found[0].id)
        assert not await products.exists_by_id(found[0].id)
        assert len(await products.list_all()) == 2


async def test_category_repository_lookup(sqlite_manager):
    async with sqlite_manager.session() as db:
        categories = SqlCategoryRepository(db)
        saved = await categories.add(Category(name="Garden", description="Out"))
        assert (await categories.get_by_name("Garden")).id == saved.id
        assert await categories.get_by_name("garden") is None
        assert await categories.exists_by_id(saved.id)
        saved.description = "Outdoor"
        updated = await categories.save(saved)
        assert updated.description == "Outdoor"


async def test_timestamps_load_as_aware_utc(sqlite_manager):
    async with sqlite_manager.session() as db:
        await SqlCategoryRepository(db).add(Category(name="Garden"))

    async with sqlite_manager.session() as db:
        loaded = await SqlCategoryRepository(db).get_by_name("Garden")
        assert loaded.created_at.utcoffset() == timedelta(0)
        assert loaded.updated_at.utcoffset() == timedelta(0)
