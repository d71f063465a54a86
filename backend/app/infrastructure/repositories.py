"""SQLAlchemy Repositories — async implementations of the core persistence Protocols.

Invariants:
    - Repositories never commit; the session's unit of work does
    - add()/save() flush and refresh so ids, timestamps and the product's
      category are populated before the service maps a response
    - Name search is a case-insensitive substring match with LIKE wildcards escaped

Design Decisions:
    - One class per aggregate, each holding the request-scoped AsyncSession
    - exists_* use SELECT of the primary key only, not full row loads
"""

from sqlalchemy import delete, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models.category import Category
from app.models.product import Product
from app.models.user import User


class SqlUserRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_email(self, email: str) -> User | None:
        result = await self.db.execute(select(User).where(User.email == email))
        return result.scalar_one_or_none()

    async def get_by_username(self, username: str) -> User | None:
        result = await self.db.execute(
            select(User).where(User.username == username),
        )
        return result.scalar_one_or_none()

    async def exists_by_email(self, email: str) -> bool:
        result = await self.db.execute(
            select(User.id).where(User.email == email).limit(1),
        )
        return result.first() is not None

    async def exists_by_username(self, username: str) -> bool:
        result = await self.db.execute(
            select(User.id).where(User.username == username).limit(1),
        )
        return result.first() is not None

    async def add(self, user: User) -> User:
        self.db.add(user)
        await self.db.flush()
        await self.db.refresh(user)
        return user


class SqlCategoryRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, category_id: int) -> Category | None:
        return await self.db.get(Category, category_id)

    async def get_by_name(self, name: str) -> Category | None:
        result = await self.db.execute(
            select(Category).where(Category.name == name),
        )
        return result.scalar_one_or_none()

    async def list_all(self) -> list[Category]:
        result = await self.db.execute(select(Category).order_by(Category.id))
        return list(result.scalars().all())

    async def exists_by_id(self, category_id: int) -> bool:
        result = await self.db.execute(
            select(Category.id).where(Category.id == category_id),
        )
        return result.first() is not None

    async def exists_by_name(self, name: str) -> bool:
        result = await self.db.execute(
            select(Category.id).where(Category.name == name).limit(1),
        )
        return result.first() is not None

    async def add(self, category: Category) -> Category:
        self.db.add(category)
        await self.db.flush()
        await self.db.refresh(category)
        return category

    async def save(self, category: Category) -> Category:
        await self.db.flush()
        await self.db.refresh(category)
        return category

    async def delete_by_id(self, category_id: int) -> None:
        await self.db.execute(delete(Category).where(Category.id == category_id))


class SqlProductRepository:
    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, product_id: int) -> Product | None:
        return await self.db.get(Product, product_id)

    async def list_all(self) -> list[Product]:
        result = await self.db.execute(select(Product).order_by(Product.id))
        return list(result.scalars().all())

    async def search_by_name(self, keyword: str) -> list[Product]:
        result = await self.db.execute(
            select(Product)
            .where(
                func.lower(Product.name).contains(
                    keyword.lower(), autoescape=True,
                ),
            )
            .order_by(Product.id),
        )
        return list(result.scalars().all())

    async def exists_by_id(self, product_id: int) -> bool:
        result = await self.db.execute(
            select(Product.id).where(Product.id == product_id),
        )
        return result.first() is not None

    async def count_by_category(self, category_id: int) -> int:
        result = await self.db.execute(
            select(func.count(Product.id)).where(
                Product.category_id == category_id,
            ),
        )
        return result.scalar_one()

    async def add(self, product: Product) -> Product:
        self.db.add(product)
        await self.db.flush()
        await self.db.refresh(product)
        return product

    async def save(self, product: Product) -> Product:
        await self.db.flush()
        await self.db.refresh(product)
        return product

    async def delete_by_id(self, product_id: int) -> None:
        await self.db.execute(delete(Product).where(Product.id == product_id))
