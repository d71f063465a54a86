"""Database Session Manager — async engine and unit-of-work sessions.

Invariants:
    - One request = one AsyncSession = one unit of work: commit when the
      block exits cleanly, rollback on any exception, close always
    - SQLAlchemy exceptions never leave this module: IntegrityError becomes
      ConflictError (409), everything else becomes DatabaseError (503)
    - A unique-constraint conflict names the colliding field when the
      driver message identifies it (users.email, users.username,
      categories.name)

Design Decisions:
    - Module-level db_manager assigned by init_db() during lifespan startup;
      importing this module opens no connections
    - expire_on_commit=False: responses are built from entities after commit
      and async sessions cannot lazy-load
    - Pool sizing only applies to server databases; SQLite uses its default pool
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncGenerator

from sqlalchemy import text
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)

from app.core.errors import CatalogError, ConflictError, DatabaseError
from app.db.base import Base

logger = logging.getLogger(__name__)

# (substrings found in SQLite/PostgreSQL messages, message, field)
_UNIQUE_VIOLATIONS = (
    (("users.email", "users_email"), "Email already exists", "email"),
    (("users.username", "users_username"), "Username already exists", "username"),
    (
        ("categories.name", "categories_name"),
        "Category name already exists", "name",
    ),
)


def _conflict_from(exc: IntegrityError) -> ConflictError:
    detail = str(exc.orig).lower()
    for markers, message, field in _UNIQUE_VIOLATIONS:
        if any(marker in detail for marker in markers):
            return ConflictError(message, field)
    if "foreign key" in detail:
        return ConflictError("Resource is referenced by other records")
    return ConflictError()


def translate_db_error(exc: SQLAlchemyError) -> CatalogError:
    """Map a SQLAlchemy exception onto the catalog error hierarchy."""
    if isinstance(exc, IntegrityError):
        return _conflict_from(exc)
    if isinstance(exc, OperationalError):
        return DatabaseError("connection or operational error", "execute")
    return DatabaseError("operation failed", "query")


class DatabaseSessionManager:
    def __init__(
        self, database_url: str, pool_size: int = 20, max_overflow: int = 10,
    ):
        engine_kwargs = {"pool_pre_ping": True}
        if not database_url.startswith("sqlite"):
            engine_kwargs.update(
                pool_size=pool_size, max_overflow=max_overflow, pool_recycle=3600,
            )
        self.engine = create_async_engine(database_url, **engine_kwargs)
        self._session_factory = async_sessionmaker(
            self.engine, class_=AsyncSession, expire_on_commit=False,
        )

    @asynccontextmanager
    async def session(self) -> AsyncGenerator[AsyncSession, None]:
        """Unit of work: commit on clean exit, rollback on any exception."""
        session = self._session_factory()
        try:
            yield session
            await session.commit()
        except SQLAlchemyError as e:
            await session.rollback()
            error = translate_db_error(e)
            log = logger.warning if isinstance(error, ConflictError) else logger.error
            log(
                f"{type(e).__name__} translated to {error.code}",
                extra={"error_code": error.code},
            )
            raise error from e
        except Exception:
            await session.rollback()
            raise
        finally:
            await session.close()

    async def create_all(self) -> None:
        """Create missing tables from ORM metadata (development bootstrap)."""
        import app.models  # noqa: F401

        async with self.engine.begin() as conn:
            await conn.run_sync(Base.metadata.create_all)

    async def health_check(self) -> bool:
        try:
            async with self.session() as db:
                await db.execute(text("SELECT 1"))
        except (DatabaseError, OSError) as e:
            logger.error(f"Database health check failed: {e}")
            return False
        return True

    async def dispose(self) -> None:
        await self.engine.dispose()


db_manager: DatabaseSessionManager | None = None


def init_db(database_url: str, **kwargs) -> DatabaseSessionManager:
    global db_manager
    db_manager = DatabaseSessionManager(database_url, **kwargs)
    return db_manager


async def get_db() -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency: one unit-of-work session per request."""
    if db_manager is None:
        raise RuntimeError("Database not initialized")
    async with db_manager.session() as session:
        yield session
