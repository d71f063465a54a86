"""ORM Base — declarative Base plus the created/updated timestamp mixin.

Invariants:
    - Every catalog table inherits from Base, so Base.metadata is complete
      for both Alembic and create_all
    - created_at is set once on insert; updated_at moves on every UPDATE
    - Timestamps are timezone-aware UTC on every backend: UTCDateTime stores
      UTC and re-attaches the offset that SQLite drops on load

Design Decisions:
    - Python-side defaults (utc_now) rather than server defaults: the values
      are known before flush and identical across SQLite and PostgreSQL
"""

from datetime import datetime, timezone

from sqlalchemy import DateTime
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column
from sqlalchemy.types import TypeDecorator


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class UTCDateTime(TypeDecorator):
    """DateTime(timezone=True) that always round-trips as aware UTC."""

    impl = DateTime(timezone=True)
    cache_ok = True

    def process_bind_param(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            value = value.replace(tzinfo=timezone.utc)
        value = value.astimezone(timezone.utc)
        # SQLite stores the literal text; keep it offset-free and in UTC
        if dialect.name == "sqlite":
            return value.replace(tzinfo=None)
        return value

    def process_result_value(self, value, dialect):
        if value is None:
            return None
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value.astimezone(timezone.utc)


class Base(DeclarativeBase):
    pass


class TimestampMixin:
    created_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False, default=utc_now,
    )
    updated_at: Mapped[datetime] = mapped_column(
        UTCDateTime(), nullable=False,
        default=utc_now, onupdate=utc_now,
    )
