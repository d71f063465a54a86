"""Database Base — declarative Base and timestamp helper shared by all models.

Invariants:
    - All models inherit from app.db.base.Base (single MetaData for Alembic)

Design Decisions:
    - asyncpg driver for PostgreSQL, aiosqlite for local development and tests
"""
