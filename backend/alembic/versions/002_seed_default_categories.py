"""Seed one category row per built-in category label.

Revision ID: 002_seed_categories
Revises: 001_initial
Create Date: 2026-10-17

Rows already present by name are left alone, so this is safe on databases
that were bootstrapped with create_tables_on_startup.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '002_seed_categories'
down_revision: Union[str, None] = '001_initial'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None

DEFAULT_CATEGORIES = (
    ('ELECTRONICS', 'Electronics'),
    ('CLOTHING', 'Clothing'),
    ('FOOD', 'Food'),
    ('BOOKS', 'Books'),
    ('SPORTS', 'Sports'),
    ('HOME', 'Home'),
    ('OTHER', 'Other'),
)


def upgrade() -> None:
    conn = op.get_bind()
    existing = {
        row[0] for row in conn.execute(sa.text('SELECT name FROM categories'))
    }
    for name, description in DEFAULT_CATEGORIES:
        if name in existing:
            continue
        conn.execute(
            sa.text(
                'INSERT INTO categories (name, description) '
                'VALUES (:name, :description)'
            ),
            {'name': name, 'description': description},
        )


def downgrade() -> None:
    conn = op.get_bind()
    for name, _ in DEFAULT_CATEGORIES:
        conn.execute(
            sa.text(
                'DELETE FROM categories WHERE name = :name AND NOT EXISTS '
                '(SELECT 1 FROM products WHERE products.category_id = categories.id)'
            ),
            {'name': name},
        )
