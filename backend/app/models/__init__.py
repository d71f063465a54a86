"""ORM Models — SQLAlchemy declarative models for users, categories and products.

Invariants:
    - All models inherit from Base (db/base.py)
    - Uniqueness of users.username, users.email and categories.name is enforced
      by the storage layer as well as by services

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from app.models.user import User  # noqa: F401
from app.models.category import Category  # noqa: F401
from app.models.product import Product  # noqa: F401
