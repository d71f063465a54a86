"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - UserId, ProductId, CategoryId wrap ints assigned by the store
    - CategoryLabel is a closed set of exactly 7 labels
    - CategoryLabel.parse is total: unknown input yields None, never an exception

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

UserId = NewType("UserId", int)
ProductId = NewType("ProductId", int)
CategoryId = NewType("CategoryId", int)


# ─── Enums ───────────────────────────────────────────────────────

_DISPLAY_NAMES = {
    "ELECTRONICS": "Electronics",
    "CLOTHING": "Clothing",
    "FOOD": "Food",
    "BOOKS": "Books",
    "SPORTS": "Sports",
    "HOME": "Home",
    "OTHER": "Other",
}


class CategoryLabel(str, Enum):
    """The fixed product category labels seeded as Category rows."""
    ELECTRONICS = "ELECTRONICS"
    CLOTHING = "CLOTHING"
    FOOD = "FOOD"
    BOOKS = "BOOKS"
    SPORTS = "SPORTS"
    HOME = "HOME"
    OTHER = "OTHER"

    @property
    def display_name(self) -> str:
        return _DISPLAY_NAMES[self.value]

    @classmethod
    def parse(cls, raw: str | None) -> "CategoryLabel | None":
        """Case-insensitive lookup of a label; None when raw is not a label."""
        if raw is None:
            return None
        try:
            return cls(raw.strip().upper())
        except ValueError:
            return None

    @classmethod
    def valid_labels(cls) -> str:
        return ", ".join(label.value for label in cls)


class LoginIdentifier(str, Enum):
    """Which field a login request identifies the user by."""
    EMAIL = "email"
    USERNAME = "username"
