"""Product ORM — catalog item owned by a Category.

Invariants:
    - name 3-100 chars, description <= 500 chars (enforced by validation rules)
    - price is exact decimal (Numeric 12,2), 0 < price <= 999,999,999
    - quantity 0..99,999
    - category_id is a non-null FK to categories.id

Design Decisions:
    - category relationship loaded with selectin: async sessions cannot lazy-load,
      and every product response embeds its category
    - ondelete RESTRICT: category deletion is refused while products reference it
"""

from decimal import Decimal

from sqlalchemy import (
    String, Integer, Numeric, ForeignKey, CheckConstraint,
)
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base import Base, TimestampMixin


class Product(TimestampMixin, Base):
    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint(
            "price > 0 AND price <= 999999999", name="ck_products_price_range",
        ),
        CheckConstraint(
            "quantity >= 0 AND quantity <= 99999",
            name="ck_products_quantity_range",
        ),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    description: Mapped[str | None] = mapped_column(String(500), nullable=True)
    price: Mapped[Decimal] = mapped_column(Numeric(12, 2), nullable=False)
    quantity: Mapped[int] = mapped_column(Integer, nullable=False, default=0)
    category_id: Mapped[int] = mapped_column(
        ForeignKey("categories.id", ondelete="RESTRICT"), nullable=False,
    )

    category: Mapped["Category"] = relationship("Category", lazy="selectin")

    def __repr__(self) -> str:
        return f"<Product id={self.id} name={self.name!r}>"
