"""Product Schemas — Product CRUD payloads.

Invariants:
    - category (label or category name) and categoryId are both optional on the
      wire; the validation rules require one of them
    - price is exact Decimal internally, a JSON number on the wire

Design Decisions:
    - PlainSerializer for price: Pydantic serializes Decimal as a string by default
"""

from datetime import datetime
from decimal import Decimal
from typing import Annotated

from pydantic import PlainSerializer

from app.schemas import CamelModel
from app.schemas.category import CategoryResponse

JsonDecimal = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json"),
]


class ProductRequest(CamelModel):
    name: str | None = None
    description: str | None = None
    price: Decimal | None = None
    quantity: int | None = None
    category: str | None = None
    category_id: int | None = None


class ProductResponse(CamelModel):
    id: int
    name: str
    description: str | None = None
    price: JsonDecimal
    quantity: int
    category: CategoryResponse | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
