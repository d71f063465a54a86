"""Category Schemas — Category CRUD payloads and the nested product summary."""

from datetime import datetime

from app.schemas import CamelModel


class CategoryRequest(CamelModel):
    name: str | None = None
    description: str | None = None


class CategoryResponse(CamelModel):
    id: int
    name: str
    description: str | None = None
    created_at: datetime | None = None
    updated_at: datetime | None = None
