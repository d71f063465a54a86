"""Pydantic Schemas — request/response contracts for API endpoints (DTOs).

Invariants:
    - Wire names are camelCase (fullName, categoryId, createdAt); attributes are snake_case
    - Request schemas only coerce types; business rules live in core/validation_rules.py
      so clients see the same messages whichever layer rejects them

Design Decisions:
    - Separate from models: schemas are API contracts, models are persistence
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """Base for DTOs exchanged as camelCase JSON."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
