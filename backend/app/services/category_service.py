"""Category Service — category CRUD orchestration and default seeding.

Invariants:
    - Category names are unique, compared case-sensitively after trimming
    - Rename skips the uniqueness check when the name is unchanged
    - A category referenced by products cannot be deleted
    - seed_default_categories is idempotent: existing labels are left untouched
"""

import logging

from app.core.domain_types import CategoryId, CategoryLabel
from app.core.errors import BadRequestError, ErrorCategory, NotFoundError
from app.core.repository_protocols import CategoryRepository, ProductRepository
from app.core.validation_rules import validate_category
from app.models.category import Category
from app.schemas.category import CategoryRequest, CategoryResponse
from app.services import entity_mapper

logger = logging.getLogger(__name__)


def _already_exists(name: str) -> BadRequestError:
    return BadRequestError(
        f"Category with name '{name}' already exists", "name",
        ErrorCategory.BUSINESS_RULE,
    )


class CategoryService:
    """CRUD over categories."""

    def __init__(
        self, categories: CategoryRepository, products: ProductRepository,
    ):
        self.categories = categories
        self.products = products

    async def create_category(self, request: CategoryRequest) -> CategoryResponse:
        valid = validate_category(
            name=request.name, description=request.description,
        )
        if await self.categories.exists_by_name(valid.name):
            raise _already_exists(valid.name)
        saved = await self.categories.add(entity_mapper.category_to_entity(valid))
        logger.info("Category created", extra={"category_id": saved.id})
        return entity_mapper.category_to_response(saved)

    async def get_all_categories(self) -> list[CategoryResponse]:
        return [
            entity_mapper.category_to_response(c)
            for c in await self.categories.list_all()
        ]

    async def get_category_by_id(
        self, category_id: CategoryId,
    ) -> CategoryResponse:
        category = await self.categories.get_by_id(category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        return entity_mapper.category_to_response(category)

    async def update_category(
        self, category_id: CategoryId, request: CategoryRequest,
    ) -> CategoryResponse:
        category = await self.categories.get_by_id(category_id)
        if category is None:
            raise NotFoundError("Category", category_id)
        valid = validate_category(
            name=request.name, description=request.description,
        )
        if (
            category.name != valid.name
            and await self.categories.exists_by_name(valid.name)
        ):
            raise _already_exists(valid.name)
        entity_mapper.update_category_entity(category, valid)
        saved = await self.categories.save(category)
        logger.info("Category updated", extra={"category_id": saved.id})
        return entity_mapper.category_to_response(saved)

    async def delete_category(self, category_id: CategoryId) -> None:
        if not await self.categories.exists_by_id(category_id):
            raise NotFoundError("Category", category_id)
        in_use = await self.products.count_by_category(category_id)
        if in_use:
            raise BadRequestError(
                f"Category is in use by {in_use} product(s)", None,
                ErrorCategory.BUSINESS_RULE,
            )
        await self.categories.delete_by_id(category_id)
        logger.info("Category deleted", extra={"category_id": category_id})


async def seed_default_categories(categories: CategoryRepository) -> int:
    """Insert a row for each CategoryLabel that is missing. Returns rows added."""
    added = 0
    for label in CategoryLabel:
        if await categories.exists_by_name(label.value):
            continue
        await categories.add(
            Category(name=label.value, description=label.display_name),
        )
        added += 1
    if added:
        logger.info(f"Seeded {added} default categories")
    return added
