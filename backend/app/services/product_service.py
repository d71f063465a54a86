"""Product Service — product CRUD orchestration.

Invariants:
    - create/update: validate -> resolve category -> map -> persist -> map response
    - update looks the product up before validating, so an unknown id is a
      404 even when the body is also invalid
    - get/update/delete of an unknown id raise NotFoundError
      ("Product not found with id: N")
    - list/search never raise on empty results

Design Decisions:
    - Category resolution: categoryId wins; otherwise the name is tried as an
      exact Category name, then as a CategoryLabel (case-insensitive)
"""

import logging

from app.core.domain_types import CategoryLabel, ProductId
from app.core.errors import BadRequestError, ErrorCategory, NotFoundError
from app.core.repository_protocols import (
    CategoryLike, CategoryRepository, ProductRepository,
)
from app.core.validation_rules import (
    ValidatedProduct, invalid_category_message, validate_product,
)
from app.schemas.product import ProductRequest, ProductResponse
from app.services import entity_mapper

logger = logging.getLogger(__name__)


class ProductService:
    """CRUD and search over products."""

    def __init__(
        self, products: ProductRepository, categories: CategoryRepository,
    ):
        self.products = products
        self.categories = categories

    async def create_product(self, request: ProductRequest) -> ProductResponse:
        valid = self._validate(request)
        category = await self._resolve_category(valid)
        product = entity_mapper.to_entity(valid, category)
        saved = await self.products.add(product)
        logger.info("Product created", extra={"product_id": saved.id})
        return entity_mapper.to_response(saved)

    async def get_all_products(self) -> list[ProductResponse]:
        return [
            entity_mapper.to_response(p) for p in await self.products.list_all()
        ]

    async def search_products(self, keyword: str) -> list[ProductResponse]:
        return [
            entity_mapper.to_response(p)
            for p in await self.products.search_by_name(keyword)
        ]

    async def get_product_by_id(self, product_id: ProductId) -> ProductResponse:
        product = await self.products.get_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        return entity_mapper.to_response(product)

    async def update_product(
        self, product_id: ProductId, request: ProductRequest,
    ) -> ProductResponse:
        product = await self.products.get_by_id(product_id)
        if product is None:
            raise NotFoundError("Product", product_id)
        valid = self._validate(request)
        category = await self._resolve_category(valid)
        entity_mapper.update_entity(product, valid, category)
        saved = await self.products.save(product)
        logger.info("Product updated", extra={"product_id": saved.id})
        return entity_mapper.to_response(saved)

    async def delete_product(self, product_id: ProductId) -> None:
        if not await self.products.exists_by_id(product_id):
            raise NotFoundError("Product", product_id)
        await self.products.delete_by_id(product_id)
        logger.info("Product deleted", extra={"product_id": product_id})

    @staticmethod
    def _validate(request: ProductRequest) -> ValidatedProduct:
        return validate_product(
            name=request.name,
            description=request.description,
            price=request.price,
            quantity=request.quantity,
            category=request.category,
            category_id=request.category_id,
        )

    async def _resolve_category(self, valid: ValidatedProduct) -> CategoryLike:
        if valid.category_id is not None:
            category = await self.categories.get_by_id(valid.category_id)
            if category is None:
                raise BadRequestError(
                    f"Category not found with id: {valid.category_id}",
                    "categoryId", ErrorCategory.BUSINESS_RULE,
                )
            return category

        category = await self.categories.get_by_name(valid.category_name)
        if category is not None:
            return category
        label = CategoryLabel.parse(valid.category_name)
        if label is None:
            raise BadRequestError(
                invalid_category_message(valid.category_name), "category",
            )
        category = await self.categories.get_by_name(label.value)
        if category is None:
            raise BadRequestError(
                f"Category not found with name: {label.value}",
                "category", ErrorCategory.BUSINESS_RULE,
            )
        return category
