"""Entity Mapper — conversions between validated requests, ORM entities and response DTOs.

Invariants:
    - Pure and stateless: no IO, no session access
    - to_entity/to_response map None to None instead of raising
    - update_entity with a None entity or request is a no-op
    - update_entity preserves id and created_at

Design Decisions:
    - to_entity takes the ValidatedProduct produced by the validation rules,
      so only normalized (trimmed) values can reach an entity
    - The resolved Category is passed in by the service; the mapper never looks it up
"""

from app.core.repository_protocols import CategoryLike, ProductLike, UserLike
from app.core.validation_rules import ValidatedCategory, ValidatedProduct
from app.models.category import Category
from app.models.product import Product
from app.schemas.auth import LoginResponse, RegisterResponse
from app.schemas.category import CategoryResponse
from app.schemas.product import ProductResponse


def to_entity(
    request: ValidatedProduct | None, category: CategoryLike | None,
) -> Product | None:
    if request is None:
        return None
    product = Product(
        name=request.name,
        description=request.description,
        price=request.price,
        quantity=request.quantity,
    )
    if category is not None:
        product.category = category
        product.category_id = category.id
    return product


def update_entity(
    product: ProductLike | None,
    request: ValidatedProduct | None,
    category: CategoryLike | None,
) -> None:
    if product is None or request is None:
        return
    product.name = request.name
    product.description = request.description
    product.price = request.price
    product.quantity = request.quantity
    if category is not None:
        product.category = category
        product.category_id = category.id


def to_response(product: ProductLike | None) -> ProductResponse | None:
    if product is None:
        return None
    return ProductResponse(
        id=product.id,
        name=product.name,
        description=product.description,
        price=product.price,
        quantity=product.quantity,
        category=category_to_response(product.category),
        created_at=product.created_at,
        updated_at=product.updated_at,
    )


# ─── Category ────────────────────────────────────────────────────

def category_to_entity(request: ValidatedCategory | None) -> Category | None:
    if request is None:
        return None
    return Category(name=request.name, description=request.description)


def update_category_entity(
    category: CategoryLike | None, request: ValidatedCategory | None,
) -> None:
    if category is None or request is None:
        return
    category.name = request.name
    category.description = request.description


def category_to_response(category: CategoryLike | None) -> CategoryResponse | None:
    if category is None:
        return None
    return CategoryResponse(
        id=category.id,
        name=category.name,
        description=category.description,
        created_at=category.created_at,
        updated_at=category.updated_at,
    )


# ─── User ────────────────────────────────────────────────────────

def to_register_response(user: UserLike) -> RegisterResponse:
    return RegisterResponse(
        user_id=user.id,
        username=user.username,
        email=user.email,
        full_name=user.full_name,
    )


def to_login_response(user: UserLike, token: str) -> LoginResponse:
    return LoginResponse(
        user_id=user.id,
        username=user.username,
        email=user.email,
        full_name=user.full_name,
        token=token,
    )
