"""Product Routes — CRUD and name search over /api/products.

Invariants:
    - GET /api/products?search=x filters by case-insensitive name substring
    - POST → 201, DELETE → 204, unknown id → 404
    - POST/PUT bodies must be application/json (415 otherwise)
"""

from fastapi import APIRouter, Depends, Query, Response, status

from app.api.dependencies import get_product_service, require_json
from app.core.domain_types import ProductId
from app.schemas.product import ProductRequest, ProductResponse
from app.services.product_service import ProductService

router = APIRouter(prefix="/api/products", tags=["products"])


@router.get("", response_model=list[ProductResponse])
async def list_products(
    search: str | None = Query(None),
    service: ProductService = Depends(get_product_service),
):
    if search is not None:
        return await service.search_products(search.strip())
    return await service.get_all_products()


@router.get("/{product_id}", response_model=ProductResponse)
async def get_product(
    product_id: int, service: ProductService = Depends(get_product_service),
):
    return await service.get_product_by_id(ProductId(product_id))


@router.post(
    "", response_model=ProductResponse, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_json)],
)
async def create_product(
    body: ProductRequest,
    service: ProductService = Depends(get_product_service),
):
    return await service.create_product(body)


@router.put(
    "/{product_id}", response_model=ProductResponse,
    dependencies=[Depends(require_json)],
)
async def update_product(
    product_id: int,
    body: ProductRequest,
    service: ProductService = Depends(get_product_service),
):
    return await service.update_product(ProductId(product_id), body)


@router.delete("/{product_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_product(
    product_id: int, service: ProductService = Depends(get_product_service),
):
    await service.delete_product(ProductId(product_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
