"""Category Routes — CRUD over /api/categories, mirroring the product routes."""

from fastapi import APIRouter, Depends, Response, status

from app.api.dependencies import get_category_service, require_json
from app.core.domain_types import CategoryId
from app.schemas.category import CategoryRequest, CategoryResponse
from app.services.category_service import CategoryService

router = APIRouter(prefix="/api/categories", tags=["categories"])


@router.get("", response_model=list[CategoryResponse])
async def list_categories(
    service: CategoryService = Depends(get_category_service),
):
    return await service.get_all_categories()


@router.get("/{category_id}", response_model=CategoryResponse)
async def get_category(
    category_id: int, service: CategoryService = Depends(get_category_service),
):
    return await service.get_category_by_id(CategoryId(category_id))


@router.post(
    "", response_model=CategoryResponse, status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(require_json)],
)
async def create_category(
    body: CategoryRequest,
    service: CategoryService = Depends(get_category_service),
):
    return await service.create_category(body)


@router.put(
    "/{category_id}", response_model=CategoryResponse,
    dependencies=[Depends(require_json)],
)
async def update_category(
    category_id: int,
    body: CategoryRequest,
    service: CategoryService = Depends(get_category_service),
):
    return await service.update_category(CategoryId(category_id), body)


@router.delete("/{category_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_category(
    category_id: int, service: CategoryService = Depends(get_category_service),
):
    await service.delete_category(CategoryId(category_id))
    return Response(status_code=status.HTTP_204_NO_CONTENT)
