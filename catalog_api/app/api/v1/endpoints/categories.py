"""
Category endpoints for API v1.

Handlers run the existence and uniqueness checks before calling the
service, then answer with either the resource itself (reads) or a
``{"message": ...}`` confirmation (writes).  Errors are raised as
catalog exceptions and rendered by ``api.error_handlers``.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from catalog_api.app.api.deps import get_category_service
from catalog_api.app.api.error_handlers import unexpected_errors
from catalog_api.app.core.exceptions import ConflictError, NotFoundError
from catalog_api.app.schemas.category import CategoryCreate, CategoryRead, CategoryUpdate
from catalog_api.app.schemas.common import MessageResponse
from catalog_api.app.services.category_service import NOT_FOUND, CategoryService
from catalog_api.app.stores.category_store import DUPLICATE_NAME

router = APIRouter()


@router.get("", response_model=List[CategoryRead])
async def list_categories(
    service: CategoryService = Depends(get_category_service),
) -> List[CategoryRead]:
    """Return all categories ordered by id."""
    return await service.list_categories()


@router.get("/{category_id}", response_model=CategoryRead)
async def get_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> CategoryRead:
    """Retrieve a single category by its ID.  Returns 404 if absent."""
    with unexpected_errors("retrieving category"):
        category = await service.get_category(category_id)
    if category is None:
        raise NotFoundError(NOT_FOUND)
    return category


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_category(
    category_in: CategoryCreate,
    service: CategoryService = Depends(get_category_service),
) -> MessageResponse:
    """Create a category.

    Returns 400 if a field is invalid and 409 if the name is taken.
    """
    with unexpected_errors("registering category"):
        await service.create_category(category_in)
    return MessageResponse(message="Category created successfully")


@router.put("/{category_id}", response_model=MessageResponse)
async def update_category(
    category_id: int,
    category_in: CategoryUpdate,
    service: CategoryService = Depends(get_category_service),
) -> MessageResponse:
    """Partially update a category.

    Only fields present in the body are considered.  Returns 404 for
    an unknown id and 409 if the new name belongs to another category.
    """
    with unexpected_errors("updating category"):
        if not await service.exists_by_id(category_id):
            raise NotFoundError(NOT_FOUND)
        if category_in.name is not None and await service.exists_by_name_excluding_id(
            category_in.name, category_id
        ):
            raise ConflictError(DUPLICATE_NAME)
        await service.update_category(category_id, category_in)
    return MessageResponse(message="Category updated successfully")


@router.delete("/{category_id}", response_model=MessageResponse)
async def delete_category(
    category_id: int,
    service: CategoryService = Depends(get_category_service),
) -> MessageResponse:
    """Delete a category.  Products referencing it are not touched."""
    with unexpected_errors("deleting category"):
        await service.delete_category(category_id)
    return MessageResponse(message="Category deleted successfully")
