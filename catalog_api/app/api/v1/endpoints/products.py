"""
Product endpoints for API v1.

Same shape as the category routes.  Creating or updating a product
additionally requires the referenced category to exist at that
moment; a missing category is reported as 400 before anything is
written.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from catalog_api.app.api.deps import get_category_service, get_product_service
from catalog_api.app.api.error_handlers import unexpected_errors
from catalog_api.app.core.exceptions import (
    CategoryReferenceError,
    ConflictError,
    NotFoundError,
)
from catalog_api.app.schemas.common import MessageResponse
from catalog_api.app.schemas.product import ProductCreate, ProductRead, ProductUpdate
from catalog_api.app.services.category_service import CategoryService
from catalog_api.app.services.product_service import NOT_FOUND, ProductService
from catalog_api.app.stores.product_store import DUPLICATE_NAME

router = APIRouter()

MISSING_CATEGORY = (
    "The specified product category does not exist. Please verify the entered data."
)


@router.get("", response_model=List[ProductRead])
async def list_products(
    service: ProductService = Depends(get_product_service),
) -> List[ProductRead]:
    """Return all products ordered by id, each with its category name."""
    return await service.list_products()


@router.get("/{product_id}", response_model=ProductRead)
async def get_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> ProductRead:
    """Retrieve a single product by its ID.  Returns 404 if absent."""
    with unexpected_errors("retrieving product"):
        product = await service.get_product(product_id)
    if product is None:
        raise NotFoundError(NOT_FOUND)
    return product


@router.post("", response_model=MessageResponse, status_code=status.HTTP_201_CREATED)
async def create_product(
    product_in: ProductCreate,
    service: ProductService = Depends(get_product_service),
    categories: CategoryService = Depends(get_category_service),
) -> MessageResponse:
    """Create a product.

    Returns 400 for an invalid field or unknown ``idCategory`` and 409
    if the name is taken.
    """
    with unexpected_errors("registering product"):
        if not await categories.exists_by_id(product_in.id_category):
            raise CategoryReferenceError(MISSING_CATEGORY)
        if await service.exists_by_name(product_in.name):
            raise ConflictError(DUPLICATE_NAME)
        await service.create_product(product_in)
    return MessageResponse(message="Product created successfully")


@router.put("/{product_id}", response_model=MessageResponse)
async def update_product(
    product_id: int,
    product_in: ProductUpdate,
    service: ProductService = Depends(get_product_service),
    categories: CategoryService = Depends(get_category_service),
) -> MessageResponse:
    """Partially update a product.

    Only fields present in the body are considered.  A supplied
    ``idCategory`` must reference an existing category.
    """
    with unexpected_errors("updating product"):
        if not await service.exists_by_id(product_id):
            raise NotFoundError(NOT_FOUND)
        if product_in.id_category is not None and not await categories.exists_by_id(
            product_in.id_category
        ):
            raise CategoryReferenceError(MISSING_CATEGORY)
        if product_in.name is not None and await service.exists_by_name_excluding_id(
            product_in.name, product_id
        ):
            raise ConflictError(DUPLICATE_NAME)
        await service.update_product(product_id, product_in)
    return MessageResponse(message="Product updated successfully")


@router.delete("/{product_id}", response_model=MessageResponse)
async def delete_product(
    product_id: int,
    service: ProductService = Depends(get_product_service),
) -> MessageResponse:
    """Delete a product."""
    with unexpected_errors("deleting product"):
        await service.delete_product(product_id)
    return MessageResponse(message="Product deleted successfully")
