"""
Top-level router for version 1 of the API.

This router aggregates the entity routers under a unified prefix.
When a new entity is introduced, include its router here.
"""

from fastapi import APIRouter

from .endpoints import categories, health, products

router = APIRouter()

router.include_router(categories.router, prefix="/categories", tags=["categories"])
router.include_router(products.router, prefix="/products", tags=["products"])
router.include_router(health.router, prefix="/health", tags=["health"])
