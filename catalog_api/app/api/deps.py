"""
FastAPI dependencies providing services to route handlers.

Services are stateless apart from their stores, so a fresh instance
per request is cheap; overriding these functions in
``app.dependency_overrides`` swaps the storage used by the routes.
"""

from catalog_api.app.services.category_service import CategoryService
from catalog_api.app.services.product_service import ProductService


def get_category_service() -> CategoryService:
    return CategoryService()


def get_product_service() -> ProductService:
    return ProductService()
