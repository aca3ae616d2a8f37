"""
Storage layer.

One store class per entity, each mapping its operations directly onto
SQL against the tables created in ``core.db``.  Stores contain no
business rules.
"""

from .category_store import CategoryStore
from .product_store import ProductStore

__all__ = ["CategoryStore", "ProductStore"]
