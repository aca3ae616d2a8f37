"""
Business logic for products.

``ProductService`` uses ``ProductStore`` for products and
``CategoryStore`` only to resolve the referenced category when a
product is read back.  Writes carry the category as a bare id; the
category's existence and the product name's uniqueness are checked by
the API layer before ``create_product`` and ``update_product`` are
called.
"""

import logging
from typing import Any, Dict, List, Optional

from catalog_api.app.core.exceptions import InternalError, NotFoundError
from catalog_api.app.schemas.product import ProductCreate, ProductRead, ProductUpdate
from catalog_api.app.stores.category_store import CategoryStore
from catalog_api.app.stores.product_store import ProductStore

logger = logging.getLogger(__name__)

NOT_FOUND = "Product does not exist"

UPDATABLE_FIELDS = ("name", "description", "total_quantity", "price", "id_category")


class ProductService:
    """Service for managing products."""

    def __init__(
        self,
        store: Optional[ProductStore] = None,
        category_store: Optional[CategoryStore] = None,
    ) -> None:
        self.store = store or ProductStore()
        self.category_store = category_store or CategoryStore()

    async def list_products(self) -> List[ProductRead]:
        rows = self.store.find_all()
        if not rows:
            return []
        names = {row["id_category"]: row["name"] for row in self.category_store.find_all()}
        return [self._to_read(row, names.get(row["id_category"])) for row in rows]

    async def get_product(self, product_id: int) -> Optional[ProductRead]:
        """Return the product or ``None`` if it does not exist."""
        row = self.store.find_by_id(product_id)
        if row is None:
            return None
        return self._resolve(row)

    async def create_product(self, data: ProductCreate) -> ProductRead:
        """Persist a new product and return it with its generated id."""
        row = self.store.insert(
            data.name,
            data.description,
            data.total_quantity,
            data.price,
            data.id_category,
        )
        logger.info(
            "Created product %s '%s' in category %s",
            row["id_product"],
            data.name,
            data.id_category,
        )
        return self._resolve(row)

    async def update_product(self, product_id: int, patch: ProductUpdate) -> ProductRead:
        """Apply the fields of ``patch`` that are set and differ from the stored values.

        A new ``id_category`` simply replaces the stored id.  When
        nothing changes the store is not written.
        """
        current = self.store.find_by_id(product_id)
        if current is None:
            # Existence is checked by callers before updating.
            raise InternalError("Product not found")

        changes: Dict[str, Any] = {}
        for field in UPDATABLE_FIELDS:
            value = getattr(patch, field)
            if value is not None and value != current[field]:
                changes[field] = value

        if not changes:
            logger.debug("Product %s unchanged", product_id)
            return self._resolve(current)

        self.store.update(product_id, changes)
        logger.info("Updated product %s fields %s", product_id, sorted(changes))
        return self._resolve({**current, **changes})

    async def delete_product(self, product_id: int) -> None:
        if not self.store.exists_by_id(product_id):
            raise NotFoundError(NOT_FOUND)
        self.store.delete_by_id(product_id)
        logger.info("Deleted product %s", product_id)

    async def exists_by_id(self, product_id: int) -> bool:
        return self.store.exists_by_id(product_id)

    async def exists_by_name(self, name: str) -> bool:
        return self.store.exists_by_name(name)

    async def exists_by_name_excluding_id(self, name: str, product_id: int) -> bool:
        return self.store.find_by_name_excluding_id(name, product_id) is not None

    def _resolve(self, row: Dict[str, Any]) -> ProductRead:
        category = self.category_store.find_by_id(row["id_category"])
        if category is None:
            logger.warning(
                "Product %s references missing category %s",
                row["id_product"],
                row["id_category"],
            )
        return self._to_read(row, category["name"] if category else None)

    @staticmethod
    def _to_read(row: Dict[str, Any], category_name: Optional[str]) -> ProductRead:
        return ProductRead(
            id_product=row["id_product"],
            name=row["name"],
            description=row["description"],
            total_quantity=row["total_quantity"],
            price=row["price"],
            id_category=row["id_category"],
            category_name=category_name,
        )
