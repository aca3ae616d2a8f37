"""
Business logic for categories.

``CategoryService`` sits on top of ``CategoryStore`` and adds
uniqueness checks on create and field-by-field partial updates.
Rename uniqueness on update is not checked here: the API layer calls
``exists_by_name_excluding_id`` before invoking ``update_category``.
"""

import logging
from typing import Any, Dict, List, Optional

from catalog_api.app.core.exceptions import (
    ConflictError,
    InternalError,
    NotFoundError,
    ValidationFailure,
)
from catalog_api.app.schemas.category import ENTITY, CategoryCreate, CategoryRead, CategoryUpdate
from catalog_api.app.schemas.rules import check_description, check_name
from catalog_api.app.stores.category_store import DUPLICATE_NAME, CategoryStore

logger = logging.getLogger(__name__)

NOT_FOUND = "Category does not exist"

# Partial-update fields and the rule each new value must satisfy.
FIELD_RULES = {
    "name": lambda value: check_name(value, ENTITY),
    "description": lambda value: check_description(value, ENTITY),
}


class CategoryService:
    """Service for managing categories."""

    def __init__(self, store: Optional[CategoryStore] = None) -> None:
        self.store = store or CategoryStore()

    async def list_categories(self) -> List[CategoryRead]:
        return [self._to_read(row) for row in self.store.find_all()]

    async def get_category(self, category_id: int) -> Optional[CategoryRead]:
        """Return the category or ``None`` if it does not exist."""
        row = self.store.find_by_id(category_id)
        return self._to_read(row) if row else None

    async def create_category(self, data: CategoryCreate) -> CategoryRead:
        """Insert a new category and return it with its generated id.

        Raises ``ConflictError`` if the name is already taken (exact,
        case-sensitive match).
        """
        if self.store.exists_by_name(data.name):
            raise ConflictError(DUPLICATE_NAME)
        row = self.store.insert(data.name, data.description)
        logger.info("Created category %s '%s'", row["id_category"], data.name)
        return self._to_read(row)

    async def update_category(self, category_id: int, patch: CategoryUpdate) -> CategoryRead:
        """Apply the fields of ``patch`` that are set and differ from the stored values.

        Each changed field is checked against its rule again and a
        ``ValidationFailure`` is raised for the first violation.  When
        nothing changes the current category is returned and the store
        is not written.
        """
        current = self.store.find_by_id(category_id)
        if current is None:
            # Existence is checked by callers before updating.
            raise InternalError("Category not found")

        changes: Dict[str, Any] = {}
        for field, rule in FIELD_RULES.items():
            value = getattr(patch, field)
            if value is None or value == current[field]:
                continue
            try:
                changes[field] = rule(value)
            except ValueError as e:
                raise ValidationFailure(str(e)) from e

        if not changes:
            logger.debug("Category %s unchanged", category_id)
            return self._to_read(current)

        self.store.update(category_id, changes)
        logger.info("Updated category %s fields %s", category_id, sorted(changes))
        return self._to_read({**current, **changes})

    async def delete_category(self, category_id: int) -> None:
        """Delete a category.

        Products referencing the category are left untouched and keep
        the now dangling ``id_category``.
        """
        if not self.store.exists_by_id(category_id):
            raise NotFoundError(NOT_FOUND)
        self.store.delete_by_id(category_id)
        logger.info("Deleted category %s", category_id)

    async def exists_by_id(self, category_id: int) -> bool:
        return self.store.exists_by_id(category_id)

    async def exists_by_name(self, name: str) -> bool:
        return self.store.exists_by_name(name)

    async def exists_by_name_excluding_id(self, name: str, category_id: int) -> bool:
        return self.store.find_by_name_excluding_id(name, category_id) is not None

    @staticmethod
    def _to_read(row: Dict[str, Any]) -> CategoryRead:
        return CategoryRead(
            id_category=row["id_category"],
            name=row["name"],
            description=row["description"],
        )
