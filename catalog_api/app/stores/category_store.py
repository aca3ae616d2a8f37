"""
Persistent collection of categories backed by the ``categories`` table.

Every method opens its own connection and commits before returning,
so each call is atomic on its own; callers that combine several calls
(check-then-insert) are not protected by a transaction.  The UNIQUE
constraint on ``name`` is the last line of defence against duplicate
names and surfaces as ``ConflictError``.
"""

import sqlite3
from typing import Any, Callable, Dict, List, Optional

from catalog_api.app.core.db import get_connection, is_unique_violation
from catalog_api.app.core.exceptions import ConflictError

DUPLICATE_NAME = "Category name already exists. Please choose another name."

COLUMNS = "id_category, name, description"
UPDATABLE = ("name", "description")


class CategoryStore:
    """Row-level access to categories.  Rows are returned as plain dicts."""

    def __init__(self, connect: Callable[[], sqlite3.Connection] = get_connection) -> None:
        self._connect = connect

    def insert(self, name: str, description: str) -> Dict[str, Any]:
        conn = self._connect()
        try:
            cursor = conn.cursor()
            try:
                cursor.execute(
                    "INSERT INTO categories (name, description) VALUES (?, ?)",
                    (name, description),
                )
            except sqlite3.IntegrityError as e:
                if is_unique_violation(e):
                    raise ConflictError(DUPLICATE_NAME) from e
                raise
            category_id = cursor.lastrowid
            conn.commit()
            return {"id_category": category_id, "name": name, "description": description}
        finally:
            conn.close()

    def find_by_id(self, category_id: int) -> Optional[Dict[str, Any]]:
        conn = self._connect()
        try:
            row = conn.execute(
                f"SELECT {COLUMNS} FROM categories WHERE id_category = ?",
                (category_id,),
            ).fetchone()
            return dict(row) if row else None
        finally:
            conn.close()

    def find_all(self) -> List[Dict[str, Any]]:
        conn = self._connect()
        try:
            rows = conn.execute(
                f"SELECT {COLUMNS} FROM categories ORDER BY id_category ASC"
            ).fetchall()
            return [dict(row) for row in rows]
        finally:
            conn.close()

    def update(self, category_id: int, changes: Dict[str, Any]) -> None:
        """Write only the given columns of one category."""
        fields = [key for key in changes if key in UPDATABLE]
        if not fields:
            return
        assignments = ", ".join(f"{key} = ?" for key in fields)
        values = [changes[key] for key in fields] + [category_id]
        conn = self._connect()
        try:
            try:
                conn.execute(
                    f"UPDATE categories SET {assignments} WHERE id_category = ?",
                    tuple(values),
                )
            except sqlite3.IntegrityError as e:
                if is_unique_violation(e):
                    raise ConflictError(DUPLICATE_NAME) from e
                raise
            conn.commit()
        finally:
            conn.close()

    def delete_by_id(self, category_id: int) -> bool:
        conn = self._connect()
        try:
            cursor = conn.execute(
                "DELETE FROM categories WHERE id_category = ?", (category_id,)
            )
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    def exists_by_id(self, category_id: int) -> bool:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT 1 FROM categories WHERE id_category = ?", (category_id,)
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def exists_by_name(self, name: str) -> bool:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT 1 FROM categories WHERE name = ?", (name,)
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def find_by_name_excluding_id(self, name: str, category_id: int) -> Optional[Dict[str, Any]]:
        """Return another category carrying ``name``, ignoring ``category_id`` itself."""
        conn = self._connect()
        try:
            row = conn.execute(
                f"SELECT {COLUMNS} FROM categories WHERE name = ? AND id_category != ?",
                (name, category_id),
            ).fetchone()
            return dict(row) if row else None
        finally:
            conn.close()
