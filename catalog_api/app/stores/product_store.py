"""
Persistent collection of products backed by the ``products`` table.

A product row stores its category as a bare ``id_category`` value.
The store never joins or checks the category; resolving it is left to
the service layer.
"""

import sqlite3
from typing import Any, Callable, Dict, List, Optional

from catalog_api.app.core.db import get_connection, is_unique_violation
from catalog_api.app.core.exceptions import ConflictError

DUPLICATE_NAME = "Product name already exists. Please choose another name."

COLUMNS = "id_product, name, description, total_quantity, price, id_category"
UPDATABLE = ("name", "description", "total_quantity", "price", "id_category")


class ProductStore:
    """Row-level access to products.  Rows are returned as plain dicts."""

    def __init__(self, connect: Callable[[], sqlite3.Connection] = get_connection) -> None:
        self._connect = connect

    def insert(
        self,
        name: str,
        description: str,
        total_quantity: int,
        price: float,
        id_category: int,
    ) -> Dict[str, Any]:
        conn = self._connect()
        try:
            cursor = conn.cursor()
            try:
                cursor.execute(
                    """
                    INSERT INTO products (name, description, total_quantity, price, id_category)
                    VALUES (?, ?, ?, ?, ?)
                    """,
                    (name, description, total_quantity, price, id_category),
                )
            except sqlite3.IntegrityError as e:
                if is_unique_violation(e):
                    raise ConflictError(DUPLICATE_NAME) from e
                raise
            product_id = cursor.lastrowid
            conn.commit()
            return {
                "id_product": product_id,
                "name": name,
                "description": description,
                "total_quantity": total_quantity,
                "price": price,
                "id_category": id_category,
            }
        finally:
            conn.close()

    def find_by_id(self, product_id: int) -> Optional[Dict[str, Any]]:
        conn = self._connect()
        try:
            row = conn.execute(
                f"SELECT {COLUMNS} FROM products WHERE id_product = ?",
                (product_id,),
            ).fetchone()
            return dict(row) if row else None
        finally:
            conn.close()

    def find_all(self) -> List[Dict[str, Any]]:
        conn = self._connect()
        try:
            rows = conn.execute(
                f"SELECT {COLUMNS} FROM products ORDER BY id_product ASC"
            ).fetchall()
            return [dict(row) for row in rows]
        finally:
            conn.close()

    def update(self, product_id: int, changes: Dict[str, Any]) -> None:
        """Write only the given columns of one product."""
        fields = [key for key in changes if key in UPDATABLE]
        if not fields:
            return
        assignments = ", ".join(f"{key} = ?" for key in fields)
        values = [changes[key] for key in fields] + [product_id]
        conn = self._connect()
        try:
            try:
                conn.execute(
                    f"UPDATE products SET {assignments} WHERE id_product = ?",
                    tuple(values),
                )
            except sqlite3.IntegrityError as e:
                if is_unique_violation(e):
                    raise ConflictError(DUPLICATE_NAME) from e
                raise
            conn.commit()
        finally:
            conn.close()

    def delete_by_id(self, product_id: int) -> bool:
        conn = self._connect()
        try:
            cursor = conn.execute(
                "DELETE FROM products WHERE id_product = ?", (product_id,)
            )
            conn.commit()
            return cursor.rowcount > 0
        finally:
            conn.close()

    def exists_by_id(self, product_id: int) -> bool:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT 1 FROM products WHERE id_product = ?", (product_id,)
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def exists_by_name(self, name: str) -> bool:
        conn = self._connect()
        try:
            row = conn.execute(
                "SELECT 1 FROM products WHERE name = ?", (name,)
            ).fetchone()
            return row is not None
        finally:
            conn.close()

    def find_by_name_excluding_id(self, name: str, product_id: int) -> Optional[Dict[str, Any]]:
        """Return another product carrying ``name``, ignoring ``product_id`` itself."""
        conn = self._connect()
        try:
            row = conn.execute(
                f"SELECT {COLUMNS} FROM products WHERE name = ? AND id_product != ?",
                (name, product_id),
            ).fetchone()
            return dict(row) if row else None
        finally:
            conn.close()
