"""
SQLite database integration and simple migration system.

This module provides ``get_connection`` for opening a connection,
``get_cursor`` for short unit-of-work blocks and ``init_db`` which
applies migrations on application start.  Applied migration versions
are stored in the ``migrations`` table and new migrations are executed
in order.

Foreign key enforcement is intentionally not switched on: a category
may be deleted while products still reference it, and those products
keep their ``id_category`` value.
"""

import logging
import os
import sqlite3
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, List, Tuple

from .config import settings

logger = logging.getLogger(__name__)


MIGRATIONS: List[Tuple[int, str]] = [
    # Migration 1: categories and products
    (
        1,
        """
        CREATE TABLE IF NOT EXISTS categories (
            id_category INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL UNIQUE,
            description TEXT NOT NULL
        );

        CREATE TABLE IF NOT EXISTS products (
            id_product INTEGER PRIMARY KEY AUTOINCREMENT,
            name TEXT NOT NULL UNIQUE,
            description TEXT NOT NULL,
            total_quantity INTEGER NOT NULL,
            price REAL NOT NULL,
            id_category INTEGER NOT NULL
        );

        CREATE INDEX IF NOT EXISTS idx_products_id_category ON products(id_category);
        """,
    ),
]


def get_database_path() -> str:
    """Compute the path to the SQLite database file.

    If ``settings.database_url`` is an absolute path, use it directly.
    Otherwise resolve it relative to the ``catalog_api`` package.
    """
    db_url = settings.database_url
    if os.path.isabs(db_url):
        return db_url
    base_dir = Path(__file__).resolve().parent.parent.parent  # catalog_api/
    return str((base_dir / db_url).resolve())


def get_connection() -> sqlite3.Connection:
    """Create and return a new SQLite connection.

    Rows are returned as ``sqlite3.Row`` so columns can be accessed by
    name.
    """
    conn = sqlite3.connect(get_database_path())
    conn.row_factory = sqlite3.Row
    return conn


@contextmanager
def get_cursor() -> Iterator[sqlite3.Cursor]:
    """Context manager that yields a cursor and closes the connection on exit.

    The transaction is committed only if the block completes without
    raising.
    """
    conn = get_connection()
    try:
        yield conn.cursor()
        conn.commit()
    finally:
        conn.close()


def is_unique_violation(error: sqlite3.IntegrityError) -> bool:
    """Tell a UNIQUE constraint failure apart from other integrity errors."""
    return str(error).startswith("UNIQUE constraint failed")


def init_db() -> None:
    """Initialise the database and apply pending migrations.

    Creates the ``migrations`` table if it does not exist, checks the
    current schema version and applies any newer entries of
    ``MIGRATIONS``.  Append new migrations with an incremented version.
    """
    with get_cursor() as cursor:
        cursor.execute(
            "CREATE TABLE IF NOT EXISTS migrations (version INTEGER PRIMARY KEY)"
        )
        cursor.execute("SELECT MAX(version) as version FROM migrations")
        row = cursor.fetchone()
        current_version = row["version"] if row and row["version"] is not None else 0

        for version, sql in MIGRATIONS:
            if version > current_version:
                cursor.executescript(sql)
                cursor.execute(
                    "INSERT INTO migrations (version) VALUES (?)", (version,)
                )
                logger.info("Applied migration %s", version)
                current_version = version


def ping() -> bool:
    """Return ``True`` if the database answers a trivial query."""
    try:
        with get_cursor() as cursor:
            cursor.execute("SELECT 1")
        return True
    except sqlite3.Error:
        logger.exception("Database health check failed")
        return False
