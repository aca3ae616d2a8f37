"""
Simple configuration management.

The ``Settings`` dataclass reads configuration directly from
environment variables.  Defaults are provided for all fields so the
service starts without any configuration; in a deployment you should
override at least ``DATABASE_URL`` to point at a persistent location.
"""

import os
from dataclasses import dataclass
from typing import Optional


@dataclass
class Settings:
    """Application settings loaded from environment variables."""

    project_name: str = os.getenv("PROJECT_NAME", "Catalog API")
    api_version: str = os.getenv("API_VERSION", "1.0.0")
    debug: bool = os.getenv("DEBUG", "false").lower() in {"1", "true", "yes"}
    log_level: str = os.getenv("LOG_LEVEL", "INFO")

    # Optional path of a log file.  When empty only the console handler
    # is attached.
    log_file: Optional[str] = os.getenv("LOG_FILE") or None

    # Path of the SQLite database file.  A relative path is resolved
    # against the ``catalog_api`` package directory by the ``db`` module.
    database_url: str = os.getenv("DATABASE_URL", "catalog.db")


# Instantiate settings once so other modules can import it without
# repeatedly reading environment variables.  Environment variables must
# be set before this module is imported.
settings = Settings()
