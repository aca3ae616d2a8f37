"""Shared fixtures: every test gets its own SQLite file under ``tmp_path``."""

import pytest
from fastapi.testclient import TestClient

from catalog_api.app.core.config import settings
from catalog_api.app.core.db import init_db
from catalog_api.app.main import app
from catalog_api.app.stores import CategoryStore, ProductStore


@pytest.fixture
def database(tmp_path, monkeypatch):
    path = str(tmp_path / "catalog.db")
    monkeypatch.setattr(settings, "database_url", path)
    init_db()
    return path


@pytest.fixture
def category_store(database):
    return CategoryStore()


@pytest.fixture
def product_store(database):
    return ProductStore()


@pytest.fixture
def client(database):
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def fruits(category_store):
    return category_store.insert("Fruits", "Fresh fruits and citrus")
