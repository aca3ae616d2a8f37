"""Tests for the sample data loader."""

from seed_catalog import SAMPLE_CATEGORIES, SAMPLE_PRODUCTS, seed


def test_seed_is_idempotent(category_store, product_store, capsys):
    added = seed(category_store, product_store)
    assert added == len(SAMPLE_CATEGORIES) + len(SAMPLE_PRODUCTS)
    assert seed(category_store, product_store) == 0
    assert "[=] Category exists: Fruits" in capsys.readouterr().out


def test_seed_links_products_to_named_categories(category_store, product_store):
    seed(category_store, product_store)
    electronics = [c for c in category_store.find_all() if c["name"] == "Electronics"][0]
    phone = [p for p in product_store.find_all() if p["name"] == "Apple iPhone 13"][0]
    assert phone["id_category"] == electronics["id_category"]


def test_categories_only(category_store, product_store):
    seed(category_store, product_store, with_products=False)
    assert product_store.find_all() == []
