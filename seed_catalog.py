#!/usr/bin/env python3
"""
Load sample categories and products into a Catalog API SQLite database.

The database file is created and migrated if needed.  Records whose
name already exists are skipped, so the script can be run repeatedly.

Usage:
    python seed_catalog.py --db ./catalog_api/catalog.db
    python seed_catalog.py --db /tmp/catalog.db --categories-only
"""

import argparse
import os
import sys

from catalog_api.app.core.config import settings
from catalog_api.app.core.db import init_db
from catalog_api.app.stores import CategoryStore, ProductStore

SAMPLE_CATEGORIES = [
    ("Fruits", "Fresh fruits and citrus"),
    ("Vegetables", "Fresh vegetables"),
    ("Electronics", "Electronics products"),
    ("Clothing", "Clothing for men and women"),
    ("Home and Garden", "Home and garden products"),
    ("Books", "Books in various categories"),
    ("Toys and Games", "Toys and games for children"),
    ("Sports and Fitness", "Sports and fitness products"),
    ("Beauty and Personal Care", "Beauty and personal care products"),
    ("Health and Wellness", "Health and wellness products"),
]

# (name, description, total quantity, price, category name)
SAMPLE_PRODUCTS = [
    ("Apple iPhone 13", "Apple iPhone 13 smartphone. 6.1 inch display, 64 GB storage.", 1, 799.99, "Electronics"),
    ("Samsung TV 50", "Samsung TV 50 inch. 4K UHD Smart TV. Wi-Fi, 3 HDMI, 2 USB.", 2, 499.99, "Electronics"),
    ("Nike Air Force 1", "Nike Air Force 1 men's shoe. White/Black.", 5, 89.99, "Clothing"),
    ("Sony PlayStation 5", "Sony PlayStation 5 console. 825 GB.", 3, 399.99, "Electronics"),
    ("Adidas Superstar", "Adidas Superstar men's shoe. White/Black.", 5, 79.99, "Clothing"),
    ("Apple MacBook Air", "Apple MacBook Air laptop. 13.3 inch, 8 GB RAM, 256 GB SSD.", 2, 999.99, "Electronics"),
    ("Nike Air Max 270", "Nike Air Max 270 men's shoe. Black/White.", 5, 109.99, "Clothing"),
    ("Canon EOS Rebel", "Canon EOS Rebel T8i camera. 18 MP, 4K video, Wi-Fi, NFC.", 2, 749.99, "Electronics"),
    ("Adidas Ultraboost", "Adidas Ultraboost men's shoe. Black/White.", 5, 179.99, "Clothing"),
    ("Samsung Galaxy S21", "Samsung Galaxy S21 smartphone. 6.2 inch, 128 GB storage.", 2, 799.99, "Electronics"),
]


def seed(categories: CategoryStore, products: ProductStore, with_products: bool = True) -> int:
    """Insert missing sample records and return how many were added."""
    added = 0
    ids = {}
    for name, description in SAMPLE_CATEGORIES:
        if categories.exists_by_name(name):
            print(f"[=] Category exists: {name}")
        else:
            categories.insert(name, description)
            added += 1
            print(f"[+] Category added: {name}")
    for row in categories.find_all():
        ids[row["name"]] = row["id_category"]

    if not with_products:
        return added

    for name, description, quantity, price, category in SAMPLE_PRODUCTS:
        if products.exists_by_name(name):
            print(f"[=] Product exists: {name}")
            continue
        products.insert(name, description, quantity, price, ids[category])
        added += 1
        print(f"[+] Product added: {name}")
    return added


def main():
    ap = argparse.ArgumentParser(description="Seed the Catalog API database with sample data.")
    ap.add_argument("--db", required=True, help="Path to SQLite DB file (created if missing)")
    ap.add_argument("--categories-only", action="store_true", help="Do not insert sample products")
    args = ap.parse_args()

    db_dir = os.path.dirname(os.path.abspath(args.db))
    if not os.path.isdir(db_dir):
        print(f"[!] Directory not found: {db_dir}", file=sys.stderr)
        sys.exit(1)

    settings.database_url = os.path.abspath(args.db)
    init_db()
    added = seed(CategoryStore(), ProductStore(), with_products=not args.categories_only)
    print(f"[+] Done, {added} record(s) added to {settings.database_url}")


if __name__ == "__main__":
    main()
