#!/usr/bin/env python3
"""
Seed the products table with deterministic random data.

Features:
- Deterministic: fixed seed → same dataset every run
- Idempotent: safe to run multiple times (clears before seeding)
- Realism-lite: prices drawn from a per-category band, scaled by brand tier

Usage:
    DATABASE_URL=postgresql+psycopg://... python scripts/seed_products.py
"""

from __future__ import annotations

import random
import sys
from datetime import datetime, timedelta, timezone

from sqlalchemy import delete

from product_catalog.infra.db.models.base import Base
from product_catalog.infra.db.models.product import ProductRow
from product_catalog.infra.db.session import create_session_factory, create_store_engine


# ==============================================================================
# Configuration
# ==============================================================================

RANDOM_SEED = 42  # Fixed seed for deterministic results
NUM_PRODUCTS = 60  # Number of products to generate
CATALOG_START = datetime(2024, 1, 1, tzinfo=timezone.utc)


# ==============================================================================
# Catalog Data
# ==============================================================================

# Category → (price band, product nouns)
CATEGORIES = {
    "Electronics": ((50, 1500), ["Smartphone", "Laptop", "Tablet", "Smartwatch", "Monitor"]),
    "Audio": ((20, 600), ["Headphones", "Earbuds", "Speaker", "Soundbar"]),
    "Home Appliances": ((30, 900), ["Blender", "Air Fryer", "Vacuum Cleaner", "Microwave"]),
    "Fashion": ((10, 250), ["Sneakers", "Backpack", "Jacket", "Sunglasses"]),
    "Sports": ((15, 400), ["Yoga Mat", "Dumbbell Set", "Running Shoes", "Bicycle Helmet"]),
}

# Brand → (price multiplier, categories it sells in)
BRANDS = {
    "Samsung": (1.2, ["Electronics", "Audio", "Home Appliances"]),
    "Apple": (1.5, ["Electronics", "Audio"]),
    "Sony": (1.3, ["Electronics", "Audio"]),
    "Xiaomi": (0.8, ["Electronics", "Audio", "Home Appliances"]),
    "Philips": (1.0, ["Home Appliances", "Audio"]),
    "Nike": (1.1, ["Fashion", "Sports"]),
    "Adidas": (1.0, ["Fashion", "Sports"]),
    "Decathlon": (0.7, ["Sports"]),
}

ADJECTIVES = ["Pro", "Lite", "Max", "Plus", "Mini", "Ultra", "Classic", "Air"]


# ==============================================================================
# Seed Generation
# ==============================================================================


def generate_product(index: int) -> ProductRow:
    """Generate a single random product with realistic data."""
    brand = random.choice(list(BRANDS.keys()))
    multiplier, categories = BRANDS[brand]
    category = random.choice(categories)
    (price_min, price_max), nouns = CATEGORIES[category]

    name = f"{brand} {random.choice(nouns)} {random.choice(ADJECTIVES)}"
    price = round(random.uniform(price_min, price_max) * multiplier, 2)
    created = CATALOG_START + timedelta(days=random.randint(0, 365), minutes=random.randint(0, 1439))

    return ProductRow(
        # 24-char hex ids, ordered by insertion
        id=f"{index:024x}",
        product_name=name,
        brand_name=brand,
        category=category,
        price=price,
        creation_date=created,
        description=f"{name} from {brand}'s {category.lower()} range.",
        product_image=f"https://picsum.photos/seed/product-{index}/400/400",
        ratings=round(random.uniform(2.5, 5.0), 1),
    )


def seed_products(num_products: int = NUM_PRODUCTS, seed: int = RANDOM_SEED) -> None:
    """
    Seed the database with random product data.

    Args:
        num_products: Number of products to generate
        seed: Random seed for deterministic results
    """
    random.seed(seed)

    print(f"Seeding database with {num_products} products (seed={seed})...")

    engine = create_store_engine()
    Base.metadata.create_all(engine)

    try:
        with create_session_factory(engine).begin() as session:
            # Step 1: Clear existing data (idempotent)
            deleted_count = session.execute(delete(ProductRow)).rowcount
            print(f"   Deleted {deleted_count} existing products")

            # Step 2: Generate and insert new products
            products = [generate_product(i) for i in range(1, num_products + 1)]
            session.add_all(products)
            session.flush()

            print(f"Successfully seeded {len(products)} products")

            print("\nSample products:")
            for i, product in enumerate(products[:5], 1):
                print(f"   {i}. {product.product_name} [{product.category}] - ${product.price:,.2f}")

            if len(products) > 5:
                print(f"   ... and {len(products) - 5} more")
    finally:
        engine.dispose()


# ==============================================================================
# Main
# ==============================================================================


if __name__ == "__main__":
    try:
        seed_products()
    except Exception as e:
        print(f"Error seeding database: {e}", file=sys.stderr)
        sys.exit(1)
