from __future__ import annotations

from datetime import datetime, timezone

import pytest

from product_catalog.domain.product import Product


def make_product(
    product_id: str,
    name: str,
    brand: str,
    category: str,
    price: float,
    day: int,
) -> Product:
    return Product(
        id=product_id,
        product_name=name,
        brand_name=brand,
        category=category,
        price=price,
        creation_date=datetime(2024, 1, day, tzinfo=timezone.utc),
    )


@pytest.fixture()
def products() -> list[Product]:
    """Small catalog; ids are inserted out of order on purpose."""
    return [
        make_product("000000000000000000000003", "Galaxy Phone S", "Samsung", "Electronics", 799.0, 3),
        make_product("000000000000000000000001", "Air Fryer XL", "Philips", "Home Appliances", 120.0, 5),
        make_product("000000000000000000000005", "iPhone 15", "Apple", "Electronics", 999.0, 1),
        make_product("000000000000000000000002", "Running Shoes", "Nike", "Sports", 89.5, 4),
        make_product("000000000000000000000004", "Phone Case 100% Silicone", "Samsung", "Accessories", 19.99, 2),
        make_product("000000000000000000000006", "Galaxy Buds", "Samsung", "Audio", 149.0, 6),
    ]


@pytest.fixture()
def scenario_products() -> list[Product]:
    """A(price=10, brand X), B(price=20, brand Y), C(price=30, brand X)."""
    return [
        make_product("a", "Alpha", "X", "Misc", 10.0, 1),
        make_product("b", "Bravo", "Y", "Misc", 20.0, 2),
        make_product("c", "Charlie", "X", "Misc", 30.0, 3),
    ]
