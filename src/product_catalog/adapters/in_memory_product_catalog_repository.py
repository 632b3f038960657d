from __future__ import annotations

from product_catalog.domain.product import FacetField, Product, QuerySpec, SortKey
from product_catalog.ports.product_catalog_repository import ProductCatalogRepository


class InMemoryProductCatalogRepository(ProductCatalogRepository):
    """
    Canonical contract implementation for tests.

    - Stores products in insertion order
    - Applies AND-semantics filtering
    - Applies ordering, then paging AFTER filtering
    - count() ignores paging and ordering
    """

    def __init__(self, products: list[Product]) -> None:
        self._products = products

    def find(self, spec: QuerySpec) -> list[Product]:
        # Trust that UseCase has validated inputs (contract programming)
        matches = [product for product in self._products if self._matches(product, spec)]
        ordered = self._sort(matches, spec.sort_key)

        start = spec.skip
        end = spec.skip + spec.page_size
        return ordered[start:end]

    def count(self, spec: QuerySpec) -> int:
        return sum(1 for product in self._products if self._matches(product, spec))

    def distinct_values(self, facet: FacetField) -> list[str]:
        return list(dict.fromkeys(getattr(product, facet.value) for product in self._products))

    def _matches(self, product: Product, spec: QuerySpec) -> bool:
        if spec.text_filter and spec.text_filter not in product.product_name.lower():
            return False
        if spec.brand and product.brand_name != spec.brand:
            return False
        if spec.category and product.category != spec.category:
            return False
        if spec.price_range is not None and not spec.price_range.contains(product.price):
            return False
        return True

    def _sort(self, products: list[Product], sort_key: SortKey) -> list[Product]:
        if sort_key is SortKey.PRICE_ASC:
            return sorted(products, key=lambda p: p.price)
        if sort_key is SortKey.PRICE_DESC:
            return sorted(products, key=lambda p: p.price, reverse=True)
        if sort_key is SortKey.DATE_ADDED_DESC:
            return sorted(products, key=lambda p: p.creation_date, reverse=True)
        return sorted(products, key=lambda p: p.id)
