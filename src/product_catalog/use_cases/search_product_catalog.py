from __future__ import annotations

import logging

from product_catalog.domain.product import QuerySpec, ResultEnvelope
from product_catalog.ports.product_catalog_repository import ProductCatalogRepository

logger = logging.getLogger(__name__)


class SearchProductCatalog:
    """
    Product search with filters, ordering and pagination.

    This use case validates the QuerySpec, issues the page read and the count
    read independently, and assembles the envelope. Filter translation
    lives in the repository adapter.
    """

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self, spec: QuerySpec) -> ResultEnvelope:
        """
        Execute catalog search.

        Pages past the end are not clamped: they yield no products while
        still reporting the real totals.

        Args:
            spec: Planned query (filters, ordering, paging)

        Returns:
            ResultEnvelope for the requested page

        Raises:
            ValidationError: If paging parameters are invalid
            StoreError: If the product store cannot be read
        """
        spec.validate()

        logger.info(
            "Searching products",
            extra={
                "text_filter": spec.text_filter,
                "brand": spec.brand,
                "category": spec.category,
                "price_range": spec.price_range,
                "sort_key": spec.sort_key.value,
                "page": spec.page,
                "page_size": spec.page_size,
            },
        )

        products = self._repository.find(spec)
        total_products = self._repository.count(spec)

        return ResultEnvelope(
            total_products=total_products,
            page=spec.page,
            limit=spec.page_size,
            products=products,
        )
