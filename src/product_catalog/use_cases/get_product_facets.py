"""Distinct brand / category listing."""

from __future__ import annotations

from product_catalog.domain.product import FacetField
from product_catalog.ports.product_catalog_repository import ProductCatalogRepository


class GetProductFacets:
    """
    Lists every distinct value of a product field across the whole catalog.

    Unfiltered and unpaginated; grouping is done by the store, so each value
    appears exactly once. Order is unspecified.
    """

    def __init__(self, product_catalog_repository: ProductCatalogRepository) -> None:
        self._repository = product_catalog_repository

    def execute(self, facet: FacetField) -> list[str]:
        """
        Raises:
            StoreError: If the product store cannot be read
        """
        return self._repository.distinct_values(facet)
