from __future__ import annotations

from abc import ABC, abstractmethod

from product_catalog.domain.product import FacetField, Product, QuerySpec


class ProductCatalogRepository(ABC):
    """
    Port for read-only product store access.

    A search is answered by two independent reads: find() for the requested
    page and count() for the unpaged total. Callers must not derive the total
    from the page.

    Contract (Preconditions):
        - spec must be pre-validated by caller (UseCase)
        - Implementations trust inputs are valid and do not re-validate

    Contract (Failures):
        - Store communication failures are raised as StoreError subclasses
    """

    @abstractmethod
    def find(self, spec: QuerySpec) -> list[Product]:
        """
        Return up to spec.page_size products matching spec, skipping spec.skip,
        in the order selected by spec.sort_key.

        Args:
            spec: Filters, ordering and paging - pre-validated

        Returns:
            Products of the requested page (empty past the last page)
        """
        ...

    @abstractmethod
    def count(self, spec: QuerySpec) -> int:
        """
        Count all products matching the filters of spec, ignoring paging and ordering.

        Args:
            spec: Filters to apply - pre-validated

        Returns:
            Total number of matching products
        """
        ...

    @abstractmethod
    def distinct_values(self, facet: FacetField) -> list[str]:
        """
        Return each distinct value of a field across the whole catalog exactly once.

        Args:
            facet: Field to group by

        Returns:
            Distinct values in unspecified order
        """
        ...
