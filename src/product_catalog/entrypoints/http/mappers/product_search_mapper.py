from __future__ import annotations

from product_catalog.domain.product import Product, QuerySpec, ResultEnvelope
from product_catalog.domain.query_planner import QueryPlanner
from product_catalog.entrypoints.http.dtos.product_search import (
    ProductResponseDTO,
    ProductSearchQueryDTO,
    ProductSearchResponseDTO,
)


class ProductSearchMapper:
    """Maps between REST DTOs and domain models for product search."""

    @staticmethod
    def to_query_spec(dto: ProductSearchQueryDTO, planner: QueryPlanner) -> QuerySpec:
        """
        Converts raw query params to a domain QuerySpec via the planner.

        Args:
            dto: Raw (string) query parameters
            planner: Planner applying defaults and dropping malformed input

        Returns:
            QuerySpec: Typed filters, ordering and paging
        """
        return planner.plan(dto.model_dump())

    @staticmethod
    def to_product_response(product: Product) -> ProductResponseDTO:
        return ProductResponseDTO(
            id=product.id,
            product_name=product.product_name,
            brand_name=product.brand_name,
            category=product.category,
            price=product.price,
            creation_date=product.creation_date,
            description=product.description,
            product_image=product.product_image,
            ratings=product.ratings,
        )

    @staticmethod
    def to_response(envelope: ResultEnvelope) -> ProductSearchResponseDTO:
        """
        Converts a domain envelope to the REST response with pagination metadata.

        Args:
            envelope: Domain search result

        Returns:
            ProductSearchResponseDTO: products plus totals and paging echo
        """
        return ProductSearchResponseDTO(
            total_products=envelope.total_products,
            page=envelope.page,
            limit=envelope.limit,
            total_pages=envelope.total_pages,
            products=[ProductSearchMapper.to_product_response(p) for p in envelope.products],
        )
