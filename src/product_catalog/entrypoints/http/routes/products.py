from fastapi import APIRouter, Depends

from product_catalog.domain.query_planner import QueryPlanner
from product_catalog.entrypoints.http.dependencies import (
    get_query_planner,
    get_search_catalog_use_case,
)
from product_catalog.entrypoints.http.dtos.product_search import (
    ProductSearchQueryDTO,
    ProductSearchResponseDTO,
)
from product_catalog.entrypoints.http.error_responses import StoreErrorResponse
from product_catalog.entrypoints.http.mappers.product_search_mapper import ProductSearchMapper
from product_catalog.use_cases.search_product_catalog import SearchProductCatalog


router = APIRouter(tags=["Products"])


@router.get(
    "/products",
    response_model=ProductSearchResponseDTO,
    summary="Search product catalog",
    description="""
    Search the product catalog with optional filters, sorting and pagination.

    ## Filters
    - All filters use AND semantics
    - query: case-insensitive substring of the product name
    - brand/category: exact match
    - minPrice/maxPrice: inclusive range, applied only when BOTH are given

    ## Sorting
    - price-asc, price-desc, date-added-desc
    - Anything else sorts by product id (stable across pages)

    ## Pagination
    - page defaults to 1, limit defaults to 10
    - Invalid values fall back to the defaults instead of failing
    - Pages past the end return no products but keep the real totals

    ## Example
    ```
    GET /products?brand=Samsung&sort=price-desc&page=1&limit=10
    ```
    """,
    responses={500: {"model": StoreErrorResponse, "description": "Product store failure"}},
)
def search_products(
    query: ProductSearchQueryDTO = Depends(),
    planner: QueryPlanner = Depends(get_query_planner),
    use_case: SearchProductCatalog = Depends(get_search_catalog_use_case),
) -> ProductSearchResponseDTO:
    """Search products endpoint following parse → execute → map → return pattern."""
    # 1. Plan the query (never fails)
    spec = ProductSearchMapper.to_query_spec(query, planner)

    # 2. Execute use case
    envelope = use_case.execute(spec)

    # 3. Map to response
    return ProductSearchMapper.to_response(envelope)
