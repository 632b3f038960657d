from fastapi import APIRouter, Depends

from product_catalog.domain.product import FacetField
from product_catalog.entrypoints.http.dependencies import get_product_facets_use_case
from product_catalog.entrypoints.http.error_responses import StoreErrorResponse
from product_catalog.use_cases.get_product_facets import GetProductFacets


router = APIRouter(tags=["Facets"])

_STORE_ERROR = {500: {"model": StoreErrorResponse, "description": "Product store failure"}}


# /allbrands and /api/brands are the paths older clients call
@router.get("/allbrands", include_in_schema=False)
@router.get("/api/brands", include_in_schema=False)
@router.get(
    "/brands",
    response_model=list[str],
    summary="List brands",
    description="Every distinct brand name in the catalog, once each, in no particular order.",
    responses=_STORE_ERROR,
)
def list_brands(
    use_case: GetProductFacets = Depends(get_product_facets_use_case),
) -> list[str]:
    return use_case.execute(FacetField.BRAND)


@router.get("/api/categories", include_in_schema=False)
@router.get(
    "/categories",
    response_model=list[str],
    summary="List categories",
    description="Every distinct category in the catalog, once each, in no particular order.",
    responses=_STORE_ERROR,
)
def list_categories(
    use_case: GetProductFacets = Depends(get_product_facets_use_case),
) -> list[str]:
    return use_case.execute(FacetField.CATEGORY)
