"""
Test suite for GET /products.

Verifies the HTTP contract:
- Query parameters go through the planner (malformed values never fail)
- Route delegates to the use case via dependency injection
- Response envelope uses the camelCase wire names
- Store failures become 500 with an {error, code} body
"""

from __future__ import annotations

from unittest.mock import Mock

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from product_catalog.adapters.in_memory_product_catalog_repository import (
    InMemoryProductCatalogRepository,
)
from product_catalog.domain.errors import StoreTimeoutError, StoreUnavailableError
from product_catalog.domain.product import PriceRange, Product, QuerySpec, ResultEnvelope, SortKey
from product_catalog.domain.query_planner import QueryPlanner
from product_catalog.entrypoints.http.dependencies import (
    get_query_planner,
    get_search_catalog_use_case,
)
from product_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from product_catalog.entrypoints.http.routes.products import router
from product_catalog.use_cases.search_product_catalog import SearchProductCatalog


@pytest.fixture
def app() -> FastAPI:
    """Create a test FastAPI app with the products router and exception handlers."""
    test_app = FastAPI()
    register_exception_handlers(test_app)
    test_app.include_router(router)
    test_app.dependency_overrides[get_query_planner] = lambda: QueryPlanner()
    return test_app


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    return TestClient(app, raise_server_exceptions=False)


@pytest.fixture
def mock_use_case(app: FastAPI) -> Mock:
    """Mock use case for testing the route in isolation."""
    use_case = Mock()
    use_case.execute.return_value = ResultEnvelope(total_products=0, page=1, limit=10)
    app.dependency_overrides[get_search_catalog_use_case] = lambda: use_case
    return use_case


def _use_catalog(app: FastAPI, products: list[Product]) -> None:
    repository = InMemoryProductCatalogRepository(products)
    app.dependency_overrides[get_search_catalog_use_case] = lambda: SearchProductCatalog(
        repository
    )


# ==============================================================================
# Happy Path
# ==============================================================================


def test_response_envelope_shape(app: FastAPI, client: TestClient, products: list[Product]) -> None:
    _use_catalog(app, products)

    response = client.get("/products", params={"limit": "4"})

    assert response.status_code == 200
    data = response.json()
    assert set(data) == {"totalProducts", "page", "limit", "totalPages", "products"}
    assert data["totalProducts"] == 6
    assert data["page"] == 1
    assert data["limit"] == 4
    assert data["totalPages"] == 2
    assert len(data["products"]) == 4


def test_product_wire_format(app: FastAPI, client: TestClient, products: list[Product]) -> None:
    _use_catalog(app, products)

    response = client.get("/products", params={"brand": "Apple"})

    (product,) = response.json()["products"]
    assert product["_id"] == "000000000000000000000005"
    assert product["productName"] == "iPhone 15"
    assert product["brandName"] == "Apple"
    assert product["category"] == "Electronics"
    assert product["price"] == 999.0
    assert product["creationDate"].startswith("2024-01-01T00:00:00")
    assert product["description"] is None
    assert product["productImage"] is None
    assert product["ratings"] is None


def test_defaults_without_parameters(
    app: FastAPI, client: TestClient, products: list[Product]
) -> None:
    _use_catalog(app, products)

    data = client.get("/products").json()

    assert data["page"] == 1
    assert data["limit"] == 10
    assert data["totalPages"] == 1
    assert [p["_id"][-1] for p in data["products"]] == ["1", "2", "3", "4", "5", "6"]


def test_brand_filter_sorted_by_price_desc(
    app: FastAPI, client: TestClient, scenario_products: list[Product]
) -> None:
    _use_catalog(app, scenario_products)

    response = client.get(
        "/products", params={"brand": "X", "sort": "price-desc", "page": "1", "limit": "10"}
    )

    data = response.json()
    assert data["totalProducts"] == 2
    assert [p["_id"] for p in data["products"]] == ["c", "a"]


def test_min_price_alone_returns_all_products(
    app: FastAPI, client: TestClient, scenario_products: list[Product]
) -> None:
    _use_catalog(app, scenario_products)

    data = client.get("/products", params={"minPrice": "15"}).json()

    assert data["totalProducts"] == 3
    assert len(data["products"]) == 3


def test_price_range_with_both_bounds(
    app: FastAPI, client: TestClient, scenario_products: list[Product]
) -> None:
    _use_catalog(app, scenario_products)

    data = client.get("/products", params={"minPrice": "15", "maxPrice": "30"}).json()

    assert [p["_id"] for p in data["products"]] == ["b", "c"]


def test_page_past_the_end(
    app: FastAPI, client: TestClient, scenario_products: list[Product]
) -> None:
    _use_catalog(app, scenario_products)

    response = client.get("/products", params={"page": "5"})

    assert response.status_code == 200
    data = response.json()
    assert data["products"] == []
    assert data["totalProducts"] == 3
    assert data["totalPages"] == 1
    assert data["page"] == 5


def test_text_query_is_case_insensitive(
    app: FastAPI, client: TestClient, products: list[Product]
) -> None:
    _use_catalog(app, products)

    data = client.get("/products", params={"query": "GALAXY"}).json()

    assert sorted(p["productName"] for p in data["products"]) == ["Galaxy Buds", "Galaxy Phone S"]


# ==============================================================================
# Planner wiring
# ==============================================================================


def test_all_parameters_reach_the_use_case(client: TestClient, mock_use_case: Mock) -> None:
    response = client.get(
        "/products",
        params={
            "query": "Phone",
            "page": "2",
            "limit": "5",
            "sort": "date-added-desc",
            "brand": "Samsung",
            "category": "Electronics",
            "minPrice": "10",
            "maxPrice": "20.5",
        },
    )

    assert response.status_code == 200
    mock_use_case.execute.assert_called_once_with(
        QuerySpec(
            text_filter="phone",
            brand="Samsung",
            category="Electronics",
            price_range=PriceRange(min_price=10.0, max_price=20.5),
            sort_key=SortKey.DATE_ADDED_DESC,
            page=2,
            page_size=5,
        )
    )


def test_malformed_parameters_fall_back_to_defaults(
    client: TestClient, mock_use_case: Mock
) -> None:
    response = client.get(
        "/products",
        params={"page": "abc", "limit": "-3", "sort": "cheapest", "minPrice": "x", "maxPrice": "9"},
    )

    assert response.status_code == 200
    mock_use_case.execute.assert_called_once_with(QuerySpec())


def test_configured_planner_is_used(app: FastAPI, client: TestClient, mock_use_case: Mock) -> None:
    app.dependency_overrides[get_query_planner] = lambda: QueryPlanner(
        default_page_size=8, max_page_size=50
    )

    client.get("/products")
    client.get("/products", params={"limit": "1000"})

    first, second = mock_use_case.execute.call_args_list
    assert first.args[0].page_size == 8
    assert second.args[0].page_size == 50


# ==============================================================================
# Error Handling
# ==============================================================================


def test_store_unavailable_returns_500(client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.side_effect = StoreUnavailableError(
        "Product store is unavailable", operation="find", detail="connection refused"
    )

    response = client.get("/products")

    assert response.status_code == 500
    assert response.json() == {
        "error": "Product store is unavailable",
        "code": "STORE_UNAVAILABLE",
    }


def test_store_timeout_returns_500_with_its_code(client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.side_effect = StoreTimeoutError("Product store timed out")

    response = client.get("/products")

    assert response.status_code == 500
    assert response.json()["code"] == "STORE_TIMEOUT"


def test_store_detail_is_not_leaked(client: TestClient, mock_use_case: Mock) -> None:
    mock_use_case.execute.side_effect = StoreUnavailableError(
        "Product store is unavailable", detail="password authentication failed for user x"
    )

    response = client.get("/products")

    assert "password" not in response.text
