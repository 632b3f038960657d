"""
Dependency injection for FastAPI routes.

Key principle: the engine is process-scoped (created once by the app
lifespan and kept on app.state); sessions, repositories and use cases
are per-request. Only stateless singletons use lru_cache.
"""

from __future__ import annotations

from functools import lru_cache
from typing import Generator

from fastapi import Depends, Request
from sqlalchemy.orm import Session, sessionmaker

from product_catalog.adapters.postgres_product_catalog_repository import (
    PostgresProductCatalogRepository,
)
from product_catalog.domain.query_planner import QueryPlanner
from product_catalog.infra import config
from product_catalog.infra.db.session import get_session
from product_catalog.ports.product_catalog_repository import ProductCatalogRepository
from product_catalog.use_cases.get_product_facets import GetProductFacets
from product_catalog.use_cases.search_product_catalog import SearchProductCatalog


def get_session_factory(request: Request) -> sessionmaker[Session]:
    """Session factory bound to the shared engine created at startup."""
    return request.app.state.session_factory


def get_db(
    session_factory: sessionmaker[Session] = Depends(get_session_factory),
) -> Generator[Session, None, None]:
    """
    Provides a database session for a single request.

    FastAPI will:
    1. Call this function when a request starts
    2. Inject the session into the route
    3. Roll back (on error) and close the session when the request ends

    Yields:
        Session: SQLAlchemy database session (per-request)
    """
    with get_session(session_factory) as session:
        yield session


def get_product_catalog_repository(db: Session = Depends(get_db)) -> ProductCatalogRepository:
    return PostgresProductCatalogRepository(session=db)


@lru_cache
def get_query_planner() -> QueryPlanner:
    """Planner configured from the environment; stateless, so built once."""
    return QueryPlanner(
        default_page_size=config.default_page_size(),
        max_page_size=config.max_page_size(),
    )


def get_search_catalog_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> SearchProductCatalog:
    """
    Factory function that returns a configured SearchProductCatalog use case.

    Called per-request, so each request gets a fresh repository bound to
    its own session.
    """
    return SearchProductCatalog(product_catalog_repository=repository)


def get_product_facets_use_case(
    repository: ProductCatalogRepository = Depends(get_product_catalog_repository),
) -> GetProductFacets:
    return GetProductFacets(product_catalog_repository=repository)
