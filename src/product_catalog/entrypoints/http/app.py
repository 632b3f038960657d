import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from sqlalchemy import Engine

from product_catalog.entrypoints.http.exception_handlers import register_exception_handlers
from product_catalog.entrypoints.http.routes.facets import router as facets_router
from product_catalog.entrypoints.http.routes.health import router as health_router
from product_catalog.entrypoints.http.routes.products import router as products_router
from product_catalog.infra import config
from product_catalog.infra.db.session import (
    check_connection,
    create_session_factory,
    create_store_engine,
)

logger = logging.getLogger(__name__)


def build_app(engine: Engine | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        engine: Store engine to use instead of creating one from DATABASE_URL
            at startup. The caller keeps ownership of an injected engine.
    """

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        store_engine = engine
        try:
            if store_engine is None:
                store_engine = create_store_engine()
            check_connection(store_engine)
        except Exception:
            # Fatal: the server must not start listening without a store
            logger.exception("Failed to connect to product store")
            raise

        app.state.engine = store_engine
        app.state.session_factory = create_session_factory(store_engine)

        yield

        if engine is None:
            store_engine.dispose()
        logger.info("Product store connection closed")

    app = FastAPI(
        title="Product Catalog API",
        description="""
        Read-only product catalog API for searching, filtering, sorting and paging products.

        ## Features
        - Search products by name, brand, category and price range
        - Sort by price or date added
        - List distinct brands and categories

        ## Authentication
        No authentication required.

        ## Error Handling
        Malformed query parameters fall back to defaults and never fail a request.
        Product store failures return 500 with an {error, code} body.
        """,
        version="0.1.0",
        docs_url="/docs",  # Swagger UI
        redoc_url="/redoc",  # ReDoc alternative
        openapi_url="/openapi.json",  # OpenAPI schema
        lifespan=lifespan,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins(),
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register global exception handlers
    register_exception_handlers(app)

    # Register routers
    app.include_router(health_router)
    app.include_router(products_router)
    app.include_router(facets_router)

    return app


app = build_app()
