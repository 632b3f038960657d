"""PostgreSQL implementation of ProductCatalogRepository."""

from __future__ import annotations

from contextlib import contextmanager
from typing import TYPE_CHECKING, Iterator

from sqlalchemy import func, select
from sqlalchemy.exc import (
    DisconnectionError,
    InterfaceError,
    OperationalError,
    SQLAlchemyError,
    TimeoutError as PoolTimeoutError,
)
from sqlalchemy.orm import Session

from product_catalog.domain.errors import (
    StoreQueryError,
    StoreTimeoutError,
    StoreUnavailableError,
)
from product_catalog.domain.product import FacetField, Product, QuerySpec, SortKey
from product_catalog.infra.db.models.product import ProductRow
from product_catalog.ports.product_catalog_repository import ProductCatalogRepository

if TYPE_CHECKING:
    from sqlalchemy.sql import ColumnElement, Select


_ORDERING = {
    SortKey.PRICE_ASC: ProductRow.price.asc(),
    SortKey.PRICE_DESC: ProductRow.price.desc(),
    SortKey.DATE_ADDED_DESC: ProductRow.creation_date.desc(),
    SortKey.DEFAULT: ProductRow.id.asc(),
}

_FACET_COLUMNS = {
    FacetField.BRAND: ProductRow.brand_name,
    FacetField.CATEGORY: ProductRow.category,
}


@contextmanager
def _store_errors(operation: str) -> Iterator[None]:
    """Translate SQLAlchemy failures into domain StoreError subclasses."""
    try:
        yield
    except PoolTimeoutError as exc:
        raise StoreTimeoutError(
            "Product store timed out", operation=operation, detail=str(exc)
        ) from exc
    except (OperationalError, InterfaceError, DisconnectionError) as exc:
        raise StoreUnavailableError(
            "Product store is unavailable", operation=operation, detail=str(exc)
        ) from exc
    except SQLAlchemyError as exc:
        raise StoreQueryError(
            "Product store rejected the query", operation=operation, detail=str(exc)
        ) from exc


class PostgresProductCatalogRepository(ProductCatalogRepository):
    """
    PostgreSQL implementation of ProductCatalogRepository.

    - Uses SQLAlchemy ORM for database access
    - Applies filters using SQL WHERE clauses
    - Answers count() with a separate COUNT(*) query
    - Answers distinct_values() with GROUP BY on the facet column
    - Converts ProductRow (infrastructure) to Product (domain)
    """

    def __init__(self, session: Session) -> None:
        """
        Initialize repository with database session.

        Args:
            session: SQLAlchemy session for database operations
        """
        self._session = session

    def find(self, spec: QuerySpec) -> list[Product]:
        query = (
            select(ProductRow)
            .where(*self._conditions(spec))
            .order_by(_ORDERING[spec.sort_key])
            .offset(spec.skip)
            .limit(spec.page_size)
        )

        with _store_errors("find"):
            rows = self._session.execute(query).scalars().all()

        return [self._to_domain(row) for row in rows]

    def count(self, spec: QuerySpec) -> int:
        filtered: Select[tuple[ProductRow]] = select(ProductRow).where(*self._conditions(spec))
        count_query = select(func.count()).select_from(filtered.subquery())

        with _store_errors("count"):
            return self._session.execute(count_query).scalar() or 0

    def distinct_values(self, facet: FacetField) -> list[str]:
        column = _FACET_COLUMNS[facet]
        query = select(column).group_by(column)

        with _store_errors("distinct"):
            return list(self._session.execute(query).scalars().all())

    def _conditions(self, spec: QuerySpec) -> list[ColumnElement[bool]]:
        """
        Build WHERE clauses for the filters present in spec (AND semantics).

        Args:
            spec: Filter criteria to apply

        Returns:
            Clauses to pass to Select.where(); empty matches everything
        """
        conditions: list[ColumnElement[bool]] = []

        # Case-insensitive substring match; LIKE wildcards in user input are literal
        if spec.text_filter:
            conditions.append(ProductRow.product_name.icontains(spec.text_filter, autoescape=True))

        if spec.brand:
            conditions.append(ProductRow.brand_name == spec.brand)

        if spec.category:
            conditions.append(ProductRow.category == spec.category)

        # Price range (inclusive)
        if spec.price_range is not None:
            conditions.append(
                ProductRow.price.between(spec.price_range.min_price, spec.price_range.max_price)
            )

        return conditions

    def _to_domain(self, row: ProductRow) -> Product:
        return Product(
            id=row.id,
            product_name=row.product_name,
            brand_name=row.brand_name,
            category=row.category,
            price=row.price,
            creation_date=row.creation_date,
            description=row.description,
            product_image=row.product_image,
            ratings=row.ratings,
        )
