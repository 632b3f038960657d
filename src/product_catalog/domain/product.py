from __future__ import annotations

import math
from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum

from product_catalog.domain.errors import ValidationError


DEFAULT_PAGE = 1
DEFAULT_PAGE_SIZE = 10


@dataclass(frozen=True)
class Product:
    id: str
    product_name: str
    brand_name: str
    category: str
    price: float
    creation_date: datetime
    description: str | None = None
    product_image: str | None = None
    ratings: float | None = None


class SortKey(str, Enum):
    """Orderings a search can request; DEFAULT is identity ascending."""

    PRICE_ASC = "price-asc"
    PRICE_DESC = "price-desc"
    DATE_ADDED_DESC = "date-added-desc"
    DEFAULT = "default"

    @classmethod
    def parse(cls, raw: str | None) -> SortKey:
        # Exact match only; the identity ordering is the only total one,
        # so anything unrecognised falls back to it.
        for key in (cls.PRICE_ASC, cls.PRICE_DESC, cls.DATE_ADDED_DESC):
            if raw == key.value:
                return key
        return cls.DEFAULT


class FacetField(str, Enum):
    """Product fields the catalog exposes distinct values for."""

    BRAND = "brand_name"
    CATEGORY = "category"


@dataclass(frozen=True, slots=True)
class PriceRange:
    """Inclusive price bounds."""

    min_price: float
    max_price: float

    def contains(self, price: float) -> bool:
        return self.min_price <= price <= self.max_price


@dataclass(frozen=True, slots=True)
class QuerySpec:
    text_filter: str | None = None
    brand: str | None = None
    category: str | None = None
    price_range: PriceRange | None = None
    sort_key: SortKey = SortKey.DEFAULT
    page: int = DEFAULT_PAGE
    page_size: int = DEFAULT_PAGE_SIZE

    @property
    def skip(self) -> int:
        """Number of matching records before the requested page."""
        return (self.page - 1) * self.page_size

    def validate(self) -> None:
        """
        Validate paging parameters.

        Raises:
            ValidationError: If page or page_size is not a positive integer
        """
        errors = []
        if self.page < 1:
            errors.append({"field": "page", "message": "page must be >= 1", "code": "INVALID_PAGE"})
        if self.page_size < 1:
            errors.append(
                {"field": "limit", "message": "limit must be >= 1", "code": "INVALID_LIMIT"}
            )
        if errors:
            raise ValidationError(errors=errors)


@dataclass(frozen=True, slots=True)
class ResultEnvelope:
    """One page of search results plus the metadata needed to page further."""

    total_products: int
    page: int
    limit: int
    products: list[Product] = field(default_factory=list)

    @property
    def total_pages(self) -> int:
        return math.ceil(self.total_products / self.limit)
