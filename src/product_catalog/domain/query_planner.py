"""Turns raw search parameters into a QuerySpec.

Malformed input never fails a request: every parameter that cannot be
parsed is dropped (filters) or replaced by its default (paging).
"""

from __future__ import annotations

import logging
import math
import re
from typing import Mapping

from product_catalog.domain.product import (
    DEFAULT_PAGE,
    DEFAULT_PAGE_SIZE,
    PriceRange,
    QuerySpec,
    SortKey,
)

logger = logging.getLogger(__name__)

# Leading-number prefixes; trailing garbage after the number is ignored
_INT_PREFIX = re.compile(r"\s*[+-]?\d+", re.ASCII)
_FLOAT_PREFIX = re.compile(r"\s*[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)


def _parse_positive_int(raw: str | None) -> int | None:
    if raw is None:
        return None
    match = _INT_PREFIX.match(raw)
    if match is None:
        return None
    try:
        value = int(match.group())
    except ValueError:
        # past the interpreter's int digit limit
        return None
    return value if value > 0 else None


def _parse_finite_float(raw: str | None) -> float | None:
    if raw is None:
        return None
    match = _FLOAT_PREFIX.match(raw)
    if match is None:
        return None
    value = float(match.group())
    return value if math.isfinite(value) else None


class QueryPlanner:
    """
    Builds a QuerySpec from loosely-typed request parameters.

    Recognised keys: query, page, limit, sort, brand, category, minPrice, maxPrice.
    Unknown keys are ignored.
    """

    def __init__(
        self,
        default_page_size: int = DEFAULT_PAGE_SIZE,
        max_page_size: int | None = None,
    ) -> None:
        """
        Args:
            default_page_size: Page size used when limit is absent or invalid
            max_page_size: Optional upper bound; larger limits are clamped to it
        """
        if default_page_size < 1:
            raise ValueError("default_page_size must be >= 1")
        if max_page_size is not None and max_page_size < default_page_size:
            raise ValueError("max_page_size must be >= default_page_size")

        self._default_page_size = default_page_size
        self._max_page_size = max_page_size

    def plan(self, params: Mapping[str, str | None]) -> QuerySpec:
        """
        Parse request parameters into a QuerySpec. Never raises.

        Args:
            params: Raw query string values keyed by parameter name

        Returns:
            A fully-populated QuerySpec with defaults applied
        """
        query = params.get("query")
        text_filter = query.lower() if query else None

        page = _parse_positive_int(params.get("page"))
        if page is None:
            if params.get("page") is not None:
                logger.debug("Ignoring invalid page", extra={"page": params.get("page")})
            page = DEFAULT_PAGE

        page_size = self._plan_page_size(params.get("limit"))

        return QuerySpec(
            text_filter=text_filter,
            brand=params.get("brand") or None,
            category=params.get("category") or None,
            price_range=self._plan_price_range(params.get("minPrice"), params.get("maxPrice")),
            sort_key=SortKey.parse(params.get("sort")),
            page=page,
            page_size=page_size,
        )

    def _plan_page_size(self, raw: str | None) -> int:
        page_size = _parse_positive_int(raw)
        if page_size is None:
            if raw is not None:
                logger.debug("Ignoring invalid limit", extra={"limit": raw})
            return self._default_page_size

        if self._max_page_size is not None and page_size > self._max_page_size:
            logger.debug(
                "Clamping limit",
                extra={"limit": page_size, "max_page_size": self._max_page_size},
            )
            return self._max_page_size
        return page_size

    def _plan_price_range(self, raw_min: str | None, raw_max: str | None) -> PriceRange | None:
        # All-or-nothing: a lone or unparseable bound drops the whole filter
        min_price = _parse_finite_float(raw_min)
        max_price = _parse_finite_float(raw_max)

        if min_price is None or max_price is None:
            if raw_min is not None or raw_max is not None:
                logger.debug(
                    "Dropping incomplete price range",
                    extra={"min_price": raw_min, "max_price": raw_max},
                )
            return None

        return PriceRange(min_price=min_price, max_price=max_price)
