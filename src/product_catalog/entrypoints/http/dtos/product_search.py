from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class ProductResponseDTO(BaseModel):
    id: str = Field(alias="_id")
    product_name: str
    brand_name: str
    category: str
    price: float
    creation_date: datetime
    description: str | None = None
    product_image: str | None = None
    ratings: float | None = None

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ProductSearchQueryDTO(BaseModel):
    """Query parameters for searching the product catalog.

    Every field is a raw string: malformed values are not rejected here but
    dropped or defaulted by the query planner.
    """

    query: str | None = Field(
        default=None,
        description="Case-insensitive substring of the product name",
        examples=["phone"],
    )
    page: str | None = Field(
        default=None,
        description="1-based page number (default 1)",
        examples=["1"],
    )
    limit: str | None = Field(
        default=None,
        description="Page size (default 10)",
        examples=["10"],
    )
    sort: str | None = Field(
        default=None,
        description="One of price-asc, price-desc, date-added-desc; anything else sorts by id",
        examples=["price-asc"],
    )
    brand: str | None = Field(
        default=None,
        description="Exact brand name",
        examples=["Samsung"],
    )
    category: str | None = Field(
        default=None,
        description="Exact category name",
        examples=["Electronics"],
    )
    minPrice: str | None = Field(
        default=None,
        description="Minimum price (inclusive); ignored unless maxPrice is also given",
        examples=["100"],
    )
    maxPrice: str | None = Field(
        default=None,
        description="Maximum price (inclusive); ignored unless minPrice is also given",
        examples=["500"],
    )


class ProductSearchResponseDTO(BaseModel):
    total_products: int
    page: int
    limit: int
    total_pages: int
    products: list[ProductResponseDTO]

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "totalProducts": 42,
                "page": 1,
                "limit": 10,
                "totalPages": 5,
                "products": [],
            }
        },
    )
