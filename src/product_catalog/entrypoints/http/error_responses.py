"""REST API error response models.

Documented shapes of the JSON bodies produced by the exception handlers.
"""

from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    """Individual error detail for field-level errors."""

    field: str
    message: str
    code: str | None = None


class ErrorResponse(BaseModel):
    """Structured error response for client errors.

    Examples:
        {
            "detail": "Validation failed",
            "code": "VALIDATION_ERROR",
            "errors": [
                {"field": "page", "message": "page must be >= 1", "code": "INVALID_PAGE"}
            ]
        }
    """

    detail: str
    code: str | None = None
    errors: list[ErrorDetail] | None = None


class StoreErrorResponse(BaseModel):
    """Body returned with HTTP 500 when the product store cannot be read.

    The message is generic; driver detail is only logged server-side.
    The code tells connectivity loss, timeouts and rejected queries apart.
    """

    error: str
    code: str

    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {"error": "Product store is unavailable", "code": "STORE_UNAVAILABLE"},
                {"error": "Product store timed out", "code": "STORE_TIMEOUT"},
            ]
        }
    )
