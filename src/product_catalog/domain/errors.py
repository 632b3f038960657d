"""Domain error classes.

Protocol-agnostic errors that represent catalog failures.
These errors are translated to HTTP responses by the entrypoint layer.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain errors.

    Contains error information that can be translated to any wire format.
    """

    # Default error code (can be used as i18n key)
    error_code: str = "DOMAIN_ERROR"

    def __init__(self, message: str, **context: Any) -> None:
        """Create a domain error.

        Args:
            message: Human-readable error message
            **context: Additional context for error (e.g., field names, values)
        """
        self.message = message
        self.context = context
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format for protocol translation."""
        return {
            "message": self.message,
            "code": self.error_code,
            **self.context,
        }


class ValidationError(DomainError):
    """Invariant violation on a domain value.

    Query parameters never produce this error (the planner degrades them to
    defaults); it signals a hand-built QuerySpec that breaks its invariants.

    Protocol mappings:
        - REST: 422 Unprocessable Entity
    """

    error_code: str = "VALIDATION_ERROR"

    def __init__(
        self,
        message: str | None = None,
        errors: list[dict[str, str]] | None = None,
        **context: Any,
    ) -> None:
        """Create a validation error.

        Args:
            message: Overall validation error message (optional if errors provided)
            errors: List of field-specific errors, each with 'field' and 'message'
            **context: Additional context
        """
        self.errors: list[dict[str, str]] | None
        if errors:
            self.errors = errors
            msg = message or "Validation failed"
        else:
            self.errors = None
            msg = message or "Validation error"

        super().__init__(msg, **context)

    def to_dict(self) -> dict[str, Any]:
        """Convert to structured format."""
        if self.errors:
            return {
                "message": self.message,
                "code": self.error_code,
                "errors": self.errors,
                **self.context,
            }
        return super().to_dict()


class StoreError(DomainError):
    """The product store could not answer a read.

    Service-unavailable class error. Never retried by the catalog; the
    subclasses only classify the cause, all of them map to the same
    wire status.

    Protocol mappings:
        - REST: 500 Internal Server Error
    """

    error_code: str = "STORE_ERROR"

    def __init__(self, message: str, operation: str | None = None, **context: Any) -> None:
        """Create a store error.

        Args:
            message: Generic, client-safe description of the failed read
            operation: Name of the store read that failed (e.g. "count")
            **context: Additional context (driver detail, kept server-side)
        """
        super().__init__(message, operation=operation, **context)
        self.operation = operation


class StoreUnavailableError(StoreError):
    """Connectivity to the store was lost or could not be established."""

    error_code: str = "STORE_UNAVAILABLE"


class StoreTimeoutError(StoreError):
    """The store (or its connection pool) did not answer in time."""

    error_code: str = "STORE_TIMEOUT"


class StoreQueryError(StoreError):
    """The store rejected the query."""

    error_code: str = "STORE_QUERY_ERROR"
