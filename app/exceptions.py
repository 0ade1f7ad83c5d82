# =============================================================================
# app/exceptions.py - Custom Exception Handlers
# =============================================================================
# Centralized exception handling for the API.
#
# Every failure leaving a handler is one of:
#   400 - bad product id or request validation error
#   404 - product not found
#   500 - anything else, with a generic body
#
# Internal exception detail is logged, never returned to the client.
# =============================================================================

import logging
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

logger = logging.getLogger(__name__)


class ProductsApiException(Exception):
    """
    Base exception for the Products API.

    All custom exceptions inherit from this class.
    Provides structured error responses with actionable suggestions.
    """

    def __init__(
        self,
        message: str,
        code: str = "PRODUCTS_API_ERROR",
        status_code: int = 500,
        suggestion: str | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code
        self.suggestion = suggestion
        self.details = details or {}

    def to_dict(self) -> dict[str, Any]:
        """Convert exception to API response dict."""
        result = {
            "detail": self.message,
            "code": self.code,
        }
        if self.suggestion:
            result["suggestion"] = self.suggestion
        if self.details:
            result["details"] = self.details
        return result


# =============================================================================
# Product Exceptions
# =============================================================================

class InvalidProductIdError(ProductsApiException):
    """Raised when a product id is zero or negative."""

    def __init__(self, product_id: int):
        super().__init__(
            message="Product ID must be a positive number",
            code="INVALID_PRODUCT_ID",
            status_code=400,
            suggestion="Use the id returned when the product was created",
            details={"product_id": product_id}
        )


class ProductNotFoundError(ProductsApiException):
    """Raised when a product id doesn't exist."""

    def __init__(self, product_id: int):
        super().__init__(
            message=f"Product with ID {product_id} not found",
            code="PRODUCT_NOT_FOUND",
            status_code=404,
            suggestion="List products with GET /api/v1/products to find a valid id",
            details={"product_id": product_id}
        )


class ProductOperationError(ProductsApiException):
    """
    Raised when the store fails unexpectedly.

    The message names the action only; the underlying error stays in the log.
    """

    def __init__(self, action: str):
        super().__init__(
            message=f"An error occurred while {action}",
            code="PRODUCT_OPERATION_FAILED",
            status_code=500,
            suggestion="Try again later or contact support if the issue persists",
        )


# =============================================================================
# Exception Handlers
# =============================================================================

async def products_api_exception_handler(
    request: Request,
    exc: ProductsApiException
) -> JSONResponse:
    """
    Convert ProductsApiException to JSON response.

    Returns structured error with:
    - detail: Human-readable message
    - code: Machine-readable error code
    - suggestion: How to fix (if available)
    - details: Additional context
    """
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_dict()
    )


def _format_validation_errors(exc: RequestValidationError) -> list[dict[str, str]]:
    """Flatten pydantic errors to {field, message, type} without echoing input."""
    errors = []
    for error in exc.errors():
        # Drop the "body"/"path" prefix so field names match the JSON payload
        location = [str(part) for part in error.get("loc", ())]
        if location and location[0] in ("body", "path", "query"):
            location = location[1:]
        errors.append({
            "field": ".".join(location) or "body",
            "message": error.get("msg", "Invalid value"),
            "type": error.get("type", "value_error"),
        })
    return errors


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    Reported as 400 with per-field details.
    """
    errors = _format_validation_errors(exc)
    logger.warning(f"Validation failed for {request.method} {request.url.path}: {errors}")

    return JSONResponse(
        status_code=400,
        content={
            "detail": "Validation error",
            "code": "VALIDATION_ERROR",
            "errors": errors,
        }
    )


async def unhandled_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle unexpected exceptions."""
    logger.exception(f"Unexpected error: {exc}")
    return JSONResponse(
        status_code=500,
        content={
            "detail": "An unexpected error occurred",
            "code": "INTERNAL_ERROR",
        }
    )
