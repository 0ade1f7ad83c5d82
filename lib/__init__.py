# =============================================================================
# lib/ - Client Request Pipeline
# =============================================================================
# This package contains the client side of the Products API:
# - api_result.py: ApiResult envelope, ErrorCode and typed error contexts
# - error_handler.py: Builders that turn each failure kind into an ApiResult
# - api_client.py: Async executor (timeout, classification, decoding)
# - products_client.py: Typed per-endpoint facade used by front ends
#
# These modules are self-contained and can be tested in isolation.
# =============================================================================

from lib.api_result import (
    ApiResult,
    ApiResultError,
    ErrorCode,
    ErrorContext,
    ExceptionContext,
    HttpErrorContext,
    InvalidDataContext,
    TimeoutContext,
)
from lib.api_client import ApiClient
from lib.products_client import ProductsClient

__all__ = [
    # Result
    "ApiResult",
    "ApiResultError",
    "ErrorCode",
    "ErrorContext",
    "ExceptionContext",
    "HttpErrorContext",
    "InvalidDataContext",
    "TimeoutContext",
    # Clients
    "ApiClient",
    "ProductsClient",
]
