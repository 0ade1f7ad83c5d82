# =============================================================================
# lib/error_handler.py - Client Failure Builders
# =============================================================================
# Turns each kind of client failure into an ApiResult with a user-facing
# message and a typed context. Messages follow the principle:
# "Errors should tell HOW to fix, not just WHAT failed."
#
# Every builder accepts an optional operation label. With a label the message
# names the operation ("Load products timed out after ..."); without one it
# falls back to a generic wording.
# =============================================================================

from http import HTTPStatus

from lib.api_result import (
    ApiResult,
    ErrorCode,
    ErrorContext,
    ExceptionContext,
    HttpErrorContext,
    InvalidDataContext,
    TimeoutContext,
)


def _format_seconds(seconds: float) -> str:
    return f"{seconds:g}"


def handle_timeout(timeout_seconds: float, operation: str | None = None) -> ApiResult:
    """Request didn't finish within `timeout_seconds`."""
    context = TimeoutContext(operation=operation, timeout_seconds=timeout_seconds)
    subject = operation or "Request"
    message = (
        f"{subject} timed out after {_format_seconds(timeout_seconds)} seconds. "
        "Please check your connection and try again."
    )
    return ApiResult.failure(message, ErrorCode.TIMEOUT, context)


def handle_network_error(exc: Exception, operation: str | None = None) -> ApiResult:
    """Transport-level failure: the request never got a response."""
    context = ExceptionContext(
        operation=operation,
        exception_type=type(exc).__name__,
        exception_message=str(exc),
    )
    prefix = f"Network error during {operation}" if operation else "Network error"
    message = f"{prefix}: {exc}. Please check if the server is running."
    return ApiResult.failure(message, ErrorCode.NETWORK_ERROR, context)


def handle_parsing_error(exc: Exception, operation: str | None = None) -> ApiResult:
    """Response body couldn't be decoded into the expected type."""
    context = ExceptionContext(
        operation=operation,
        exception_type=type(exc).__name__,
        exception_message=str(exc),
    )
    if operation:
        message = f"Invalid response format received during {operation}. Please try again later."
    else:
        message = "Invalid response format received from server. Please try again later."
    return ApiResult.failure(message, ErrorCode.PARSING_ERROR, context)


# Status-specific wording, with and without an operation label
_STATUS_MESSAGES: dict[int, tuple[str, str]] = {
    HTTPStatus.NOT_FOUND: (
        "{op} endpoint not found. Please check the server configuration.",
        "Endpoint not found. Please check the server configuration.",
    ),
    HTTPStatus.UNAUTHORIZED: (
        "Authentication required for {op}. Please log in and try again.",
        "Authentication required. Please log in and try again.",
    ),
    HTTPStatus.FORBIDDEN: (
        "Access denied for {op}. You don't have permission to perform this action.",
        "Access denied. You don't have permission to perform this action.",
    ),
    HTTPStatus.INTERNAL_SERVER_ERROR: (
        "Server error occurred during {op}. Please try again later.",
        "Server error occurred. Please try again later.",
    ),
    HTTPStatus.SERVICE_UNAVAILABLE: (
        "Service is temporarily unavailable for {op}. Please try again later.",
        "Service is temporarily unavailable. Please try again later.",
    ),
    HTTPStatus.BAD_REQUEST: (
        "Invalid request for {op}. Please check your input and try again.",
        "Invalid request. Please check your input and try again.",
    ),
}


def status_name(status_code: int) -> str:
    """Reason phrase for a status code, e.g. 404 -> "Not Found"."""
    try:
        return HTTPStatus(status_code).phrase
    except ValueError:
        return "Unknown Status"


def handle_http_status_error(status_code: int, operation: str | None = None) -> ApiResult:
    """Server answered with a 4xx/5xx status."""
    name = status_name(status_code)
    context = HttpErrorContext(
        operation=operation,
        status_code=status_code,
        status_name=name,
    )

    templates = _STATUS_MESSAGES.get(status_code)
    if templates:
        with_op, without_op = templates
        message = with_op.format(op=operation) if operation else without_op
    elif operation:
        message = f"Server responded with status {status_code} ({name}) for {operation}. Please try again."
    else:
        message = f"Server responded with status {status_code} ({name}). Please try again."

    return ApiResult.failure(message, ErrorCode.HTTP_ERROR, context)


def handle_unexpected_error(exc: Exception, operation: str | None = None) -> ApiResult:
    """Catch-all for failures no other builder covers."""
    context = ExceptionContext(
        operation=operation,
        exception_type=type(exc).__name__,
        exception_message=str(exc),
    )
    if operation:
        message = f"An unexpected error occurred during {operation}. Please try again later."
    else:
        message = "An unexpected error occurred. Please try again later."
    return ApiResult.failure(message, ErrorCode.UNEXPECTED_ERROR, context)


def handle_empty_response(operation: str | None = None) -> ApiResult:
    """Success status, but no body where one was expected."""
    context = ErrorContext(operation=operation)
    if operation:
        message = f"Empty response received from {operation}."
    else:
        message = "Empty response received from server."
    return ApiResult.failure(message, ErrorCode.EMPTY_RESPONSE, context)


def handle_invalid_data(
    operation: str | None = None,
    additional_info: str | None = None,
) -> ApiResult:
    """Body parsed, but held no usable value (e.g. JSON null)."""
    context = InvalidDataContext(operation=operation, additional_info=additional_info)
    if operation:
        message = f"Failed to parse response data from {operation}."
    else:
        message = "Failed to parse server response data."
    return ApiResult.failure(message, ErrorCode.INVALID_DATA, context)
