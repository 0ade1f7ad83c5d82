# =============================================================================
# lib/api_result.py - Client Result Envelope
# =============================================================================
# Every call made through ApiClient returns an ApiResult instead of raising.
#
# A result is either:
# - a success carrying the decoded payload, or
# - a failure carrying a message, an ErrorCode and a typed error context
#
# Usage:
#   result = await client.get("/api/v1/products/3", Product)
#   if result.is_success:
#       print(result.data.name)
#   else:
#       print(f"[{result.error_code}] {result.error_message}")
# =============================================================================

from __future__ import annotations

from dataclasses import asdict, dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Generic, TypeVar

T = TypeVar("T")


class ErrorCode(str, Enum):
    """
    Closed set of client failure kinds.

    - TIMEOUT: No response within the timeout
    - NETWORK_ERROR: Transport failed (connection refused, DNS, ...)
    - PARSING_ERROR: Body wasn't valid JSON for the expected type
    - HTTP_ERROR: Server answered with an error status
    - UNEXPECTED_ERROR: Anything else
    - EMPTY_RESPONSE: Success status with an empty body
    - INVALID_DATA: Body decoded to null
    """
    TIMEOUT = "TIMEOUT"
    NETWORK_ERROR = "NETWORK_ERROR"
    PARSING_ERROR = "PARSING_ERROR"
    HTTP_ERROR = "HTTP_ERROR"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"
    EMPTY_RESPONSE = "EMPTY_RESPONSE"
    INVALID_DATA = "INVALID_DATA"


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


# =============================================================================
# Error Contexts
# =============================================================================
# One small struct per failure kind. to_dict() gives the key -> value view
# used in logs and diagnostics; unset values are left out.

@dataclass(frozen=True)
class ErrorContext:
    """Diagnostics common to every failure."""
    operation: str | None = None
    timestamp: datetime = field(default_factory=_utcnow)

    def to_dict(self) -> dict[str, Any]:
        return {key: value for key, value in asdict(self).items() if value is not None}


@dataclass(frozen=True)
class TimeoutContext(ErrorContext):
    """Context for TIMEOUT failures."""
    timeout_seconds: float = 0.0


@dataclass(frozen=True)
class HttpErrorContext(ErrorContext):
    """Context for HTTP_ERROR failures."""
    status_code: int = 0
    status_name: str = ""


@dataclass(frozen=True)
class ExceptionContext(ErrorContext):
    """Context for failures caused by an exception."""
    exception_type: str | None = None
    exception_message: str | None = None


@dataclass(frozen=True)
class InvalidDataContext(ErrorContext):
    """Context for INVALID_DATA failures."""
    additional_info: str | None = None


# =============================================================================
# Result
# =============================================================================

@dataclass(frozen=True)
class ApiResult(Generic[T]):
    """
    Tagged success/failure envelope returned by the client pipeline.

    Build with ApiResult.success() or ApiResult.failure(); don't set the
    fields by hand.
    """
    is_success: bool
    data: T | None = None
    error_message: str | None = None
    error_code: ErrorCode | None = None
    error_context: ErrorContext | None = None

    @classmethod
    def success(cls, data: T | None = None) -> ApiResult[T]:
        """Create a successful result."""
        return cls(is_success=True, data=data)

    @classmethod
    def failure(
        cls,
        message: str,
        code: ErrorCode,
        context: ErrorContext | None = None,
    ) -> ApiResult[T]:
        """Create a failed result."""
        return cls(
            is_success=False,
            error_message=message,
            error_code=code,
            error_context=context or ErrorContext(),
        )

    @property
    def context(self) -> dict[str, Any]:
        """Error context as a plain mapping (empty for successes)."""
        return self.error_context.to_dict() if self.error_context else {}

    def unwrap(self) -> T:
        """
        Return the payload or raise.

        For callers that would rather handle failure with an exception.

        Raises:
            ApiResultError: If the result is a failure
        """
        if not self.is_success:
            raise ApiResultError(self)
        return self.data


class ApiResultError(Exception):
    """Raised by ApiResult.unwrap() on a failed result."""

    def __init__(self, result: ApiResult):
        super().__init__(f"[{result.error_code.value}] {result.error_message}")
        self.result = result
        self.code = result.error_code
