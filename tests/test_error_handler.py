# =============================================================================
# tests/test_error_handler.py - Client Failure Builder Tests
# =============================================================================
# Checks that each builder produces the right ErrorCode, message wording and
# typed context, with and without an operation label.
# =============================================================================

from datetime import datetime

import pytest

from lib import error_handler
from lib.api_result import (
    ApiResult,
    ApiResultError,
    ErrorCode,
    ExceptionContext,
    HttpErrorContext,
    TimeoutContext,
)


class TestApiResult:
    """Tests for the ApiResult envelope."""

    def test_success(self):
        result = ApiResult.success([1, 2])

        assert result.is_success
        assert result.data == [1, 2]
        assert result.error_code is None
        assert result.context == {}

    def test_failure_always_has_timestamp(self):
        result = ApiResult.failure("boom", ErrorCode.UNEXPECTED_ERROR)

        assert not result.is_success
        assert isinstance(result.context["timestamp"], datetime)
        assert "operation" not in result.context

    def test_unwrap(self):
        assert ApiResult.success("ok").unwrap() == "ok"

        with pytest.raises(ApiResultError) as exc_info:
            ApiResult.failure("gone", ErrorCode.HTTP_ERROR).unwrap()
        assert exc_info.value.code == ErrorCode.HTTP_ERROR

    def test_error_codes_are_strings(self):
        assert ErrorCode.TIMEOUT == "TIMEOUT"
        assert {code.value for code in ErrorCode} == {
            "TIMEOUT", "NETWORK_ERROR", "PARSING_ERROR", "HTTP_ERROR",
            "UNEXPECTED_ERROR", "EMPTY_RESPONSE", "INVALID_DATA",
        }


class TestTimeout:

    def test_with_operation(self):
        result = error_handler.handle_timeout(30, "Load products")

        assert result.error_code == ErrorCode.TIMEOUT
        assert result.error_message.startswith("Load products timed out after 30 seconds")
        assert isinstance(result.error_context, TimeoutContext)
        assert result.context["timeout_seconds"] == 30
        assert result.context["operation"] == "Load products"

    def test_without_operation(self):
        result = error_handler.handle_timeout(2.5)
        assert result.error_message.startswith("Request timed out after 2.5 seconds")


class TestHttpStatus:

    @pytest.mark.parametrize("status, fragment", [
        (404, "endpoint not found"),
        (401, "Authentication required"),
        (403, "Access denied"),
        (500, "Server error occurred"),
        (503, "temporarily unavailable"),
        (400, "Invalid request"),
    ])
    def test_specific_messages(self, status, fragment):
        result = error_handler.handle_http_status_error(status, "Load product 3")

        assert result.error_code == ErrorCode.HTTP_ERROR
        assert fragment in result.error_message
        assert "Load product 3" in result.error_message

    def test_other_status(self):
        result = error_handler.handle_http_status_error(409, "Create product")

        assert "status 409 (Conflict)" in result.error_message
        assert "Please try again" in result.error_message

    def test_context(self):
        result = error_handler.handle_http_status_error(404)

        assert isinstance(result.error_context, HttpErrorContext)
        assert result.context["status_code"] == 404
        assert result.context["status_name"] == "Not Found"
        assert result.error_message == "Endpoint not found. Please check the server configuration."

    def test_unknown_status_name(self):
        assert error_handler.status_name(599) == "Unknown Status"


class TestExceptionFailures:

    def test_network_error(self):
        exc = ConnectionRefusedError("Connection refused")
        result = error_handler.handle_network_error(exc, "Load products")

        assert result.error_code == ErrorCode.NETWORK_ERROR
        assert "Connection refused" in result.error_message
        assert "check if the server is running" in result.error_message

    def test_parsing_error(self):
        result = error_handler.handle_parsing_error(ValueError("bad json"))

        assert result.error_code == ErrorCode.PARSING_ERROR
        assert result.error_message.startswith("Invalid response format received from server")
        assert result.context["exception_message"] == "bad json"

    def test_unexpected_error_captures_type(self):
        result = error_handler.handle_unexpected_error(KeyError("x"), "Load stats")

        assert result.error_code == ErrorCode.UNEXPECTED_ERROR
        assert isinstance(result.error_context, ExceptionContext)
        assert result.context["exception_type"] == "KeyError"


class TestEmptyAndInvalid:

    def test_empty_response(self):
        result = error_handler.handle_empty_response("Load products")

        assert result.error_code == ErrorCode.EMPTY_RESPONSE
        assert result.error_message == "Empty response received from Load products."

    def test_invalid_data(self):
        result = error_handler.handle_invalid_data("Load products", "Deserialization returned null")

        assert result.error_code == ErrorCode.INVALID_DATA
        assert result.context["additional_info"] == "Deserialization returned null"
