# =============================================================================
# lib/api_client.py - Client Request Pipeline
# =============================================================================
# Async HTTP client that wraps every outbound call in an ApiResult.
#
# For each request the pipeline:
# 1. Races the request against a timeout (default 30s)
# 2. Classifies transport failures and error statuses
# 3. Decodes the JSON body into the expected type
#
# No exception escapes execute() - every failure comes back as a failed
# ApiResult. Timeouts are advisory: the pipeline stops waiting, but the
# server may still finish the operation.
#
# Usage:
#   async with ApiClient("http://localhost:8000") as client:
#       result = await client.get("/api/v1/products", list[Product], operation="Load products")
# =============================================================================

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

import httpx
from pydantic import BaseModel, TypeAdapter, ValidationError

from app.config import settings
from lib.api_result import ApiResult
from lib.error_handler import (
    handle_empty_response,
    handle_http_status_error,
    handle_invalid_data,
    handle_network_error,
    handle_parsing_error,
    handle_timeout,
    handle_unexpected_error,
)

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json"

WRITE_METHODS = frozenset({"POST", "PUT", "PATCH"})


def serialize_body(data: Any) -> bytes:
    """
    Encode a request body as JSON.

    Pydantic models are dumped by alias with nulls dropped, matching the
    server's wire format. None becomes an empty body.
    """
    if data is None:
        return b""
    if isinstance(data, BaseModel):
        return data.model_dump_json(by_alias=True, exclude_none=True).encode("utf-8")
    return TypeAdapter(Any).dump_json(data, by_alias=True, exclude_none=True)


class ApiClient:
    """
    Executes HTTP requests and returns typed ApiResults.

    Owns an httpx.AsyncClient unless one is passed in (useful for tests with
    httpx.MockTransport); a passed-in client is left open on close().
    """

    def __init__(
        self,
        base_url: str | None = None,
        default_timeout_seconds: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.base_url = base_url or settings.API_BASE_URL
        self.default_timeout_seconds = (
            default_timeout_seconds
            if default_timeout_seconds is not None
            else settings.CLIENT_TIMEOUT_SECONDS
        )
        self._owns_client = http_client is None
        self._client = http_client or httpx.AsyncClient(base_url=self.base_url)

    async def close(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def __aenter__(self) -> ApiClient:
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.close()

    # -------------------------------------------------------------------------
    # Verb Helpers
    # -------------------------------------------------------------------------

    async def get(
        self,
        path: str,
        response_type: Any,
        operation: str | None = None,
        timeout_seconds: float | None = None,
    ) -> ApiResult:
        return await self.execute("GET", path, response_type, None, operation, timeout_seconds)

    async def post(
        self,
        path: str,
        data: Any,
        response_type: Any,
        operation: str | None = None,
        timeout_seconds: float | None = None,
    ) -> ApiResult:
        return await self.execute("POST", path, response_type, data, operation, timeout_seconds)

    async def put(
        self,
        path: str,
        data: Any,
        response_type: Any,
        operation: str | None = None,
        timeout_seconds: float | None = None,
    ) -> ApiResult:
        return await self.execute("PUT", path, response_type, data, operation, timeout_seconds)

    async def delete(
        self,
        path: str,
        response_type: Any = None,
        operation: str | None = None,
        timeout_seconds: float | None = None,
    ) -> ApiResult:
        return await self.execute("DELETE", path, response_type, None, operation, timeout_seconds)

    # -------------------------------------------------------------------------
    # Pipeline
    # -------------------------------------------------------------------------

    async def execute(
        self,
        method: str,
        path: str,
        response_type: Any = None,
        data: Any = None,
        operation: str | None = None,
        timeout_seconds: float | None = None,
    ) -> ApiResult:
        """
        Send one request and classify the outcome.

        Args:
            method: HTTP verb
            path: Path relative to base_url
            response_type: Type to decode the body into (a model, list[Model],
                list[str], ...). None means no payload is expected, so an
                empty body counts as success.
            data: Body for write verbs
            operation: Label used in logs and error messages
                (defaults to "<METHOD> <path>")
            timeout_seconds: Overrides the client default

        Returns:
            ApiResult: Success with the decoded payload, or a failure
        """
        method = method.upper()
        operation = operation or f"{method} {path}"
        timeout = timeout_seconds if timeout_seconds is not None else self.default_timeout_seconds

        try:
            logger.info(f"Starting {operation}")

            response = await asyncio.wait_for(
                self._send(method, path, data, timeout),
                timeout=timeout,
            )
            result = self._process_response(response, response_type, operation)

            if result.is_success:
                logger.info(f"Successfully completed {operation}")
            else:
                logger.warning(f"Failed {operation}: {result.error_message}")

            return result

        except (asyncio.TimeoutError, httpx.TimeoutException):
            logger.warning(f"Timeout occurred for {operation} after {timeout:g} seconds")
            return handle_timeout(timeout, operation)

        except httpx.RequestError as e:
            logger.error(f"Network error occurred for {operation}: {e}", exc_info=True)
            return handle_network_error(e, operation)

        except Exception as e:
            logger.error(f"Unexpected error occurred for {operation}: {e}", exc_info=True)
            return handle_unexpected_error(e, operation)

    async def _send(
        self,
        method: str,
        path: str,
        data: Any,
        timeout: float,
    ) -> httpx.Response:
        if method in WRITE_METHODS:
            return await self._client.request(
                method,
                path,
                content=serialize_body(data),
                headers={"Content-Type": JSON_CONTENT_TYPE},
                timeout=timeout,
            )
        return await self._client.request(method, path, timeout=timeout)

    def _process_response(
        self,
        response: httpx.Response,
        response_type: Any,
        operation: str,
    ) -> ApiResult:
        if not response.is_success:
            return handle_http_status_error(response.status_code, operation)
        return self._process_success_response(response, response_type, operation)

    def _process_success_response(
        self,
        response: httpx.Response,
        response_type: Any,
        operation: str,
    ) -> ApiResult:
        body = response.text

        if not body.strip():
            if response_type is None:
                return ApiResult.success(None)
            return handle_empty_response(operation)

        if response_type is None:
            # Nothing to decode into; the body is informational only
            return ApiResult.success(None)

        try:
            decoded = json.loads(body)
        except json.JSONDecodeError as e:
            logger.error(f"Failed to deserialize response for {operation}: {e}")
            return handle_parsing_error(e, operation)

        if decoded is None:
            return handle_invalid_data(operation, "Deserialization returned null")

        try:
            value = TypeAdapter(response_type).validate_python(decoded)
        except ValidationError as e:
            logger.error(f"Response for {operation} doesn't match the expected type: {e}")
            return handle_parsing_error(e, operation)

        return ApiResult.success(value)
