"""HTTP client for a single downstream data source."""

from __future__ import annotations

import asyncio
from uuid import UUID

import httpx
from fincloud_service_libs import Result
from fincloud_service_libs.logging_utils import create_service_logger

from services.aggregation_bff_service.clients._utils import build_tracing_headers
from services.aggregation_bff_service.domain.sources import (
    SourceOutcome,
    SourceRequest,
    SourceResult,
)

logger = create_service_logger("aggregation_bff.source_client")


class HttpSourceClient:
    """Performs one GET per SourceRequest and normalizes the outcome.

    Network errors, timeouts, non-2xx responses and undecodable bodies all
    become ``Result.err`` with the upstream message. Calls are never retried.
    """

    def __init__(self, http_client: httpx.AsyncClient) -> None:
        """Initialize with shared HTTP client.

        Args:
            http_client: Shared httpx AsyncClient instance
        """
        self._client = http_client

    async def fetch(self, request: SourceRequest, correlation_id: UUID) -> SourceOutcome:
        """Call the source described by ``request``.

        Args:
            request: Target, query parameters, headers and timeout
            correlation_id: Request correlation ID for tracing

        Returns:
            SourceOutcome tagged with the request's source name
        """
        result = await self._call(request, correlation_id)
        if result.is_err:
            logger.warning(
                "Source call failed",
                extra={
                    "source": request.name.value,
                    "url": request.url,
                    "error": result.error,
                    "correlation_id": str(correlation_id),
                },
            )
        return SourceOutcome(name=request.name, result=result)

    async def _call(self, request: SourceRequest, correlation_id: UUID) -> SourceResult:
        headers = {**request.headers, **build_tracing_headers(correlation_id)}

        logger.debug(
            "Calling source",
            extra={"source": request.name.value, "correlation_id": str(correlation_id)},
        )

        try:
            # httpx timeouts apply per phase; the outer deadline bounds the whole call
            async with asyncio.timeout(request.timeout_seconds):
                response = await self._client.get(
                    request.url,
                    params=request.params,
                    headers=headers,
                    timeout=request.timeout_seconds,
                )
            response.raise_for_status()
        except (TimeoutError, httpx.TimeoutException):
            return Result.err(f"Request timed out after {request.timeout_seconds:g}s")
        except httpx.HTTPStatusError as e:
            return Result.err(f"Request failed with status code {e.response.status_code}")
        except httpx.HTTPError as e:
            return Result.err(str(e) or type(e).__name__)

        try:
            payload = response.json()
        except ValueError:
            return Result.err(f"Invalid JSON response from {request.name.value}")

        logger.info(
            "Fetched source data",
            extra={
                "source": request.name.value,
                "status_code": response.status_code,
                "correlation_id": str(correlation_id),
            },
        )
        return Result.ok(payload)
