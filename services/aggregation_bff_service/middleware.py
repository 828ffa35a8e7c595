"""Aggregation BFF middleware components."""

from __future__ import annotations

from uuid import UUID, uuid4

from fastapi import Request
from fincloud_service_libs.logging_utils import bind_request_context, clear_request_context
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response


def parse_correlation_id(header_value: str | None) -> UUID:
    """Use the caller's X-Correlation-ID when it is a valid UUID, else a new one."""
    if header_value:
        try:
            return UUID(header_value)
        except ValueError:
            pass
    return uuid4()


class CorrelationIDMiddleware(BaseHTTPMiddleware):
    """Ensures every request has a correlation ID in state, logs and response."""

    async def dispatch(self, request: Request, call_next: RequestResponseEndpoint) -> Response:
        correlation_id = parse_correlation_id(request.headers.get("X-Correlation-ID"))

        request.state.correlation_id = correlation_id
        bind_request_context(correlation_id=str(correlation_id), path=request.url.path)
        try:
            response = await call_next(request)
        finally:
            clear_request_context()
        response.headers["X-Correlation-ID"] = str(correlation_id)
        return response
