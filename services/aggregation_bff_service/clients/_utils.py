"""Shared utilities for Aggregation BFF HTTP clients."""

from __future__ import annotations

from uuid import UUID

from services.aggregation_bff_service.config import settings


def build_tracing_headers(correlation_id: UUID) -> dict[str, str]:
    """Build headers identifying this service and the originating request."""
    return {
        "X-Service-ID": settings.SERVICE_NAME,
        "X-Correlation-ID": str(correlation_id),
    }
