"""Dependency Injection providers for the Aggregation BFF Service.

Provides Dishka DI container setup with APP-scoped infrastructure
and REQUEST-scoped context providers.
"""

from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import UUID, uuid4

import httpx
from dishka import Provider, Scope, from_context, provide
from fastapi import Request

from services.aggregation_bff_service.clients.source_client import HttpSourceClient
from services.aggregation_bff_service.config import AggregationBFFSettings, settings
from services.aggregation_bff_service.domain.planner import SourcePlanner
from services.aggregation_bff_service.implementations.fan_out import FanOutCoordinator
from services.aggregation_bff_service.protocols import (
    FanOutCoordinatorProtocol,
    SourceClientProtocol,
)


class AggregationBFFProvider(Provider):
    """Infrastructure provider for the Aggregation BFF Service.

    Provides APP-scoped dependencies: config, HTTP client, source client,
    planner and fan-out coordinator.
    """

    scope = Scope.APP

    @provide
    def get_config(self) -> AggregationBFFSettings:
        """Provide settings singleton."""
        return settings

    @provide(scope=Scope.APP)
    async def get_http_client(
        self, config: AggregationBFFSettings
    ) -> AsyncIterator[httpx.AsyncClient]:
        """Provide shared HTTP client with connection pooling.

        Source calls pass their own timeout; this default only applies to
        calls that do not.
        """
        async with httpx.AsyncClient(
            timeout=httpx.Timeout(
                config.HTTP_CLIENT_TIMEOUT_SECONDS,
                connect=config.HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS,
            )
        ) as client:
            yield client

    @provide(scope=Scope.APP)
    def provide_source_client(self, http_client: httpx.AsyncClient) -> SourceClientProtocol:
        return HttpSourceClient(http_client)

    @provide(scope=Scope.APP)
    def provide_planner(self, config: AggregationBFFSettings) -> SourcePlanner:
        return SourcePlanner(config)

    @provide(scope=Scope.APP)
    def provide_coordinator(
        self, source_client: SourceClientProtocol
    ) -> FanOutCoordinatorProtocol:
        return FanOutCoordinator(source_client)


class RequestContextProvider(Provider):
    """Request-scoped provider for correlation context."""

    request = from_context(provides=Request, scope=Scope.REQUEST)

    @provide(scope=Scope.REQUEST)
    def provide_correlation_id(self, request: Request) -> UUID:
        """Provide correlation ID from request state (set by CorrelationIDMiddleware)."""
        return getattr(request.state, "correlation_id", None) or uuid4()
