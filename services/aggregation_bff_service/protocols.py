"""Protocol definitions for the Aggregation BFF Service.

Defines interfaces for components used in dependency injection.
"""

from __future__ import annotations

from collections.abc import Sequence
from typing import TYPE_CHECKING, Protocol
from uuid import UUID

if TYPE_CHECKING:
    from services.aggregation_bff_service.domain.sources import (
        SourceOutcome,
        SourceRequest,
    )


class SourceClientProtocol(Protocol):
    """Protocol for the per-source HTTP client."""

    async def fetch(self, request: SourceRequest, correlation_id: UUID) -> SourceOutcome:
        """Perform one source call.

        Implementations must report network errors, timeouts and non-2xx
        responses as a failed outcome instead of raising.
        """
        ...


class FanOutCoordinatorProtocol(Protocol):
    """Protocol for concurrent execution of source calls."""

    async def execute(
        self,
        requests: Sequence[SourceRequest],
        correlation_id: UUID,
    ) -> list[SourceOutcome]:
        """Run all requests concurrently and return outcomes in request order."""
        ...
