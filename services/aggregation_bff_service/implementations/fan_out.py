"""Concurrent fan-out over downstream sources."""

from __future__ import annotations

import asyncio
from collections.abc import Sequence
from enum import Enum
from uuid import UUID

from fincloud_service_libs import Result
from fincloud_service_libs.logging_utils import create_service_logger

from services.aggregation_bff_service.domain.sources import SourceOutcome, SourceRequest
from services.aggregation_bff_service.protocols import SourceClientProtocol

logger = create_service_logger("aggregation_bff.fan_out")


class SettlePolicy(str, Enum):
    """How the coordinator waits on concurrent source calls.

    SETTLE_ALL waits for every call to succeed, fail or time out. One failed
    source never cancels or short-circuits the others.
    """

    SETTLE_ALL = "settle_all"


class FanOutCoordinator:
    """Issues all source calls of one aggregation request concurrently."""

    policy = SettlePolicy.SETTLE_ALL

    def __init__(self, source_client: SourceClientProtocol) -> None:
        self._source_client = source_client

    async def execute(
        self,
        requests: Sequence[SourceRequest],
        correlation_id: UUID,
    ) -> list[SourceOutcome]:
        """Run ``requests`` concurrently and settle all of them.

        Outcomes are returned in the order of ``requests``, not completion
        order. An exception escaping the client is reported as a failure of
        that source.
        """
        if not requests:
            return []

        settled = await asyncio.gather(
            *[self._source_client.fetch(request, correlation_id) for request in requests],
            return_exceptions=True,
        )

        outcomes: list[SourceOutcome] = []
        for request, result in zip(requests, settled):
            if isinstance(result, Exception):
                logger.error(
                    f"Source call for {request.name.value} raised: {result!r}",
                    extra={"source": request.name.value, "correlation_id": str(correlation_id)},
                )
                outcomes.append(SourceOutcome(name=request.name, result=Result.err(str(result))))
            elif isinstance(result, BaseException):
                raise result
            else:
                outcomes.append(result)

        logger.info(
            "Fan-out settled",
            extra={
                "total_sources": len(outcomes),
                "available_sources": sum(1 for o in outcomes if o.available),
                "correlation_id": str(correlation_id),
            },
        )
        return outcomes
