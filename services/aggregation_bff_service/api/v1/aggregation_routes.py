"""Aggregation API v1 routes.

Each route plans its source calls, fans them out concurrently and merges
whatever came back into a single envelope. Individual source failures are
part of the envelope; only faults in this service produce an error status.
"""

from __future__ import annotations

from uuid import UUID

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter, Query
from fincloud_service_libs.error_handling import (
    raise_missing_required_field,
    raise_processing_error,
)
from fincloud_service_libs.logging_utils import create_service_logger

from services.aggregation_bff_service.domain.planner import SourcePlanner
from services.aggregation_bff_service.dto.aggregation_v1 import (
    DataAggregationResponseV1,
    UserAggregationResponseV1,
)
from services.aggregation_bff_service.implementations.result_merger import (
    merge_data_aggregation,
    merge_user_aggregation,
)
from services.aggregation_bff_service.protocols import FanOutCoordinatorProtocol

router = APIRouter()
logger = create_service_logger("aggregation_bff.aggregation_routes")

SERVICE = "aggregation_bff_service"


@router.get("/data", response_model=DataAggregationResponseV1)
@inject
async def get_aggregated_data(
    planner: FromDishka[SourcePlanner],
    coordinator: FromDishka[FanOutCoordinatorProtocol],
    correlation_id: FromDishka[UUID],
    mongo_collection: str | None = Query(
        None, alias="mongoCollection", description="MongoDB collection to query"
    ),
    sql_table: str | None = Query(None, alias="sqlTable", description="Azure SQL table to query"),
    user_id: str | None = Query(
        None, alias="userId", description="Scope sources to a user and include user services"
    ),
) -> DataAggregationResponseV1:
    """Aggregate data from the sources implied by the query parameters.

    MongoDB is queried only with ``mongoCollection``, Azure SQL only with
    ``sqlTable``, and the User and Transaction services only with ``userId``.
    """
    try:
        requests = planner.plan_data_sources(
            mongo_collection=mongo_collection,
            sql_table=sql_table,
            user_id=user_id,
        )
        outcomes = await coordinator.execute(requests, correlation_id)
        return merge_data_aggregation(outcomes)
    except Exception as e:
        logger.exception(
            "Aggregation failed",
            extra={"error": str(e), "correlation_id": str(correlation_id)},
        )
        raise_processing_error(
            service=SERVICE,
            operation="get_aggregated_data",
            message="Aggregation failed",
            correlation_id=correlation_id,
            reason=str(e),
        )


@router.get("/user/{user_id}", response_model=UserAggregationResponseV1)
@inject
async def get_user_aggregation(
    user_id: str,
    planner: FromDishka[SourcePlanner],
    coordinator: FromDishka[FanOutCoordinatorProtocol],
    correlation_id: FromDishka[UUID],
) -> UserAggregationResponseV1:
    """Aggregate preferences, audit logs, profile and transaction summary for a user."""
    if not user_id.strip():
        raise_missing_required_field(
            service=SERVICE,
            operation="get_user_aggregation",
            field_name="userId",
            correlation_id=correlation_id,
        )

    try:
        outcomes = await coordinator.execute(planner.plan_user_sources(user_id), correlation_id)
        return merge_user_aggregation(user_id, outcomes)
    except Exception as e:
        logger.exception(
            "User aggregation failed",
            extra={"user_id": user_id, "error": str(e), "correlation_id": str(correlation_id)},
        )
        raise_processing_error(
            service=SERVICE,
            operation="get_user_aggregation",
            message="User aggregation failed",
            correlation_id=correlation_id,
            reason=str(e),
        )
