"""Health routes for the Aggregation BFF Service."""

from __future__ import annotations

from dishka.integrations.fastapi import FromDishka, inject
from fastapi import APIRouter

from services.aggregation_bff_service.config import AggregationBFFSettings

router = APIRouter()


@router.get("/healthz", tags=["Health"])
@inject
async def health_check(config: FromDishka[AggregationBFFSettings]) -> dict[str, str | dict]:
    """Report service status and the configured source targets.

    Sources are not probed here; their availability is reported per request
    in the aggregation envelopes.
    """
    return {
        "service": "aggregation_bff_service",
        "status": "healthy",
        "message": "Aggregation BFF Service is healthy",
        "version": "0.1.0",
        "environment": config.ENVIRONMENT.value,
        "dependencies": {
            "mongodb": {"url": config.MONGODB_FUNCTION_URL},
            "azuresql": {"url": config.AZURESQL_FUNCTION_URL},
            "userService": {"url": config.USER_SERVICE_URL},
            "transactionService": {"url": config.TRANSACTION_SERVICE_URL},
        },
    }
