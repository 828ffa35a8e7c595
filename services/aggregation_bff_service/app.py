"""Aggregation BFF Service - multi-source composition for FinCloud front-ends.

Exposes endpoints that fan out to the MongoDB and Azure SQL functions and
to the User and Transaction services, returning one merged envelope.
"""

from __future__ import annotations

from dishka import make_async_container
from dishka.integrations.fastapi import FastapiProvider, setup_dishka
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from fincloud_service_libs.error_handling.fastapi import (
    register_error_handlers as register_fastapi_error_handlers,
)
from fincloud_service_libs.logging_utils import (
    configure_service_logging,
    create_service_logger,
)

from services.aggregation_bff_service.api.health_routes import router as health_router
from services.aggregation_bff_service.api.v1 import router as aggregation_router_v1
from services.aggregation_bff_service.config import settings
from services.aggregation_bff_service.di import AggregationBFFProvider, RequestContextProvider
from services.aggregation_bff_service.middleware import CorrelationIDMiddleware

configure_service_logging(
    settings.SERVICE_NAME,
    environment=settings.ENVIRONMENT.value,
    log_level=settings.LOG_LEVEL,
)
logger = create_service_logger("aggregation_bff_service")


def create_app() -> FastAPI:
    """Create and configure the FastAPI application."""
    app = FastAPI(
        title=settings.SERVICE_NAME,
        version="0.1.0",
        description="Aggregation BFF Service - merges FinCloud data sources per request",
        docs_url="/api/docs" if settings.is_development() else None,
        redoc_url=None,
        openapi_url="/api/openapi.json" if settings.is_development() else None,
    )

    register_fastapi_error_handlers(app)

    app.add_middleware(CorrelationIDMiddleware)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=settings.CORS_ALLOW_METHODS,
        allow_headers=settings.CORS_ALLOW_HEADERS,
    )

    app.include_router(health_router)
    app.include_router(aggregation_router_v1, prefix="/api/aggregation", tags=["Aggregation"])

    container = make_async_container(
        AggregationBFFProvider(),
        RequestContextProvider(),
        FastapiProvider(),
    )
    setup_dishka(container, app)
    app.state.di_container = container

    logger.info(
        "Aggregation BFF configured",
        extra={"environment": settings.ENVIRONMENT.value},
    )
    return app


# Create application instance
app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "services.aggregation_bff_service.app:app",
        host=settings.HOST,
        port=settings.PORT,
        reload=settings.is_development(),
        log_level=settings.LOG_LEVEL.lower(),
    )
