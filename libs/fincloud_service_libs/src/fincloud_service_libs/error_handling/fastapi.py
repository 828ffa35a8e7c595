"""FastAPI exception handlers rendering FinCloudError as structured JSON."""

from __future__ import annotations

from uuid import UUID, uuid4

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from fincloud_common.error_enums import ErrorCode

from fincloud_service_libs.error_handling.error_detail_factory import (
    create_error_detail_with_context,
)
from fincloud_service_libs.error_handling.fincloud_error import FinCloudError
from fincloud_service_libs.logging_utils import create_service_logger

logger = create_service_logger("error_handling.fastapi")

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: 400,
    ErrorCode.MISSING_REQUIRED_FIELD: 400,
    ErrorCode.RESOURCE_NOT_FOUND: 404,
    ErrorCode.EXTERNAL_SERVICE_ERROR: 502,
    ErrorCode.CONNECTION_ERROR: 503,
    ErrorCode.SERVICE_UNAVAILABLE: 503,
    ErrorCode.TIMEOUT: 504,
}


def status_code_for(error_code: ErrorCode) -> int:
    return ERROR_CODE_TO_STATUS.get(error_code, 500)


def _request_correlation_id(request: Request) -> UUID:
    return getattr(request.state, "correlation_id", None) or uuid4()


def register_error_handlers(app: FastAPI) -> None:
    """Register FinCloud exception handlers on a FastAPI application."""

    @app.exception_handler(FinCloudError)
    async def handle_fincloud_error(request: Request, exc: FinCloudError) -> JSONResponse:
        status_code = status_code_for(exc.error_detail.error_code)
        log = logger.error if status_code >= 500 else logger.warning
        log(
            "Request failed",
            extra={
                "error_code": exc.error_code,
                "operation": exc.operation,
                "path": request.url.path,
                "correlation_id": exc.correlation_id,
            },
        )
        return JSONResponse(status_code=status_code, content={"error": exc.to_dict()})

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation_error(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        error = FinCloudError(
            create_error_detail_with_context(
                error_code=ErrorCode.VALIDATION_ERROR,
                message="Request validation failed",
                service=app.title,
                operation=request.url.path,
                correlation_id=_request_correlation_id(request),
                details={"errors": [str(e.get("msg", e)) for e in exc.errors()]},
                capture_stack=False,
            )
        )
        return JSONResponse(status_code=400, content={"error": error.to_dict()})

    @app.exception_handler(Exception)
    async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
        correlation_id = _request_correlation_id(request)
        logger.exception(
            "Unhandled exception",
            extra={"path": request.url.path, "correlation_id": str(correlation_id)},
        )
        error = FinCloudError(
            create_error_detail_with_context(
                error_code=ErrorCode.UNKNOWN_ERROR,
                message="Internal server error",
                service=app.title,
                operation=request.url.path,
                correlation_id=correlation_id,
                capture_stack=False,
            )
        )
        return JSONResponse(status_code=500, content={"error": error.to_dict()})
