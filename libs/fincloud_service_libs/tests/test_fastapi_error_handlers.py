"""Unit tests for FastAPI error handler registration."""

from __future__ import annotations

from collections.abc import AsyncIterator
from uuid import uuid4

import pytest
from fastapi import FastAPI, Query
from fincloud_common.error_enums import ErrorCode
from fincloud_service_libs.error_handling import (
    raise_missing_required_field,
    raise_processing_error,
)
from fincloud_service_libs.error_handling.fastapi import (
    register_error_handlers,
    status_code_for,
)
from httpx import ASGITransport, AsyncClient


@pytest.fixture
async def client() -> AsyncIterator[AsyncClient]:
    app = FastAPI(title="error_handler_test")
    register_error_handlers(app)

    @app.get("/missing")
    async def missing() -> None:
        raise_missing_required_field(
            service="test", operation="missing", field_name="userId", correlation_id=uuid4()
        )

    @app.get("/fault")
    async def fault() -> None:
        raise_processing_error(
            service="test", operation="fault", message="Aggregation failed", correlation_id=uuid4()
        )

    @app.get("/typed")
    async def typed(limit: int = Query(...)) -> dict[str, int]:
        return {"limit": limit}

    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac


@pytest.mark.asyncio
async def test_missing_field_maps_to_400(client: AsyncClient) -> None:
    response = await client.get("/missing")

    assert response.status_code == 400
    assert response.json()["error"]["code"] == "MISSING_REQUIRED_FIELD"


@pytest.mark.asyncio
async def test_processing_error_maps_to_500(client: AsyncClient) -> None:
    response = await client.get("/fault")

    assert response.status_code == 500
    error = response.json()["error"]
    assert error["code"] == "PROCESSING_ERROR"
    assert error["message"] == "Aggregation failed"
    assert error["operation"] == "fault"


@pytest.mark.asyncio
async def test_request_validation_maps_to_400(client: AsyncClient) -> None:
    response = await client.get("/typed", params={"limit": "many"})

    assert response.status_code == 400
    error = response.json()["error"]
    assert error["code"] == "VALIDATION_ERROR"
    assert error["details"]["errors"]


@pytest.mark.parametrize(
    "error_code, expected",
    [
        (ErrorCode.VALIDATION_ERROR, 400),
        (ErrorCode.RESOURCE_NOT_FOUND, 404),
        (ErrorCode.EXTERNAL_SERVICE_ERROR, 502),
        (ErrorCode.TIMEOUT, 504),
        (ErrorCode.UNKNOWN_ERROR, 500),
    ],
)
def test_status_code_mapping(error_code: ErrorCode, expected: int) -> None:
    assert status_code_for(error_code) == expected
