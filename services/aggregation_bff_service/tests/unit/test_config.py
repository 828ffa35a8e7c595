"""Unit tests for Aggregation BFF settings."""

from __future__ import annotations

import httpx
import pytest
from dishka import make_async_container
from fincloud_common.config_enums import Environment

from services.aggregation_bff_service import di
from services.aggregation_bff_service.config import AggregationBFFSettings
from services.aggregation_bff_service.tests.test_provider import make_test_settings


def test_defaults_point_at_local_sources(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in ("MONGODB_FUNCTION_URL", "AZURE_FUNCTION_KEY", "ENVIRONMENT"):
        monkeypatch.delenv(name, raising=False)
        monkeypatch.delenv(f"AGGREGATION_BFF_{name}", raising=False)

    config = AggregationBFFSettings(_env_file=None)

    assert config.MONGODB_FUNCTION_URL == "http://localhost:7071/api/mongodb-function"
    assert config.get_function_key() == ""
    assert config.ENVIRONMENT == Environment.DEVELOPMENT
    assert config.is_development()


def test_unprefixed_source_variables_are_accepted(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("USER_SERVICE_URL", "http://users:3001")
    monkeypatch.setenv("AZURE_FUNCTION_KEY", "func-key")

    config = AggregationBFFSettings(_env_file=None)

    assert config.USER_SERVICE_URL == "http://users:3001"
    assert config.get_function_key() == "func-key"


def test_prefixed_variables_are_accepted(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AGGREGATION_BFF_TRANSACTION_SERVICE_TIMEOUT_SECONDS", "3.5")
    monkeypatch.setenv("ENVIRONMENT", "production")

    config = AggregationBFFSettings(_env_file=None)

    assert config.TRANSACTION_SERVICE_TIMEOUT_SECONDS == 3.5
    assert config.is_production()
    assert not config.is_development()


def test_function_key_is_not_exposed_in_repr(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AZURE_FUNCTION_KEY", "func-key")

    config = AggregationBFFSettings(_env_file=None)

    assert "func-key" not in repr(config)


def test_http_client_timeouts_come_from_settings(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("AGGREGATION_BFF_HTTP_CLIENT_TIMEOUT_SECONDS", "12")
    monkeypatch.setenv("AGGREGATION_BFF_HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS", "2")

    config = AggregationBFFSettings(_env_file=None)

    assert config.HTTP_CLIENT_TIMEOUT_SECONDS == 12.0
    assert config.HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS == 2.0


@pytest.mark.asyncio
async def test_provided_http_client_uses_configured_timeouts(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setattr(
        di,
        "settings",
        make_test_settings(
            HTTP_CLIENT_TIMEOUT_SECONDS=12.0,
            HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS=2.0,
        ),
    )
    container = make_async_container(di.AggregationBFFProvider())
    try:
        http_client = await container.get(httpx.AsyncClient)
        assert http_client.timeout.read == 12.0
        assert http_client.timeout.connect == 2.0
    finally:
        await container.close()
