"""Configuration for the Aggregation BFF Service.

Uses Pydantic settings for environment-based configuration. Each
downstream source has its own base URL and timeout; the Azure Functions
sources share a function key.
"""

from __future__ import annotations

from fincloud_service_libs.config import SecureServiceSettings
from pydantic import AliasChoices, Field, SecretStr
from pydantic_settings import SettingsConfigDict


class AggregationBFFSettings(SecureServiceSettings):
    """Configuration settings for the Aggregation BFF Service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="AGGREGATION_BFF_",
        case_sensitive=False,
        extra="ignore",
    )

    # Service identity
    SERVICE_NAME: str = "aggregation-bff-service"

    # HTTP server configuration
    HOST: str = Field(default="0.0.0.0", description="HTTP server host")
    PORT: int = Field(default=3000, description="HTTP server port")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # CORS configuration for the admin and user front-ends
    CORS_ORIGINS: list[str] = Field(
        default=["http://localhost:5173", "http://localhost:3000"],
        description="Allowed CORS origins",
    )
    CORS_ALLOW_CREDENTIALS: bool = Field(
        default=True, description="Allow credentials in CORS requests"
    )
    CORS_ALLOW_METHODS: list[str] = Field(
        default=["GET", "OPTIONS"],
        description="Allowed HTTP methods for CORS",
    )
    CORS_ALLOW_HEADERS: list[str] = Field(
        default=["*"], description="Allowed headers for CORS requests"
    )

    # Azure Functions sources
    MONGODB_FUNCTION_URL: str = Field(
        default="http://localhost:7071/api/mongodb-function",
        validation_alias=AliasChoices(
            "AGGREGATION_BFF_MONGODB_FUNCTION_URL", "MONGODB_FUNCTION_URL"
        ),
        description="MongoDB Azure Function endpoint",
    )
    AZURESQL_FUNCTION_URL: str = Field(
        default="http://localhost:7072/api/azuresql-function",
        validation_alias=AliasChoices(
            "AGGREGATION_BFF_AZURESQL_FUNCTION_URL", "AZURESQL_FUNCTION_URL"
        ),
        description="Azure SQL Azure Function endpoint",
    )
    AZURE_FUNCTION_KEY: SecretStr | None = Field(
        default=None,
        validation_alias=AliasChoices("AGGREGATION_BFF_AZURE_FUNCTION_KEY", "AZURE_FUNCTION_KEY"),
        description="Function key sent as x-functions-key to both Azure Functions",
    )

    # Microservice sources
    USER_SERVICE_URL: str = Field(
        default="http://localhost:3001",
        validation_alias=AliasChoices("AGGREGATION_BFF_USER_SERVICE_URL", "USER_SERVICE_URL"),
        description="User Service base URL",
    )
    TRANSACTION_SERVICE_URL: str = Field(
        default="http://localhost:3002",
        validation_alias=AliasChoices(
            "AGGREGATION_BFF_TRANSACTION_SERVICE_URL", "TRANSACTION_SERVICE_URL"
        ),
        description="Transaction Service base URL",
    )

    # Per-source timeouts bound the overall aggregation latency
    MONGODB_FUNCTION_TIMEOUT_SECONDS: float = Field(default=8.0, gt=0)
    AZURESQL_FUNCTION_TIMEOUT_SECONDS: float = Field(default=8.0, gt=0)
    USER_SERVICE_TIMEOUT_SECONDS: float = Field(default=8.0, gt=0)
    TRANSACTION_SERVICE_TIMEOUT_SECONDS: float = Field(default=8.0, gt=0)

    HTTP_CLIENT_TIMEOUT_SECONDS: float = Field(
        default=10.0,
        description="Default request timeout for the shared HTTP client",
    )
    HTTP_CLIENT_CONNECT_TIMEOUT_SECONDS: float = Field(
        default=5.0,
        description="Connection timeout for the shared HTTP client",
    )

    def get_function_key(self) -> str:
        return self.get_secret_value(self.AZURE_FUNCTION_KEY)


# Global settings instance
settings = AggregationBFFSettings()
