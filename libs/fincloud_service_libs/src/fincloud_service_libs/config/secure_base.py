"""Base settings class shared by FinCloud services."""

from __future__ import annotations

from pydantic import Field, SecretStr
from pydantic_settings import BaseSettings

from fincloud_common.config_enums import Environment


class SecureServiceSettings(BaseSettings):
    """Pydantic settings base with environment helpers and secret access.

    Subclasses declare their own ``model_config`` (env prefix, env file).
    ``ENVIRONMENT`` is read from the global ``ENVIRONMENT`` variable so all
    services in a deployment agree on it.
    """

    SERVICE_NAME: str = "fincloud-service"

    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias="ENVIRONMENT",
        description="Runtime environment for the service",
    )

    def is_development(self) -> bool:
        return self.ENVIRONMENT in (Environment.DEVELOPMENT, Environment.TESTING)

    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION

    @staticmethod
    def get_secret_value(secret: SecretStr | None) -> str:
        """Unwrap an optional secret, returning an empty string when unset."""
        if secret is None:
            return ""
        return secret.get_secret_value()
