"""Configuration for Voting Gateway Service.

Uses Pydantic settings for environment-based configuration. The backend
base URL is read once here and handed to the backend client by the DI
provider.
"""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic import AliasChoices, Field
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Defines application environments."""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class VotingGatewaySettings(BaseSettings):
    """Configuration settings for Voting Gateway Service."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_prefix="VOTING_GATEWAY_",
        case_sensitive=False,
        extra="ignore",
        populate_by_name=True,
    )

    # Service identity
    SERVICE_NAME: str = "voting-gateway-service"

    # Environment
    ENVIRONMENT: Environment = Field(
        default=Environment.DEVELOPMENT,
        validation_alias="ENVIRONMENT",
        description="Runtime environment for the service",
    )

    # HTTP server configuration
    HOST: str = Field(default="0.0.0.0", description="HTTP server host")
    PORT: int = Field(default=3000, description="HTTP server port")

    # Logging
    LOG_LEVEL: str = Field(default="INFO", description="Logging level")

    # Static file serving
    STATIC_DIR: Path = Field(
        default=Path(__file__).parent / "static",
        description="Directory containing the voting UI static files",
    )

    # Voting backend
    BACKEND_URL: str = Field(
        default="http://localhost:8080",
        description="Voting backend base URL",
        validation_alias=AliasChoices("VOTING_GATEWAY_BACKEND_URL", "BACKEND_URL"),
    )

    # HTTP client configuration (None keeps the httpx default)
    HTTP_CLIENT_TIMEOUT_SECONDS: float | None = Field(
        default=None,
        description="HTTP client timeout in seconds for backend calls",
    )

    def is_development(self) -> bool:
        return self.ENVIRONMENT == Environment.DEVELOPMENT

    def is_production(self) -> bool:
        return self.ENVIRONMENT == Environment.PRODUCTION


# Global settings instance
settings = VotingGatewaySettings()
