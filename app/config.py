"""
Application configuration with Pydantic Settings for validation and type safety.
Values come from environment variables, ``connect.env`` or ``.env``.
"""

from enum import Enum
from typing import Optional
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator


class Environment(str, Enum):
    """Application environment types"""

    DEVELOPMENT = "development"
    STAGING = "staging"
    PRODUCTION = "production"
    TESTING = "testing"


class Settings(BaseSettings):
    """
    Application settings with validation.
    Settings are loaded from environment variables or the env files.
    """

    # Application settings
    app_name: str = Field(default="Cookbook", description="Application name")
    app_version: str = Field(default="1.0.0", description="Application version")
    environment: Environment = Field(
        default=Environment.DEVELOPMENT, description="Application environment"
    )
    debug: bool = Field(default=False, description="Debug mode")

    # Server settings
    host: str = Field(default="0.0.0.0", description="Server host")
    port: int = Field(default=3000, ge=1, le=65535, description="Server port")

    # MongoDB settings
    mongodb_uri: Optional[str] = Field(
        default=None, description="MongoDB connection string (required)"
    )
    db_name: str = Field(default="cookbook", description="MongoDB database name")
    collection_name: str = Field(
        default="recipes", description="MongoDB collection holding recipes"
    )
    mongo_timeout_ms: Optional[int] = Field(
        default=None,
        ge=1,
        description="Client-side timeout for each MongoDB operation; unset waits on the driver",
    )
    db_init_attempts: int = Field(
        default=3, ge=1, description="Initial connection attempts before giving up"
    )
    db_init_delay_sec: float = Field(
        default=1.0, ge=0, description="Delay between connection attempts"
    )

    # Logging
    log_level: str = Field(default="INFO", description="Logging level")
    log_format: str = Field(
        default="%(asctime)s %(levelname)s %(name)s: %(message)s",
        description="Log format string",
    )

    # CORS settings
    cors_origins: list[str] = Field(
        default=["http://localhost:3000"],
        description="Allowed CORS origins",
    )
    cors_allow_credentials: bool = Field(
        default=True, description="Allow CORS credentials"
    )
    cors_allow_methods: list[str] = Field(
        default=["*"], description="Allowed HTTP methods"
    )
    cors_allow_headers: list[str] = Field(
        default=["*"], description="Allowed HTTP headers"
    )

    # API settings
    api_title: str = Field(default="Cookbook API", description="API documentation title")
    api_description: str = Field(
        default="Share, edit and comment on recipes",
        description="API documentation description",
    )

    model_config = SettingsConfigDict(
        env_file=("connect.env", ".env"),
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    @field_validator("environment", mode="before")
    @classmethod
    def validate_environment(cls, v):
        """Validate and normalize environment value"""
        if isinstance(v, str):
            return Environment(v.lower())
        return v

    @field_validator("mongodb_uri", mode="before")
    @classmethod
    def blank_uri_is_missing(cls, v):
        if isinstance(v, str) and not v.strip():
            return None
        return v

    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == Environment.PRODUCTION

    def is_development(self) -> bool:
        """Check if running in development environment"""
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment"""
        return self.environment == Environment.TESTING


# Global settings instance
settings = Settings()
