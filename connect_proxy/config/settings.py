"""
Configuration management for Connect Proxy.

This module provides configuration classes for the service settings with
environment variable support, validation, and deployment environment handling.
"""

from typing import Dict, Any
from enum import Enum
from pydantic import BaseModel, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Environment(str, Enum):
    """Supported deployment environments."""
    DEVELOPMENT = "development"
    TESTING = "testing"
    PRODUCTION = "production"


class LogLevel(str, Enum):
    """Supported logging levels."""
    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"
    CRITICAL = "CRITICAL"


class APIConfig(BaseModel):
    """HTTP API metadata settings."""

    title: str = Field(
        default="Connect Proxy",
        description="API title"
    )
    version: str = Field(
        default="1.0.0",
        description="API version"
    )


class MonitoringConfig(BaseModel):
    """Logging and observability configuration."""

    log_level: LogLevel = Field(
        default=LogLevel.INFO,
        description="Application log level"
    )
    log_format: str = Field(
        default="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        description="Log message format used when structured logging is off"
    )
    structured_logging: bool = Field(
        default=True,
        description="Emit one JSON object per log line"
    )


class Settings(BaseSettings):
    """Main application settings with environment variable support."""

    # Environment settings
    environment: Environment = Field(
        default=Environment.DEVELOPMENT,
        description="Deployment environment"
    )
    debug: bool = Field(
        default=False,
        description="Enable debug mode"
    )

    # Component configurations
    api: APIConfig = Field(
        default_factory=APIConfig,
        description="API configuration"
    )
    monitoring: MonitoringConfig = Field(
        default_factory=MonitoringConfig,
        description="Monitoring configuration"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        env_nested_delimiter="__",
        case_sensitive=False,
        env_prefix="CONNECT_PROXY_",
        extra="ignore"
    )

    @model_validator(mode='after')
    def validate_environment_specific_settings(self):
        """Apply environment-specific configuration overrides."""
        if self.environment == Environment.DEVELOPMENT:
            self.monitoring.log_level = LogLevel.DEBUG
            self.debug = True

        elif self.environment == Environment.TESTING:
            self.monitoring.log_level = LogLevel.WARNING
            self.debug = False

        elif self.environment == Environment.PRODUCTION:
            self.monitoring.log_level = LogLevel.INFO
            self.debug = False

        return self

    def is_development(self) -> bool:
        """Check if running in development environment."""
        return self.environment == Environment.DEVELOPMENT

    def is_testing(self) -> bool:
        """Check if running in testing environment."""
        return self.environment == Environment.TESTING

    def is_production(self) -> bool:
        """Check if running in production environment."""
        return self.environment == Environment.PRODUCTION

    def to_dict(self) -> Dict[str, Any]:
        """Convert settings to dictionary."""
        return self.model_dump(mode='json')


# Global settings instance
settings = Settings()


def get_settings() -> Settings:
    """Get the global settings instance."""
    return settings


def reload_settings() -> Settings:
    """Reload settings from environment variables and files."""
    global settings
    settings = Settings()
    return settings
