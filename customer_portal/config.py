"""
Configuration module for the customer portal guards.

This module provides centralized configuration management using Pydantic settings.
All configuration values can be overridden via environment variables or .env file.
"""

from typing import Literal

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """
    Settings for the customer portal guard helpers.

    Attributes:
        SERVICE_NAME: Name used for the service logger
        LOG_LEVEL: Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        LOG_JSON: Use JSON structured logging instead of human-readable format
        LOG_GUARD_FAILURES: Emit log records when a guard check fails
        RESPONSE_BODY_LOG_LIMIT: Maximum response body characters written to logs
    """

    SERVICE_NAME: str = Field(
        default="customer-portal",
        description="Name used for the service logger",
    )

    # Logging configuration
    LOG_LEVEL: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = Field(
        default="INFO",
        description="Logging level",
    )
    LOG_JSON: bool = Field(
        default=False,
        description="Use JSON structured logging",
    )
    LOG_GUARD_FAILURES: bool = Field(
        default=True,
        description="Emit log records when a guard check fails",
    )
    RESPONSE_BODY_LOG_LIMIT: int = Field(
        default=500,
        ge=0,
        description="Maximum response body characters written to logs",
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=True,
        extra="ignore",
    )

    @field_validator("SERVICE_NAME")
    @classmethod
    def validate_service_name(cls, value: str) -> str:
        """
        Validate that the service name is usable as a logger name.

        Raises:
            ValueError: If the name is empty
        """
        value = value.strip()
        if not value:
            raise ValueError("Service name cannot be empty")
        return value


# Global settings instance
settings = Settings()
