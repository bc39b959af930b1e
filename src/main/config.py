"""
Application Settings - Main Layer

Use Pydantic Settings for configuration management.
This module handles configuration settings provided using
environment variables, .env files and default values.
"""

from typing import List, Optional

from pydantic import AliasChoices, Field, model_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from src.shared import DEFAULT_ORDER_STATUSES, EnumEnvironment, EnumLogLevel


class DatabaseSettings(BaseSettings):
    """Database configuration settings."""

    mongo_uri: str = Field(
        default="mongodb://localhost:27017/sales_db",
        description="MongoDB connection URI",
    )
    database_name: str = Field(
        default="sales_db", description="Name of the MongoDB database"
    )

    model_config = SettingsConfigDict(
        env_prefix="DB_", case_sensitive=False, extra="ignore"
    )


class ServiceSettings(BaseSettings):
    """HTTP service configuration settings."""

    title: str = Field(default="Sales Trend Service", description="Service title")
    description: str = Field(
        default="Per-product sales trend predictions from the order ledger",
        description="Service description",
    )
    version: str = Field(default="1.0.0", description="Service version")
    git_commit: str = Field(
        default="unknown",
        description="Git commit hash",
        validation_alias=AliasChoices("SERVICE_GIT_COMMIT", "GIT_COMMIT"),
    )
    build_time: str = Field(
        default="unknown",
        description="Build timestamp",
        validation_alias=AliasChoices("SERVICE_BUILD_TIME", "BUILD_TIME"),
    )
    debug: bool = Field(default=False, description="Enable debug mode")
    host: str = Field(default="0.0.0.0", description="Interface to bind the server")
    port: int = Field(default=8000, description="Port to bind the server")
    reload: bool = Field(
        default=False, description="Enable auto-reload for development"
    )

    model_config = SettingsConfigDict(
        env_prefix="SERVICE_", case_sensitive=False, extra="ignore"
    )


class PredictionSettings(BaseSettings):
    """Trend estimator parameters and prediction run defaults."""

    default_period_days: int = Field(
        default=30, ge=1, le=365, description="History window when none is given"
    )
    order_statuses: List[str] = Field(
        default_factory=lambda: list(DEFAULT_ORDER_STATUSES),
        description="Order statuses counted as sales",
    )
    smoothing_window: int = Field(default=3, ge=1)
    trend_threshold: float = Field(default=0.1, ge=0)
    low_confidence_threshold: float = Field(default=0.4, ge=0, le=1)
    high_confidence_threshold: float = Field(default=0.7, ge=0, le=1)
    insufficient_data_confidence: float = Field(default=0.2, ge=0, le=1)
    short_series_confidence: float = Field(default=0.3, ge=0, le=1)
    min_points_for_confidence: int = Field(default=3, ge=1)
    weekly_pattern_threshold: float = Field(default=0.2, ge=0)
    seasonality_confidence_boost: float = Field(default=0.1, ge=0, le=1)

    model_config = SettingsConfigDict(
        env_prefix="PREDICTION_", case_sensitive=False, extra="ignore"
    )

    @model_validator(mode="after")
    def _check_confidence_thresholds(self) -> "PredictionSettings":
        if self.low_confidence_threshold > self.high_confidence_threshold:
            raise ValueError(
                "low_confidence_threshold cannot exceed high_confidence_threshold"
            )
        return self


class LoggingSettings(BaseSettings):
    """Logging configuration settings."""

    level: EnumLogLevel = Field(default=EnumLogLevel.INFO, description="Logging level")
    file_path: Optional[str] = Field(
        default=None, description="Log file path (if None, logs to console)"
    )

    model_config = SettingsConfigDict(
        env_prefix="LOG_", case_sensitive=False, extra="ignore"
    )


class AppSettings(BaseSettings):
    """Main application settings, aggregating all sub-settings."""

    environment: EnumEnvironment = Field(
        default=EnumEnvironment.DEVELOPMENT, description="Application environment"
    )

    database: DatabaseSettings = Field(default_factory=DatabaseSettings)
    service: ServiceSettings = Field(default_factory=ServiceSettings)
    logging: LoggingSettings = Field(default_factory=LoggingSettings)
    prediction: PredictionSettings = Field(default_factory=PredictionSettings)

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        env_nested_delimiter="__",
        extra="ignore",
    )


def get_settings() -> AppSettings:
    """
    Get application settings instance Factory.

    Used to be mocked in tests, allowing different settings based on enviroment.
    """
    return AppSettings()
