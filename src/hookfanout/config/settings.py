"""
Module: settings.py
Description: Application configuration using pydantic-settings.

Loads all settings from environment variables (or a .env file) and
derives the immutable DispatchConfig handed to the dispatcher. Invalid
values are rejected when the process starts, never at dispatch time.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from hookfanout.exceptions import ConfigurationError


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    # Application settings
    app_name: str = Field(default="Hook Fanout API", description="Application name")
    app_version: str = Field(default="0.1.0", description="Application version")
    log_level: str = Field(default="INFO", description="Logging level")
    stage: str = Field(default="dev", description="Deployment stage")

    # AWS settings
    aws_region: str = Field(default="us-east-1", description="AWS region")
    hooks_table_name: str = Field(
        default="hookfanout-hooks",
        description="Name of the DynamoDB table holding hook registrations"
    )

    # Dispatch settings
    batch_size: int = Field(
        default=10,
        ge=1,
        description="Number of hooks grouped into one chunk"
    )
    retry_count: int = Field(
        default=3,
        ge=1,
        description="Total delivery passes, including the initial one"
    )
    delivery_timeout: float = Field(
        default=10.0,
        gt=0,
        le=60,
        description="HTTP timeout in seconds for a single delivery attempt"
    )
    max_in_flight: Optional[int] = Field(
        default=None,
        ge=1,
        description="Cap on simultaneous requests per round (defaults to batch_size)"
    )
    round_delay_seconds: float = Field(
        default=0.0,
        ge=0,
        description="Pause between retry rounds; 0 retries immediately"
    )

    # Metrics settings
    metrics_enabled: bool = Field(default=False, description="Publish CloudWatch metrics")
    metrics_namespace: str = Field(default="HookFanout", description="CloudWatch namespace")

    @field_validator('log_level')
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a valid logging level."""
        valid_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in valid_levels:
            raise ValueError(f"log_level must be one of: {', '.join(valid_levels)}")
        return v.upper()


class DispatchConfig(BaseModel):
    """
    Process-wide dispatch parameters.

    Passed explicitly into the dispatcher so it can be exercised with
    different batch sizes and retry counts.

    Attributes:
        batch_size: Hooks per chunk
        retry_count: Total passes (1 means no retries)
        delivery_timeout: Per-request timeout in seconds
        max_in_flight: Concurrent request cap per round
        round_delay_seconds: Pause before each retry round
    """

    model_config = ConfigDict(frozen=True)

    batch_size: int = Field(default=10, ge=1)
    retry_count: int = Field(default=3, ge=1)
    delivery_timeout: float = Field(default=10.0, gt=0, le=60)
    max_in_flight: Optional[int] = Field(default=None, ge=1)
    round_delay_seconds: float = Field(default=0.0, ge=0)

    @property
    def concurrency_limit(self) -> int:
        """Width of the per-round worker pool."""
        return self.max_in_flight or self.batch_size

    @classmethod
    def from_settings(cls, settings: "Settings") -> "DispatchConfig":
        """
        Build dispatch parameters from application settings.

        Raises:
            ConfigurationError: If any parameter is out of range
        """
        try:
            return cls(
                batch_size=settings.batch_size,
                retry_count=settings.retry_count,
                delivery_timeout=settings.delivery_timeout,
                max_in_flight=settings.max_in_flight,
                round_delay_seconds=settings.round_delay_seconds,
            )
        except ValidationError as e:
            raise ConfigurationError(f"Invalid dispatch configuration: {e}") from e


def load_settings() -> Settings:
    """
    Load settings from the environment.

    Raises:
        ConfigurationError: If the environment holds invalid values
    """
    try:
        return Settings()
    except ValidationError as e:
        raise ConfigurationError(f"Invalid settings: {e}") from e


# Global settings instance
settings = load_settings()
