import logging

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict


class Settings(BaseSettings):
    """Library settings loaded from environment variables.

    All settings can be configured via VERDICT_* environment variables or .env file.
    """

    # Logging settings
    log_level: str = "INFO"

    # Diagnostic dump defaults (a RuleConfiguration may override verbose)
    verbose: bool = False
    diagnostic_body_limit: int = 4096  # Max body characters written to a dump

    # HTTP client settings used by create_http_client()
    httpx_connect_timeout: float = 10.0
    httpx_read_timeout: float = 30.0
    httpx_write_timeout: float = 10.0
    httpx_pool_timeout: float = 5.0

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Validate log level is a standard logging level name."""
        v = v.strip().upper()
        if not isinstance(logging.getLevelName(v), int):
            raise ValueError(f"Unknown log level: {v}")
        return v

    @field_validator("diagnostic_body_limit")
    @classmethod
    def validate_body_limit(cls, v: int) -> int:
        if v < 1:
            raise ValueError("diagnostic_body_limit must be at least 1")
        return v

    @field_validator(
        "httpx_connect_timeout",
        "httpx_read_timeout",
        "httpx_write_timeout",
        "httpx_pool_timeout",
    )
    @classmethod
    def validate_timeout_positive(cls, v: float) -> float:
        """Validate timeout values are positive."""
        if v <= 0:
            raise ValueError("Timeout values must be positive")
        return v

    model_config = SettingsConfigDict(
        env_prefix="VERDICT_", env_file=".env", extra="ignore"
    )


# Global settings instance
settings = Settings()
