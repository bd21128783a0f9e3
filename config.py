"""Configuration management for URL shortener."""

from typing import Optional
from pydantic_settings import BaseSettings
from pydantic import Field


class Config(BaseSettings):
    """Application configuration."""

    # Server settings
    host: str = Field(
        default="0.0.0.0",
        description="Host to bind to"
    )

    port: int = Field(
        default=8080,
        ge=1,
        le=65535,
        description="Port to listen on (PORT environment variable overrides)"
    )

    # URL shortener settings
    base_url: str = Field(
        default="http://localhost:8080",
        description="Base URL used for short links when the request carries no host"
    )

    path_prefix: str = Field(
        default="",
        description="Path prefix for short URLs (e.g., '/s' for /s/abc123)"
    )

    trust_forwarded_headers: bool = Field(
        default=True,
        description="Build short links from X-Forwarded-Proto/Host/Prefix when present"
    )

    short_code_length: int = Field(
        default=7,
        ge=4,
        le=20,
        description="Length of generated short codes"
    )

    enable_custom_codes: bool = Field(
        default=True,
        description="Allow API users to provide custom short codes"
    )

    max_collision_retries: int = Field(
        default=5,
        ge=0,
        description="Redraws allowed when a generated code is already taken"
    )

    # Logging settings
    log_level: str = Field(
        default="INFO",
        description="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    log_file: Optional[str] = Field(
        default=None,
        description="Log file path (logs to stdout if not specified)"
    )

    log_json: bool = Field(
        default=False,
        description="Use JSON format for logs"
    )

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "case_sensitive": False,
        "extra": "ignore",  # Ignore extra environment variables
    }


def load_config() -> Config:
    """Load configuration from environment."""
    return Config()
