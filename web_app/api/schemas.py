"""Pydantic schemas for API requests and responses."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ShortenRequest(BaseModel):
    """Request to shorten a URL."""

    url: str = Field(..., description="The URL to shorten; https:// is assumed when no scheme is given")
    custom_code: Optional[str] = Field(None, description="Optional custom short code")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "url": "https://example.com/very/long/path/to/resource",
                    "custom_code": None
                },
                {
                    "url": "github.com/user/repo",
                    "custom_code": "myrepo"
                }
            ]
        }
    }


class ShortenResponse(BaseModel):
    """Response after shortening a URL."""

    short_code: str = Field(..., description="The generated short code")
    short_url: str = Field(..., description="The complete short URL")
    original_url: str = Field(..., description="The normalized long URL")
    created_at: datetime = Field(..., description="Creation timestamp")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "short_code": "aZ3kQ9x",
                    "short_url": "https://short.link/aZ3kQ9x",
                    "original_url": "https://example.com/very/long/path",
                    "created_at": "2024-01-01T12:00:00Z"
                }
            ]
        }
    }


class URLInfoResponse(BaseModel):
    """Response with URL information."""

    short_code: str
    original_url: str
    created_at: datetime


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall status")
    store: str = Field(..., description="Mapping store status")
    timestamp: datetime = Field(..., description="Check timestamp")


class ErrorResponse(BaseModel):
    """Error response."""

    detail: str = Field(..., description="Error message")


class StatisticsResponse(BaseModel):
    """Statistics response."""

    total_urls: int
    reserved: int
    store: str
    custom_codes_enabled: bool
