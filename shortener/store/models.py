"""Data models for URL shortener."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class URLMapping:
    """Represents a bound short code -> URL mapping."""

    short_code: str
    original_url: str
    created_at: datetime

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "short_code": self.short_code,
            "original_url": self.original_url,
            "created_at": self.created_at,
        }
