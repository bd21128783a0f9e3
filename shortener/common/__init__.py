"""Common utilities for URL shortener."""

from .validators import validate_url, is_valid_url, is_valid_short_code
from .headers import extract_forwarded_headers, build_base_url, prefers_json
from .url_builder import build_short_url, PublicURLResolver
from .logging_config import setup_logging, get_logger

__all__ = [
    "validate_url",
    "is_valid_url",
    "is_valid_short_code",
    "extract_forwarded_headers",
    "build_base_url",
    "prefers_json",
    "build_short_url",
    "PublicURLResolver",
    "setup_logging",
    "get_logger",
]
