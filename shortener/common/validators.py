"""Validation utilities for URL shortener."""

import re
from urllib.parse import urlparse
from typing import Optional, Tuple


MAX_URL_LENGTH = 2048

ALLOWED_SCHEMES = ("http", "https")
DEFAULT_SCHEME = "https"

# Dot-separated host labels: example.com, sub.example.co.uk, 10.0.0.1
_HOST_RE = re.compile(r"^[\w-]+(\.[\w-]+)+$", re.UNICODE)
_SCHEME_RE = re.compile(r"^([A-Za-z][A-Za-z0-9+.-]*):")
_WHITESPACE_RE = re.compile(r"\s")

RESERVED_WORDS = {
    "api", "health", "admin", "static", "assets", "favicon",
    "robots", "sitemap", "shorten", "css", "js",
}


def validate_url(url: Optional[str]) -> Tuple[Optional[str], str]:
    """Validate a submitted URL and canonicalize it.

    Input may come with or without a scheme. Without one, ``https://`` is
    prefixed. The function is pure.

    Args:
        url: The raw URL as submitted

    Returns:
        Tuple of (normalized_url or None, error_message)
    """
    if not url or not isinstance(url, str):
        return None, "URL is required"

    candidate = url.strip()
    if not candidate:
        return None, "URL is required"

    if len(candidate) > MAX_URL_LENGTH:
        return None, f"URL is too long (max {MAX_URL_LENGTH} characters)"

    if _WHITESPACE_RE.search(candidate):
        return None, "URL must not contain whitespace"

    scheme_match = _SCHEME_RE.match(candidate)
    if scheme_match and candidate[scheme_match.end():].startswith("//"):
        if scheme_match.group(1).lower() not in ALLOWED_SCHEMES:
            return None, "URL must use http or https protocol"
        candidate = scheme_match.group(1).lower() + candidate[scheme_match.end(1):]
    elif scheme_match and not _looks_like_host_port(candidate):
        # mailto:, javascript: and friends
        return None, "URL must use http or https protocol"
    else:
        candidate = f"{DEFAULT_SCHEME}://{candidate}"

    is_valid, error = is_valid_url(candidate)
    if not is_valid:
        return None, error

    return candidate, ""


def _looks_like_host_port(value: str) -> bool:
    """True for scheme-less input such as ``example.com:8080/path``."""
    head = value.split("/", 1)[0]
    host, _, port = head.rpartition(":")
    return bool(host) and port.isdigit()


def is_valid_url(url: str) -> Tuple[bool, str]:
    """Validate an absolute URL.

    Args:
        url: The URL to validate

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not url or not isinstance(url, str):
        return False, "URL is required"

    if len(url) > MAX_URL_LENGTH:
        return False, f"URL is too long (max {MAX_URL_LENGTH} characters)"

    if _WHITESPACE_RE.search(url):
        return False, "URL must not contain whitespace"

    try:
        result = urlparse(url)

        # Check if scheme is http or https
        if result.scheme.lower() not in ALLOWED_SCHEMES:
            return False, "URL must use http or https protocol"

        # Check if netloc (domain) exists
        if not result.netloc or not result.hostname:
            return False, "URL must have a valid domain"

        if not _HOST_RE.match(result.hostname):
            return False, "URL must have a valid domain"

        # Raises ValueError on a non-numeric or out of range port
        result.port

        return True, ""

    except ValueError as e:
        return False, f"Invalid URL format: {str(e)}"


def is_valid_short_code(short_code: str, min_length: int = 4, max_length: int = 20) -> Tuple[bool, str]:
    """Validate a short code.

    Args:
        short_code: The short code to validate
        min_length: Minimum length for short code
        max_length: Maximum length for short code

    Returns:
        Tuple of (is_valid, error_message)
    """
    if not short_code or not isinstance(short_code, str):
        return False, "Short code is required"

    if len(short_code) < min_length:
        return False, f"Short code must be at least {min_length} characters"

    if len(short_code) > max_length:
        return False, f"Short code must be at most {max_length} characters"

    # Only allow alphanumeric characters, hyphens, and underscores
    if not re.match(r'^[a-zA-Z0-9_-]+$', short_code):
        return False, "Short code can only contain letters, numbers, hyphens, and underscores"

    # Prevent collisions with routes
    if short_code.lower() in RESERVED_WORDS:
        return False, f"'{short_code}' is a reserved word and cannot be used"

    return True, ""
