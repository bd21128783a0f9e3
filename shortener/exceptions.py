"""
Error classes for the URL shortener.

Every error carries the HTTP status code it is reported with, so the web
layer can turn any of them into a response without string matching.
"""

from typing import Optional, Dict, Any


class ShortenerError(Exception):
    """
    Base error class.

    Attributes:
        status_code: HTTP status code (default: 400)
        message: Error message
        details: Optional additional error details
    """
    status_code: int = 400
    message: str = "Bad request"

    def __init__(self, message: Optional[str] = None, details: Optional[Dict[str, Any]] = None):
        """
        Initialize error.

        Args:
            message: Error message (overrides default)
            details: Optional additional error details
        """
        self.message = message or self.message
        self.details = details or {}
        super().__init__(self.message)


class MissingURLError(ShortenerError):
    """400 No URL submitted."""
    status_code = 400
    message = "Missing URL"


class InvalidURLError(ShortenerError):
    """400 Submitted URL is malformed."""
    status_code = 400
    message = "Invalid URL"


class InvalidShortCodeError(ShortenerError):
    """400 Custom short code is malformed or reserved."""
    status_code = 400
    message = "Invalid short code"


class CustomCodesDisabledError(ShortenerError):
    """400 Custom short codes are switched off."""
    status_code = 400
    message = "Custom short codes are not enabled"


class ShortCodeNotFoundError(ShortenerError):
    """404 Short code is absent or not bound yet."""
    status_code = 404
    message = "Short link not found"


class MethodNotAllowedError(ShortenerError):
    """405 Wrong HTTP verb on a mutating endpoint."""
    status_code = 405
    message = "Method not allowed"


class ShortCodeConflictError(ShortenerError):
    """409 Custom short code is already taken."""
    status_code = 409
    message = "Short code already exists"


class CodeSpaceExhaustedError(ShortenerError):
    """503 No free code found within the retry budget."""
    status_code = 503
    message = "Unable to generate unique short code"


class StoreBindError(ShortenerError):
    """500 A reserved code could not be bound."""
    status_code = 500
    message = "Failed to store short URL"
