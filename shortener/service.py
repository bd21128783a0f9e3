"""Business logic service for URL shortener."""

import logging
from typing import Optional, Dict, Any
from datetime import datetime, timezone

from .shortcode import ShortCodeGenerator
from .store.base import MappingStoreBase
from .common.validators import validate_url, is_valid_short_code
from .exceptions import (
    MissingURLError,
    InvalidURLError,
    InvalidShortCodeError,
    CustomCodesDisabledError,
    ShortCodeConflictError,
    CodeSpaceExhaustedError,
    StoreBindError,
)


class URLShortenerService:
    """Service layer for URL shortening business logic.

    Allocation is two-phase: a candidate code is reserved in the store
    (atomic check-and-claim), then the normalized target is bound to it.
    Lookups never see a code between the two phases.
    """

    def __init__(
        self,
        store: MappingStoreBase,
        short_code_generator: Optional[ShortCodeGenerator] = None,
        logger: Optional[logging.Logger] = None,
        enable_custom_codes: bool = True,
        max_collision_retries: int = 5,
    ):
        """Initialize URL shortener service.

        Args:
            store: Mapping store instance, shared by all requests
            short_code_generator: Optional short code generator
            logger: Optional logger
            enable_custom_codes: Whether to allow custom short codes
            max_collision_retries: Redraws allowed after the first collision
        """
        if max_collision_retries < 0:
            raise ValueError("max_collision_retries must not be negative")
        self.store = store
        self.generator = short_code_generator or ShortCodeGenerator()
        self.logger = logger or logging.getLogger(__name__)
        self.enable_custom_codes = enable_custom_codes
        self.max_collision_retries = max_collision_retries

    def create_short_url(
        self,
        original_url: Optional[str],
        custom_code: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Create a new short URL.

        Args:
            original_url: The original long URL, with or without scheme
            custom_code: Optional custom short code

        Returns:
            Dictionary with short_code, original_url (normalized), created_at

        Raises:
            MissingURLError: If no URL was given
            InvalidURLError: If the URL is malformed
            InvalidShortCodeError, CustomCodesDisabledError,
            ShortCodeConflictError: If the custom code cannot be used
            CodeSpaceExhaustedError: If no free code was found
        """
        if not original_url or not original_url.strip():
            raise MissingURLError()

        normalized, error = validate_url(original_url)
        if normalized is None:
            raise InvalidURLError(f"Invalid URL: {error}")

        if custom_code:
            short_code = self._reserve_custom_code(custom_code)
        else:
            short_code = self.allocate_short_code()

        created_at = datetime.now(timezone.utc)
        if not self.store.bind(short_code, normalized, created_at):
            # Only the reserving caller binds, so this means a broken store
            raise StoreBindError(
                f"Failed to bind short code '{short_code}' (possible race condition)"
            )

        self.logger.info(f"Created short URL: {short_code} -> {normalized}")

        return {
            "short_code": short_code,
            "original_url": normalized,
            "created_at": created_at,
        }

    def allocate_short_code(self) -> str:
        """Generate a unique short code and reserve it.

        Each attempt draws a whole new candidate; reserving it is the
        uniqueness check, so no other caller can obtain the same code.

        Returns:
            A short code reserved for the caller

        Raises:
            CodeSpaceExhaustedError: If every attempt collided
        """
        attempts = self.max_collision_retries + 1

        for attempt in range(attempts):
            code = self.generator.generate_random()

            if self.store.reserve(code):
                if attempt:
                    self.logger.debug(f"Generated code after {attempt + 1} attempts: {code}")
                return code

            self.logger.debug(f"Short code collision on {code}, redrawing")

        self.logger.error(f"No free short code after {attempts} attempts")
        raise CodeSpaceExhaustedError(
            f"Unable to generate unique short code after {attempts} attempts"
        )

    def _reserve_custom_code(self, custom_code: str) -> str:
        if not self.enable_custom_codes:
            raise CustomCodesDisabledError()

        custom_code = custom_code.strip()
        is_valid, error = is_valid_short_code(custom_code)
        if not is_valid:
            raise InvalidShortCodeError(f"Invalid short code: {error}")

        if not self.store.reserve(custom_code):
            raise ShortCodeConflictError(f"Short code '{custom_code}' already exists")

        return custom_code

    def get_original_url(self, short_code: str) -> Optional[str]:
        """Get the original URL for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            Original URL or None if not found or not bound yet
        """
        original_url = self.store.lookup(short_code)

        if original_url:
            self.logger.debug(f"Retrieved URL: {short_code} -> {original_url}")
            return original_url

        self.logger.warning(f"Short code not found: {short_code}")
        return None

    def get_url_info(self, short_code: str) -> Optional[Dict[str, Any]]:
        """Get complete information about a short URL.

        Args:
            short_code: The short code to lookup

        Returns:
            Dictionary with URL mapping info or None
        """
        mapping = self.store.get_mapping(short_code)
        if mapping:
            self.logger.debug(f"Retrieved URL info for {short_code}")
            return mapping.to_dict()
        return None

    def get_statistics(self) -> Dict[str, Any]:
        """Get service statistics."""
        return {
            **self.store.get_statistics(),
            "custom_codes_enabled": self.enable_custom_codes,
        }

    def health_check(self) -> Dict[str, bool]:
        """Perform health check."""
        store_healthy = self.store.health_check()
        return {
            "store": store_healthy,
            "overall": store_healthy,
        }

    def close(self) -> None:
        """Close the underlying store."""
        self.store.close()
