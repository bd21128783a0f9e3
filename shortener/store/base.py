"""Abstract base class for mapping store implementations."""

from abc import ABC, abstractmethod
from typing import Optional, Dict, Any
from datetime import datetime

from .models import URLMapping


class MappingStoreBase(ABC):
    """Abstract base class for short code -> URL mapping storage.

    A key moves through three states: absent, reserved (claimed by an
    allocation that has not bound its target yet) and bound. Only bound
    keys are visible to lookups. None of the operations raise; absence and
    refused transitions are reported through return values.
    """

    @abstractmethod
    def reserve(self, short_code: str) -> bool:
        """Claim a short code if nobody holds it.

        Must be a single atomic check-and-set with respect to concurrent
        ``reserve`` calls on the same code.

        Args:
            short_code: The candidate short code

        Returns:
            True if the code was absent and is now reserved by the caller
        """
        pass

    @abstractmethod
    def bind(
        self,
        short_code: str,
        original_url: str,
        created_at: Optional[datetime] = None,
    ) -> bool:
        """Attach the target URL to a reserved short code.

        Args:
            short_code: A code previously returned by a successful ``reserve``
            original_url: The target URL (non-empty)
            created_at: Optional binding timestamp (defaults to now)

        Returns:
            True if bound, False if the code was not in the reserved state
        """
        pass

    @abstractmethod
    def lookup(self, short_code: str) -> Optional[str]:
        """Get the bound target URL for a short code.

        Args:
            short_code: The short code to lookup

        Returns:
            The original URL if bound, None if absent or only reserved
        """
        pass

    @abstractmethod
    def get_mapping(self, short_code: str) -> Optional[URLMapping]:
        """Get the complete mapping record of a bound short code.

        Args:
            short_code: The short code to lookup

        Returns:
            URLMapping or None if absent or only reserved
        """
        pass

    @abstractmethod
    def contains(self, short_code: str) -> bool:
        """Check if a short code is reserved or bound.

        Args:
            short_code: The short code to check

        Returns:
            True if the code is taken
        """
        pass

    @abstractmethod
    def get_statistics(self) -> Dict[str, Any]:
        """Get store statistics.

        Returns:
            Dictionary with total_urls, reserved and store name
        """
        pass

    @abstractmethod
    def close(self) -> None:
        """Release store resources."""
        pass

    @abstractmethod
    def health_check(self) -> bool:
        """Check if the store is usable.

        Returns:
            True if healthy, False otherwise
        """
        pass
