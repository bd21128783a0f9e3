"""In-memory implementation of the mapping store."""

import logging
import threading
from typing import Optional, Dict, Any
from datetime import datetime, timezone

from .base import MappingStoreBase
from .models import URLMapping


# Value held by a reserved, not yet bound key
_RESERVED = None


class InMemoryMappingStore(MappingStoreBase):
    """Process-local, unbounded mapping store guarded by a single lock.

    Mappings live for the lifetime of the process. Every operation holds the
    lock for constant time work only, so readers never wait long behind a
    writer.
    """

    name = "memory"

    def __init__(self, logger: Optional[logging.Logger] = None):
        """Initialize an empty store.

        Args:
            logger: Optional logger instance
        """
        self.logger = logger or logging.getLogger(__name__)
        self._mappings: Dict[str, Optional[URLMapping]] = {}
        self._lock = threading.Lock()

    def reserve(self, short_code: str) -> bool:
        with self._lock:
            if short_code in self._mappings:
                return False
            self._mappings[short_code] = _RESERVED
            return True

    def bind(
        self,
        short_code: str,
        original_url: str,
        created_at: Optional[datetime] = None,
    ) -> bool:
        if not original_url:
            self.logger.warning(f"Refusing to bind empty URL to {short_code}")
            return False

        mapping = URLMapping(
            short_code=short_code,
            original_url=original_url,
            created_at=created_at or datetime.now(timezone.utc),
        )

        with self._lock:
            if short_code not in self._mappings:
                self.logger.warning(f"Cannot bind {short_code}: not reserved")
                return False
            if self._mappings[short_code] is not _RESERVED:
                self.logger.warning(f"Cannot bind {short_code}: already bound")
                return False
            self._mappings[short_code] = mapping
            return True

    def lookup(self, short_code: str) -> Optional[str]:
        mapping = self.get_mapping(short_code)
        return mapping.original_url if mapping else None

    def get_mapping(self, short_code: str) -> Optional[URLMapping]:
        with self._lock:
            return self._mappings.get(short_code)

    def contains(self, short_code: str) -> bool:
        with self._lock:
            return short_code in self._mappings

    def get_statistics(self) -> Dict[str, Any]:
        with self._lock:
            total = len(self._mappings)
            bound = sum(1 for m in self._mappings.values() if m is not _RESERVED)
        return {
            "total_urls": bound,
            "reserved": total - bound,
            "store": self.name,
        }

    def close(self) -> None:
        stats = self.get_statistics()
        self.logger.info(
            f"Closing in-memory store: {stats['total_urls']} mappings, "
            f"{stats['reserved']} pending reservations discarded"
        )

    def health_check(self) -> bool:
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._mappings)
