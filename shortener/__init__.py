"""Core business logic for URL shortener."""

from .shortcode import ShortCodeGenerator
from .service import URLShortenerService
from .store import InMemoryMappingStore, MappingStoreBase, URLMapping

__all__ = [
    "ShortCodeGenerator",
    "URLShortenerService",
    "InMemoryMappingStore",
    "MappingStoreBase",
    "URLMapping",
]
