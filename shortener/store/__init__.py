"""Mapping store layer for URL shortener."""

from .base import MappingStoreBase
from .memory import InMemoryMappingStore
from .models import URLMapping

__all__ = ["MappingStoreBase", "InMemoryMappingStore", "URLMapping"]
