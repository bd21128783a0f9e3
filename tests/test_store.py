"""Tests for the in-memory mapping store."""

import threading
from concurrent.futures import ThreadPoolExecutor
from datetime import datetime, timezone

from shortener.store import InMemoryMappingStore, URLMapping


class TestInMemoryMappingStore:
    """Test reservation, binding and lookup."""

    def test_reserve_once(self, store):
        assert store.reserve("Ab3dE9z")
        assert not store.reserve("Ab3dE9z")
        assert store.contains("Ab3dE9z")

    def test_reserved_code_is_not_visible(self, store):
        """A reserved but unbound code looks absent to lookups."""
        store.reserve("Ab3dE9z")

        assert store.lookup("Ab3dE9z") is None
        assert store.get_mapping("Ab3dE9z") is None

    def test_bind_then_lookup(self, store):
        created_at = datetime(2024, 1, 1, tzinfo=timezone.utc)
        store.reserve("Ab3dE9z")

        assert store.bind("Ab3dE9z", "https://example.com", created_at)
        assert store.lookup("Ab3dE9z") == "https://example.com"
        assert store.get_mapping("Ab3dE9z") == URLMapping(
            short_code="Ab3dE9z",
            original_url="https://example.com",
            created_at=created_at,
        )

    def test_bind_requires_reservation(self, store):
        assert not store.bind("Ab3dE9z", "https://example.com")
        assert store.lookup("Ab3dE9z") is None
        assert not store.contains("Ab3dE9z")

    def test_bound_mapping_is_immutable(self, store):
        store.reserve("Ab3dE9z")
        store.bind("Ab3dE9z", "https://example.com")

        assert not store.bind("Ab3dE9z", "https://other.example.com")
        assert store.lookup("Ab3dE9z") == "https://example.com"

    def test_bind_rejects_empty_target(self, store):
        store.reserve("Ab3dE9z")

        assert not store.bind("Ab3dE9z", "")
        assert store.lookup("Ab3dE9z") is None

    def test_lookup_absent(self, store):
        assert store.lookup("missing") is None
        assert not store.contains("missing")

    def test_statistics(self, store):
        store.reserve("aaaaaaa")
        store.reserve("bbbbbbb")
        store.bind("aaaaaaa", "https://example.com")

        stats = store.get_statistics()
        assert stats == {"total_urls": 1, "reserved": 1, "store": "memory"}
        assert len(store) == 2

    def test_health_and_close(self, store):
        assert store.health_check()
        store.close()


class TestStoreConcurrency:
    """The store is shared by every request thread."""

    def test_concurrent_reserve_same_code(self):
        """Exactly one of many racing reservations wins."""
        store = InMemoryMappingStore()
        threads = 32
        barrier = threading.Barrier(threads)

        def claim():
            barrier.wait()
            return store.reserve("Ab3dE9z")

        with ThreadPoolExecutor(max_workers=threads) as pool:
            results = list(pool.map(lambda _: claim(), range(threads)))

        assert results.count(True) == 1

    def test_concurrent_allocate_and_bind(self, service, store):
        """N concurrent shortenings produce N distinct bound codes."""
        count = 500

        with ThreadPoolExecutor(max_workers=16) as pool:
            results = list(pool.map(
                lambda i: service.create_short_url(f"https://example.com/page_{i}"),
                range(count),
            ))

        codes = [r["short_code"] for r in results]
        assert len(set(codes)) == count
        assert store.get_statistics()["total_urls"] == count
        for i, result in enumerate(results):
            assert store.lookup(result["short_code"]) == f"https://example.com/page_{i}"
