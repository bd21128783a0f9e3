"""Pytest configuration and fixtures."""

import pytest
from typing import AsyncGenerator
from httpx import AsyncClient, ASGITransport

from config import Config
from shortener.store import InMemoryMappingStore
from shortener.service import URLShortenerService
from shortener.shortcode import ShortCodeGenerator
from shortener.common.logging_config import setup_logging
from web_app import create_app


@pytest.fixture
def logger():
    """Create test logger."""
    return setup_logging(level="DEBUG")


@pytest.fixture
def store(logger) -> InMemoryMappingStore:
    """Create an empty mapping store."""
    return InMemoryMappingStore(logger=logger)


@pytest.fixture
def short_code_generator():
    """Create short code generator."""
    return ShortCodeGenerator(default_length=7)


@pytest.fixture
def service(store, short_code_generator, logger) -> URLShortenerService:
    """Create service instance."""
    return URLShortenerService(
        store=store,
        short_code_generator=short_code_generator,
        logger=logger,
    )


@pytest.fixture
def config() -> Config:
    """Configuration pointing short links at the test server."""
    return Config(base_url="http://testserver", path_prefix="")


@pytest.fixture
def app(store, service, config, logger):
    """Create test FastAPI app."""
    return create_app(
        store_instance=store,
        service_instance=service,
        config=config,
        logger=logger,
    )


@pytest.fixture
async def client(app) -> AsyncGenerator[AsyncClient, None]:
    """Create test client."""
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://testserver") as ac:
        yield ac


class SequenceGenerator(ShortCodeGenerator):
    """Generator replaying fixed codes, for driving collisions."""

    def __init__(self, codes):
        super().__init__(default_length=7)
        self.codes = list(codes)
        self.calls = 0

    def generate_random(self, length=None) -> str:
        code = self.codes[min(self.calls, len(self.codes) - 1)]
        self.calls += 1
        return code


@pytest.fixture
def sample_urls():
    """Sample URLs for testing."""
    return [
        "https://example.com/test",
        "https://github.com/user/repo",
        "https://stackoverflow.com/questions/123456",
    ]


@pytest.fixture
def sequence_generator():
    """Factory for generators that replay fixed codes."""
    return SequenceGenerator
