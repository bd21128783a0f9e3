#!/usr/bin/env python3
"""
Main entry point for URL shortener service.

Concurrency: FastAPI runs the synchronous route handlers in its worker
thread pool, so requests are served concurrently. All of them share one
in-memory mapping store; it lives in this process only, which is why the
service always runs as a single uvicorn process.

Usage:
    python app.py

Environment variables:
    HOST - Interface to bind to
    PORT - Port to listen on
    BASE_URL - Base URL for short links when the request carries no host
    PATH_PREFIX - Path prefix for short links
    SHORT_CODE_LENGTH - Length of generated codes
    MAX_COLLISION_RETRIES - Redraws allowed per allocation
    LOG_LEVEL - Logging level
"""

import signal
import sys
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from config import Config, load_config
from shortener.store import InMemoryMappingStore
from shortener.service import URLShortenerService
from shortener.shortcode import ShortCodeGenerator
from shortener.common.logging_config import setup_logging
from web_app import create_app


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown."""
    logger = app.state.logger

    logger.info("Starting URL shortener service...")
    logger.info(
        f"Short codes: {app.state.config.short_code_length} characters, "
        f"{app.state.service.max_collision_retries} collision retries"
    )

    yield

    logger.info("Shutting down URL shortener service...")
    app.state.service.close()
    logger.info("Service stopped")


def build_app(config: Config, logger: logging.Logger) -> FastAPI:
    """Wire store, generator and service into a FastAPI app.

    Args:
        config: Configuration instance
        logger: Application logger

    Returns:
        FastAPI app ready to be served
    """
    store = InMemoryMappingStore(logger=logger.getChild("store"))
    generator = ShortCodeGenerator(default_length=config.short_code_length)
    service = URLShortenerService(
        store=store,
        short_code_generator=generator,
        logger=logger.getChild("service"),
        enable_custom_codes=config.enable_custom_codes,
        max_collision_retries=config.max_collision_retries,
    )

    app = create_app(
        store_instance=store,
        service_instance=service,
        config=config,
        logger=logger,
    )
    app.state.logger = logger
    app.router.lifespan_context = lifespan

    return app


def main():
    """Main entry point."""
    config = load_config()

    logger = setup_logging(
        level=config.log_level,
        log_file=config.log_file,
        json_format=config.log_json,
    )

    logger.info("URL Shortener Service")
    logger.info(f"Configuration: {config.model_dump()}")

    app = build_app(config, logger)

    uvicorn_config = uvicorn.Config(
        app,
        host=config.host,
        port=config.port,
        log_level=config.log_level.lower(),
        access_log=True,
    )

    server = uvicorn.Server(uvicorn_config)

    def handle_signal(signum, frame):
        logger.info(f"Received signal {signum}, initiating graceful shutdown...")
        server.should_exit = True

    signal.signal(signal.SIGINT, handle_signal)
    signal.signal(signal.SIGTERM, handle_signal)

    logger.info(f"Open your browser at http://localhost:{config.port}")
    try:
        logger.info(f"Starting server on {config.host}:{config.port}")
        server.run()
    except Exception as e:
        logger.error(f"Server error: {e}")
        sys.exit(1)


if __name__ == "__main__":
    main()
