"""FastAPI application factory."""

import os
import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.staticfiles import StaticFiles
from fastapi.middleware.cors import CORSMiddleware

from shortener.common.url_builder import PublicURLResolver
from shortener.exceptions import ShortenerError
from .api import api_router
from .web import web_router
from .middleware.headers import ForwardedHeadersMiddleware
from .middleware.logging import LoggingMiddleware
from .responses import shortener_error_handler, static_css_dir


def create_app(
    store_instance,
    service_instance,
    config,
    logger: Optional[logging.Logger] = None,
) -> FastAPI:
    """Create and configure FastAPI application.

    The store and service are built once by the caller and shared by every
    request through ``app.state``.

    Args:
        store_instance: Mapping store instance
        service_instance: Service instance
        config: Configuration instance
        logger: Optional logger for request logging

    Returns:
        Configured FastAPI app
    """
    app = FastAPI(
        title="URL Shortener",
        description="In-memory URL shortening service",
        version="1.0.0",
        docs_url="/api/docs",
        redoc_url="/api/redoc",
        openapi_url="/api/openapi.json",
    )

    # Store instances in app state for access in routes
    app.state.store = store_instance
    app.state.service = service_instance
    app.state.config = config
    app.state.url_resolver = PublicURLResolver(
        fallback_base_url=config.base_url,
        path_prefix=config.path_prefix,
        trust_forwarded_headers=config.trust_forwarded_headers,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    # Last added runs first: forwarded headers are resolved before logging
    app.add_middleware(
        LoggingMiddleware,
        logger=logger.getChild("web") if logger else None,
    )
    app.add_middleware(ForwardedHeadersMiddleware)

    app.add_exception_handler(ShortenerError, shortener_error_handler)

    if os.path.isdir(static_css_dir):
        app.mount("/css", StaticFiles(directory=static_css_dir), name="css")

    app.include_router(api_router, prefix="/api", tags=["API"])
    app.include_router(web_router, tags=["Web"])

    return app
