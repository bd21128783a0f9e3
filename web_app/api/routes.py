"""API routes implementation."""

from fastapi import APIRouter, Request, HTTPException, status
from datetime import datetime, timezone

from .schemas import (
    ShortenRequest,
    ShortenResponse,
    URLInfoResponse,
    HealthResponse,
    ErrorResponse,
    StatisticsResponse,
)
from shortener.common.url_builder import build_short_url
from shortener.exceptions import ShortenerError

router = APIRouter()


@router.post(
    "/shorten",
    response_model=ShortenResponse,
    responses={
        400: {"model": ErrorResponse, "description": "Invalid request"},
        409: {"model": ErrorResponse, "description": "Short code already exists"},
        503: {"model": ErrorResponse, "description": "No free short code found"},
    },
    summary="Create short URL",
    description="Create a shortened URL. Optionally provide a custom short code.",
)
def shorten_url(request: Request, body: ShortenRequest):
    """Create a shortened URL."""
    service = request.app.state.service

    try:
        result = service.create_short_url(
            original_url=body.url,
            custom_code=body.custom_code,
        )
    except ShortenerError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)

    short_url = build_short_url(
        short_code=result["short_code"],
        base_url=request.state.public_base_url,
    )

    return ShortenResponse(
        short_code=result["short_code"],
        short_url=short_url,
        original_url=result["original_url"],
        created_at=result["created_at"],
    )


@router.get(
    "/urls/{short_code}",
    response_model=URLInfoResponse,
    responses={
        404: {"model": ErrorResponse, "description": "Short code not found"},
    },
    summary="Get URL information",
    description="Get information about a shortened URL.",
)
def get_url_info(request: Request, short_code: str):
    """Get information about a shortened URL."""
    service = request.app.state.service

    info = service.get_url_info(short_code)

    if not info:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail=f"Short code '{short_code}' not found",
        )

    return URLInfoResponse(**info)


@router.get(
    "/stats",
    response_model=StatisticsResponse,
    summary="Get statistics",
    description="Get mapping store statistics.",
)
def get_statistics(request: Request):
    """Get service statistics."""
    stats = request.app.state.service.get_statistics()

    return StatisticsResponse(**stats)


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Check if the service is healthy.",
)
def health_check(request: Request):
    """Health check endpoint for proxies and monitoring."""
    health = request.app.state.service.health_check()

    return HealthResponse(
        status="healthy" if health["overall"] else "unhealthy",
        store="healthy" if health["store"] else "unhealthy",
        timestamp=datetime.now(timezone.utc),
    )
