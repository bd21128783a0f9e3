"""Web interface routes implementation."""

from typing import Optional

from fastapi import APIRouter, Request, Form, status
from fastapi.responses import HTMLResponse, JSONResponse, Response

from shortener.common.url_builder import build_short_url
from shortener.shortcode import ShortCodeGenerator
from shortener.exceptions import MethodNotAllowedError, ShortCodeNotFoundError
from ..responses import render_page, wants_json

router = APIRouter()


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
def homepage(request: Request):
    """Serve the submission form."""
    return render_page(request, "index.html")


@router.post("/shorten", include_in_schema=False)
def shorten_url_web(
    request: Request,
    url: Optional[str] = Form(None),
):
    """Handle form submission: allocate a code and show the short link.

    Answers with {"short", "long"} JSON when the Accept header prefers it,
    otherwise with the form page showing the result.
    """
    service = request.app.state.service

    # Raises MissingURLError / InvalidURLError before touching the store
    result = service.create_short_url(original_url=url)

    short_url = build_short_url(
        short_code=result["short_code"],
        base_url=request.state.public_base_url,
    )

    if wants_json(request):
        return JSONResponse(content={"short": short_url, "long": result["original_url"]})

    return render_page(
        request,
        "index.html",
        {"short_link": short_url, "long_url": result["original_url"]},
    )


@router.api_route(
    "/shorten",
    methods=["GET", "PUT", "PATCH", "DELETE"],
    include_in_schema=False,
)
def shorten_wrong_method(request: Request):
    """Reject non-POST verbs on the mutating endpoint."""
    raise MethodNotAllowedError(
        f"Method {request.method} not allowed on /shorten",
        details={"allow": ["POST"]},
    )


@router.get("/health", include_in_schema=False)
def health_check_web(request: Request):
    """Health check endpoint (simple version for load balancers)."""
    health = request.app.state.service.health_check()

    if health["overall"]:
        return {"status": "healthy"}
    return JSONResponse(
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        content={"status": "unhealthy"},
    )


@router.get("/{short_code}", include_in_schema=False)
def redirect_to_url(request: Request, short_code: str):
    """Permanently redirect to the original URL."""
    service = request.app.state.service

    original_url = None
    if ShortCodeGenerator.is_valid_format(short_code, allow_custom=True):
        original_url = service.get_original_url(short_code)

    if not original_url:
        raise ShortCodeNotFoundError(f"Short code '{short_code}' not found")

    # Location carries the bound target byte for byte
    return Response(
        status_code=status.HTTP_301_MOVED_PERMANENTLY,
        headers={"location": original_url},
    )
