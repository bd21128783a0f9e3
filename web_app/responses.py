"""Template setup and content-negotiated responses shared by the routers."""

import os
from typing import Any, Dict, Optional

from fastapi import Request
from fastapi.responses import JSONResponse, Response
from fastapi.templating import Jinja2Templates

from shortener.common.headers import prefers_json
from shortener.common.logging_config import get_logger
from shortener.exceptions import ShortenerError, MethodNotAllowedError

logger = get_logger("url_shortener.web")

# Templates and static assets live outside the package
template_dir = os.path.join(os.path.dirname(__file__), "..", "ux", "web")
static_css_dir = os.path.join(template_dir, "css")
templates = Jinja2Templates(directory=template_dir)


def wants_json(request: Request) -> bool:
    """Whether the caller asked for a machine-readable response."""
    return prefers_json(request.headers.get("accept"))


def render_page(
    request: Request,
    name: str,
    context: Optional[Dict[str, Any]] = None,
    status_code: int = 200,
    headers: Optional[Dict[str, str]] = None,
) -> Response:
    """Render an HTML template with the proxy path prefix available to it."""
    page_context = {"prefix": getattr(request.state, "path_prefix", "")}
    page_context.update(context or {})
    return templates.TemplateResponse(
        request,
        name,
        page_context,
        status_code=status_code,
        headers=headers,
    )


def error_response(request: Request, exc: ShortenerError) -> Response:
    """Report an error as JSON or as the HTML error page."""
    headers = None
    if isinstance(exc, MethodNotAllowedError):
        headers = {"Allow": ", ".join(exc.details.get("allow", ["POST"]))}

    if wants_json(request):
        return JSONResponse(
            status_code=exc.status_code,
            content={"detail": exc.message},
            headers=headers,
        )

    return render_page(
        request,
        "error.html",
        {"error_message": exc.message, "status_code": exc.status_code},
        status_code=exc.status_code,
        headers=headers,
    )


async def shortener_error_handler(request: Request, exc: ShortenerError) -> Response:
    """Exception handler registered for every ShortenerError."""
    if exc.status_code >= 500:
        logger.error(f"Error in {request.method} {request.url.path}: {exc.message}")
    else:
        logger.warning(f"Client error in {request.method} {request.url.path}: {exc.message}")
    return error_response(request, exc)
