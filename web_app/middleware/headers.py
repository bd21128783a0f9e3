"""Forwarded headers middleware."""

from starlette.middleware.base import BaseHTTPMiddleware
from starlette.requests import Request
from typing import Callable

from shortener.common.headers import extract_forwarded_headers


class ForwardedHeadersMiddleware(BaseHTTPMiddleware):
    """Resolve the public base URL of each request once, before routing."""

    async def dispatch(self, request: Request, call_next: Callable):
        """Store the client address and the public base URL in request state."""
        headers = dict(request.headers)
        forwarded = extract_forwarded_headers(headers)
        request.state.forwarded_for = forwarded["forwarded_for"]

        resolver = request.app.state.url_resolver
        request.state.public_base_url = resolver.resolve(
            headers=headers,
            request_scheme=request.url.scheme,
            request_host=request.headers.get("host"),
        )
        request.state.path_prefix = resolver.prefix(headers)

        response = await call_next(request)
        return response
