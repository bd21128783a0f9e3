"""URL building utilities for URL shortener."""

from typing import Dict, Optional

from .headers import build_base_url, get_forwarded_path_prefix


def build_short_url(
    short_code: str,
    base_url: str,
    path_prefix: str = "",
) -> str:
    """Build complete short URL.

    Args:
        short_code: The short code
        base_url: Base URL (e.g., https://example.com)
        path_prefix: Optional path prefix (e.g., /s)

    Returns:
        Complete short URL
    """
    base = base_url.rstrip("/")
    prefix = path_prefix.strip("/")

    if prefix:
        return f"{base}/{prefix}/{short_code}"
    return f"{base}/{short_code}"


class PublicURLResolver:
    """Work out the public address short links are reachable under.

    Keeps proxy and transport details (X-Forwarded-* headers, Host, the
    configured fallback) out of the allocation and store code. Callers pass
    plain header dictionaries so the resolver does not depend on a web
    framework.
    """

    def __init__(
        self,
        fallback_base_url: str,
        path_prefix: str = "",
        trust_forwarded_headers: bool = True,
    ):
        """Initialize resolver.

        Args:
            fallback_base_url: Base URL used when the request carries no host
            path_prefix: Configured path prefix (used without X-Forwarded-Prefix)
            trust_forwarded_headers: Honour X-Forwarded-* headers
        """
        self.fallback_base_url = fallback_base_url.rstrip("/")
        prefix = (path_prefix or "").strip().strip("/")
        self.path_prefix = "/" + prefix if prefix else ""
        self.trust_forwarded_headers = trust_forwarded_headers

    def base_url(
        self,
        headers: Dict[str, str],
        request_scheme: Optional[str] = None,
        request_host: Optional[str] = None,
    ) -> str:
        """Public base URL (scheme and host) for the request."""
        return build_base_url(
            headers=headers,
            fallback_base_url=self.fallback_base_url,
            request_scheme=request_scheme,
            request_host=request_host,
            trust_forwarded=self.trust_forwarded_headers,
        )

    def prefix(self, headers: Dict[str, str]) -> str:
        """Path prefix the proxy strips, else the configured one."""
        if self.trust_forwarded_headers:
            forwarded = get_forwarded_path_prefix(headers)
            if forwarded:
                return forwarded
        return self.path_prefix

    def resolve(
        self,
        headers: Dict[str, str],
        request_scheme: Optional[str] = None,
        request_host: Optional[str] = None,
    ) -> str:
        """Base URL including the path prefix, without trailing slash."""
        base = self.base_url(headers, request_scheme, request_host)
        return base + self.prefix(headers)
