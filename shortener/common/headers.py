"""Header parsing utilities for URL shortener."""

from typing import Dict, Optional, Tuple


JSON_MEDIA_TYPE = "application/json"
HTML_MEDIA_TYPE = "text/html"


def extract_forwarded_headers(headers: Dict[str, str]) -> Dict[str, Optional[str]]:
    """Extract X-Forwarded-* headers from request.

    Args:
        headers: Request headers dictionary

    Returns:
        Dictionary with forwarded_proto, forwarded_host, forwarded_for
    """
    # Convert headers to lowercase for case-insensitive lookup
    headers_lower = {k.lower(): v for k, v in headers.items()}

    return {
        "forwarded_proto": _first_value(headers_lower.get("x-forwarded-proto")),
        "forwarded_host": _first_value(headers_lower.get("x-forwarded-host")),
        "forwarded_for": _first_value(headers_lower.get("x-forwarded-for")),
    }


def _first_value(value: Optional[str]) -> Optional[str]:
    """First entry of a comma separated header appended to by several proxies."""
    if not value:
        return None
    first = value.split(",", 1)[0].strip()
    return first or None


def build_base_url(
    headers: Dict[str, str],
    fallback_base_url: str,
    request_scheme: Optional[str] = None,
    request_host: Optional[str] = None,
    trust_forwarded: bool = True,
) -> str:
    """Build base URL from headers or fallback.

    Scheme: X-Forwarded-Proto, then the request scheme.
    Host: X-Forwarded-Host, then the request Host header.
    When no scheme/host pair can be formed the configured base URL is used.

    Args:
        headers: Request headers
        fallback_base_url: Fallback base URL from configuration
        request_scheme: Request scheme (http/https)
        request_host: Request host
        trust_forwarded: Honour X-Forwarded-* headers

    Returns:
        Base URL (e.g., https://example.com)
    """
    proto = None
    host = None

    # Try X-Forwarded headers first (from proxy)
    if trust_forwarded:
        forwarded = extract_forwarded_headers(headers)
        proto = forwarded["forwarded_proto"]
        host = forwarded["forwarded_host"]

    proto = proto or request_scheme
    host = host or request_host

    if proto and host:
        return f"{proto.lower()}://{host}"

    # Fall back to configured base URL
    return fallback_base_url.rstrip("/")


def get_forwarded_path_prefix(headers: Dict[str, str]) -> str:
    """Get path prefix from X-Forwarded-Prefix (set by a proxy stripping a path).

    Returns normalized prefix with leading slash, no trailing (e.g. '/u_s'), or '' if not set.
    """
    key = "x-forwarded-prefix"
    for k, v in headers.items():
        if k.lower() == key and v:
            p = v.strip().strip("/")
            return "/" + p if p else ""
    return ""


def parse_accept(accept: Optional[str]) -> Dict[str, float]:
    """Parse an Accept header into {media_type: quality}.

    Malformed quality values count as 0. When a media type is listed
    twice the higher quality wins.
    """
    result: Dict[str, float] = {}
    if not accept:
        return result

    for part in accept.split(","):
        media_type, quality = _parse_media_range(part)
        if media_type:
            result[media_type] = max(quality, result.get(media_type, 0.0))
    return result


def _parse_media_range(part: str) -> Tuple[str, float]:
    pieces = [p.strip() for p in part.split(";")]
    media_type = pieces[0].lower()
    quality = 1.0
    for param in pieces[1:]:
        name, _, value = param.partition("=")
        if name.strip().lower() == "q":
            try:
                quality = float(value.strip())
            except ValueError:
                quality = 0.0
    return media_type, quality


def prefers_json(accept: Optional[str]) -> bool:
    """Whether the caller ranks application/json above text/html.

    A browser default (``text/html,...,*/*;q=0.8``), a bare ``*/*`` and a
    missing header all select HTML. An explicit JSON range beats the
    wildcard.

    Args:
        accept: Raw Accept header value

    Returns:
        True if a JSON response should be sent
    """
    ranges = parse_accept(accept)
    json_q = ranges.get(JSON_MEDIA_TYPE, ranges.get("application/*", 0.0))
    html_q = ranges.get(HTML_MEDIA_TYPE, ranges.get("text/*", 0.0))
    return json_q > 0 and json_q > html_q
