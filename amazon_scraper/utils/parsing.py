from __future__ import annotations

import re
from urllib.parse import quote, urlparse

_SCHEME = re.compile(r"^[a-zA-Z][a-zA-Z0-9+.-]*:")


def origin_of(url: str) -> str:
    """
    Reduce a URL to scheme://host, e.g. "https://www.amazon.com.br/s?k=x" -> "https://www.amazon.com.br".
    """
    parsed = urlparse(url)
    return f"{parsed.scheme}://{parsed.netloc}"


def absolute_url(href: str, origin: str) -> str:
    """
    Resolve a link found on a result page against the storefront origin.

    http(s) links pass through verbatim, protocol-relative ones take the origin's
    scheme, links with any other scheme (javascript:, mailto:, data:) resolve to ""
    and everything else is anchored at the origin.
    """
    href = href.strip()
    origin = origin.rstrip("/")
    lowered = href.lower()
    if lowered.startswith(("http://", "https://")):
        return href
    if href.startswith("//"):
        return f"{urlparse(origin).scheme}:{href}"
    if _SCHEME.match(href):
        return ""
    if not href.startswith("/"):
        href = "/" + href
    return origin + href


def search_url(origin: str, keyword: str) -> str:
    return f"{origin.rstrip('/')}/s?k={quote(keyword, safe='')}"
