from __future__ import annotations

from typing import List, Protocol, Union
from urllib.parse import urlparse

from ..extraction.models import SearchResult


class SiteAdapter(Protocol):
    """
    Interface for storefront-specific search handling.
    Engines own the HTTP; adapters own URL building and page extraction.
    """

    name: str
    domains: List[str]  # e.g. ["amazon.com.br", "www.amazon.com.br"]

    def matches(self, url: str) -> bool:
        """Return True if this adapter should handle the given URL."""
        ...

    def search_url(self, keyword: str) -> str:
        """URL of the first result page for a keyword."""
        ...

    def parse(self, keyword: str, markup: Union[str, bytes]) -> SearchResult:
        """
        Extract the listings of one result page.
        Raises ParseFailure when the markup cannot be parsed; zero listings is a valid result.
        """
        ...


def domain_of(url: str) -> str:
    return urlparse(url).netloc.lower()
