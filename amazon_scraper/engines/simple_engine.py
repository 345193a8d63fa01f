from __future__ import annotations

import logging
from typing import Union

from .base import SearchEngine
from ..config import ScraperConfig
from ..adapters.amazon import AmazonSearchAdapter
from ..adapters.base import SiteAdapter
from ..adapters.registry import AdapterRegistry
from ..extraction.models import SearchResult
from ..markup.base import MarkupParser
from ..utils.http import build_headers, create_session, fetch_text
from ..utils.loader import load_symbol

logger = logging.getLogger(__name__)


def build_parser(config: ScraperConfig) -> MarkupParser:
    """Instantiate the configured parser class with the configured backend feature string."""
    parser_cls = load_symbol(config.parser)
    return parser_cls(config.parser_features)


class SimpleSearchEngine(SearchEngine):
    """
    Fetches one result page per keyword and hands it to the matching adapter.
    - Engine owns HTTP.
    - Adapters own URL building and extraction.
    No state survives a call; concurrent searches share nothing but configuration.
    """
    def __init__(self, config: ScraperConfig, registry: AdapterRegistry | None = None) -> None:
        self.config = config
        if registry is None:
            registry = AdapterRegistry(AmazonSearchAdapter(config.base_url, parser=build_parser(config)))
            registry.discover_entry_points()
        self.registry = registry

    @property
    def adapter(self) -> SiteAdapter:
        return self.registry.match(self.config.base_url)

    async def search(self, keyword: str) -> SearchResult:
        keyword = _require_keyword(keyword)
        adapter = self.adapter
        url = adapter.search_url(keyword)
        logger.info("Searching %r via %s", keyword, url)

        session = create_session()
        try:
            markup = await fetch_text(
                session,
                url,
                headers=build_headers(self.config),
                timeout=self.config.request_timeout,
            )
        finally:
            await session.close()

        return adapter.parse(keyword, markup)

    def parse_markup(self, keyword: str, markup: Union[str, bytes]) -> SearchResult:
        return self.adapter.parse(_require_keyword(keyword), markup)


def _require_keyword(keyword: str) -> str:
    if not keyword or not keyword.strip():
        raise ValueError("keyword cannot be empty")
    return keyword
