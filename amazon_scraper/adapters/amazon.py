from __future__ import annotations

import logging
from typing import List, Optional, Union

from .base import domain_of
from ..extraction.assembler import ResultAssembler
from ..extraction.fields import FieldExtractor
from ..extraction.locator import ContainerLocator
from ..extraction.models import SearchResult
from ..markup.base import MarkupParser
from ..markup.soup import SoupMarkupParser
from ..utils.parsing import origin_of, search_url

logger = logging.getLogger(__name__)


class AmazonSearchAdapter:
    """Search-results extraction for Amazon storefronts."""

    name = "amazon"

    def __init__(self, base_url: str = "https://www.amazon.com.br", parser: Optional[MarkupParser] = None) -> None:
        self.origin = origin_of(base_url)
        self.parser: MarkupParser = parser or SoupMarkupParser()
        self.locator = ContainerLocator()
        self.assembler = ResultAssembler(FieldExtractor(self.origin))
        host = domain_of(self.origin)
        bare = host[4:] if host.startswith("www.") else host
        self.domains: List[str] = [bare, f"www.{bare}"]

    def matches(self, url: str) -> bool:
        return domain_of(url) in self.domains

    def search_url(self, keyword: str) -> str:
        return search_url(self.origin, keyword)

    def parse(self, keyword: str, markup: Union[str, bytes]) -> SearchResult:
        document = self.parser.parse(markup)
        containers = self.locator.locate(document)
        logger.info("Processing %d containers for %r", len(containers), keyword)
        return self.assembler.assemble(keyword, containers)
