from __future__ import annotations

import logging
from typing import Iterable, List

from .fields import FieldExtractor
from .models import ProductRecord, SearchResult
from ..markup.base import Element

logger = logging.getLogger(__name__)


class ResultAssembler:
    """
    Runs the field extractor over located containers and keeps the ones with a usable title.
    Retained records are numbered 1..N in document order; dropped containers leave no gaps.
    """

    def __init__(self, extractor: FieldExtractor) -> None:
        self.extractor = extractor

    def assemble(self, keyword: str, containers: Iterable[Element]) -> SearchResult:
        products: List[ProductRecord] = []
        for index, container in enumerate(containers, start=1):
            try:
                fields = self.extractor.extract(container)
            except Exception as exc:
                logger.warning("Failed to process container %d: %r", index, exc)
                continue
            if not fields.has_title:
                continue
            products.append(ProductRecord.from_fields(len(products) + 1, fields))

        logger.info("Extraction finished: %d valid products", len(products))
        return SearchResult(keyword=keyword, products=tuple(products))
