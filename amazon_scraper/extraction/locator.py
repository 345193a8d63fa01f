from __future__ import annotations

import logging
from typing import List, Sequence

from .rules import select_first_matching
from ..markup.base import Element

logger = logging.getLogger(__name__)

# Most specific first. Result-page markup varies, so no single selector is reliable.
CONTAINER_SELECTORS = (
    '[data-component-type="s-search-result"]',
    ".s-result-item",
    ".sg-col-inner",
)

# Broad catch-all; may also hit sponsored widgets and other non-listing nodes.
GENERIC_CONTAINER_SELECTOR = "[data-asin]"


class ContainerLocator:
    """Finds the elements that each hold one product listing."""

    def __init__(
        self,
        selectors: Sequence[str] = CONTAINER_SELECTORS,
        fallback_selector: str = GENERIC_CONTAINER_SELECTOR,
    ) -> None:
        self.selectors = tuple(selectors)
        self.fallback_selector = fallback_selector

    def locate(self, document: Element) -> List[Element]:
        hit = select_first_matching(document, self.selectors)
        if hit is not None:
            selector, containers = hit
            logger.info("Found %d containers using selector: %s", len(containers), selector)
            return containers

        logger.warning("No containers matched the specific selectors, trying %s", self.fallback_selector)
        return document.select(self.fallback_selector)
