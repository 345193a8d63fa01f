"""
Per-container field extraction.

Each field has its own fallback chain of CSS selectors and a reader that
normalizes the matched element. Fields are extracted independently: a fault
while reading one of them is logged and replaced by that field's default,
the remaining fields are still read.
"""
from __future__ import annotations

import logging
import re
from typing import Callable, TypeVar

from .models import (
    ExtractedFields,
    IMAGE_UNAVAILABLE,
    RATING_UNAVAILABLE,
    REVIEWS_UNAVAILABLE,
    TITLE_UNAVAILABLE,
)
from .rules import Rule, RuleChain, clean_text
from ..markup.base import Element
from ..utils.parsing import absolute_url

logger = logging.getLogger(__name__)

T = TypeVar("T")

TITLE_SELECTORS = ("h2 a", ".a-text-normal", '[data-cy="title-recipe"]')
RATING_SELECTORS = (".a-icon-alt", '[aria-label*="estrela"]', '[aria-label*="star"]')
REVIEWS_SELECTORS = ('a[href*="reviews"]', ".a-size-base")
IMAGE_SELECTOR = "img[src], img[data-src]"
LINK_SELECTOR = 'a[href*="/dp/"], h2 a'

RATING_PATTERN = re.compile(r"\d+(?:\.\d+)?")
# Thousands separators and a K/M/B magnitude suffix are kept as written.
REVIEWS_PATTERN = re.compile(r"\d+(?:[.,]\d+)*[KMB]?")


def read_rating(node: Element) -> str:
    source = node.get("aria-label") or node.text()
    match = RATING_PATTERN.search(source)
    return f"{match.group(0)} estrelas" if match else source


def read_review_count(node: Element) -> str:
    text = clean_text(node)
    match = REVIEWS_PATTERN.search(text)
    return f"{match.group(0)} avaliações" if match else text


def read_image_url(node: Element) -> str:
    return node.get("src") or node.get("data-src") or IMAGE_UNAVAILABLE


class FieldExtractor:
    """
    Extracts title, rating, review count, image and product link from one container.
    `origin` is the storefront root that relative product links are resolved against.
    """

    def __init__(self, origin: str) -> None:
        self.origin = origin.rstrip("/")
        self.title = RuleChain([Rule(s, clean_text) for s in TITLE_SELECTORS], TITLE_UNAVAILABLE)
        self.rating = RuleChain([Rule(s, read_rating) for s in RATING_SELECTORS], RATING_UNAVAILABLE)
        self.review_count = RuleChain([Rule(s, read_review_count) for s in REVIEWS_SELECTORS], REVIEWS_UNAVAILABLE)
        self.image_url = RuleChain([Rule(IMAGE_SELECTOR, read_image_url)], IMAGE_UNAVAILABLE)
        self.product_url = RuleChain([Rule(LINK_SELECTOR, self.read_product_url)], "")

    def read_product_url(self, node: Element) -> str:
        href = node.get("href")
        if not href:
            return ""
        return absolute_url(href, self.origin)

    def extract(self, container: Element) -> ExtractedFields:
        return ExtractedFields(
            title=self._isolated("title", lambda: self.title.evaluate(container), TITLE_UNAVAILABLE),
            rating=self._isolated("rating", lambda: self.rating.evaluate(container), RATING_UNAVAILABLE),
            review_count=self._isolated(
                "review_count", lambda: self.review_count.evaluate(container), REVIEWS_UNAVAILABLE
            ),
            image_url=self._isolated("image_url", lambda: self.image_url.evaluate(container), IMAGE_UNAVAILABLE),
            product_url=self._isolated("product_url", lambda: self.product_url.evaluate(container), ""),
        )

    @staticmethod
    def _isolated(name: str, read: Callable[[], T], default: T) -> T:
        try:
            return read()
        except Exception as exc:
            logger.debug("Field %s could not be extracted: %r", name, exc)
            return default
