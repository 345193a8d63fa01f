from __future__ import annotations

import logging
from typing import List, Optional, Union

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup
from bs4.element import Tag

from .base import Element
from ..errors import ParseFailure

logger = logging.getLogger(__name__)


class SoupElement:
    """Element backed by a BeautifulSoup tag; CSS lookups go through soupsieve."""

    __slots__ = ("_tag",)

    def __init__(self, tag: Tag) -> None:
        self._tag = tag

    def select_one(self, selector: str) -> Optional[Element]:
        node = self._tag.select_one(selector)
        return SoupElement(node) if node is not None else None

    def select(self, selector: str) -> List[Element]:
        return [SoupElement(node) for node in self._tag.select(selector)]

    def get(self, attribute: str) -> Optional[str]:
        value = self._tag.get(attribute)
        if isinstance(value, list):
            # Multi-valued attributes (class, rel) come back as lists.
            return " ".join(value)
        return value

    def text(self) -> str:
        return self._tag.get_text()

    def __repr__(self) -> str:
        return f"<SoupElement {self._tag.name}>"


class SoupMarkupParser:
    """
    Lenient HTML parser. Malformed markup is repaired by the backend;
    only markup that is not text at all, or that the backend refuses, fails.
    """

    def __init__(self, features: str = "html.parser") -> None:
        self.features = features

    def parse(self, markup: Union[str, bytes]) -> Element:
        if not isinstance(markup, (str, bytes)):
            raise ParseFailure(f"Markup must be str or bytes, got {type(markup).__name__}")
        try:
            soup = BeautifulSoup(markup, self.features)
        except ParserRejectedMarkup as exc:
            logger.debug("Parser %s rejected markup: %r", self.features, exc)
            raise ParseFailure(f"Markup rejected by parser: {exc}") from exc
        return SoupElement(soup)
