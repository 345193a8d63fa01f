from __future__ import annotations

from typing import List, Optional, Protocol, Union


class Element(Protocol):
    """
    Read-only view of one node in a parsed document.
    Extraction rules only talk to this interface, never to a concrete DOM.
    """

    def select_one(self, selector: str) -> Optional["Element"]:
        """Return the first descendant matching a CSS selector, or None."""
        ...

    def select(self, selector: str) -> List["Element"]:
        """Return all descendants matching a CSS selector, in document order."""
        ...

    def get(self, attribute: str) -> Optional[str]:
        """Return an attribute value, or None when the attribute is absent."""
        ...

    def text(self) -> str:
        """Concatenated text content of the node, untrimmed."""
        ...


class MarkupParser(Protocol):
    """Turns raw markup into a queryable document root."""

    def parse(self, markup: Union[str, bytes]) -> Element:
        """Raise ParseFailure when the markup cannot be parsed at all."""
        ...
