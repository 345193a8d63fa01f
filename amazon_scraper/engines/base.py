from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Union

from ..extraction.models import SearchResult


class SearchEngine(ABC):
    """
    Abstract engine interface. Implementations own one search request end to end.
    """
    @abstractmethod
    async def search(self, keyword: str) -> SearchResult:  # pragma: no cover - interface
        ...

    @abstractmethod
    def parse_markup(self, keyword: str, markup: Union[str, bytes]) -> SearchResult:  # pragma: no cover - interface
        ...
