from __future__ import annotations

from typing import Optional


class ScraperError(Exception):
    """Base class for every fault raised by the scraper."""


class ParseFailure(ScraperError):
    """The supplied markup could not be turned into a document at all."""


class FetchError(ScraperError):
    """The search page could not be retrieved."""

    def __init__(self, message: str, status: Optional[int] = None) -> None:
        super().__init__(message)
        self.status = status


class UpstreamUnavailable(FetchError):
    """No connection could be made to the storefront."""


class UpstreamBlocked(FetchError):
    """The storefront answered with 403 Forbidden."""

    def __init__(self, message: str) -> None:
        super().__init__(message, status=403)


class ConfigurationError(ScraperError):
    """The service configuration is invalid or names something that cannot be loaded."""
