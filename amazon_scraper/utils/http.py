from __future__ import annotations

import asyncio
from typing import Dict
from aiohttp import ClientSession, ClientTimeout
import aiohttp
import logging

from ..config import ScraperConfig
from ..errors import FetchError, UpstreamBlocked, UpstreamUnavailable

logger = logging.getLogger(__name__)


def build_headers(config: ScraperConfig) -> Dict[str, str]:
    """
    Static browser-like header set sent with every search request.
    """
    return {
        "User-Agent": config.user_agent,
        "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,image/webp,*/*;q=0.8",
        "Accept-Language": config.accept_language,
        "Accept-Encoding": "gzip, deflate",
        "Connection": "keep-alive",
        "Upgrade-Insecure-Requests": "1",
    }


async def fetch_text(
    session: ClientSession,
    url: str,
    *,
    headers: Dict[str, str],
    timeout: float = 30.0,
) -> str:
    """
    Fetch a URL and return body text. Single attempt; failures are raised as FetchError subclasses.
    """
    try:
        async with session.get(url, headers=headers, timeout=ClientTimeout(total=timeout)) as resp:
            if resp.status == 403:
                raise UpstreamBlocked(f"{url} answered 403 Forbidden")
            resp.raise_for_status()
            return await resp.text()
    except aiohttp.ClientConnectorError as exc:
        logger.warning("Connection to %s failed: %r", url, exc)
        raise UpstreamUnavailable(f"Could not connect to {url}: {exc}") from exc
    except aiohttp.ClientResponseError as exc:
        logger.warning("%s answered HTTP %s", url, exc.status)
        raise FetchError(f"{url} answered HTTP {exc.status}", status=exc.status) from exc
    except asyncio.TimeoutError as exc:
        logger.warning("Timed out after %.1fs fetching %s", timeout, url)
        raise FetchError(f"Timed out fetching {url}") from exc
    except aiohttp.ClientError as exc:
        logger.warning("fetch_text failed for %s: %r", url, exc)
        raise FetchError(f"Request to {url} failed: {exc}") from exc


def create_session() -> ClientSession:
    """
    Create an aiohttp ClientSession.
    """
    # Note: caller is responsible for closing the session (await session.close()).
    return aiohttp.ClientSession()
