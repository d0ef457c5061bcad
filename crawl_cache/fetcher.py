# crawl_cache/fetcher.py
"""
Fetcher module: issues a single GET with the configured User-Agent and timeout.
"""
from __future__ import annotations

import asyncio
from typing import Any, Dict

from aiohttp import ClientError, ClientSession, ClientTimeout

from crawl_cache.config import CacheConfig
from crawl_cache.errors import FetchError
from crawl_cache.logger import logger

# UnicodeDecodeError and invalid header values are ValueErrors,
# an unknown response charset is a LookupError.
_FETCH_ERRORS = (ClientError, asyncio.TimeoutError, ValueError, LookupError)


class HttpFetcher:
    """Fetches a URL and returns the body as text, whatever the HTTP status."""

    def __init__(self, config: CacheConfig) -> None:
        self.config = config

    def _session(self) -> ClientSession:
        kwargs: Dict[str, Any] = {"headers": {"User-Agent": self.config.user_agent}}
        if self.config.timeout is not None:
            # aiohttp treats total <= 0 as "no limit"
            kwargs["timeout"] = ClientTimeout(total=self.config.timeout)
        return ClientSession(**kwargs)

    async def fetch(self, url: str) -> str:
        """
        GET *url* and decode the response body.

        Raises FetchError on any client, transport or decoding failure.
        """
        logger.debug("GET %s", url)
        try:
            async with self._session() as session:
                async with session.get(url) as resp:
                    text = await resp.text()
                    logger.debug("GET %s -> HTTP %s, %d chars", url, resp.status, len(text))
                    return text
        except _FETCH_ERRORS as exc:
            message = _describe(exc)
            logger.warning("Failed %s: %s", url, message)
            raise FetchError(url, message) from exc


def _describe(exc: BaseException) -> str:
    if isinstance(exc, asyncio.TimeoutError):
        return "request timed out"
    text = str(exc)
    return f"{type(exc).__name__}: {text}" if text else type(exc).__name__


__all__ = ["HttpFetcher"]
