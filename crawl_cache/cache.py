# === FILE: crawl_cache/cache.py ===
from __future__ import annotations

import asyncio
from typing import Optional

from crawl_cache.config import CacheConfig
from crawl_cache.fetcher import HttpFetcher
from crawl_cache.logger import logger
from crawl_cache.storage import PathT, ensure_parent, read_cache, remove_cache, write_cache

__all__ = ("CrawlCache",)


class CrawlCache:
    """
    Fetches pages over HTTP and keeps each body in a file chosen by the caller.

    The path is the only key and the file's existence the only freshness
    signal: a cached file is served until it is removed. There is no locking,
    so two concurrent misses on the same path both fetch and the last write wins.

    Usage::

        cache = CrawlCache().with_timeout(10).with_post_fetch_delay(1.0)
        html = await cache.get_or_fetch("https://example.com/", "cache/example.com/index.html")
    """

    def __init__(self, config: Optional[CacheConfig] = None) -> None:
        self._config = config if config is not None else CacheConfig()
        self._fetcher = HttpFetcher(self._config)

    @property
    def config(self) -> CacheConfig:
        return self._config

    def with_user_agent(self, user_agent: str) -> CrawlCache:
        return CrawlCache(self._config.with_user_agent(user_agent))

    def with_timeout(self, timeout: float) -> CrawlCache:
        return CrawlCache(self._config.with_timeout(timeout))

    def with_post_fetch_delay(self, delay: float) -> CrawlCache:
        return CrawlCache(self._config.with_post_fetch_delay(delay))

    async def fetch(self, url: str) -> str:
        """Fetch *url* from the network, bypassing the cache. Raises FetchError."""
        return await self._fetcher.fetch(url)

    async def get_or_fetch(self, url: str, cache_path: PathT) -> str:
        """
        Return the content cached at *cache_path*, fetching and storing *url* on a miss.

        On a miss the parent directories are created, the body is written and
        the configured post-fetch delay is awaited. FetchError propagates
        unchanged and leaves no file behind; StorageError is raised when the
        directory or the file cannot be created or written.
        """
        cached = read_cache(cache_path)
        if cached is not None:
            logger.debug("Cache hit: %s", cache_path)
            return cached

        logger.debug("Cache miss: %s <- %s", cache_path, url)
        ensure_parent(cache_path)
        content = await self._fetcher.fetch(url)
        write_cache(cache_path, content)
        if self._config.post_fetch_delay is not None:
            await asyncio.sleep(self._config.post_fetch_delay)
        return content

    @staticmethod
    def read_cache(cache_path: PathT) -> Optional[str]:
        return read_cache(cache_path)

    @staticmethod
    def remove_cache(cache_path: PathT) -> bool:
        return remove_cache(cache_path)

    def __repr__(self) -> str:
        return f"<CrawlCache {self._config!r}>"
