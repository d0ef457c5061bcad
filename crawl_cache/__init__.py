# crawl_cache/__init__.py
"""
crawl_cache package initializer.
Defines package version and exposes the public API.
"""
__version__ = "0.1.0"

from crawl_cache.cache import CrawlCache
from crawl_cache.config import DEFAULT_USER_AGENT, CacheConfig
from crawl_cache.errors import CrawlCacheError, FetchError, StorageError
from crawl_cache.fetcher import HttpFetcher
from crawl_cache.storage import read_cache, remove_cache, write_cache

__all__ = [
    "__version__",
    "CrawlCache",
    "CacheConfig",
    "DEFAULT_USER_AGENT",
    "HttpFetcher",
    "CrawlCacheError",
    "FetchError",
    "StorageError",
    "read_cache",
    "remove_cache",
    "write_cache",
]
