"""
Exceptions raised by crawl_cache.
"""
from __future__ import annotations

import os
from typing import Union

__all__ = ("CrawlCacheError", "FetchError", "StorageError")


class CrawlCacheError(Exception):
    """Base class for every error raised by the package."""


class FetchError(CrawlCacheError):
    """Client or transport failure while fetching a URL.

    Covers session/request construction, network failures (DNS, refused
    connection, TLS, timeout) and decoding of the response body. The causes
    are not distinguished; the original exception is available as
    ``__cause__``.
    """

    def __init__(self, url: str, message: str) -> None:
        super().__init__(message)
        self.url = url


class StorageError(CrawlCacheError):
    """The cache file or its parent directory could not be created or written."""

    def __init__(self, path: Union[str, os.PathLike], message: str) -> None:
        super().__init__(message)
        self.path = path
