# File: tests/conftest.py
import asyncio
from collections import Counter
from collections.abc import AsyncIterator
from dataclasses import dataclass, field

import pytest
import pytest_asyncio
from aiohttp import web

from crawl_cache.config import CacheConfig

#: seconds the "/slow" handler sleeps before answering
SLOW_SLEEP: float = 1.0


@dataclass
class TestServer:
    """Base URL of a running test server and the number of requests per path."""

    __test__ = False

    url: str
    hits: Counter = field(default_factory=Counter)

    def total_hits(self) -> int:
        return sum(self.hits.values())


async def _serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()


@pytest_asyncio.fixture
async def http_server(unused_tcp_port: int) -> AsyncIterator[TestServer]:
    """
    Serve a handful of endpoints:

    /page       HTML body
    /missing    404 with a text body
    /error      500 with a text body
    /echo-ua    echoes the received User-Agent header
    /slow       answers after SLOW_SLEEP seconds
    /binary     bytes that are not valid UTF-8, declared as utf-8
    """
    app = web.Application()
    hits: Counter = Counter()

    @web.middleware
    async def count_hits(request, handler):
        hits[request.path] += 1
        return await handler(request)

    app.middlewares.append(count_hits)

    async def handle_page(_):
        return web.Response(text="<h1>Page</h1>", content_type="text/html")

    async def handle_missing(_):
        return web.Response(status=404, text="not here", content_type="text/plain")

    async def handle_error(_):
        return web.Response(status=500, text="boom", content_type="text/plain")

    async def handle_echo_ua(request):
        return web.Response(text=request.headers.get("User-Agent", ""), content_type="text/plain")

    async def handle_slow(_):
        await asyncio.sleep(SLOW_SLEEP)
        return web.Response(text="slow", content_type="text/plain")

    async def handle_binary(_):
        return web.Response(body=b"\xff\xfe\xfa\x00", content_type="text/plain", charset="utf-8")

    app.router.add_get("/page", handle_page)
    app.router.add_get("/missing", handle_missing)
    app.router.add_get("/error", handle_error)
    app.router.add_get("/echo-ua", handle_echo_ua)
    app.router.add_get("/slow", handle_slow)
    app.router.add_get("/binary", handle_binary)

    async for url in _serve_app(app, unused_tcp_port):
        yield TestServer(url=url, hits=hits)


@pytest.fixture()
def basic_config() -> CacheConfig:
    """Return a CacheConfig with a short timeout and a recognisable User-Agent."""
    return CacheConfig(user_agent="TestAgent/1.0", timeout=5.0)
