# File: tests/test_fetcher.py
# Fetching robots.txt from a real local aiohttp server
from __future__ import annotations

import asyncio
from collections.abc import AsyncIterator

import pytest
import pytest_asyncio
from aiohttp import ClientConnectionError, ClientResponseError, ClientSession, web

from robots_txt import Precedence, RobotsTxt
from robots_txt.config import CheckerConfig
from robots_txt.fetcher import fetch_document, fetch_robots

from conftest import SAMPLE_ROBOTS, serve_app


@pytest_asyncio.fixture
async def robots_server(unused_tcp_port: int) -> AsyncIterator[str]:
    app = web.Application()

    async def handle_robots(_):
        return web.Response(text=SAMPLE_ROBOTS, content_type="text/plain")

    async def handle_echo_agent(request):
        agent = request.headers.get("User-Agent", "")
        return web.Response(text=f"User-agent: {agent}\nDisallow: /\n", content_type="text/plain")

    async def handle_missing(_):
        return web.Response(status=404)

    async def handle_slow(_):
        await asyncio.sleep(2)
        return web.Response(text="User-agent: *\nDisallow: /")

    app.router.add_get("/robots.txt", handle_robots)
    app.router.add_get("/echo/robots.txt", handle_echo_agent)
    app.router.add_get("/missing/robots.txt", handle_missing)
    app.router.add_get("/slow/robots.txt", handle_slow)

    async for url in serve_app(app, unused_tcp_port):
        yield url


@pytest.mark.asyncio()
async def test_fetch_robots_returns_body(robots_server: str):
    text = await fetch_robots(f"{robots_server}/robots.txt", user_agent="TestAgent/1.0", timeout=2.0)
    assert text == SAMPLE_ROBOTS


@pytest.mark.asyncio()
async def test_fetch_robots_with_shared_session(robots_server: str):
    async with ClientSession() as session:
        text = await fetch_robots(
            f"{robots_server}/robots.txt", user_agent="TestAgent/1.0", timeout=2.0, session=session
        )
    assert "Sitemap:" in text


@pytest.mark.asyncio()
async def test_timeout_applies_to_shared_session(robots_server: str):
    async with ClientSession() as session:
        with pytest.raises(asyncio.TimeoutError):
            await fetch_robots(
                f"{robots_server}/slow/robots.txt", user_agent="TestAgent/1.0", timeout=0.5, session=session
            )


@pytest.mark.asyncio()
async def test_fetch_document_parses_and_sets_domain(robots_server: str):
    document = await fetch_document(f"{robots_server}/robots.txt")
    assert document.domain == "localhost"
    assert len(document.groups) == 2
    assert document.sitemaps == ("https://example.com/sitemap.xml",)


@pytest.mark.asyncio()
async def test_fetch_document_domain_override(robots_server: str):
    cfg = CheckerConfig(domain="example.com")
    document = await fetch_document(f"{robots_server}/robots.txt", cfg)
    assert document.domain == "example.com"


@pytest.mark.asyncio()
async def test_from_url(robots_server: str):
    cfg = CheckerConfig(user_agent="TestAgent/1.0", tie_break="disallow")
    robots = await RobotsTxt.from_url(f"{robots_server}/robots.txt", cfg)
    assert robots.tie_break is Precedence.DISALLOW
    assert robots.get_domain() == "localhost"
    assert not robots.can_fetch("Googlebot/2.1", "/private/x")
    assert robots.can_fetch("Googlebot/2.1", "/admin/x")


@pytest.mark.asyncio()
async def test_http_error_propagates(robots_server: str):
    with pytest.raises(ClientResponseError) as exc_info:
        await fetch_document(f"{robots_server}/missing/robots.txt")
    assert exc_info.value.status == 404


@pytest.mark.asyncio()
async def test_timeout_propagates(robots_server: str):
    with pytest.raises(asyncio.TimeoutError):
        await fetch_robots(f"{robots_server}/slow/robots.txt", user_agent="TestAgent/1.0", timeout=0.5)


@pytest.mark.asyncio()
async def test_connection_error_propagates(unused_tcp_port: int):
    with pytest.raises(ClientConnectionError):
        await fetch_robots(
            f"http://localhost:{unused_tcp_port}/robots.txt", user_agent="TestAgent/1.0", timeout=2.0
        )


@pytest.mark.asyncio()
async def test_configured_user_agent_is_sent(robots_server: str):
    cfg = CheckerConfig(user_agent="EchoBot/3.0")
    document = await fetch_document(f"{robots_server}/echo/robots.txt", cfg)
    assert document.groups[0].user_agents == ("EchoBot/3.0",)
