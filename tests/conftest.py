# File: tests/conftest.py
from collections.abc import AsyncIterator
from pathlib import Path

import pytest
from aiohttp import web

from robots_txt import parse
from robots_txt.logger import configure
from robots_txt.models import ParsedDocument

SAMPLE_ROBOTS = """\
# Example robots.txt
User-agent: *
Disallow: /admin/
Allow: /public/

User-agent: Googlebot
User-agent: Bingbot
Disallow: /private/   # no crawlers here
Allow: /private/open$

Sitemap: https://example.com/sitemap.xml
"""


@pytest.fixture(autouse=True)
def reset_logging():
    """
    The CLI rebinds log handlers to CliRunner streams; restore them after each test.
    """
    yield
    configure()


@pytest.fixture()
def sample_text() -> str:
    return SAMPLE_ROBOTS


@pytest.fixture()
def sample_document() -> ParsedDocument:
    return parse(SAMPLE_ROBOTS)


@pytest.fixture()
def robots_file(tmp_path) -> Path:
    """
    Write SAMPLE_ROBOTS to a temporary robots.txt and return its path.
    """
    path = tmp_path / "robots.txt"
    path.write_text(SAMPLE_ROBOTS, encoding="utf-8")
    return path


async def serve_app(app: web.Application, port: int) -> AsyncIterator[str]:
    """Start *app* on *port*, yield base URL, ensure cleanup."""
    runner = web.AppRunner(app)
    await runner.setup()
    site = web.TCPSite(runner, "localhost", port)
    await site.start()
    try:
        yield f"http://localhost:{port}"
    finally:
        await runner.cleanup()
