# robots_txt/fetcher.py
"""
Fetcher module: downloads robots.txt over HTTP with aiohttp.

Errors are logged and re-raised unchanged; interpreting a failed download
(allow everything, retry later, ...) is the caller's decision.
"""
from __future__ import annotations

import asyncio
from typing import Optional

from aiohttp import ClientError, ClientSession, ClientTimeout

from robots_txt.config import CheckerConfig
from robots_txt.logger import get_logger
from robots_txt.models import ParsedDocument
from robots_txt.parser.robots_parser import parse_with_domain
from robots_txt.utils import extract_domain

log = get_logger("fetcher")


async def fetch_robots(
    url: str,
    *,
    user_agent: str,
    timeout: float,
    session: Optional[ClientSession] = None,
) -> str:
    """
    GET ``url`` and return the decoded body.

    Non-2xx responses raise ``aiohttp.ClientResponseError``; connection
    problems and timeouts propagate as raised by aiohttp.
    """
    if session is None:
        async with ClientSession(
            timeout=ClientTimeout(total=timeout),
            headers={"User-Agent": user_agent},
        ) as own:
            return await _get_text(own, url, user_agent, timeout)
    return await _get_text(session, url, user_agent, timeout)


async def _get_text(session: ClientSession, url: str, user_agent: str, timeout: float) -> str:
    log.info("Fetching %s", url)
    try:
        async with session.get(
            url,
            headers={"User-Agent": user_agent},
            timeout=ClientTimeout(total=timeout),
            raise_for_status=True,
        ) as resp:
            text = await resp.text(errors="replace")
            log.debug("robots.txt %s -> HTTP %s, %d chars", url, resp.status, len(text))
            return text
    except (ClientError, asyncio.TimeoutError) as exc:
        log.warning("Failed to fetch %s: %r", url, exc)
        raise


async def fetch_document(
    url: str,
    config: Optional[CheckerConfig] = None,
    session: Optional[ClientSession] = None,
) -> ParsedDocument:
    """Fetch ``url`` and parse it; the domain comes from config or the URL."""
    cfg = config or CheckerConfig()
    text = await fetch_robots(url, user_agent=cfg.user_agent, timeout=cfg.timeout, session=session)
    return parse_with_domain(text, cfg.domain or extract_domain(url))
