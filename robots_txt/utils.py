# File: robots_txt/utils.py
"""robots_txt.utils: вспомогательные функции для URL и локальных файлов robots.txt."""

from __future__ import annotations

from pathlib import Path
from typing import Sequence, Union
from urllib.parse import urlparse, urlunparse

from robots_txt.logger import get_logger

log = get_logger("utils")

__all__: Sequence[str] = (
    "extract_domain",
    "robots_url",
    "path_from_url",
    "is_url",
    "read_text",
)


def is_url(value: str) -> bool:
    """True для абсолютных http(s)-URL."""
    return urlparse(value).scheme in ("http", "https")


def extract_domain(url: str) -> str:
    """Возвращает хост из URL без схемы, пути и порта.

    Работает и для «голых» доменов: ``extract_domain("example.org") == "example.org"``.
    """
    url = url.strip()
    parsed = urlparse(url if "://" in url else f"//{url}")
    return parsed.hostname or ""


def robots_url(url: str) -> str:
    """Строит ``scheme://host[:port]/robots.txt`` для любого URL сайта."""
    url = url.strip()
    parsed = urlparse(url if "://" in url else f"https://{url}")
    return urlunparse((parsed.scheme or "https", parsed.netloc, "/robots.txt", "", "", ""))


def path_from_url(url: str) -> str:
    """Путь (с ``?query``) для проверки правил; ``/`` если путь пуст.

    Голый домен (``example.com/admin/``) разбирается как ``https://``-URL;
    значение, начинающееся с ``/``, уже является путём и возвращается как есть.
    """
    url = url.strip()
    if not url:
        return "/"
    if not is_url(url):
        if url.startswith("/") or "://" in url:
            return url
        url = f"https://{url}"
    parsed = urlparse(url)
    path = parsed.path or "/"
    if parsed.query:
        path = f"{path}?{parsed.query}"
    return path


def read_text(path: Union[str, Path]) -> str:
    """Читает локальный robots.txt как UTF-8 (битые байты заменяются)."""
    p = Path(path).expanduser()
    if not p.is_file():
        log.error("robots.txt not found: %s", p)
        raise FileNotFoundError(f"robots.txt file not found: {p}")
    text = p.read_text(encoding="utf-8", errors="replace")
    log.debug("Read %d characters from %s", len(text), p)
    return text
