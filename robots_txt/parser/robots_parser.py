# File: robots_txt/parser/robots_parser.py
"""robots_txt.parser.robots_parser: разбор текста robots.txt в ParsedDocument.

The parser never raises: real-world robots.txt files are frequently broken,
and a crawler still has to make a decision from whatever could be read.
"""

from __future__ import annotations

from enum import Enum, auto
from typing import Iterator, List, Optional, Tuple

from robots_txt.logger import get_logger
from robots_txt.models import Directive, DirectiveKind, ParsedDocument, RuleGroup

log = get_logger("parser")

_BOM = "\ufeff"
_KNOWN = frozenset({"user-agent", "allow", "disallow", "sitemap"})


class _State(Enum):
    """Grouping state: which kind of line the open group is waiting for."""

    COLLECTING_AGENTS = auto()
    COLLECTING_DIRECTIVES = auto()


class _GroupBuilder:
    """Mutable accumulator for one group, frozen into a RuleGroup at the end."""

    __slots__ = ("agents", "directives")

    def __init__(self, agent: str) -> None:
        self.agents: List[str] = [agent]
        self.directives: List[Directive] = []

    def add_agent(self, agent: str) -> None:
        if agent not in self.agents:
            self.agents.append(agent)

    def build(self) -> RuleGroup:
        return RuleGroup(user_agents=tuple(self.agents), directives=tuple(self.directives))


def parse(text: Optional[str]) -> ParsedDocument:
    """Разбирает robots.txt без привязки к домену."""
    return parse_with_domain(text, None)


def parse_with_domain(text: Optional[str], domain: Optional[str]) -> ParsedDocument:
    """Разбирает robots.txt и возвращает неизменяемый ParsedDocument.

    Args:
        text: содержимое robots.txt (уже декодированное).
        domain: домен для отображения; не проверяется и не влияет на матчинг.

    Returns:
        ParsedDocument с группами, sitemap-ссылками и комментариями.
    """
    groups: List[_GroupBuilder] = []
    sitemaps: List[str] = []
    comments: List[str] = []
    current: Optional[_GroupBuilder] = None
    state = _State.COLLECTING_DIRECTIVES

    for lineno, kind, value in _classify_lines(text or ""):
        if kind == "#":
            comments.append(value)
        elif kind == "sitemap":
            if value:
                sitemaps.append(value)
        elif kind == "user-agent":
            if not value:
                log.debug("line %d: empty User-agent ignored", lineno)
                continue
            agents = value.split()
            if current is None or state is _State.COLLECTING_DIRECTIVES:
                current = _GroupBuilder(agents[0])
                groups.append(current)
                state = _State.COLLECTING_AGENTS
            for agent in agents:
                current.add_agent(agent)
        else:
            if current is None:
                log.debug("line %d: %s outside of any group ignored", lineno, kind)
                continue
            current.directives.append(Directive(DirectiveKind(kind), value))
            state = _State.COLLECTING_DIRECTIVES

    document = ParsedDocument(
        groups=tuple(g.build() for g in groups),
        sitemaps=tuple(sitemaps),
        comments=tuple(comments),
        domain=domain,
    )
    log.debug(
        "Parsed robots.txt%s: %d groups, %d sitemaps, %d comments",
        f" for {domain}" if domain else "",
        len(document.groups),
        len(document.sitemaps),
        len(document.comments),
    )
    return document


def _classify_lines(text: str) -> Iterator[Tuple[int, str, str]]:
    """Yields (line number, kind, value) for every meaningful line.

    ``kind`` is ``"#"`` for a full-line comment or one of the known directive
    names in lower case. Anything else is skipped here.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM):]
    for lineno, raw in enumerate(text.splitlines(), start=1):
        line = raw.strip()
        if not line:
            continue
        if line.startswith("#"):
            yield lineno, "#", _comment_text(line)
            continue
        line = line.split("#", 1)[0]
        key, sep, val = line.partition(":")
        if not sep:
            log.debug("line %d: no ':' separator, ignored: %r", lineno, raw)
            continue
        key = key.strip().lower()
        if key not in _KNOWN:
            log.debug("line %d: unknown directive %r ignored", lineno, key)
            continue
        yield lineno, key, val.strip()


def _comment_text(line: str) -> str:
    """Drops the leading ``#`` and at most one following space."""
    body = line[1:]
    if body.startswith(" "):
        body = body[1:]
    return body.rstrip()
