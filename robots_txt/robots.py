# robots_txt/robots.py
"""
Read-only accessors for parsed documents and the RobotsTxt convenience wrapper.
"""
from __future__ import annotations

from typing import TYPE_CHECKING, List, Optional, Tuple

from robots_txt.config import CheckerConfig
from robots_txt.matcher import Precedence, matching_directive, select_group
from robots_txt.matcher import can_fetch as _can_fetch
from robots_txt.models import Directive, ParsedDocument, RuleGroup
from robots_txt.parser.robots_parser import parse, parse_with_domain
from robots_txt.utils import path_from_url

if TYPE_CHECKING:
    from aiohttp import ClientSession


def get_rule(document: ParsedDocument, user_agent: str) -> Optional[RuleGroup]:
    """Group that would be applied to ``user_agent`` (same selection as can_fetch)."""
    return select_group(document, user_agent)


def get_rules(document: ParsedDocument) -> List[Tuple[Tuple[str, ...], RuleGroup]]:
    """All groups in document order, keyed by their user-agent tokens."""
    return [(group.user_agents, group) for group in document.groups]


def get_sitemaps(document: ParsedDocument) -> List[str]:
    return list(document.sitemaps)


def get_comments(document: ParsedDocument) -> List[str]:
    return list(document.comments)


def get_domain(document: ParsedDocument) -> Optional[str]:
    return document.domain


class RobotsTxt:
    """Parsed robots.txt plus a tie-break policy.

    Example::

        robots = RobotsTxt.parse("User-agent: *\\nDisallow: /admin/\\n")
        robots.can_fetch("Googlebot", "/admin/panel")  # False
    """

    __slots__ = ("document", "tie_break")

    def __init__(self, document: ParsedDocument, tie_break: Precedence = Precedence.ALLOW) -> None:
        self.document = document
        self.tie_break = tie_break

    @classmethod
    def parse(cls, text: str, tie_break: Precedence = Precedence.ALLOW) -> RobotsTxt:
        return cls(parse(text), tie_break)

    @classmethod
    def parse_with_domain(
        cls, text: str, domain: Optional[str], tie_break: Precedence = Precedence.ALLOW
    ) -> RobotsTxt:
        return cls(parse_with_domain(text, domain), tie_break)

    @classmethod
    async def from_url(
        cls,
        url: str,
        config: Optional[CheckerConfig] = None,
        session: Optional[ClientSession] = None,
    ) -> RobotsTxt:
        """Download and parse ``url``; network errors propagate unchanged."""
        from robots_txt.fetcher import fetch_document

        cfg = config or CheckerConfig()
        document = await fetch_document(url, cfg, session=session)
        return cls(document, cfg.precedence)

    def can_fetch(self, user_agent: str, path: str) -> bool:
        return _can_fetch(self.document, user_agent, path, tie_break=self.tie_break)

    def can_fetch_url(self, user_agent: str, url: str) -> bool:
        """Like :meth:`can_fetch` but takes a full URL (path and query are matched)."""
        return self.can_fetch(user_agent, path_from_url(url))

    def matching_directive(self, user_agent: str, path: str) -> Optional[Directive]:
        return matching_directive(self.document, user_agent, path, tie_break=self.tie_break)

    def get_rule(self, user_agent: str) -> Optional[RuleGroup]:
        return get_rule(self.document, user_agent)

    def get_rules(self) -> List[Tuple[Tuple[str, ...], RuleGroup]]:
        return get_rules(self.document)

    def get_sitemaps(self) -> List[str]:
        return get_sitemaps(self.document)

    def get_comments(self) -> List[str]:
        return get_comments(self.document)

    def get_domain(self) -> Optional[str]:
        return get_domain(self.document)

    def __repr__(self) -> str:
        return (
            f"RobotsTxt(domain={self.document.domain!r}, groups={len(self.document.groups)}, "
            f"tie_break={self.tie_break.value!r})"
        )
