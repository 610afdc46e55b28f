# robots_txt/models.py
"""
Data models for parsed robots.txt documents.

All models are frozen: a parsed document can be shared between threads and
tasks without locking.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Tuple


class DirectiveKind(str, Enum):
    """Kind of a path rule."""

    ALLOW = "allow"
    DISALLOW = "disallow"


@dataclass(frozen=True, slots=True)
class Directive:
    """Single Allow/Disallow line, pattern kept exactly as written."""

    kind: DirectiveKind
    pattern: str

    @property
    def is_empty(self) -> bool:
        return self.pattern == ""

    @property
    def anchored(self) -> bool:
        """True if the pattern ends with the ``$`` end-of-path anchor."""
        return self.pattern.endswith("$")

    @property
    def literal_length(self) -> int:
        """Number of literal characters (no ``*``, no trailing ``$``)."""
        body = self.pattern[:-1] if self.anchored else self.pattern
        return len(body) - body.count("*")

    @property
    def allows(self) -> bool:
        return self.kind is DirectiveKind.ALLOW


@dataclass(frozen=True, slots=True)
class RuleGroup:
    """User-agent tokens sharing one ordered list of directives."""

    user_agents: Tuple[str, ...]
    directives: Tuple[Directive, ...] = ()

    @property
    def allowed(self) -> Tuple[str, ...]:
        return tuple(d.pattern for d in self.directives if d.kind is DirectiveKind.ALLOW)

    @property
    def disallowed(self) -> Tuple[str, ...]:
        return tuple(d.pattern for d in self.directives if d.kind is DirectiveKind.DISALLOW)

    def to_dict(self) -> dict:
        return {
            "user_agents": list(self.user_agents),
            "directives": [{"kind": d.kind.value, "pattern": d.pattern} for d in self.directives],
        }


@dataclass(frozen=True, slots=True)
class ParsedDocument:
    """Result of parsing one robots.txt file."""

    groups: Tuple[RuleGroup, ...] = ()
    sitemaps: Tuple[str, ...] = ()
    comments: Tuple[str, ...] = ()
    domain: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "domain": self.domain,
            "groups": [g.to_dict() for g in self.groups],
            "sitemaps": list(self.sitemaps),
            "comments": list(self.comments),
        }
