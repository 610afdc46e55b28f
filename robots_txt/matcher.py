# robots_txt/matcher.py
"""
Group selection and Allow/Disallow precedence for parsed robots.txt documents.

Every function here is a pure read over an immutable ParsedDocument.
"""
from __future__ import annotations

import re
from enum import Enum
from typing import List, Optional, Tuple

from robots_txt.logger import get_logger
from robots_txt.models import Directive, ParsedDocument, RuleGroup

log = get_logger("matcher")

WILDCARD = "*"
_PRODUCT_SPLIT_RE = re.compile(r"[\s;(),]+")


class Precedence(str, Enum):
    """Which kind wins when an Allow and a Disallow match with equal length."""

    ALLOW = "allow"
    DISALLOW = "disallow"


def can_fetch(
    document: ParsedDocument,
    user_agent: str,
    path: str,
    *,
    tie_break: Precedence = Precedence.ALLOW,
) -> bool:
    """Return True if ``user_agent`` may fetch ``path`` under ``document``.

    Fails open: no applicable group or no matching directive means allowed.
    """
    directive = matching_directive(document, user_agent, path, tie_break=tie_break)
    allowed = True if directive is None else directive.allows
    log.debug("%s %s -> %s (%s)", user_agent, path, allowed, directive)
    return allowed


def matching_directive(
    document: ParsedDocument,
    user_agent: str,
    path: str,
    *,
    tie_break: Precedence = Precedence.ALLOW,
) -> Optional[Directive]:
    """Return the directive that decides the query, or None if nothing applies."""
    group = select_group(document, user_agent)
    if group is None:
        return None
    return decide(group, path, tie_break=tie_break)


def select_group(document: ParsedDocument, user_agent: str) -> Optional[RuleGroup]:
    """Pick the group whose token is the longest match for ``user_agent``.

    The first ``*`` group is used only when no named token matches. Equal
    token lengths resolve to the earliest group in the document.
    """
    ua = (user_agent or "").strip().lower()
    products = product_tokens(ua)
    best: Optional[RuleGroup] = None
    best_len = 0
    fallback: Optional[RuleGroup] = None

    for group in document.groups:
        for token in group.user_agents:
            if token == WILDCARD:
                if fallback is None:
                    fallback = group
                continue
            if len(token) > best_len and agent_matches(token, ua, products):
                best, best_len = group, len(token)
    return best if best is not None else fallback


def product_tokens(user_agent: str) -> List[str]:
    """Split a lower-cased User-Agent header into product tokens."""
    return [p for p in _PRODUCT_SPLIT_RE.split(user_agent) if p]


def agent_matches(token: str, user_agent: str, products: List[str]) -> bool:
    """Case-insensitive product-token match of a group token against an agent.

    ``Googlebot`` matches ``Googlebot/2.1`` and
    ``Mozilla/5.0 (compatible; Googlebot/2.1)`` but ``bot`` does not match
    ``Googlebot``.
    """
    token = token.lower()
    if user_agent.startswith(token):
        return True
    return any(p.startswith(token) for p in products)


def decide(
    group: RuleGroup, path: str, *, tie_break: Precedence = Precedence.ALLOW
) -> Optional[Directive]:
    """Longest literal match wins; ``tie_break`` settles Allow/Disallow ties;
    among identical kinds the later directive wins."""
    winner: Optional[Directive] = None
    for directive in group.directives:
        if not path_matches(path, directive.pattern):
            continue
        if winner is None or _outranks(directive, winner, tie_break):
            winner = directive
    return winner


def _outranks(candidate: Directive, current: Directive, tie_break: Precedence) -> bool:
    if candidate.literal_length != current.literal_length:
        return candidate.literal_length > current.literal_length
    if candidate.kind is not current.kind:
        return candidate.kind.value == tie_break.value
    return True


def path_matches(path: str, pattern: str) -> bool:
    """Match ``path`` against a robots.txt pattern by scanning its fragments.

    ``*`` matches any run of characters, a trailing ``$`` anchors the end of
    the path, otherwise the pattern only needs to match a prefix. Matching is
    case-sensitive and works on the path exactly as given.
    """
    if not pattern:
        return False
    fragments, anchored = split_pattern(pattern)
    first = fragments[0]
    if not path.startswith(first):
        return False
    if len(fragments) == 1:
        return not anchored or len(path) == len(first)

    pos = len(first)
    for fragment in fragments[1:-1]:
        found = path.find(fragment, pos)
        if found < 0:
            return False
        pos = found + len(fragment)

    last = fragments[-1]
    if anchored:
        # leftmost placement of the middle fragments leaves the most room
        return len(path) - len(last) >= pos and path.endswith(last)
    return path.find(last, pos) >= 0


def split_pattern(pattern: str) -> Tuple[List[str], bool]:
    """Return the literal fragments of ``pattern`` and whether it is anchored."""
    anchored = pattern.endswith("$")
    return (pattern[:-1] if anchored else pattern).split(WILDCARD), anchored
