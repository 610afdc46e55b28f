"""
robots_txt package initializer.
Defines package version and exposes the parsing/matching API.
The CLI lives in :mod:`robots_txt.cli` (console script ``robots-txt``).
"""
__version__ = "0.1.0"

from robots_txt.matcher import Precedence, can_fetch
from robots_txt.models import Directive, DirectiveKind, ParsedDocument, RuleGroup
from robots_txt.parser.robots_parser import parse, parse_with_domain
from robots_txt.robots import (
    RobotsTxt,
    get_comments,
    get_domain,
    get_rule,
    get_rules,
    get_sitemaps,
)

__all__ = [
    "__version__",
    "Directive",
    "DirectiveKind",
    "ParsedDocument",
    "Precedence",
    "RobotsTxt",
    "RuleGroup",
    "can_fetch",
    "get_comments",
    "get_domain",
    "get_rule",
    "get_rules",
    "get_sitemaps",
    "parse",
    "parse_with_domain",
]
