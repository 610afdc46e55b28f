# File: robots_txt/report/__init__.py
"""robots_txt.report: сводка по разобранному robots.txt для CLI (JSON и HTML)."""

from __future__ import annotations

from typing import Any, Dict, Iterable, List, Optional

from robots_txt.matcher import Precedence, matching_directive, select_group
from robots_txt.models import ParsedDocument
from robots_txt.report.html_report import render_html
from robots_txt.report.json_report import render_json


def build_report(
    document: ParsedDocument,
    user_agent: Optional[str] = None,
    paths: Iterable[str] = (),
    tie_break: Precedence = Precedence.ALLOW,
) -> Dict[str, Any]:
    """Собирает словарь с группами, sitemap, комментариями и вердиктами по путям.

    Без ``user_agent`` вердикты не считаются и ``selected_group`` равен None.
    """
    report: Dict[str, Any] = document.to_dict()
    report["user_agent"] = user_agent
    report["selected_group"] = None
    report["verdicts"] = []
    if user_agent is None:
        return report

    group = select_group(document, user_agent)
    report["selected_group"] = group.to_dict() if group else None
    verdicts: List[Dict[str, Any]] = []
    for path in paths:
        directive = matching_directive(document, user_agent, path, tie_break=tie_break)
        verdicts.append(
            {
                "path": path,
                "allowed": True if directive is None else directive.allows,
                "directive": (
                    {"kind": directive.kind.value, "pattern": directive.pattern} if directive else None
                ),
            }
        )
    report["verdicts"] = verdicts
    return report


__all__ = ["build_report", "render_json", "render_html"]
