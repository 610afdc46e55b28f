"""robots_txt.parser: построчный разбор robots.txt."""

from robots_txt.parser.robots_parser import parse, parse_with_domain

__all__ = ["parse", "parse_with_domain"]
