"""Scanner for standalone HTML documents."""

import logging
from typing import List

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from ..models import Issue
from ..registry import RuleRegistry, registry as default_registry
from ..rules.base import HtmlContext

logger = logging.getLogger(__name__)

HTML_PARSER = "html.parser"


def parse_html(source: str) -> BeautifulSoup:
    return BeautifulSoup(source, HTML_PARSER)


class HtmlScanner:
    """Runs the document rule battery over one HTML source. One instance per file."""

    def __init__(self, source: str, rules: RuleRegistry | None = None):
        self.source = source
        self.rules = rules or default_registry

    def scan(self) -> List[Issue]:
        try:
            soup = parse_html(self.source)
        except ParserRejectedMarkup as exc:
            logger.warning("Could not parse markup: %s", exc)
            return []

        context = HtmlContext(soup=soup, source=self.source)
        issues: List[Issue] = []
        for rule in self.rules.document_rules():
            issues.extend(rule.check(context))
        return issues
