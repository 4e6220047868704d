"""Applies attribute fixes to HTML by mutating the parsed tree."""

import logging
from typing import Dict, Sequence, Tuple

from bs4 import BeautifulSoup, Tag

from ..models import Issue, IssueType
from .base import (
    ACCESSIBLE_NAME_ATTRIBUTE,
    LABELLEDBY_ATTRIBUTE,
    FixOutcome,
    fix_target,
    fixable,
    names_element,
)

logger = logging.getLogger(__name__)


class HtmlFixer:
    """Re-parses the document, finds each target tag by source position and sets the attribute.

    An attribute that is already present is never overwritten, so applying
    the same fixes twice leaves the document unchanged. When no fix applies
    the original text is returned as-is instead of a re-serialization.
    """

    def apply(self, source: str, issues: Sequence[Issue]) -> FixOutcome:
        todo = fixable(issues)
        if not todo:
            return FixOutcome(source=source)

        soup = BeautifulSoup(source, "html.parser")
        tags = self._index_by_position(soup)

        applied = 0
        for issue in todo:
            target = tags.get(fix_target(issue.fix))
            if target is None:
                logger.debug("No tag at %s:%s for %s", issue.line, issue.column, issue.type.value)
                continue
            if self._apply_one(target, issue):
                applied += 1

        if applied == 0:
            return FixOutcome(source=source)
        return FixOutcome(source=str(soup), applied=applied)

    @staticmethod
    def _index_by_position(soup: BeautifulSoup) -> Dict[Tuple[int, int], Tag]:
        index: Dict[Tuple[int, int], Tag] = {}
        for tag in soup.find_all(True):
            if tag.sourceline is None:
                continue
            index.setdefault((tag.sourceline, (tag.sourcepos or 0) + 1), tag)
        return index

    def _apply_one(self, tag: Tag, issue: Issue) -> bool:
        parts = issue.fix.attribute()
        if parts is None:
            logger.debug("Unsupported fix for markup: %s", issue.fix.kind.value)
            return False
        name, value = parts
        if tag.has_attr(name):
            return False
        if names_element(issue) and tag.has_attr(LABELLEDBY_ATTRIBUTE):
            return False
        if name == ACCESSIBLE_NAME_ATTRIBUTE and issue.type is IssueType.MISSING_ARIA_LABEL:
            value = self._extracted_label(tag) or value
        tag[name] = value
        return True

    @staticmethod
    def _extracted_label(tag: Tag) -> str:
        return " ".join(tag.get_text(" ").split())

