import re
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Dict, List, Optional, Tuple

from a11y_tree_sitter import ASTWalker, JSXPatterns
from bs4 import BeautifulSoup, Tag
from tree_sitter import Node

from ..models import Issue, IssueType, Severity

ScopeKey = Tuple[str, int, int]


@dataclass
class HtmlContext:
    """Parsed markup document handed to every document rule."""

    soup: BeautifulSoup
    source: str

    def locate(self, node: Tag | None) -> tuple[int, int]:
        """1-based (line, column) of a tag.

        Exact when the parser recorded the tag's source position. Otherwise
        the tag is taken to be the n-th `<name` in the source, n being the
        number of same-named tags before it in document order.
        """
        if node is None:
            return 1, 1
        if getattr(node, "sourceline", None) is not None:
            return node.sourceline, (node.sourcepos or 0) + 1
        nth = len(node.find_all_previous(node.name))
        pattern = re.compile(rf"<{re.escape(node.name)}(?=[\s/>])", re.IGNORECASE)
        for index, match in enumerate(pattern.finditer(self.source)):
            if index == nth:
                before = self.source[: match.start()]
                return before.count("\n") + 1, len(before.rsplit("\n", 1)[-1]) + 1
        return 1, 1

    @staticmethod
    def snippet(tag: Tag) -> str:
        attrs = []
        for name, value in tag.attrs.items():
            if isinstance(value, list):
                value = " ".join(value)
            attrs.append(f' {name}="{value}"')
        return f"<{tag.name}{''.join(attrs)}>"


@dataclass
class JsxContext:
    """Parsed script file handed to every element rule."""

    source: bytes
    lines: List[str]
    id_counts: Dict[Tuple[ScopeKey, str], int] = field(default_factory=dict)

    def position(self, node: Node) -> tuple[int, int]:
        return ASTWalker.get_position(node, self.source)

    def snippet(self, element: Node) -> str:
        opening = JSXPatterns.opening_of(element) or element
        start, end = opening.start_point[0], opening.end_point[0]
        return "\n".join(self.lines[start : end + 1]).strip()

    def tag_name(self, element: Node) -> str:
        return JSXPatterns.get_tag_name(element, self.source)

    def has(self, element: Node, attribute: str) -> bool:
        return JSXPatterns.has_attribute(element, attribute, self.source)

    def literal(self, element: Node, attribute: str) -> Optional[str]:
        return JSXPatterns.get_literal_attribute(element, attribute, self.source)

    @staticmethod
    def scope_key(node: Node) -> ScopeKey:
        """Identifies the component whose body renders `node`."""
        scope = JSXPatterns.component_scope(node)
        return scope.type, scope.start_byte, scope.end_byte


class BaseRule(ABC):
    """Abstract base class for all accessibility rules."""

    @property
    @abstractmethod
    def rule_id(self) -> IssueType:
        """Issue type this rule reports."""

    @property
    @abstractmethod
    def severity(self) -> Severity:
        """Default severity for this rule."""

    @property
    def auto_fixable(self) -> bool:
        """Can a fix be generated for this rule's issues?"""
        return False

    def _create_issue(
        self,
        message: str,
        line: int,
        column: int,
        code: str = "",
        element: str | None = None,
    ) -> Issue:
        """Helper to create an issue with rule defaults."""
        return Issue(
            type=self.rule_id,
            severity=self.severity,
            message=message,
            line=line,
            column=column,
            code=code,
            element=element,
        )


class DocumentRule(BaseRule):
    """A check over a whole markup document."""

    @abstractmethod
    def check(self, context: HtmlContext) -> list[Issue]:
        """Run the check and return found issues."""

    def _issue_at(self, context: HtmlContext, tag: Tag | None, message: str, code: str | None = None) -> Issue:
        line, column = context.locate(tag)
        if code is None:
            code = context.snippet(tag) if isinstance(tag, Tag) else ""
        name = tag.name if isinstance(tag, Tag) else None
        return self._create_issue(message, line, column, code, element=name)


class ElementRule(BaseRule):
    """A check over a single JSX element, decided from its own subtree."""

    @abstractmethod
    def check(self, element: Node, tag_name: str, context: JsxContext) -> list[Issue]:
        """Run the check on one element and return found issues."""

    def _issue_at(self, context: JsxContext, element: Node, tag_name: str, message: str) -> Issue:
        opening = JSXPatterns.opening_of(element) or element
        line, column = context.position(opening)
        return self._create_issue(message, line, column, context.snippet(element), element=tag_name)
