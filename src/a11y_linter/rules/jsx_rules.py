import re
from typing import List

from a11y_tree_sitter import JSXPatterns
from tree_sitter import Node

from ..models import Issue, IssueType, Severity
from ..roles import (
    CLICK_HANDLERS,
    FORM_CONTROLS,
    MAX_HEADING_LEVEL,
    NAME_ATTRIBUTES,
    is_valid_role,
)
from .base import ElementRule, JsxContext

_HEADING = re.compile(r"^h(\d+)$")


def _has_accessible_name_attr(element: Node, context: JsxContext) -> bool:
    return any(context.has(element, name) for name in NAME_ATTRIBUTES)


class JsxMissingAltTextRule(ElementRule):
    @property
    def rule_id(self) -> IssueType:
        return IssueType.MISSING_ALT_TEXT

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def auto_fixable(self) -> bool:
        return True

    def check(self, element: Node, tag_name: str, context: JsxContext) -> List[Issue]:
        if tag_name != "img" or context.has(element, "alt"):
            return []
        return [self._issue_at(context, element, tag_name, "Image missing alt attribute")]


class JsxMissingAriaLabelRule(ElementRule):
    @property
    def rule_id(self) -> IssueType:
        return IssueType.MISSING_ARIA_LABEL

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def auto_fixable(self) -> bool:
        return True

    def check(self, element: Node, tag_name: str, context: JsxContext) -> List[Issue]:
        if not self._is_interactive(element, tag_name, context):
            return []
        if _has_accessible_name_attr(element, context):
            return []
        if JSXPatterns.has_text_content(element, context.source):
            return []
        return [
            self._issue_at(
                context, element, tag_name, "Interactive element missing aria-label or accessible text"
            )
        ]

    @staticmethod
    def _is_interactive(element: Node, tag_name: str, context: JsxContext) -> bool:
        if tag_name in ("button", "a"):
            return True
        if context.literal(element, "role") == "button":
            return True
        if tag_name in ("div", "span"):
            return any(context.has(element, handler) for handler in CLICK_HANDLERS)
        return False


class JsxMissingButtonTypeRule(ElementRule):
    @property
    def rule_id(self) -> IssueType:
        return IssueType.MISSING_BUTTON_TYPE

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def auto_fixable(self) -> bool:
        return True

    def check(self, element: Node, tag_name: str, context: JsxContext) -> List[Issue]:
        if tag_name != "button" or context.has(element, "type"):
            return []
        return [self._issue_at(context, element, tag_name, "Button missing type attribute")]


class JsxMissingFormLabelRule(ElementRule):
    @property
    def rule_id(self) -> IssueType:
        return IssueType.MISSING_FORM_LABEL

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def auto_fixable(self) -> bool:
        return True

    def check(self, element: Node, tag_name: str, context: JsxContext) -> List[Issue]:
        if tag_name not in FORM_CONTROLS:
            return []
        if _has_accessible_name_attr(element, context):
            return []
        if (context.literal(element, "type") or "").lower() == "hidden":
            return []
        # Only an enclosing <label> is visible from here; htmlFor links are not followed
        if JSXPatterns.has_ancestor_element(element, "label", context.source):
            return []
        return [self._issue_at(context, element, tag_name, "Form input missing associated label")]


class JsxDuplicateIdRule(ElementRule):
    """Duplicate literal ids within one component, nested callbacks included."""

    @property
    def rule_id(self) -> IssueType:
        return IssueType.DUPLICATE_ID

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    def check(self, element: Node, tag_name: str, context: JsxContext) -> List[Issue]:
        value = context.literal(element, "id")
        if not value:
            return []
        if context.id_counts.get((context.scope_key(element), value), 0) < 2:
            return []
        return [self._issue_at(context, element, tag_name, f'Duplicate ID "{value}" found')]


class JsxHeadingLevelRule(ElementRule):
    """Flags heading tags beyond h6; ordering between headings is not checked here."""

    @property
    def rule_id(self) -> IssueType:
        return IssueType.MISSING_HEADING_HIERARCHY

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    def check(self, element: Node, tag_name: str, context: JsxContext) -> List[Issue]:
        match = _HEADING.match(tag_name)
        if not match or int(match.group(1)) <= MAX_HEADING_LEVEL:
            return []
        return [self._issue_at(context, element, tag_name, f"Invalid heading level: {tag_name}")]


class JsxInvalidRoleRule(ElementRule):
    @property
    def rule_id(self) -> IssueType:
        return IssueType.INVALID_ROLE

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    def check(self, element: Node, tag_name: str, context: JsxContext) -> List[Issue]:
        role = context.literal(element, "role")
        if role is None or is_valid_role(role):
            return []
        return [self._issue_at(context, element, tag_name, f'Invalid ARIA role: "{role}"')]


class JsxMissingLangRule(ElementRule):
    @property
    def rule_id(self) -> IssueType:
        return IssueType.MISSING_LANG_ATTRIBUTE

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def auto_fixable(self) -> bool:
        return True

    def check(self, element: Node, tag_name: str, context: JsxContext) -> List[Issue]:
        if tag_name != "html" or context.has(element, "lang"):
            return []
        return [self._issue_at(context, element, tag_name, "HTML element missing lang attribute")]
