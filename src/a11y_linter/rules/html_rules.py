import re
from typing import Dict, List

from bs4 import Tag

from ..models import Issue, IssueType, Severity
from ..roles import FORM_CONTROLS, NAME_ATTRIBUTES, NAV_LINK_THRESHOLD, is_valid_role
from .base import DocumentRule, HtmlContext

_HEADING = re.compile(r"^h[1-6]$")


def _has_accessible_name_attr(tag: Tag) -> bool:
    return any(tag.has_attr(name) for name in NAME_ATTRIBUTES)


class MissingAltTextRule(DocumentRule):
    @property
    def rule_id(self) -> IssueType:
        return IssueType.MISSING_ALT_TEXT

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def auto_fixable(self) -> bool:
        return True

    def check(self, context: HtmlContext) -> List[Issue]:
        issues = []
        for img in context.soup.find_all("img"):
            # alt="" marks a decorative image and is valid
            if img.has_attr("alt"):
                continue
            code = f'<img src="{img.get("src")}">'
            issues.append(self._issue_at(context, img, "Image missing alt attribute", code))
        return issues


class MissingAriaLabelRule(DocumentRule):
    @property
    def rule_id(self) -> IssueType:
        return IssueType.MISSING_ARIA_LABEL

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def auto_fixable(self) -> bool:
        return True

    def check(self, context: HtmlContext) -> List[Issue]:
        issues = []
        interactive = context.soup.find_all(lambda t: t.name == "button" or t.get("role") == "button")
        for element in interactive:
            if _has_accessible_name_attr(element):
                continue
            if element.get_text().strip():
                continue
            issues.append(
                self._issue_at(context, element, "Interactive element missing aria-label or accessible text")
            )
        return issues


class MissingFormLabelRule(DocumentRule):
    @property
    def rule_id(self) -> IssueType:
        return IssueType.MISSING_FORM_LABEL

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def auto_fixable(self) -> bool:
        return True

    def check(self, context: HtmlContext) -> List[Issue]:
        issues = []
        labelled = {
            label.get("for") for label in context.soup.find_all("label") if label.get("for")
        }
        for control in context.soup.find_all(list(FORM_CONTROLS)):
            if str(control.get("type", "")).lower() == "hidden":
                continue
            if control.get("id") and control.get("id") in labelled:
                continue
            if _has_accessible_name_attr(control):
                continue
            issues.append(self._issue_at(context, control, "Form input missing associated label"))
        return issues


class MissingButtonTypeRule(DocumentRule):
    @property
    def rule_id(self) -> IssueType:
        return IssueType.MISSING_BUTTON_TYPE

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    @property
    def auto_fixable(self) -> bool:
        return True

    def check(self, context: HtmlContext) -> List[Issue]:
        return [
            self._issue_at(
                context,
                button,
                'Button missing type attribute (should be "button", "submit", or "reset")',
            )
            for button in context.soup.find_all("button")
            if not button.has_attr("type")
        ]


class DuplicateIdRule(DocumentRule):
    @property
    def rule_id(self) -> IssueType:
        return IssueType.DUPLICATE_ID

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    def check(self, context: HtmlContext) -> List[Issue]:
        by_id: Dict[str, List[Tag]] = {}
        for element in context.soup.find_all(id=True):
            value = element.get("id")
            if value:
                by_id.setdefault(value, []).append(element)

        issues = []
        for value, elements in by_id.items():
            if len(elements) < 2:
                continue
            # Every holder of the id is reported, not only the later ones
            for element in elements:
                issues.append(self._issue_at(context, element, f'Duplicate ID "{value}" found'))
        return issues


class MissingLangRule(DocumentRule):
    """Root `<html>` without a `lang` attribute.

    Markup with no `<html>` element is treated as a partial template and is
    not reported: its language comes from whichever page includes it, and
    there is no root tag for a fix to write to.
    """

    @property
    def rule_id(self) -> IssueType:
        return IssueType.MISSING_LANG_ATTRIBUTE

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    @property
    def auto_fixable(self) -> bool:
        return True

    def check(self, context: HtmlContext) -> List[Issue]:
        root = context.soup.find("html")
        if root is None or root.has_attr("lang"):
            return []
        return [self._issue_at(context, root, "HTML element missing lang attribute")]


class HeadingHierarchyRule(DocumentRule):
    @property
    def rule_id(self) -> IssueType:
        return IssueType.MISSING_HEADING_HIERARCHY

    @property
    def severity(self) -> Severity:
        return Severity.WARNING

    def check(self, context: HtmlContext) -> List[Issue]:
        issues = []
        previous = 0
        for heading in context.soup.find_all(_HEADING):
            level = int(heading.name[1])
            if previous > 0 and level > previous + 1:
                issues.append(
                    self._issue_at(
                        context,
                        heading,
                        f"Heading level {level} follows level {previous} (should be {previous + 1})",
                    )
                )
            previous = level
        return issues


class LandmarkRule(DocumentRule):
    @property
    def rule_id(self) -> IssueType:
        return IssueType.MISSING_LANDMARK

    @property
    def severity(self) -> Severity:
        return Severity.INFO

    def check(self, context: HtmlContext) -> List[Issue]:
        soup = context.soup
        anchor = soup.body or soup.find("html")
        issues = []

        has_main = soup.find("main") or soup.find(attrs={"role": "main"})
        if not has_main:
            issues.append(self._issue_at(context, anchor, "Document missing main landmark"))

        has_nav = soup.find("nav") or soup.find(attrs={"role": "navigation"})
        if not has_nav and len(soup.find_all("a")) > NAV_LINK_THRESHOLD:
            issues.append(
                self._issue_at(context, anchor, "Document with multiple links should have navigation landmark")
            )
        return issues


class InvalidRoleRule(DocumentRule):
    @property
    def rule_id(self) -> IssueType:
        return IssueType.INVALID_ROLE

    @property
    def severity(self) -> Severity:
        return Severity.ERROR

    def check(self, context: HtmlContext) -> List[Issue]:
        issues = []
        for element in context.soup.find_all(attrs={"role": True}):
            role = element.get("role")
            if role and not is_valid_role(role):
                issues.append(self._issue_at(context, element, f'Invalid ARIA role: "{role}"'))
        return issues
