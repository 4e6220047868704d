import logging
import re
from typing import Callable, Dict, List, Optional, assert_never

from a11y_tree_sitter import ScriptDialect

from .config import A11yConfig
from .file_kinds import FileKind
from .fixers import FallbackRequired, FixOutcome, HtmlFixer, JsxTransformer, StructuredEdit, TextualFixer
from .models import Fix, FixKind, FixPosition, Issue, IssueType
from .roles import FORM_FIELD_LABEL, default_label

logger = logging.getLogger(__name__)

_TAG_IN_SNIPPET = re.compile(r"<\s*([A-Za-z][\w.:-]*)")


class FixGenerator:
    """Maps a detected issue to a remediation proposal. Pure and deterministic."""

    def __init__(self, config: A11yConfig | None = None):
        self.config = config or A11yConfig()
        self._generators: Dict[IssueType, Callable[[Issue], Optional[Fix]]] = {
            IssueType.MISSING_ALT_TEXT: self._fix_missing_alt,
            IssueType.MISSING_BUTTON_TYPE: self._fix_button_type,
            IssueType.MISSING_LANG_ATTRIBUTE: self._fix_lang,
            IssueType.MISSING_ARIA_LABEL: self._fix_aria_label,
            IssueType.MISSING_FORM_LABEL: self._fix_form_label,
        }

    def can_fix(self, issue_type: IssueType) -> bool:
        return issue_type in self._generators

    def generate(self, issue: Issue) -> Optional[Fix]:
        # Duplicate ids, bad roles, headings and landmarks need a human decision
        generator = self._generators.get(issue.type)
        if generator is None:
            return None
        return generator(issue)

    def generate_all(self, issues: List[Issue]) -> List[Issue]:
        return [issue.with_fix(self.generate(issue)) for issue in issues]

    def _fix_missing_alt(self, issue: Issue) -> Fix:
        return _add_attribute(issue, "Add alt attribute to image", 'alt=""')

    def _fix_button_type(self, issue: Issue) -> Fix:
        return _add_attribute(issue, 'Add type="button" to button', 'type="button"')

    def _fix_lang(self, issue: Issue) -> Fix:
        return _add_attribute(issue, "Add lang attribute to html element", 'lang="en"')

    def _fix_aria_label(self, issue: Issue) -> Optional[Fix]:
        if not self.config.auto_fix.generate_aria_labels:
            return None
        label = default_label(issue.element or _tag_from_snippet(issue.code))
        return _add_attribute(issue, "Add aria-label attribute", f'aria-label="{label}"')

    def _fix_form_label(self, issue: Issue) -> Optional[Fix]:
        if not self.config.auto_fix.wrap_inputs_with_labels:
            return None
        return _add_attribute(issue, "Add aria-label to input", f'aria-label="{FORM_FIELD_LABEL}"')


def _add_attribute(issue: Issue, description: str, code: str) -> Fix:
    return Fix(
        kind=FixKind.ADD_ATTRIBUTE,
        description=description,
        code=code,
        position=FixPosition(line=issue.line, column=issue.column),
    )


def _tag_from_snippet(code: str) -> Optional[str]:
    match = _TAG_IN_SNIPPET.search(code or "")
    return match.group(1) if match else None


class AutoFixEngine:
    """Applies generated fixes to one file's source, choosing the strategy by file kind."""

    def __init__(self):
        self.html_fixer = HtmlFixer()
        self.transformer = JsxTransformer()
        self.text_fixer = TextualFixer()

    def apply_fixes(
        self,
        kind: FileKind,
        source: str,
        issues: List[Issue],
        dialect: ScriptDialect = ScriptDialect.TSX,
    ) -> FixOutcome:
        if not any(issue.fix is not None for issue in issues):
            return FixOutcome(source=source)

        match kind:
            case FileKind.MARKUP:
                return self.html_fixer.apply(source, issues)
            case FileKind.SCRIPT:
                return self._fix_script(source, issues, dialect)
            case FileKind.UNSCANNABLE:
                return FixOutcome(source=source)
            case _:
                assert_never(kind)

    def _fix_script(self, source: str, issues: List[Issue], dialect: ScriptDialect) -> FixOutcome:
        outcome = self.transformer.transform(source, issues, dialect)
        match outcome:
            case StructuredEdit(source=new_source, applied=applied):
                return FixOutcome(source=new_source, applied=applied)
            case FallbackRequired(reason=reason):
                logger.info("Structured JSX fix unavailable (%s), using line-based fixes", reason)
                return self.text_fixer.apply(source, issues)
            case _:
                assert_never(outcome)
