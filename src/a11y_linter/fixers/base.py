from dataclasses import dataclass
from typing import List, Sequence

from ..models import Fix, Issue, IssueType

ACCESSIBLE_NAME_ATTRIBUTE = "aria-label"
LABELLEDBY_ATTRIBUTE = "aria-labelledby"


@dataclass(frozen=True)
class FixOutcome:
    """Rewritten source plus the number of fixes that actually changed it."""

    source: str
    applied: int = 0

    @property
    def modified(self) -> bool:
        return self.applied > 0


@dataclass(frozen=True)
class Transformation:
    start_byte: int
    end_byte: int
    new_content: bytes
    priority: int = 0


def apply_transformations(source: bytes, transforms: List[Transformation]) -> bytes:
    """Applies non-overlapping byte-range edits in a single pass."""
    ordered = sorted(transforms, key=lambda t: (t.start_byte, t.end_byte, t.priority))
    result = []
    last_offset = 0
    for t in ordered:
        if t.start_byte < last_offset:
            continue
        result.append(source[last_offset : t.start_byte])
        result.append(t.new_content)
        last_offset = max(last_offset, t.end_byte)
    result.append(source[last_offset:])
    return b"".join(result)


def fixable(issues: Sequence[Issue]) -> List[Issue]:
    return [issue for issue in issues if issue.fix is not None]


def names_element(issue: Issue) -> bool:
    """Issue types whose fix supplies an accessible name."""
    return issue.type in (IssueType.MISSING_ARIA_LABEL, IssueType.MISSING_FORM_LABEL)


def quote_attribute(value: str) -> str:
    return value.replace("&", "&amp;").replace('"', "&quot;")


def render_attribute(name: str, value: str) -> str:
    return f'{name}="{quote_attribute(value)}"'


def fix_target(fix: Fix) -> tuple[int, int]:
    return fix.position.line, fix.position.column
