"""Line-based fallback for script files the structured transform cannot handle."""

import logging
import re
from typing import List, Optional, Sequence

from ..models import Fix, FixKind, Issue
from .base import FixOutcome, fixable, render_attribute

logger = logging.getLogger(__name__)

# Opening tag; attribute values may hold `>` inside quotes or {expressions}
_OPENING_TAG = re.compile(
    r"""<(?P<name>[A-Za-z][\w.:-]*)(?P<attrs>(?:\{[^{}]*\}|"[^"]*"|'[^']*'|[^<>{}"'])*?)(?P<close>\s*/?)>"""
)
_TAG_START = re.compile(r"<(?P<name>[A-Za-z][\w.:-]*)")


class TextualFixer:
    """Splices fixes into source lines, bottom-up so earlier positions stay valid."""

    def apply(self, source: str, issues: Sequence[Issue]) -> FixOutcome:
        lines = source.split("\n")
        applied = 0
        for issue in sorted(fixable(issues), key=lambda i: i.fix.position.line, reverse=True):
            if self._apply_fix(lines, issue.fix):
                applied += 1
        if applied == 0:
            return FixOutcome(source=source)
        return FixOutcome(source="\n".join(lines), applied=applied)

    def _apply_fix(self, lines: List[str], fix: Fix) -> bool:
        index = fix.position.line - 1
        if index < 0 or index >= len(lines):
            return False
        if fix.kind is FixKind.ADD_ATTRIBUTE:
            return self._add_attribute(lines, index, fix)
        if fix.kind is FixKind.INSERT:
            lines.insert(index, fix.code)
            return True
        if fix.kind is FixKind.REPLACE:
            return self._replace(lines, index, fix)
        if fix.kind is FixKind.REMOVE:
            return self._remove(lines, index, fix)
        return False

    def _add_attribute(self, lines: List[str], index: int, fix: Fix) -> bool:
        parts = fix.attribute()
        if parts is None:
            return False
        name, value = parts
        line = lines[index]
        if re.search(rf"(?<![\w-]){re.escape(name)}\s*=", line):
            return False

        rendered = render_attribute(name, value)
        match = self._find_tag(_OPENING_TAG, line, fix.position.column)
        if match is not None:
            at = match.end("attrs")
            attrs = match.group("attrs")
            sep = "" if attrs.endswith((" ", "\t")) else " "
            lines[index] = f"{line[:at]}{sep}{rendered}{line[at:]}"
            return True

        # Tag continues on the following lines
        match = self._find_tag(_TAG_START, line, fix.position.column)
        if match is None:
            logger.debug("No opening tag on line %d", index + 1)
            return False
        at = match.end("name")
        lines[index] = f"{line[:at]} {rendered}{line[at:]}"
        return True

    @staticmethod
    def _find_tag(pattern: re.Pattern, line: str, column: int) -> Optional[re.Match]:
        match = pattern.match(line, column - 1) if 0 < column <= len(line) else None
        return match or pattern.search(line)

    @staticmethod
    def _replace(lines: List[str], index: int, fix: Fix) -> bool:
        pos = fix.position
        if pos.end_line is None or pos.end_column is None:
            return False
        end = pos.end_line - 1
        if end < index or end >= len(lines):
            return False
        first = lines[index][: pos.column - 1]
        last = lines[end][pos.end_column - 1 :]
        lines[index : end + 1] = [first + fix.code + last]
        return True

    @staticmethod
    def _remove(lines: List[str], index: int, fix: Fix) -> bool:
        if fix.position.end_line is None:
            return False
        end = fix.position.end_line - 1
        if end < index:
            return False
        del lines[index : end + 1]
        return True
