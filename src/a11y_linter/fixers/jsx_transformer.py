"""Structured fixes for JSX: attribute insertions located through the syntax tree."""

import logging
from collections import defaultdict
from dataclasses import dataclass
from typing import Dict, List, Sequence, Set, Tuple, Union

from a11y_tree_sitter import ASTWalker, JSXPatterns, ScriptDialect, ScriptParser
from a11y_tree_sitter.jsx_patterns import ELEMENT_TYPES
from tree_sitter import Node

from ..models import FixKind, Issue
from .base import (
    LABELLEDBY_ATTRIBUTE,
    Transformation,
    apply_transformations,
    fix_target,
    fixable,
    names_element,
    render_attribute,
)

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StructuredEdit:
    source: str
    applied: int


@dataclass(frozen=True)
class FallbackRequired:
    reason: str


TransformOutcome = Union[StructuredEdit, FallbackRequired]


class JsxTransformer:
    """Inserts attributes right after the last existing attribute of the target opening tag.

    Everything outside the inserted text is left byte-for-byte intact. The
    result is parsed again and any new syntax error turns the whole
    transformation into a FallbackRequired.
    """

    def transform(
        self,
        source: str,
        issues: Sequence[Issue],
        dialect: ScriptDialect = ScriptDialect.TSX,
    ) -> TransformOutcome:
        todo = fixable(issues)
        if not todo:
            return StructuredEdit(source=source, applied=0)
        try:
            return self._transform(source, todo, ScriptParser(dialect))
        except Exception as exc:
            logger.debug("Structured transform failed", exc_info=True)
            return FallbackRequired(reason=f"{type(exc).__name__}: {exc}")

    def _transform(self, source: str, issues: List[Issue], parser: ScriptParser) -> TransformOutcome:
        parsed = parser.parse_string(source)
        if not parsed.ok:
            return FallbackRequired(reason="source does not parse")

        source_bytes = parsed.source_bytes
        elements = self._index_by_position(parsed.tree.root_node, source_bytes)

        by_line: Dict[int, List[Issue]] = defaultdict(list)
        for issue in issues:
            if issue.fix.kind is not FixKind.ADD_ATTRIBUTE or issue.fix.attribute() is None:
                return FallbackRequired(reason=f"unsupported fix kind: {issue.fix.kind.value}")
            by_line[issue.fix.position.line].append(issue)

        transforms: List[Transformation] = []
        added: Dict[Tuple[int, int], Set[str]] = defaultdict(set)
        for line in sorted(by_line):
            for issue in by_line[line]:
                key = fix_target(issue.fix)
                element = elements.get(key)
                if element is None:
                    return FallbackRequired(reason=f"no JSX element at {key[0]}:{key[1]}")
                name, value = issue.fix.attribute()
                if name in added[key] or JSXPatterns.has_attribute(element, name, source_bytes):
                    continue
                if names_element(issue) and JSXPatterns.has_attribute(element, LABELLEDBY_ATTRIBUTE, source_bytes):
                    continue
                offset = JSXPatterns.attribute_insertion_byte(element)
                if offset is None:
                    return FallbackRequired(reason=f"cannot place attribute at {key[0]}:{key[1]}")
                added[key].add(name)
                transforms.append(
                    Transformation(
                        start_byte=offset,
                        end_byte=offset,
                        new_content=(" " + render_attribute(name, value)).encode("utf-8"),
                        priority=len(transforms),
                    )
                )

        if not transforms:
            return StructuredEdit(source=source, applied=0)

        new_source = apply_transformations(source_bytes, transforms).decode("utf-8")
        if not parser.parse_string(new_source).ok:
            return FallbackRequired(reason="edit introduced a syntax error")
        return StructuredEdit(source=new_source, applied=len(transforms))

    @staticmethod
    def _index_by_position(root: Node, source: bytes) -> Dict[Tuple[int, int], Node]:
        index: Dict[Tuple[int, int], Node] = {}
        for element in ASTWalker.find_all_by_type(root, ELEMENT_TYPES):
            opening = JSXPatterns.opening_of(element) or element
            index.setdefault(ASTWalker.get_position(opening, source), element)
        return index
