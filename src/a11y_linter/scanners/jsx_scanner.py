"""Scanner for JSX embedded in JavaScript/TypeScript sources.

Only what is decidable from one element's own subtree is checked.
Duplicate ids are counted per component: an element in a nested callback
is compared with the rest of the component around it, while two components
that each render `id="name"` are not reported. Heading order across elements
is not tracked at all; only tags above h6 are reported.
"""

import logging
from collections import Counter
from typing import List

from a11y_tree_sitter import ASTWalker, JSXPatterns, ScriptDialect, ScriptParser
from a11y_tree_sitter.jsx_patterns import ELEMENT_TYPES
from tree_sitter import Node

from ..models import Issue
from ..registry import RuleRegistry, registry as default_registry
from ..rules.base import JsxContext

logger = logging.getLogger(__name__)


class JsxScanner:
    """Walks JSX elements in document order and runs the element rules on each."""

    def __init__(
        self,
        source: str,
        dialect: ScriptDialect = ScriptDialect.TSX,
        rules: RuleRegistry | None = None,
    ):
        self.source = source
        self.dialect = dialect
        self.rules = rules or default_registry

    def scan(self) -> List[Issue]:
        result = ScriptParser(self.dialect).parse_string(self.source)
        if not result.ok:
            logger.warning("Could not parse script (%s): %s", self.dialect.value, "; ".join(result.errors[:3]))
            return []

        source_bytes = result.source_bytes
        elements = ASTWalker.find_all_by_type(result.tree.root_node, ELEMENT_TYPES)
        context = JsxContext(
            source=source_bytes,
            lines=self.source.split("\n"),
            id_counts=self._count_ids(elements, source_bytes),
        )

        issues: List[Issue] = []
        rules = self.rules.element_rules()
        for element in elements:
            tag_name = context.tag_name(element)
            if not tag_name:
                continue
            for rule in rules:
                issues.extend(rule.check(element, tag_name, context))
        return issues

    @staticmethod
    def _count_ids(elements: List[Node], source: bytes) -> Counter:
        counts: Counter = Counter()
        for element in elements:
            value = JSXPatterns.get_literal_attribute(element, "id", source)
            if value:
                counts[(JsxContext.scope_key(element), value)] += 1
        return counts
