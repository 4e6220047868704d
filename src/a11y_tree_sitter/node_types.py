from dataclasses import dataclass, field
from typing import List

from tree_sitter import Tree

JSX_ELEMENT = "jsx_element"
JSX_SELF_CLOSING = "jsx_self_closing_element"
JSX_OPENING = "jsx_opening_element"
JSX_ATTRIBUTE = "jsx_attribute"
JSX_TEXT = "jsx_text"
JSX_EXPRESSION = "jsx_expression"

# Nodes that open a new lexical scope for id bookkeeping
SCOPE_NODE_TYPES = frozenset(
    {
        "program",
        "function_declaration",
        "function_expression",
        "function",
        "generator_function_declaration",
        "generator_function",
        "arrow_function",
        "method_definition",
        "class_declaration",
        "class",
    }
)


@dataclass
class ParseResult:
    """Result of a tree-sitter parse operation"""

    tree: Tree
    source: str
    errors: List[str] = field(default_factory=list)

    @property
    def source_bytes(self) -> bytes:
        return self.source.encode("utf-8")

    @property
    def ok(self) -> bool:
        return not self.errors
