"""JSX-specific AST pattern recognition."""

from typing import Iterator, Optional

from tree_sitter import Node

from .ast_walker import ASTWalker
from .node_types import (
    JSX_ATTRIBUTE,
    JSX_ELEMENT,
    JSX_EXPRESSION,
    JSX_OPENING,
    JSX_SELF_CLOSING,
    JSX_TEXT,
    SCOPE_NODE_TYPES,
)

ELEMENT_TYPES = frozenset({JSX_ELEMENT, JSX_SELF_CLOSING})
OPENING_TYPES = frozenset({JSX_OPENING, JSX_SELF_CLOSING})


class JSXPatterns:
    """Recognize JSX elements, attributes and text in the AST."""

    @staticmethod
    def opening_of(element: Node) -> Optional[Node]:
        """Return the node that carries the tag name and attributes.

        For `<a>...</a>` that is the jsx_opening_element child, for `<a />`
        the element itself.
        """
        if element.type in OPENING_TYPES:
            return element
        return ASTWalker.get_child_of_type(element, JSX_OPENING)

    @staticmethod
    def get_tag_name(element: Node, source: bytes | str) -> str:
        """Tag name as written: `img`, `Foo.Bar`, `svg:rect`; '' for fragments."""
        opening = JSXPatterns.opening_of(element)
        if opening is None:
            return ""
        name_node = opening.child_by_field_name("name")
        if name_node is None:
            return ""
        return ASTWalker.get_text(name_node, source)

    @staticmethod
    def iter_attributes(element: Node, source: bytes | str) -> Iterator[tuple[str, Node]]:
        """Yield (name, jsx_attribute node) pairs; spread attributes are skipped."""
        opening = JSXPatterns.opening_of(element)
        if opening is None:
            return
        for child in opening.children:
            if child.type != JSX_ATTRIBUTE or child.child_count == 0:
                continue
            yield ASTWalker.get_text(child.children[0], source), child

    @staticmethod
    def get_attribute(element: Node, name: str, source: bytes | str) -> Optional[Node]:
        for attr_name, attr in JSXPatterns.iter_attributes(element, source):
            if attr_name == name:
                return attr
        return None

    @staticmethod
    def has_attribute(element: Node, name: str, source: bytes | str) -> bool:
        return JSXPatterns.get_attribute(element, name, source) is not None

    @staticmethod
    def get_literal_value(attribute: Node, source: bytes | str) -> Optional[str]:
        """Value of `name="value"`; None for expressions, elements or bare names."""
        if attribute.named_child_count < 2:
            return None
        value = attribute.named_children[-1]
        if value.type != "string":
            return None
        text = ASTWalker.get_text(value, source)
        if len(text) >= 2 and text[0] in "\"'" and text[-1] == text[0]:
            return text[1:-1]
        return text

    @staticmethod
    def get_literal_attribute(element: Node, name: str, source: bytes | str) -> Optional[str]:
        attribute = JSXPatterns.get_attribute(element, name, source)
        if attribute is None:
            return None
        return JSXPatterns.get_literal_value(attribute, source)

    @staticmethod
    def has_text_content(element: Node, source: bytes | str) -> bool:
        """True when the element has literal, non-blank text somewhere below it.

        Only jsx_text counts. `{label}` or `{t("save")}` children are not
        resolved.
        """
        if element.type != JSX_ELEMENT:
            return False
        for child in element.named_children:
            if child.type in (JSX_TEXT, "html_character_reference"):
                if ASTWalker.get_text(child, source).strip():
                    return True
            elif child.type == JSX_ELEMENT and JSXPatterns.has_text_content(child, source):
                return True
        return False

    @staticmethod
    def has_ancestor_element(element: Node, tag_name: str, source: bytes | str) -> bool:
        current = element.parent
        while current:
            if current.type in ELEMENT_TYPES and JSXPatterns.get_tag_name(current, source) == tag_name:
                return True
            current = current.parent
        return False

    @staticmethod
    def enclosing_scope(node: Node) -> Node:
        """Nearest function, method, class or module node around `node`."""
        scope = ASTWalker.find_parent_of_type(node, SCOPE_NODE_TYPES)
        if scope is not None:
            return scope
        root = node
        while root.parent is not None:
            root = root.parent
        return root

    @staticmethod
    def component_scope(node: Node) -> Node:
        """Outermost scope below the module that encloses `node`.

        Callbacks and nested functions resolve to the component that
        defines them. Top-level elements resolve to the module itself.
        """
        scope = JSXPatterns.enclosing_scope(node)
        while scope.parent is not None:
            outer = JSXPatterns.enclosing_scope(scope)
            if outer.parent is None:
                break
            scope = outer
        return scope

    @staticmethod
    def attribute_insertion_byte(element: Node) -> Optional[int]:
        """Byte offset right after the last attribute (or the tag name)."""
        opening = JSXPatterns.opening_of(element)
        if opening is None:
            return None
        anchor = opening.child_by_field_name("name")
        for child in opening.children:
            if child.type in (JSX_ATTRIBUTE, JSX_EXPRESSION):
                anchor = child
        if anchor is None:
            return None
        return anchor.end_byte
