from typing import Iterator, List, Optional

from tree_sitter import Node


class ASTWalker:
    """Utilities for traversing and searching the script AST"""

    @staticmethod
    def iter_preorder(node: Node) -> Iterator[Node]:
        """Yield nodes in document order without recursion."""
        stack = [node]
        while stack:
            current = stack.pop()
            yield current
            stack.extend(reversed(current.children))

    @staticmethod
    def find_parent_of_type(node: Node, type_names: str | frozenset[str]) -> Optional[Node]:
        """Find the first parent node of a specific type (or set of types)"""
        wanted = {type_names} if isinstance(type_names, str) else type_names
        current = node.parent
        while current:
            if current.type in wanted:
                return current
            current = current.parent
        return None

    @staticmethod
    def get_child_of_type(node: Node, type_name: str) -> Optional[Node]:
        """Find the first direct child of a specific type"""
        for child in node.children:
            if child.type == type_name:
                return child
        return None

    @staticmethod
    def find_all_by_type(node: Node, type_names: str | frozenset[str]) -> List[Node]:
        """Find all descendant nodes of a specific type, in document order"""
        wanted = {type_names} if isinstance(type_names, str) else type_names
        return [n for n in ASTWalker.iter_preorder(node) if n.type in wanted]

    @staticmethod
    def get_text(node: Node, source: bytes | str) -> str:
        if isinstance(source, str):
            source = source.encode("utf-8")
        return source[node.start_byte : node.end_byte].decode("utf-8", errors="replace")

    @staticmethod
    def get_position(node: Node, source: bytes | str) -> tuple[int, int]:
        """1-based (line, column) of a node, with the column counted in characters.

        tree-sitter reports byte columns, which drift on lines holding
        non-ASCII text.
        """
        if isinstance(source, str):
            source = source.encode("utf-8")
        row, byte_col = node.start_point[0], node.start_point[1]
        line_start = node.start_byte - byte_col
        prefix = source[line_start : node.start_byte].decode("utf-8", errors="replace")
        return row + 1, len(prefix) + 1
