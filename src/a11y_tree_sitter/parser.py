"""Tree-sitter parser for script files that embed JSX."""

from enum import Enum
from pathlib import Path

import tree_sitter_typescript as tsts
from tree_sitter import Language, Node, Parser

from .node_types import ParseResult


class ScriptDialect(str, Enum):
    """Grammar used to parse a script file."""

    TSX = "tsx"
    TYPESCRIPT = "typescript"

    @classmethod
    def for_path(cls, path: Path | str) -> "ScriptDialect":
        # Plain .ts cannot contain JSX and allows <T>expr casts, which TSX rejects
        if Path(path).suffix.lower() == ".ts":
            return cls.TYPESCRIPT
        return cls.TSX


_LANGUAGES = {
    ScriptDialect.TSX: tsts.language_tsx,
    ScriptDialect.TYPESCRIPT: tsts.language_typescript,
}


class ScriptParser:
    """Parses JavaScript/TypeScript sources, with or without JSX."""

    def __init__(self, dialect: ScriptDialect = ScriptDialect.TSX):
        self.dialect = dialect
        self.language = Language(_LANGUAGES[dialect]())
        self.parser = Parser(self.language)

    def parse_string(self, source: str) -> ParseResult:
        tree = self.parser.parse(source.encode("utf-8"))
        return ParseResult(tree=tree, source=source, errors=self._collect_errors(tree.root_node))

    @staticmethod
    def _collect_errors(root: Node) -> list[str]:
        if not root.has_error:
            return []
        errors = []
        stack = [root]
        while stack:
            node = stack.pop()
            if node.is_error or node.is_missing:
                row, col = node.start_point[0] + 1, node.start_point[1] + 1
                kind = "missing" if node.is_missing else "unexpected"
                errors.append(f"{kind} {node.type} at {row}:{col}")
                continue
            if node.has_error:
                stack.extend(node.children)
        return errors or ["syntax error"]
