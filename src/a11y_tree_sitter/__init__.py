from .ast_walker import ASTWalker
from .jsx_patterns import JSXPatterns
from .node_types import ParseResult
from .parser import ScriptDialect, ScriptParser

__all__ = ["ASTWalker", "JSXPatterns", "ParseResult", "ScriptDialect", "ScriptParser"]
