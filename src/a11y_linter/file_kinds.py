from enum import Enum
from pathlib import Path

from a11y_tree_sitter import ScriptDialect

MARKUP_SUFFIXES = frozenset({".html", ".htm"})
SCRIPT_SUFFIXES = frozenset({".js", ".jsx", ".ts", ".tsx"})


class FileKind(str, Enum):
    """Closed set of file kinds the engine knows how to handle"""

    MARKUP = "markup"
    SCRIPT = "script"
    UNSCANNABLE = "unscannable"


def classify(path: Path | str) -> FileKind:
    suffix = Path(path).suffix.lower()
    if suffix in MARKUP_SUFFIXES:
        return FileKind.MARKUP
    if suffix in SCRIPT_SUFFIXES:
        return FileKind.SCRIPT
    return FileKind.UNSCANNABLE


__all__ = ["FileKind", "ScriptDialect", "classify", "MARKUP_SUFFIXES", "SCRIPT_SUFFIXES"]
