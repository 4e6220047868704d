"""
a11y-autofix - Static accessibility checks and fixes for HTML and JSX

This package provides:
- Rule-based scanning of HTML documents and JSX in JS/TS sources
- Fix generation for the mechanically fixable issue types
- Tree-based and line-based fix application
- Content-hash caching and parallel scanning across files
"""

__version__ = "0.1.0"

from .autofix import AutoFixEngine, FixGenerator
from .cache import FileCache, JsonCacheStore, MemoryCacheStore
from .config import A11yConfig, AutoFixConfig, PerformanceConfig, RuleConfig
from .engine import ScanEngine
from .file_kinds import FileKind, classify
from .models import Fix, FixKind, FixPosition, Issue, IssueType, ScanResult, Severity
from .scanners import HtmlScanner, JsxScanner

__all__ = [
    "A11yConfig",
    "AutoFixConfig",
    "AutoFixEngine",
    "FileCache",
    "FileKind",
    "Fix",
    "FixGenerator",
    "FixKind",
    "FixPosition",
    "HtmlScanner",
    "Issue",
    "IssueType",
    "JsonCacheStore",
    "JsxScanner",
    "MemoryCacheStore",
    "PerformanceConfig",
    "RuleConfig",
    "ScanEngine",
    "ScanResult",
    "Severity",
    "classify",
]
