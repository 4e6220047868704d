import logging
from concurrent.futures import ThreadPoolExecutor, as_completed
from pathlib import Path
from typing import List, Optional, Sequence, assert_never

from .autofix import AutoFixEngine, FixGenerator
from .cache import FileCache
from .config import A11yConfig, apply_rule_overrides
from .file_kinds import FileKind, ScriptDialect, classify
from .models import Issue, ScanResult
from .scanners import HtmlScanner, JsxScanner

logger = logging.getLogger(__name__)


class ScanEngine:
    """Core engine: scans files, generates and applies fixes, consults the cache"""

    def __init__(self, config: A11yConfig | None = None, cache: Optional[FileCache] = None):
        self.config = config or A11yConfig()
        self.cache = cache
        self.generator = FixGenerator(self.config)
        self.fixer = AutoFixEngine()

    def scan_files(self, paths: Sequence[Path | str]) -> List[ScanResult]:
        """Scan every file; in parallel mode results arrive in completion order.

        A file that cannot be read or processed is logged and left out.
        """
        files = [Path(p) for p in paths]
        perf = self.config.performance
        results: List[ScanResult] = []
        if not perf.parallel or len(files) <= 1:
            for path in files:
                result = self._scan_file_safely(path)
                if result is not None:
                    results.append(result)
            return results

        workers = min(perf.max_concurrency, len(files))
        with ThreadPoolExecutor(max_workers=workers) as executor:
            futures = {executor.submit(self._scan_file_safely, path): path for path in files}
            for future in as_completed(futures):
                result = future.result()
                if result is not None:
                    results.append(result)
        return results

    def _scan_file_safely(self, path: Path) -> Optional[ScanResult]:
        try:
            return self.scan_file(path)
        except (OSError, UnicodeDecodeError) as exc:
            logger.error("Cannot process %s: %s", path, exc)
        except Exception:
            logger.exception("Unexpected failure while scanning %s", path)
        return None

    def scan_file(self, path: Path | str) -> ScanResult:
        path = Path(path)
        if classify(path) is FileKind.UNSCANNABLE:
            return ScanResult(file=str(path))

        # Decoded from bytes so CRLF endings survive a fix
        content = path.read_bytes().decode("utf-8")
        use_cache = self.cache is not None and not self.config.fix
        if use_cache:
            cached = self.cache.get(path, content)
            if cached is not None:
                logger.debug("Cache hit: %s", path)
                return cached

        result, new_content = self._process(path, content)
        if new_content != content:
            with path.open("w", encoding="utf-8", newline="") as f:
                f.write(new_content)
            logger.info("Fixed %d issue(s) in %s", result.fixed, path)

        if use_cache:
            self.cache.set(path, content, result)
        return result

    def scan_source(self, path: Path | str, content: str) -> ScanResult:
        """Scan (and fix in memory, when enabled) without touching the filesystem."""
        result, _ = self._process(Path(path), content)
        return result

    def fix_source(self, path: Path | str, content: str) -> tuple[ScanResult, str]:
        return self._process(Path(path), content)

    def _process(self, path: Path, content: str) -> tuple[ScanResult, str]:
        kind = classify(path)
        dialect = ScriptDialect.for_path(path)
        issues = apply_rule_overrides(self._scan(kind, content, dialect), self.config)
        issues = self.generator.generate_all(issues)

        fixed = 0
        new_content = content
        if self.config.fix and issues:
            outcome = self.fixer.apply_fixes(kind, content, issues, dialect)
            if outcome.source != content:
                new_content = outcome.source
                fixed = min(outcome.applied, len(issues))

        return ScanResult(file=str(path), issues=issues, fixed=fixed, total=len(issues)), new_content

    @staticmethod
    def _scan(kind: FileKind, content: str, dialect: ScriptDialect) -> List[Issue]:
        match kind:
            case FileKind.MARKUP:
                return HtmlScanner(content).scan()
            case FileKind.SCRIPT:
                return JsxScanner(content, dialect).scan()
            case FileKind.UNSCANNABLE:
                return []
            case _:
                assert_never(kind)
