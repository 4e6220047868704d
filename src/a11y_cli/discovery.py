import glob
import os
from fnmatch import fnmatch
from pathlib import Path
from typing import Iterable, List

DEFAULT_IGNORE = ("**/node_modules/**", "**/dist/**", "**/build/**")


def _is_ignored(path: Path, patterns: Iterable[str]) -> bool:
    # fnmatch's `*` also crosses `/`, so `**/dir/**` matches any depth
    candidates = (path.as_posix(), Path(os.path.relpath(path)).as_posix(), path.name)
    return any(fnmatch(candidate, pattern) for pattern in patterns for candidate in candidates)


def find_files(patterns: Iterable[str], ignore: Iterable[str] = ()) -> List[Path]:
    """Expand glob patterns into unique absolute file paths, in first-seen order.

    A pattern naming a directory scans everything below it.
    """
    ignore_patterns = [*DEFAULT_IGNORE, *ignore]
    seen = set()
    files: List[Path] = []
    for pattern in patterns:
        if os.path.isdir(pattern):
            pattern = os.path.join(pattern, "**", "*")
        for match in sorted(glob.glob(pattern, recursive=True)):
            path = Path(match).resolve()
            if not path.is_file() or path in seen:
                continue
            if _is_ignored(path, ignore_patterns):
                continue
            seen.add(path)
            files.append(path)
    return files
