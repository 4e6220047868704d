"""Content-hash cache for scan results."""

import hashlib
import json
import logging
import threading
import time
from pathlib import Path
from typing import Dict, Optional, Protocol

from pydantic import TypeAdapter, ValidationError

from .models import CacheEntry, ScanResult

logger = logging.getLogger(__name__)

CACHE_FILE_NAME = "cache.json"
DEFAULT_MAX_AGE = 7 * 24 * 60 * 60

_TABLE = TypeAdapter(Dict[str, CacheEntry])


def content_hash(content: str) -> str:
    return hashlib.md5(content.encode("utf-8")).hexdigest()


class CacheStore(Protocol):
    """Where the cache table lives between runs."""

    location: str

    def load(self) -> Dict[str, CacheEntry]: ...

    def save(self, entries: Dict[str, CacheEntry]) -> None: ...


class JsonCacheStore:
    """Persists the whole table as one JSON object in `<cache_dir>/cache.json`."""

    def __init__(self, cache_dir: Path | str):
        self.cache_dir = Path(cache_dir)
        self.path = self.cache_dir / CACHE_FILE_NAME
        self.location = str(self.path)

    def load(self) -> Dict[str, CacheEntry]:
        if not self.path.exists():
            return {}
        try:
            return _TABLE.validate_json(self.path.read_bytes())
        except (OSError, ValidationError) as exc:
            logger.warning("Ignoring unreadable cache %s: %s", self.path, exc)
            return {}

    def save(self, entries: Dict[str, CacheEntry]) -> None:
        self.cache_dir.mkdir(parents=True, exist_ok=True)
        data = {key: entry.model_dump(mode="json") for key, entry in entries.items()}
        self.path.write_text(json.dumps(data, indent=2), encoding="utf-8")


class MemoryCacheStore:
    def __init__(self):
        self.location = "<memory>"
        self.entries: Dict[str, CacheEntry] = {}
        self.saves = 0

    def load(self) -> Dict[str, CacheEntry]:
        return dict(self.entries)

    def save(self, entries: Dict[str, CacheEntry]) -> None:
        self.entries = dict(entries)
        self.saves += 1


class FileCache:
    """One cache session: loads the table once, persists after every write.

    Entries are keyed by absolute path and are only valid while the stored
    hash matches the hash of the content being scanned.
    """

    def __init__(self, store: CacheStore, enabled: bool = True):
        self.store = store
        self.enabled = enabled
        self._lock = threading.Lock()
        self._entries: Dict[str, CacheEntry] = store.load() if enabled else {}

    @staticmethod
    def _key(path: Path | str) -> str:
        return str(Path(path).resolve())

    def get(self, path: Path | str, content: str) -> Optional[ScanResult]:
        if not self.enabled:
            return None
        with self._lock:
            entry = self._entries.get(self._key(path))
        if entry is None or entry.content_hash != content_hash(content):
            return None
        return entry.result

    def set(self, path: Path | str, content: str, result: ScanResult) -> None:
        if not self.enabled:
            return
        entry = CacheEntry(content_hash=content_hash(content), timestamp=time.time(), result=result)
        with self._lock:
            self._entries[self._key(path)] = entry
            self._persist()

    def clear(self) -> None:
        with self._lock:
            self._entries = {}
            self._persist()

    def stats(self) -> Dict[str, object]:
        with self._lock:
            return {"size": len(self._entries), "location": self.store.location}

    def cleanup(self, max_age: float = DEFAULT_MAX_AGE) -> int:
        """Drop entries older than `max_age` seconds; returns how many were removed."""
        cutoff = time.time() - max_age
        with self._lock:
            stale = [key for key, entry in self._entries.items() if entry.timestamp < cutoff]
            for key in stale:
                del self._entries[key]
            if stale:
                self._persist()
        return len(stale)

    def _persist(self) -> None:
        try:
            self.store.save(self._entries)
        except OSError as exc:
            logger.warning("Could not write cache to %s: %s", self.store.location, exc)
