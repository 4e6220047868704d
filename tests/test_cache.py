import json
from concurrent.futures import ThreadPoolExecutor

from a11y_linter.cache import FileCache, JsonCacheStore, MemoryCacheStore, content_hash
from a11y_linter.models import Issue, IssueType, ScanResult, Severity


def _result(path="a.html"):
    issue = Issue(type=IssueType.MISSING_ALT_TEXT, severity=Severity.ERROR, message="m", line=2, column=3)
    return ScanResult(file=path, issues=[issue], total=1)


def test_round_trip_and_miss_on_changed_content(tmp_path):
    cache = FileCache(MemoryCacheStore())
    path = tmp_path / "a.html"
    cache.set(path, "<img>", _result())
    assert cache.get(path, "<img>") == _result()
    assert cache.get(path, "<img alt=''>") is None
    assert cache.get(tmp_path / "other.html", "<img>") is None


def test_every_write_is_persisted():
    store = MemoryCacheStore()
    cache = FileCache(store)
    cache.set("a.html", "x", _result())
    cache.set("b.html", "y", _result("b.html"))
    assert store.saves == 2
    assert len(store.entries) == 2


def test_disabled_cache_never_hits():
    store = MemoryCacheStore()
    cache = FileCache(store, enabled=False)
    cache.set("a.html", "x", _result())
    assert cache.get("a.html", "x") is None
    assert store.saves == 0


def test_json_store_survives_a_new_session(tmp_path):
    store = JsonCacheStore(tmp_path / ".a11y-cache")
    FileCache(store).set(tmp_path / "a.html", "<p>", _result())

    data = json.loads((tmp_path / ".a11y-cache" / "cache.json").read_text())
    entry = data[str((tmp_path / "a.html").resolve())]
    assert entry["content_hash"] == content_hash("<p>")

    reopened = FileCache(JsonCacheStore(tmp_path / ".a11y-cache"))
    assert reopened.get(tmp_path / "a.html", "<p>") == _result()


def test_corrupt_cache_file_loads_empty(tmp_path):
    cache_dir = tmp_path / "cache"
    cache_dir.mkdir()
    (cache_dir / "cache.json").write_text("{not json")
    cache = FileCache(JsonCacheStore(cache_dir))
    assert cache.stats()["size"] == 0


def test_clear_and_stats(tmp_path):
    store = JsonCacheStore(tmp_path)
    cache = FileCache(store)
    cache.set("a.html", "x", _result())
    assert cache.stats() == {"size": 1, "location": str(tmp_path / "cache.json")}
    cache.clear()
    assert cache.stats()["size"] == 0
    assert FileCache(JsonCacheStore(tmp_path)).stats()["size"] == 0


def test_cleanup_uses_timestamps():
    cache = FileCache(MemoryCacheStore())
    cache.set("a.html", "x", _result())
    assert cache.cleanup() == 0
    assert cache.get("a.html", "x") is not None
    assert cache.cleanup(max_age=-1) == 1
    assert cache.get("a.html", "x") is None


def test_concurrent_writers():
    cache = FileCache(MemoryCacheStore())
    paths = [f"file{n}.html" for n in range(50)]
    with ThreadPoolExecutor(max_workers=8) as pool:
        list(pool.map(lambda p: cache.set(p, p, _result(p)), paths))
    assert cache.stats()["size"] == 50
    assert all(cache.get(p, p) is not None for p in paths)
