"""Unit tests for the result cache."""

import json
import os
import time
from pathlib import Path

import pytest
from wsg.garbage.cache import (
    DEFAULT_CACHE_TTL,
    CacheExpiredError,
    CacheIOError,
    CacheMismatchError,
    CacheMissingError,
    CacheSerializationError,
    ResultCache,
    path_hash,
)
from wsg.garbage.models import GarbageIndex, MatchResult


def _make_results(root: Path) -> list[MatchResult]:
    return [
        MatchResult(
            index=GarbageIndex.of(0),
            recognizer_name="Flutter",
            directory=root / "app",
            size=10_000_000,
            deletable=(root / "app" / "build",),
        ),
        MatchResult(
            index=GarbageIndex.of(1),
            recognizer_name="NodeJS",
            directory=root / "web",
            size=5_000_000,
            deletable=(root / "web" / "node_modules",),
        ),
    ]


def _age_entry(location: Path, seconds: float) -> None:
    """Backdate a cache entry's modification time."""
    past = time.time() - seconds
    os.utime(location, (past, past))


class TestPathHash:
    """Tests for path_hash."""

    def test_equivalent_spellings_hash_alike(self) -> None:
        """Trailing separators, '.' and '..' do not change the hash."""
        expected = path_hash("/a/b")

        assert path_hash("/a/b/") == expected
        assert path_hash("/a/./b") == expected
        assert path_hash("/a/c/../b") == expected
        assert path_hash("/a//b") == expected
        assert path_hash(Path("/a/b")) == expected

    def test_relative_path_resolved_against_cwd(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        """Relative roots hash the same as their absolute form."""
        monkeypatch.chdir(tmp_path)

        assert path_hash("proj") == path_hash(tmp_path / "proj")

    def test_distinct_roots_hash_differently(self) -> None:
        """Different roots produce different names."""
        hashes = {path_hash(f"/home/user/project-{i}") for i in range(500)}

        assert len(hashes) == 500

    def test_hash_is_filename_safe(self) -> None:
        """Hashes contain no path separators or padding."""
        for i in range(200):
            name = path_hash(f"/some/root/{i}")
            assert "/" not in name
            assert "=" not in name
            assert name

    def test_hash_is_stable(self) -> None:
        """The same root always yields the same name."""
        assert path_hash("/home/user/code") == path_hash("/home/user/code")


class TestResultCache:
    """Tests for ResultCache."""

    def test_default_ttl(self, cache_dir: Path) -> None:
        """Default TTL is five minutes and namespace follows the environment."""
        cache = ResultCache()

        assert cache.ttl == DEFAULT_CACHE_TTL == 300
        assert cache.cache_dir == cache_dir

    def test_round_trip(self, tmp_path: Path, cache_dir: Path) -> None:
        """write followed by read returns equal results."""
        cache = ResultCache(cache_dir=cache_dir)
        results = _make_results(tmp_path)

        location = cache.write(tmp_path, results)

        assert location == cache_dir / path_hash(tmp_path)
        assert cache.read(tmp_path) == results

    def test_round_trip_empty(self, tmp_path: Path, cache_dir: Path) -> None:
        """An empty result set is cached too."""
        cache = ResultCache(cache_dir=cache_dir)
        cache.write(tmp_path, [])

        assert cache.read(tmp_path) == []

    def test_entry_is_human_readable_json(self, tmp_path: Path, cache_dir: Path) -> None:
        """Entries are pretty-printed JSON with recognizers and results."""
        cache = ResultCache(cache_dir=cache_dir)
        location = cache.write(tmp_path, _make_results(tmp_path))

        content = location.read_text()
        data = json.loads(content)
        assert "\n  " in content
        assert data["recognizers"] == []
        assert data["results"][0]["recognizer_name"] == "Flutter"
        assert data["results"][1]["index"] == 1

    def test_equivalent_root_spelling_hits(self, tmp_path: Path, cache_dir: Path) -> None:
        """A trailing separator on read still finds the entry."""
        cache = ResultCache(cache_dir=cache_dir)
        results = _make_results(tmp_path)
        cache.write(str(tmp_path), results)

        assert cache.read(f"{tmp_path}/") == results

    def test_read_missing(self, tmp_path: Path, cache_dir: Path) -> None:
        """Reading without an entry raises CacheMissingError."""
        cache = ResultCache(cache_dir=cache_dir)

        with pytest.raises(CacheMissingError):
            cache.read(tmp_path)

    def test_read_zero_ttl_expired(self, tmp_path: Path, cache_dir: Path) -> None:
        """An entry read with ttl 0 is immediately expired."""
        cache = ResultCache(cache_dir=cache_dir)
        cache.write(tmp_path, _make_results(tmp_path))

        with pytest.raises(CacheExpiredError):
            cache.read(tmp_path, ttl=0)

    def test_read_expired_entry(self, tmp_path: Path, cache_dir: Path) -> None:
        """Entries older than the TTL are never returned."""
        cache = ResultCache(cache_dir=cache_dir, ttl=60)
        location = cache.write(tmp_path, _make_results(tmp_path))
        _age_entry(location, 120)

        with pytest.raises(CacheExpiredError):
            cache.read(tmp_path)
        assert cache.read(tmp_path, ttl=600) == _make_results(tmp_path)

    def test_write_skips_fresh_entry(self, tmp_path: Path, cache_dir: Path) -> None:
        """A fresh entry is not overwritten."""
        cache = ResultCache(cache_dir=cache_dir)
        original = _make_results(tmp_path)
        cache.write(tmp_path, original)

        location = cache.write(tmp_path, original[:1])

        assert location == cache.location_for(tmp_path)
        assert cache.read(tmp_path) == original

    def test_write_replaces_expired_entry(self, tmp_path: Path, cache_dir: Path) -> None:
        """An expired entry is overwritten and becomes fresh again."""
        cache = ResultCache(cache_dir=cache_dir, ttl=60)
        original = _make_results(tmp_path)
        location = cache.write(tmp_path, original)
        _age_entry(location, 120)

        cache.write(tmp_path, original[:1])

        assert cache.read(tmp_path) == original[:1]

    def test_write_with_zero_ttl_always_writes(self, tmp_path: Path, cache_dir: Path) -> None:
        """ttl 0 on write bypasses the freshness short-circuit."""
        cache = ResultCache(cache_dir=cache_dir)
        original = _make_results(tmp_path)
        cache.write(tmp_path, original)

        cache.write(tmp_path, original[:1], ttl=0)

        assert cache.read(tmp_path) == original[:1]

    def test_write_creates_namespace(self, tmp_path: Path) -> None:
        """The cache directory is created on first write."""
        namespace = tmp_path / "nested" / "wsg"
        cache = ResultCache(cache_dir=namespace)

        cache.write(tmp_path, [])

        assert namespace.is_dir()

    def test_write_io_failure(self, tmp_path: Path) -> None:
        """Unwritable namespaces raise CacheIOError."""
        blocker = tmp_path / "blocker"
        blocker.write_text("a file where the namespace should be")
        cache = ResultCache(cache_dir=blocker)

        with pytest.raises(CacheIOError):
            cache.write(tmp_path, [])

    def test_read_corrupt_entry(self, tmp_path: Path, cache_dir: Path) -> None:
        """Invalid JSON raises CacheSerializationError."""
        cache = ResultCache(cache_dir=cache_dir)
        cache_dir.mkdir(parents=True)
        cache.location_for(tmp_path).write_text("{not json")

        with pytest.raises(CacheSerializationError):
            cache.read(tmp_path)

    def test_read_wrong_shape(self, tmp_path: Path, cache_dir: Path) -> None:
        """Valid JSON of the wrong shape raises CacheSerializationError."""
        cache = ResultCache(cache_dir=cache_dir)
        cache_dir.mkdir(parents=True)
        cache.location_for(tmp_path).write_text('{"index": 0}')

        with pytest.raises(CacheSerializationError):
            cache.read(tmp_path)

    def test_read_invalid_index_type(self, tmp_path: Path, cache_dir: Path) -> None:
        """A null index is reported as CacheSerializationError."""
        cache = ResultCache(cache_dir=cache_dir)
        location = cache.write(tmp_path, _make_results(tmp_path))
        data = json.loads(location.read_text())
        data["results"][0]["index"] = None
        location.write_text(json.dumps(data))

        with pytest.raises(CacheSerializationError):
            cache.read(tmp_path)

    def test_recognizers_recorded(self, tmp_path: Path, cache_dir: Path) -> None:
        """Entries remember the recognizer selection they were made with."""
        cache = ResultCache(cache_dir=cache_dir)
        results = _make_results(tmp_path)
        cache.write(tmp_path, results, recognizers=["Flutter", "NodeJS"])

        assert cache.read(tmp_path, recognizers=["Flutter", "NodeJS"]) == results
        assert cache.read(tmp_path) == results

    def test_recognizer_mismatch(self, tmp_path: Path, cache_dir: Path) -> None:
        """An entry made with other recognizers raises CacheMismatchError."""
        cache = ResultCache(cache_dir=cache_dir)
        cache.write(tmp_path, _make_results(tmp_path), recognizers=["NodeJS"])

        with pytest.raises(CacheMismatchError, match="NodeJS"):
            cache.read(tmp_path, recognizers=["Flutter", "NodeJS", "Rust"])

    def test_invalidate(self, tmp_path: Path, cache_dir: Path) -> None:
        """invalidate removes the entry."""
        cache = ResultCache(cache_dir=cache_dir)
        location = cache.write(tmp_path, _make_results(tmp_path))

        cache.invalidate(tmp_path)

        assert not location.exists()
        with pytest.raises(CacheMissingError):
            cache.read(tmp_path)

    def test_invalidate_missing(self, tmp_path: Path, cache_dir: Path) -> None:
        """invalidate without an entry raises CacheMissingError."""
        cache = ResultCache(cache_dir=cache_dir)

        with pytest.raises(CacheMissingError):
            cache.invalidate(tmp_path)

    def test_clear_all(self, tmp_path: Path, cache_dir: Path) -> None:
        """clear_all removes every entry regardless of age."""
        cache = ResultCache(cache_dir=cache_dir)
        fresh = cache.write(tmp_path / "a", [])
        stale = cache.write(tmp_path / "b", [])
        _age_entry(stale, 10_000)

        removed = cache.clear_all()

        assert removed == 2
        assert not fresh.exists()
        assert not stale.exists()

    def test_clear_all_without_namespace(self, tmp_path: Path) -> None:
        """Clearing a cache that was never written removes nothing."""
        cache = ResultCache(cache_dir=tmp_path / "never-created")

        assert cache.clear_all() == 0

    def test_is_fresh_and_age(self, tmp_path: Path, cache_dir: Path) -> None:
        """is_fresh and age_of reflect the entry's modification time."""
        cache = ResultCache(cache_dir=cache_dir, ttl=60)

        assert cache.age_of(tmp_path) is None
        assert not cache.is_fresh(tmp_path)

        location = cache.write(tmp_path, [])
        assert cache.is_fresh(tmp_path)

        _age_entry(location, 90)
        age = cache.age_of(tmp_path)
        assert age is not None and age >= 90
        assert not cache.is_fresh(tmp_path)
