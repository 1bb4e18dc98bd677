"""Result cache for scan output.

Each scanned root gets one JSON file in the cache namespace, named by a
stable hash of the normalized root path. The file's own modification time
is the only freshness signal, so a list/clean cycle across two process
invocations reuses the same match set (and the same indices) without
walking the filesystem again. The entry also records which recognizers
produced it, so a listing made with other filters is never reused.
"""

import base64
import json
import logging
import os
import time
from collections.abc import Sequence
from pathlib import Path

import xxhash

from wsg.core.paths import ensure_dir, get_cache_dir, normalize_path
from wsg.garbage.models import MatchResult

logger = logging.getLogger(__name__)

# Default time-to-live for a cache entry (5 minutes)
DEFAULT_CACHE_TTL: float = 5 * 60


class CacheError(Exception):
    """Base exception for result cache errors."""


class CacheMissingError(CacheError):
    """Raised when no cache entry exists for a root."""


class CacheExpiredError(CacheError):
    """Raised when a cache entry is older than its time-to-live."""


class CacheIOError(CacheError):
    """Raised when a cache entry cannot be read or written."""


class CacheSerializationError(CacheError):
    """Raised when a cache entry cannot be encoded or decoded."""


class CacheMismatchError(CacheError):
    """Raised when a cache entry was produced by a different recognizer selection."""


def path_hash(root: str | os.PathLike[str]) -> str:
    """Derive the cache file name for a root path.

    Pure function of the normalized path: ``/a/b``, ``/a/b/`` and
    ``/a/./b`` all hash identically.

    Args:
        root: Scanned root path.

    Returns:
        URL-safe base64 of the xxHash64 digest, without padding.
    """
    normalized = str(normalize_path(root))
    digest = xxhash.xxh64(normalized.encode("utf-8")).digest()
    return base64.urlsafe_b64encode(digest).decode("ascii").rstrip("=")


class ResultCache:
    """Read-through cache of scan results keyed by scanned root.

    Args:
        cache_dir: Cache namespace. Defaults to ``<tempdir>/wsg``.
        ttl: Default time-to-live in seconds.
    """

    def __init__(self, cache_dir: Path | None = None, ttl: float = DEFAULT_CACHE_TTL) -> None:
        self._cache_dir = cache_dir if cache_dir is not None else get_cache_dir()
        self._ttl = ttl

    @property
    def cache_dir(self) -> Path:
        """Directory holding the cache entries."""
        return self._cache_dir

    @property
    def ttl(self) -> float:
        """Default time-to-live in seconds."""
        return self._ttl

    def location_for(self, root: str | os.PathLike[str]) -> Path:
        """Return the cache file location for ``root``."""
        return self._cache_dir / path_hash(root)

    def age_of(self, root: str | os.PathLike[str]) -> float | None:
        """Return the age in seconds of the entry for ``root``.

        Returns:
            Seconds since the entry was last written, or None if absent.

        Raises:
            CacheIOError: If the entry exists but cannot be inspected.
        """
        location = self.location_for(root)
        try:
            mtime = location.stat().st_mtime
        except FileNotFoundError:
            return None
        except OSError as e:
            raise CacheIOError(f"Cannot inspect cache entry {location}: {e}") from e
        return time.time() - mtime

    def is_fresh(self, root: str | os.PathLike[str], ttl: float | None = None) -> bool:
        """Check whether a cache entry exists and is within its time-to-live."""
        age = self.age_of(root)
        if age is None:
            return False
        return age < self._effective_ttl(ttl)

    def write(
        self,
        root: str | os.PathLike[str],
        results: Sequence[MatchResult],
        ttl: float | None = None,
        recognizers: Sequence[str] = (),
    ) -> Path:
        """Persist scan results for ``root``.

        A still-fresh entry is left untouched and its location returned.

        Args:
            root: Scanned root path.
            results: Matches to store.
            ttl: Time-to-live override in seconds.
            recognizers: Names of the recognizers used for the scan.

        Returns:
            Location of the cache entry.

        Raises:
            CacheIOError: If the namespace or entry cannot be written.
            CacheSerializationError: If the results cannot be encoded.
        """
        location = self.location_for(root)

        if self.is_fresh(root, ttl):
            logger.debug("Cache entry %s still fresh, skipping write", location)
            return location

        try:
            payload = json.dumps(
                {
                    "recognizers": list(recognizers),
                    "results": [result.to_dict() for result in results],
                },
                indent=2,
            )
        except (TypeError, ValueError) as e:
            raise CacheSerializationError(f"Cannot encode scan results: {e}") from e

        try:
            ensure_dir(self._cache_dir, "cache")
            location.write_text(payload + "\n", encoding="utf-8")
        except (OSError, RuntimeError) as e:
            raise CacheIOError(f"Cannot write cache entry {location}: {e}") from e

        logger.debug("Wrote %d result(s) for %s to %s", len(results), root, location)
        return location

    def read(
        self,
        root: str | os.PathLike[str],
        ttl: float | None = None,
        recognizers: Sequence[str] | None = None,
    ) -> list[MatchResult]:
        """Load cached scan results for ``root``.

        Args:
            root: Scanned root path.
            ttl: Time-to-live override in seconds.
            recognizers: Recognizer names the caller scans with. If given,
                an entry written for a different selection is rejected.

        Returns:
            Cached matches in their original order.

        Raises:
            CacheMissingError: If no entry exists.
            CacheExpiredError: If the entry is older than the time-to-live.
            CacheIOError: If the entry cannot be read.
            CacheSerializationError: If the entry content is invalid.
            CacheMismatchError: If the entry was written for other recognizers.
        """
        location = self.location_for(root)
        age = self.age_of(root)
        if age is None:
            raise CacheMissingError(f"No cached results for {normalize_path(root)}")

        effective_ttl = self._effective_ttl(ttl)
        if age >= effective_ttl:
            raise CacheExpiredError(
                f"Cached results for {normalize_path(root)} expired "
                f"({age:.0f}s old, ttl {effective_ttl:.0f}s)"
            )

        try:
            content = location.read_text(encoding="utf-8")
        except FileNotFoundError as e:
            raise CacheMissingError(f"No cached results for {normalize_path(root)}") from e
        except OSError as e:
            raise CacheIOError(f"Cannot read cache entry {location}: {e}") from e

        try:
            data = json.loads(content)
            if not isinstance(data, dict):
                msg = "expected an object with recognizers and results"
                raise TypeError(msg)
            stored = [str(name) for name in data["recognizers"]]
            results = [MatchResult.from_dict(item) for item in data["results"]]
        except (json.JSONDecodeError, AttributeError, KeyError, TypeError, ValueError) as e:
            raise CacheSerializationError(f"Invalid cache entry {location}: {e}") from e

        if recognizers is not None and stored != list(recognizers):
            raise CacheMismatchError(
                f"Cached results for {normalize_path(root)} were made with "
                f"{', '.join(stored) or 'no recognizers'}"
            )

        logger.debug("Cache hit for %s (%d result(s))", root, len(results))
        return results

    def invalidate(self, root: str | os.PathLike[str]) -> None:
        """Delete the cache entry for ``root``.

        Raises:
            CacheMissingError: If there is nothing to delete.
            CacheIOError: If the entry cannot be removed.
        """
        location = self.location_for(root)
        try:
            location.unlink()
        except FileNotFoundError as e:
            raise CacheMissingError(f"No cached results for {normalize_path(root)}") from e
        except OSError as e:
            raise CacheIOError(f"Cannot remove cache entry {location}: {e}") from e
        logger.debug("Invalidated cache entry %s", location)

    def clear_all(self) -> int:
        """Delete every entry in the cache namespace regardless of age.

        Returns:
            Number of entries removed.

        Raises:
            CacheIOError: If the namespace cannot be listed or an entry removed.
        """
        if not self._cache_dir.is_dir():
            return 0

        removed = 0
        try:
            for entry in self._cache_dir.iterdir():
                if entry.is_file() and not entry.is_symlink():
                    entry.unlink()
                    removed += 1
        except OSError as e:
            raise CacheIOError(f"Cannot clear cache {self._cache_dir}: {e}") from e

        logger.debug("Cleared %d cache entr(ies) from %s", removed, self._cache_dir)
        return removed

    def _effective_ttl(self, ttl: float | None) -> float:
        return self._ttl if ttl is None else ttl
