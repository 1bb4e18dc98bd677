"""Garbage scanning, caching and cleanup.

This module provides the recognizer walk, the result cache, index
selection and the deletion operator.
"""

from wsg.garbage.cache import (
    DEFAULT_CACHE_TTL,
    CacheError,
    CacheExpiredError,
    CacheIOError,
    CacheMismatchError,
    CacheMissingError,
    CacheSerializationError,
    ResultCache,
    path_hash,
)
from wsg.garbage.models import (
    DeleteOperationResult,
    DeleteOperationSelection,
    GarbageIndex,
    MatchResult,
)
from wsg.garbage.operator import GarbageOperator
from wsg.garbage.scanner import GarbageScanner, WalkError, total_size
from wsg.garbage.selection import SelectionError, filter_results, parse_indices
from wsg.garbage.size import size_of

__all__ = [
    "DEFAULT_CACHE_TTL",
    "CacheError",
    "CacheExpiredError",
    "CacheIOError",
    "CacheMismatchError",
    "CacheMissingError",
    "CacheSerializationError",
    "DeleteOperationResult",
    "DeleteOperationSelection",
    "GarbageIndex",
    "GarbageOperator",
    "GarbageScanner",
    "MatchResult",
    "ResultCache",
    "SelectionError",
    "WalkError",
    "filter_results",
    "parse_indices",
    "path_hash",
    "size_of",
    "total_size",
]
