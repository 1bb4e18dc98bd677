"""Selection of cached matches by index.

Pure helpers used before deletion: parsing the operator's index list and
filtering a cached result set down to the requested matches.
"""

from collections.abc import Iterable, Sequence

from wsg.garbage.models import GarbageIndex, MatchResult


class SelectionError(Exception):
    """Raised when requested indices do not exist in the cached result set.

    Attributes:
        missing: Requested indices that were not found.
    """

    def __init__(self, missing: Sequence[GarbageIndex]) -> None:
        self.missing = tuple(missing)
        ids = ", ".join(str(index) for index in self.missing)
        super().__init__(f"Unknown index(es): {ids}")


def parse_indices(values: Iterable[str]) -> list[GarbageIndex]:
    """Parse index arguments, accepting comma-separated lists.

    Args:
        values: Raw arguments such as ``["1,2", "7"]`` or ``["all"]``.

    Returns:
        Parsed indices without duplicates, in first-seen order.

    Raises:
        ValueError: If any token is not ``all`` or an integer.
    """
    indices: list[GarbageIndex] = []
    for value in values:
        for token in value.split(","):
            if not token.strip():
                continue
            index = GarbageIndex.parse(token)
            if index not in indices:
                indices.append(index)
    return indices


def filter_results(
    results: Sequence[MatchResult],
    indices: Sequence[GarbageIndex],
) -> list[MatchResult]:
    """Select the cached matches named by ``indices``.

    Args:
        results: Cached matches.
        indices: Requested indices. ``all`` selects every match.

    Returns:
        Selected matches in cached order.

    Raises:
        SelectionError: If a requested integer index is not in ``results``.
    """
    if any(index.is_all for index in indices):
        return list(results)

    available = {result.index for result in results}
    missing = [index for index in indices if index not in available]
    if missing:
        raise SelectionError(missing)

    requested = set(indices)
    return [result for result in results if result.index in requested]
