"""Directory walker and recognizer matcher.

Walks a directory tree depth-first without following symbolic links,
evaluates every selected recognizer against each directory, and prunes
claimed deletable subtrees from further descent so that no two matches
overlap and no byte is counted twice.
"""

import logging
import stat
from collections.abc import Callable, Sequence
from pathlib import Path

from wsg.core.paths import normalize_path
from wsg.garbage.models import GarbageIndex, MatchResult
from wsg.garbage.size import size_of
from wsg.recognizers.models import Recognizer

logger = logging.getLogger(__name__)


class WalkError(Exception):
    """Raised when the filesystem cannot be traversed.

    Attributes:
        path: Path at which the traversal failed.
    """

    def __init__(self, path: Path, message: str) -> None:
        self.path = path
        super().__init__(f"Cannot scan {path}: {message}")


class GarbageScanner:
    """Scans a directory tree for recognized project garbage.

    Args:
        recognizers: Recognizers to evaluate, in priority order.
        size_calculator: Callable measuring a deletable subtree. Failures
            degrade that match's size to zero.
    """

    def __init__(
        self,
        recognizers: Sequence[Recognizer],
        size_calculator: Callable[[Path], int] = size_of,
    ) -> None:
        self._recognizers = tuple(recognizers)
        self._size_of = size_calculator

    @property
    def recognizers(self) -> tuple[Recognizer, ...]:
        """Recognizers evaluated by this scanner."""
        return self._recognizers

    def scan(self, root: Path) -> list[MatchResult]:
        """Walk ``root`` and return every match in traversal order.

        Traversal is pre-order with children visited in sorted name order,
        so indices are deterministic for a fixed filesystem state.

        Args:
            root: Directory to scan.

        Returns:
            Matches with dense zero-based indices.

        Raises:
            WalkError: If the root is unusable or any entry cannot be read.
                No partial results are returned.
        """
        root = normalize_path(root)

        try:
            if not root.is_dir():
                raise WalkError(root, "not a directory")
        except OSError as e:
            raise WalkError(root, str(e)) from e

        pruned: list[Path] = []
        results: list[MatchResult] = []
        stack: list[Path] = [root]

        while stack:
            directory = stack.pop()
            if self._is_pruned(directory, pruned):
                continue

            results.extend(self._match_directory(directory, pruned, len(results)))

            try:
                children = sorted(directory.iterdir())
            except OSError as e:
                raise WalkError(directory, str(e)) from e

            subdirs: list[Path] = []
            for child in children:
                try:
                    mode = child.lstat().st_mode
                except OSError as e:
                    raise WalkError(child, str(e)) from e
                # lstat: symlinked directories are never descended
                if stat.S_ISDIR(mode):
                    subdirs.append(child)

            # Reversed so the first child is popped first
            stack.extend(reversed(subdirs))

        logger.debug("Scan of %s found %d match(es)", root, len(results))
        return results

    def _match_directory(
        self,
        directory: Path,
        pruned: list[Path],
        next_index: int,
    ) -> list[MatchResult]:
        """Evaluate every recognizer against a single directory.

        Claimed deletable paths are appended to ``pruned`` as they match,
        so a later recognizer cannot claim an overlapping subtree.

        Args:
            directory: Candidate project root.
            pruned: Deletable subtrees claimed so far (mutated).
            next_index: Index to assign to the first new match.

        Returns:
            New matches for this directory.
        """
        matches: list[MatchResult] = []

        for recognizer in self._recognizers:
            try:
                if not recognizer.is_present_in(directory):
                    continue
                deletable = recognizer.find_deletable(directory)
            except OSError as e:
                raise WalkError(directory, str(e)) from e

            if deletable is None:
                continue
            if self._overlaps(deletable, pruned):
                logger.debug(
                    "Skipping %s for %s: already claimed",
                    deletable,
                    recognizer.name,
                )
                continue

            size = self._measure(deletable)
            pruned.append(deletable)
            match = MatchResult(
                index=GarbageIndex.of(next_index + len(matches)),
                recognizer_name=recognizer.name,
                directory=directory,
                size=size,
                deletable=(deletable,),
            )
            logger.debug("Matched %s at %s (%d bytes)", recognizer.name, directory, size)
            matches.append(match)

        return matches

    def _measure(self, path: Path) -> int:
        """Measure a deletable subtree, degrading failures to zero."""
        try:
            return self._size_of(path)
        except OSError as e:
            logger.warning("Cannot compute size of %s: %s", path, e)
            return 0

    @staticmethod
    def _is_pruned(path: Path, pruned: list[Path]) -> bool:
        """Check if ``path`` is equal to or under a claimed subtree."""
        return any(path.is_relative_to(claimed) for claimed in pruned)

    @staticmethod
    def _overlaps(path: Path, pruned: list[Path]) -> bool:
        """Check if ``path`` is equal to, under, or above a claimed subtree."""
        return any(
            path.is_relative_to(claimed) or claimed.is_relative_to(path) for claimed in pruned
        )


def total_size(results: Sequence[MatchResult]) -> int:
    """Sum the cleanable bytes of a result set."""
    return sum(result.size for result in results)
