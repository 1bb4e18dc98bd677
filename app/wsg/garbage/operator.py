"""Garbage deletion operator.

Deletes the deletable paths of selected matches with dry-run support,
isolating failures per path so that one bad path never aborts the batch.
"""

import logging
import shutil
import stat
from collections.abc import Sequence
from pathlib import Path

from wsg.garbage.models import DeleteOperationResult, DeleteOperationSelection, MatchResult

logger = logging.getLogger(__name__)


class GarbageOperator:
    """Handles deletion of matched garbage.

    Attributes:
        _dry_run: If True, simulate deletions without modifying the filesystem.
    """

    def __init__(self, dry_run: bool = False) -> None:
        """Initialize the GarbageOperator.

        Args:
            dry_run: If True, report what would be deleted without deleting.
        """
        self._dry_run = dry_run

    def execute(self, selection: Sequence[MatchResult]) -> list[DeleteOperationSelection]:
        """Delete every deletable path of every selected match.

        Never raises: success or failure is only observable through the
        per-path results.

        Args:
            selection: Matches to clean.

        Returns:
            One DeleteOperationSelection per match, in selection order.
        """
        reports: list[DeleteOperationSelection] = []

        for match in selection:
            results = [self._delete_single(path) for path in match.deletable]
            reports.append(
                DeleteOperationSelection(
                    name=match.recognizer_name,
                    directory=match.directory,
                    results=results,
                )
            )

        return reports

    def _delete_single(self, path: Path) -> DeleteOperationResult:
        """Delete a single path.

        Dispatches on an ``lstat`` probe taken immediately before deletion:
        - Directories: shutil.rmtree
        - Regular files and symlinks: Path.unlink
        - Anything else: reported as unsupported

        Args:
            path: Absolute path to delete.

        Returns:
            DeleteOperationResult indicating success or failure.
        """
        try:
            mode = path.lstat().st_mode
        except OSError as e:
            logger.warning("Cannot inspect %s: %s", path, e)
            return DeleteOperationResult.failed(path, str(e))

        if self._dry_run:
            logger.info("Dry-run: would delete %s", path)
            return DeleteOperationResult.succeeded(path, dry_run=True)

        try:
            if stat.S_ISDIR(mode):
                shutil.rmtree(path)
            elif stat.S_ISREG(mode) or stat.S_ISLNK(mode):
                path.unlink()
            else:
                logger.warning("Refusing to delete %s: unsupported file type", path)
                return DeleteOperationResult.failed(path, f"Unsupported file type: {path}")
        except OSError as e:
            logger.warning("Failed to delete %s: %s", path, e)
            return DeleteOperationResult.failed(path, str(e))

        logger.info("Deleted %s", path)
        return DeleteOperationResult.succeeded(path)
