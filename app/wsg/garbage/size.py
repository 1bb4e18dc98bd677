"""Recursive size calculation for deletable subtrees."""

from pathlib import Path


def size_of(path: Path) -> int:
    """Sum the byte lengths of everything under ``path``.

    Symbolic links are never followed: a link contributes its own
    ``lstat`` size. Directories contribute only the recursive sum of
    their contents, not their own entry overhead. A non-directory path
    returns its own size.

    Args:
        path: File or directory to measure.

    Returns:
        Total size in bytes.

    Raises:
        OSError: If any entry cannot be read.
    """
    if not path.is_dir() or path.is_symlink():
        return path.lstat().st_size

    total = 0
    for child in path.iterdir():
        if child.is_dir() and not child.is_symlink():
            total += size_of(child)
        else:
            total += child.lstat().st_size
    return total
