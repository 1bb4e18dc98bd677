"""Garbage domain models for scanning, caching and deletion.

This module defines the match records produced by the directory walk,
the identifiers used to select them, and the per-path deletion reports
produced by the operator.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any


@dataclass(frozen=True, slots=True)
class GarbageIndex:
    """Identifier of a match within one cached result set.

    Either a dense zero-based integer assigned in discovery order, or the
    sentinel ``all`` selecting every cached match.

    Attributes:
        value: Integer id, or None for the ``all`` sentinel.
    """

    value: int | None

    ALL_TOKEN = "all"

    def __post_init__(self) -> None:
        """Validate index data after initialization."""
        if self.value is not None and self.value < 0:
            msg = f"Index must be non-negative, got {self.value}"
            raise ValueError(msg)

    @classmethod
    def of(cls, value: int) -> GarbageIndex:
        """Create an integer index."""
        return cls(value=value)

    @classmethod
    def all(cls) -> GarbageIndex:
        """Create the ``all`` sentinel."""
        return cls(value=None)

    @classmethod
    def parse(cls, text: str) -> GarbageIndex:
        """Parse an index from user input.

        Args:
            text: ``"all"`` (case-insensitive) or a non-negative integer.

        Returns:
            Parsed GarbageIndex.

        Raises:
            ValueError: If the text is neither ``all`` nor an integer.
        """
        token = text.strip()
        if token.lower() == cls.ALL_TOKEN:
            return cls.all()
        try:
            number = int(token)
        except ValueError:
            msg = f"Invalid index '{text}': expected 'all' or an integer"
            raise ValueError(msg) from None
        return cls.of(number)

    @property
    def is_all(self) -> bool:
        """Whether this index is the ``all`` sentinel."""
        return self.value is None

    def to_json(self) -> int | str:
        """Serialize to a JSON-compatible value."""
        return self.ALL_TOKEN if self.value is None else self.value

    @classmethod
    def from_json(cls, data: object) -> GarbageIndex:
        """Deserialize from a JSON value written by :meth:`to_json`.

        Raises:
            TypeError: If ``data`` is neither an integer nor a string.
            ValueError: If ``data`` is not a valid index.
        """
        if isinstance(data, bool) or not isinstance(data, int | str):
            msg = f"Invalid index value: {data!r}"
            raise TypeError(msg)
        if isinstance(data, int):
            return cls.of(data)
        return cls.parse(data)

    def __str__(self) -> str:
        return str(self.to_json())


@dataclass(frozen=True, slots=True)
class MatchResult:
    """A project root whose disposable output was found during a scan.

    Attributes:
        index: Identifier, unique and stable only within one cached result set.
        recognizer_name: Name of the recognizer that matched.
        directory: Absolute path of the recognized project root.
        size: Byte total under every deletable path at scan time.
        deletable: Absolute paths that are safe to remove.
    """

    index: GarbageIndex
    recognizer_name: str
    directory: Path
    size: int
    deletable: tuple[Path, ...]

    def __post_init__(self) -> None:
        """Validate match data after initialization."""
        if not self.recognizer_name:
            msg = "Recognizer name cannot be empty"
            raise ValueError(msg)
        if self.size < 0:
            msg = f"Size must be non-negative, got {self.size}"
            raise ValueError(msg)

    def to_dict(self) -> dict[str, Any]:
        """Serialize to dictionary for JSON storage.

        Returns:
            Dictionary representation of the match.
        """
        return {
            "index": self.index.to_json(),
            "recognizer_name": self.recognizer_name,
            "directory": str(self.directory),
            "size": self.size,
            "deletable": [str(path) for path in self.deletable],
        }

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> MatchResult:
        """Deserialize from dictionary.

        Args:
            data: Dictionary containing match data.

        Returns:
            MatchResult instance.

        Raises:
            KeyError: If required fields are missing.
            TypeError: If a field has the wrong shape.
            ValueError: If a field value is invalid.
        """
        size = data["size"]
        if not isinstance(size, int) or isinstance(size, bool):
            msg = f"Size must be an integer, got {size!r}"
            raise TypeError(msg)

        return cls(
            index=GarbageIndex.from_json(data["index"]),
            recognizer_name=data["recognizer_name"],
            directory=Path(data["directory"]),
            size=size,
            deletable=tuple(Path(path) for path in data["deletable"]),
        )


@dataclass(frozen=True, slots=True)
class DeleteOperationResult:
    """Outcome of deleting a single path.

    Attributes:
        path: Path that was operated on.
        success: Whether the path was removed.
        error_message: Stringified cause if the deletion failed.
        dry_run: Whether this was a dry-run (nothing removed).
    """

    path: Path
    success: bool
    error_message: str | None = None
    dry_run: bool = False

    @classmethod
    def succeeded(cls, path: Path, dry_run: bool = False) -> DeleteOperationResult:
        """Create a success record."""
        return cls(path=path, success=True, dry_run=dry_run)

    @classmethod
    def failed(cls, path: Path, error_message: str | None) -> DeleteOperationResult:
        """Create a failure record."""
        return cls(path=path, success=False, error_message=error_message)


@dataclass(frozen=True, slots=True)
class DeleteOperationSelection:
    """Deletion report for one match.

    Attributes:
        name: Recognizer name of the match.
        directory: Project root the deletable paths belong to.
        results: One result per deletable path, in order.
    """

    name: str
    directory: Path
    results: list[DeleteOperationResult] = field(default_factory=lambda: [])

    @property
    def succeeded(self) -> list[DeleteOperationResult]:
        """Results whose deletion succeeded."""
        return [r for r in self.results if r.success]

    @property
    def failed(self) -> list[DeleteOperationResult]:
        """Results whose deletion failed."""
        return [r for r in self.results if not r.success]
