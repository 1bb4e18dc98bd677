"""Recognizer domain models.

A recognizer pairs the marker paths that identify a project root of some
kind with the marker paths locating that project's disposable output.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path, PurePath


class SignatureKind(str, Enum):
    """Kind of filesystem entry a path signature refers to.

    Attributes:
        FILE: The marker is expected to be a file (e.g., ``package.json``).
        DIRECTORY: The marker is expected to be a directory (e.g., ``build/``).
    """

    FILE = "file"
    DIRECTORY = "directory"


@dataclass(frozen=True, slots=True)
class PathSignature:
    """Relative marker path tested for existence under a candidate root.

    The kind is descriptive: existence of either kind satisfies the
    signature, matching how markers are declared in the registry.

    Attributes:
        kind: Whether the marker names a file or a directory.
        path: Marker path relative to the candidate root.
    """

    kind: SignatureKind
    path: str

    def __post_init__(self) -> None:
        """Validate signature data after initialization."""
        if not self.path:
            msg = "Signature path cannot be empty"
            raise ValueError(msg)
        if PurePath(self.path).is_absolute():
            msg = f"Signature path must be relative, got {self.path}"
            raise ValueError(msg)

    @classmethod
    def file(cls, path: str) -> PathSignature:
        """Create a file signature."""
        return cls(kind=SignatureKind.FILE, path=path)

    @classmethod
    def directory(cls, path: str) -> PathSignature:
        """Create a directory signature."""
        return cls(kind=SignatureKind.DIRECTORY, path=path)

    def resolve(self, root: Path) -> Path:
        """Return the marker path joined onto ``root``."""
        return root / self.path

    def exists_in(self, root: Path) -> bool:
        """Check whether the marker exists under ``root``."""
        return self.resolve(root).exists()


@dataclass(frozen=True, slots=True)
class Recognizer:
    """Named rule recognizing a project type and its disposable output.

    Attributes:
        name: Human-readable recognizer name (e.g., "NodeJS").
        presence_markers: Markers proving a directory is a project root.
        deletable_markers: Markers inside that root which are safe to erase.
            The first one that exists wins.
    """

    name: str
    presence_markers: tuple[PathSignature, ...]
    deletable_markers: tuple[PathSignature, ...]

    def __post_init__(self) -> None:
        """Validate recognizer data after initialization."""
        if not self.name:
            msg = "Recognizer name cannot be empty"
            raise ValueError(msg)

    def is_present_in(self, directory: Path) -> bool:
        """Check whether any presence marker exists under ``directory``."""
        return any(marker.exists_in(directory) for marker in self.presence_markers)

    def find_deletable(self, directory: Path) -> Path | None:
        """Return the first existing deletable path under ``directory``.

        Args:
            directory: Candidate project root.

        Returns:
            Absolute deletable path, or None if no marker exists.
        """
        for marker in self.deletable_markers:
            candidate = marker.resolve(directory)
            if candidate.exists():
                return candidate
        return None
