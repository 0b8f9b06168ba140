"""Directory-listing abstraction used by the file searches."""

from collections.abc import Iterable
from pathlib import Path
from typing import Protocol


class DirectoryListing(Protocol):
    """Read-only view of a directory tree."""

    def exists(self, path: Path) -> bool:
        """Return whether anything exists at ``path``."""
        ...

    def is_dir(self, path: Path) -> bool:
        """Return whether ``path`` is a directory."""
        ...

    def list_dir(self, path: Path) -> Iterable[Path]:
        """Yield the entries of the directory ``path`` in traversal order."""
        ...


class LocalDirectoryListing:
    """DirectoryListing backed by the real filesystem."""

    def exists(self, path: Path) -> bool:
        """Return whether anything exists at ``path``."""
        return path.exists()

    def is_dir(self, path: Path) -> bool:
        """Return whether ``path`` is a directory."""
        return path.is_dir()

    def list_dir(self, path: Path) -> Iterable[Path]:
        """Yield the entries of the directory ``path`` in traversal order."""
        return path.iterdir()
