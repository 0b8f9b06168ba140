"""Recursive file search filtered by a predicate."""

import logging
from collections.abc import Callable
from pathlib import Path

from sln_depends.directory_listing import DirectoryListing, LocalDirectoryListing
from sln_depends.errors import SearchRootError

logger = logging.getLogger(__name__)


def find_files(
    root: Path,
    *,
    recursive: bool,
    predicate: Callable[[Path], bool],
    max_results: int | None = None,
    listing: DirectoryListing | None = None,
) -> list[Path]:
    """Find files under ``root`` accepted by ``predicate``.

    Every subdirectory is descended into when ``recursive`` is set; the predicate
    only filters files. Results come back in traversal order. Once
    ``max_results`` matches are collected the walk stops.
    """
    listing = listing or LocalDirectoryListing()
    if not listing.exists(root):
        logger.error(
            "Unable to search in the following directory because it doesn't exist: %s",
            root,
        )
        raise SearchRootError(root, "directory does not exist")
    if not listing.is_dir(root):
        logger.error("Unable to search because the path isn't a directory: %s", root)
        raise SearchRootError(root, "path is not a directory")

    found: list[Path] = []
    _walk(root, recursive, predicate, max_results, listing, found)
    return found


def find_single_file(
    root: Path,
    *,
    recursive: bool,
    predicate: Callable[[Path], bool],
    listing: DirectoryListing | None = None,
) -> Path | None:
    """Return the first file under ``root`` accepted by ``predicate``, if any."""
    files = find_files(
        root, recursive=recursive, predicate=predicate, max_results=1, listing=listing
    )
    return files[0] if files else None


def _walk(
    directory: Path,
    recursive: bool,
    predicate: Callable[[Path], bool],
    max_results: int | None,
    listing: DirectoryListing,
    found: list[Path],
) -> None:
    """Collect matches below ``directory`` into ``found``.

    Raises SearchRootError if a directory on the way cannot be listed.
    """
    try:
        entries = [
            (entry, listing.is_dir(entry)) for entry in listing.list_dir(directory)
        ]
    except OSError as exc:
        logger.error("Unable to list directory %s: %s", directory, exc)
        raise SearchRootError(directory, str(exc)) from exc

    for entry, is_dir in entries:
        if max_results is not None and len(found) >= max_results:
            return
        if is_dir:
            if recursive:
                _walk(entry, recursive, predicate, max_results, listing, found)
            continue
        if predicate(entry):
            found.append(entry)
