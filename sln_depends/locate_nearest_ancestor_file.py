"""Upward search for the closest ancestor directory holding a matching file."""

import logging
from collections.abc import Callable
from pathlib import Path

from sln_depends.directory_listing import DirectoryListing

logger = logging.getLogger(__name__)


def locate_nearest_ancestor_file(
    start_dir: Path,
    predicate: Callable[[Path], bool],
    listing: DirectoryListing,
) -> Path | None:
    """Walk from ``start_dir`` toward the root and return the first match.

    Each ancestor is listed non-recursively. Ancestors that do not exist (hint
    paths often contain unexpanded ``$(Configuration)`` segments) or cannot be
    read are skipped. When one directory holds several matches, the lexically
    smallest file name wins. Returns None once the filesystem root has been
    checked.
    """
    for directory in (start_dir, *start_dir.parents):
        try:
            if not listing.is_dir(directory):
                continue
            matches = [
                entry
                for entry in listing.list_dir(directory)
                if not listing.is_dir(entry) and predicate(entry)
            ]
        except OSError as exc:
            logger.warning("Skipping unreadable directory %s: %s", directory, exc)
            continue
        if matches:
            return min(matches, key=lambda p: p.name)
    return None
