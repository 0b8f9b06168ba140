"""Heuristic lookup of the project producing a binary and of a project's solution."""

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

from sln_depends.directory_listing import DirectoryListing, LocalDirectoryListing
from sln_depends.is_project_file import make_project_file_predicate
from sln_depends.is_solution_file import make_solution_file_predicate
from sln_depends.locate_nearest_ancestor_file import locate_nearest_ancestor_file

logger = logging.getLogger(__name__)


class ParentLocator:
    """Finds producers and owners by climbing the directory tree.

    Build output conventionally sits a few levels below its project (e.g.
    ``bin/Debug/x86``) and solutions sit alongside or above their projects, so
    the nearest ancestor holding a matching file is taken as the answer.
    """

    def __init__(
        self,
        is_project_file: Callable[[Path], bool],
        is_solution_file: Callable[[Path], bool],
        listing: DirectoryListing | None = None,
    ) -> None:
        """Initialize the locator with file predicates and a directory listing."""
        self.is_project_file = is_project_file
        self.is_solution_file = is_solution_file
        self.listing = listing or LocalDirectoryListing()
        self._project_cache: dict[Path, Path | None] = {}
        self._solution_cache: dict[Path, Path | None] = {}

    @classmethod
    def from_config(
        cls, config: dict[str, Any], listing: DirectoryListing | None = None
    ) -> "ParentLocator":
        """Create a locator using the configured extensions."""
        return cls(
            make_project_file_predicate(
                config["project_extensions"],
                check_content=config.get("check_project_content", True),
            ),
            make_solution_file_predicate(config["solution_extensions"]),
            listing,
        )

    def find_producing_project(self, hint_path: Path) -> Path | None:
        """Return the project most likely to build the binary at ``hint_path``."""
        start_dir = hint_path.parent
        if start_dir not in self._project_cache:
            found = locate_nearest_ancestor_file(
                start_dir, self.is_project_file, self.listing
            )
            if found is None:
                logger.debug("No producing project found for %s", hint_path)
            self._project_cache[start_dir] = found
        return self._project_cache[start_dir]

    def find_owning_solution(self, project_path: Path) -> Path | None:
        """Return the solution most likely to own the project at ``project_path``."""
        start_dir = project_path.parent
        if start_dir not in self._solution_cache:
            found = locate_nearest_ancestor_file(
                start_dir, self.is_solution_file, self.listing
            )
            if found is None:
                logger.debug("No owning solution found for %s", project_path)
            self._solution_cache[start_dir] = found
        return self._solution_cache[start_dir]
