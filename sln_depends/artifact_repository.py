"""Registry and loaders for solutions and projects."""

import logging
import os
from collections.abc import Callable
from pathlib import Path
from typing import Any

from sln_depends.canonical_path import canonical_path, normalize_path, path_key
from sln_depends.errors import SolutionDependsError
from sln_depends.is_project_file import has_project_extension, has_project_root_marker
from sln_depends.models import Project, Solution
from sln_depends.read_project_hint_paths import read_project_hint_paths
from sln_depends.read_solution_project_paths import read_solution_project_paths

logger = logging.getLogger(__name__)


class ArtifactRepository:
    """Loads solutions and projects, keeping one instance per file.

    A repository lives for one resolve-and-order run; create a fresh one per run.
    """

    def __init__(
        self,
        project_extensions: list[str],
        *,
        check_project_content: bool = True,
        read_solution: Callable[[Path], list[str]] = read_solution_project_paths,
        read_project: Callable[[Path], list[str]] = read_project_hint_paths,
    ) -> None:
        """Initialize empty registries and the raw-file readers."""
        self.project_extensions = [ext.lower() for ext in project_extensions]
        self.check_project_content = check_project_content
        self.read_solution = read_solution
        self.read_project = read_project
        self.solutions: dict[str, Solution] = {}
        self.projects: dict[str, Project] = {}

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "ArtifactRepository":
        """Create a repository using the configured project recognition rules."""
        return cls(
            config["project_extensions"],
            check_project_content=config.get("check_project_content", True),
        )

    def get_solution(self, path: Path) -> Solution | None:
        """Return the loaded solution for ``path``, if any."""
        return _lookup(self.solutions, path)

    def get_project(self, path: Path) -> Project | None:
        """Return the loaded project for ``path``, if any."""
        return _lookup(self.projects, path)

    def load_solution(self, path: Path) -> Solution:
        """Load a solution and, eagerly, every recognized member project.

        Raises ArtifactLoadError or ArtifactParseError; on failure nothing from
        this solution stays registered.
        """
        cached = self.get_solution(path)
        if cached is not None:
            return cached

        solution_path = canonical_path(path)
        project_paths = self.read_solution(solution_path)
        solution = Solution.from_path(solution_path)
        # Registered before its projects load, so a project reaching back to
        # its own solution finds this instance
        self.solutions[solution.key] = solution
        logger.info("Loading solution %s", solution_path)

        try:
            for relative_path in project_paths:
                project_path = normalize_path(relative_path, solution_path.parent)
                if not self._accepts_project(project_path):
                    continue
                solution.projects.append(self.load_project(project_path, solution))
        except SolutionDependsError:
            self._unregister(solution)
            raise

        return solution

    def load_project(self, path: Path, solution: Solution) -> Project:
        """Load a project and its assembly references.

        On a cache hit the first-seen owning solution is kept.
        """
        cached = self.get_project(path)
        if cached is not None:
            if cached.solution_key != solution.key:
                logger.debug(
                    "Project %s already belongs to %s; ignoring %s",
                    cached.path,
                    cached.solution_key,
                    solution.path,
                )
            return cached

        project_path = canonical_path(path)
        hint_paths = self.read_project(project_path)
        project = Project.from_path(project_path, solution)
        for raw_hint_path in hint_paths:
            project.add_reference(normalize_path(raw_hint_path, project_path.parent))

        self.projects[project.key] = project
        logger.debug(
            "Loaded project %s with %d reference(s)",
            project_path,
            len(project.references),
        )
        return project

    def _accepts_project(self, project_path: Path) -> bool:
        """Apply the existence, extension and content filters to a member path."""
        if not project_path.is_file():
            # e.g. virtual solution folders
            logger.debug("Skipping project path that is not a file: %s", project_path)
            return False
        if not has_project_extension(project_path, self.project_extensions):
            logger.debug("Skipping unrecognized project type %s", project_path)
            return False
        if self.check_project_content and not has_project_root_marker(project_path):
            logger.info("Skipping file without a <Project> root: %s", project_path)
            return False
        return True

    def _unregister(self, solution: Solution) -> None:
        """Drop a partially loaded solution and the projects it created."""
        self.solutions.pop(solution.key, None)
        for project in solution.projects:
            if project.solution_key == solution.key:
                self.projects.pop(project.key, None)


def _lookup(registry: dict[str, Any], path: Path) -> Any:
    """Find a registry entry by key, falling back to a same-file comparison."""
    key = path_key(path)
    if key in registry:
        return registry[key]
    if not os.path.exists(path):
        return None
    for entry in registry.values():
        try:
            if os.path.samefile(entry.path, path):
                return entry
        except OSError:
            continue
    return None
