"""Discovery, loading and resolution of the solutions under a set of roots."""

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any

from sln_depends.artifact_repository import ArtifactRepository
from sln_depends.canonical_path import canonical_path
from sln_depends.errors import SolutionDependsError
from sln_depends.find_files import find_files
from sln_depends.is_solution_file import make_solution_file_predicate
from sln_depends.models import Solution
from sln_depends.parent_locator import ParentLocator
from sln_depends.remove_unresolvable_references import remove_unresolvable_references
from sln_depends.resolve_references import resolve_references

logger = logging.getLogger(__name__)


@dataclass
class SolutionGraph:
    """Solutions with their references resolved, ready for ordering."""

    solutions: list[Solution]
    repository: ArtifactRepository
    removed_before: int = 0
    resolved: int = 0
    removed_after: int = 0
    failed: list[Path] = field(default_factory=list)

    @property
    def project_count(self) -> int:
        """Number of project entries across all solutions."""
        return sum(len(s.projects) for s in self.solutions)

    @property
    def reference_count(self) -> int:
        """Number of surviving assembly references."""
        return sum(len(p.references) for s in self.solutions for p in s.projects)

    @property
    def unresolved_count(self) -> int:
        """Number of surviving references without a producer."""
        return sum(
            1
            for s in self.solutions
            for p in s.projects
            for r in p.references
            if not r.is_resolved
        )


def find_solution_files(search_dirs: list[Path], config: dict[str, Any]) -> list[Path]:
    """Find every solution file below each search root, root by root."""
    predicate = make_solution_file_predicate(config["solution_extensions"])
    solution_files: list[Path] = []
    for search_dir in search_dirs:
        root = canonical_path(search_dir)
        solution_files.extend(find_files(root, recursive=True, predicate=predicate))
    return solution_files


def resolve_solution_graph(
    search_dirs: list[Path],
    config: dict[str, Any],
    *,
    load_dependencies: bool,
) -> SolutionGraph:
    """Load every solution under ``search_dirs`` and resolve its references.

    Solutions that fail to load are logged and skipped. Raises
    SolutionDependsError if no solution is found at all.
    """
    solution_files = find_solution_files(search_dirs, config)
    if not solution_files:
        msg = "No solutions found."
        raise SolutionDependsError(msg)

    repository = ArtifactRepository.from_config(config)
    locator = ParentLocator.from_config(config)
    graph = SolutionGraph(solutions=[], repository=repository)

    for solution_file in solution_files:
        try:
            solution = repository.load_solution(solution_file)
        except SolutionDependsError as exc:
            logger.error("Skipping solution: %s", exc)
            graph.failed.append(solution_file)
            continue
        if solution not in graph.solutions:
            graph.solutions.append(solution)

    # Prune first so resolution doesn't waste time on framework references
    graph.removed_before = remove_unresolvable_references(graph.solutions, locator)
    graph.resolved = resolve_references(
        graph.solutions, repository, locator, load_dependencies=load_dependencies
    )
    graph.removed_after = remove_unresolvable_references(graph.solutions, locator)

    logger.info(
        "Loaded %d solution(s), %d project(s); %d reference(s) kept "
        "(%d resolved, %d unresolved), %d removed; %d solution(s) failed to load",
        len(graph.solutions),
        graph.project_count,
        graph.reference_count,
        graph.resolved,
        graph.unresolved_count,
        graph.removed_before + graph.removed_after,
        len(graph.failed),
    )
    return graph
