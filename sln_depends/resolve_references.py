"""Resolution of assembly references to their producing projects."""

import logging

from sln_depends.artifact_repository import ArtifactRepository
from sln_depends.canonical_path import paths_equivalent
from sln_depends.models import AssemblyReference, Project, Solution
from sln_depends.parent_locator import ParentLocator

logger = logging.getLogger(__name__)


def resolve_references(
    solutions: list[Solution],
    repository: ArtifactRepository,
    locator: ParentLocator,
    *,
    load_dependencies: bool,
) -> int:
    """Link every unresolved reference to the project that produces it.

    A producer only counts when its owning solution is in ``solutions``. With
    ``load_dependencies`` an owning solution that is missing gets loaded and
    appended to ``solutions``; appended solutions are visited later in the same
    sweep. Already-resolved references are left untouched. Returns the number
    of references resolved by this call.
    """
    resolved = 0
    index = 0
    while index < len(solutions):
        solution = solutions[index]
        index += 1
        for project in solution.projects:
            for reference in project.references:
                if reference.is_resolved:
                    continue
                reference.attempted = True
                producer = _find_producer(
                    reference, solutions, repository, locator, load_dependencies
                )
                if producer is None:
                    continue
                reference.producer_key = producer.key
                resolved += 1

    logger.info("Resolved %d assembly reference(s)", resolved)
    return resolved


def _find_producer(
    reference: AssemblyReference,
    solutions: list[Solution],
    repository: ArtifactRepository,
    locator: ParentLocator,
    load_dependencies: bool,
) -> Project | None:
    """Find the loaded project that produces the referenced binary."""
    producer_path = locator.find_producing_project(reference.hint_path)
    if producer_path is None:
        return None

    owner_path = locator.find_owning_solution(producer_path)
    if owner_path is None:
        logger.debug("Producer %s has no owning solution", producer_path)
        return None

    owner = next((s for s in solutions if paths_equivalent(s.path, owner_path)), None)
    if owner is None:
        if not load_dependencies:
            logger.debug("Solution %s is not loaded; skipping", owner_path)
            return None
        logger.info("Loading dependency solution %s", owner_path)
        owner = repository.load_solution(owner_path)
        solutions.append(owner)

    producer = next(
        (p for p in owner.projects if paths_equivalent(p.path, producer_path)), None
    )
    if producer is None:
        logger.debug("Project %s is not part of %s", producer_path, owner.path)
    return producer
