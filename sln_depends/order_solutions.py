"""Linearization of solutions so that producers come before consumers."""

import logging

from sln_depends.errors import OrderingError
from sln_depends.models import Project, Solution

logger = logging.getLogger(__name__)


def order_solutions(
    solutions: list[Solution], *, strict: bool = False
) -> list[Solution]:
    """Return a new ordering of ``solutions`` honoring producer-before-consumer.

    The default is a single sweep over the input order that moves each
    dependency solution directly in front of its consumer when it sits later.
    That sweep can leave violations on deeper graphs; ``strict`` runs a stable
    topological sort instead and raises on cycles.

    Raises OrderingError if any reference is unresolved or is produced by a
    solution outside ``solutions``.
    """
    edges = _collect_edges(solutions)
    if strict:
        return _stable_topological_sort(solutions, edges)
    return _single_pass_sort(solutions, edges)


def _collect_edges(solutions: list[Solution]) -> list[tuple[str, str]]:
    """List (consumer solution key, producer solution key) pairs in sweep order."""
    projects: dict[str, Project] = {
        project.key: project for solution in solutions for project in solution.projects
    }
    known = {solution.key for solution in solutions}

    edges: list[tuple[str, str]] = []
    for solution in solutions:
        for project in solution.projects:
            for reference in project.references:
                if reference.producer_key is None:
                    logger.error(
                        "Can't sort because an assembly reference's producing "
                        "project is missing. Solution: %s; Project: %s; "
                        "Hint path: %s",
                        solution.path.name,
                        project.path.name,
                        reference.hint_path.name,
                    )
                    msg = (
                        f"Unresolved assembly reference {reference.hint_path} "
                        f"in project {project.path}"
                    )
                    raise OrderingError(msg)

                producer = projects.get(reference.producer_key)
                if producer is None or producer.solution_key not in known:
                    msg = (
                        f"Assembly reference {reference.hint_path} in project "
                        f"{project.path} is produced outside the given solutions"
                    )
                    raise OrderingError(msg)
                edges.append((solution.key, producer.solution_key))
    return edges


def _single_pass_sort(
    solutions: list[Solution], edges: list[tuple[str, str]]
) -> list[Solution]:
    """Move each producer in front of its consumer, in one sweep."""
    by_key = {solution.key: solution for solution in solutions}
    working = [solution.key for solution in solutions]
    for consumer_key, producer_key in edges:
        producer_pos = working.index(producer_key)
        consumer_pos = working.index(consumer_key)
        if producer_pos > consumer_pos:
            del working[producer_pos]
            working.insert(consumer_pos, producer_key)
    return [by_key[key] for key in working]


def _stable_topological_sort(
    solutions: list[Solution], edges: list[tuple[str, str]]
) -> list[Solution]:
    """Emit the earliest solution whose producers are all emitted, repeatedly."""
    producers: dict[str, set[str]] = {solution.key: set() for solution in solutions}
    for consumer_key, producer_key in edges:
        if consumer_key != producer_key:
            producers[consumer_key].add(producer_key)

    ordered: list[Solution] = []
    emitted: set[str] = set()
    remaining = list(solutions)
    while remaining:
        ready = next(
            (s for s in remaining if producers[s.key] <= emitted),
            None,
        )
        if ready is None:
            names = ", ".join(s.path.name for s in remaining)
            msg = f"Dependency cycle among solutions: {names}"
            raise OrderingError(msg)
        ordered.append(ready)
        emitted.add(ready.key)
        remaining.remove(ready)
    return ordered
