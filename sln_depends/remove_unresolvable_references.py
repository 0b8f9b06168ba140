"""Pruning of references that resolution can never satisfy."""

import logging

from sln_depends.models import AssemblyReference, Solution
from sln_depends.parent_locator import ParentLocator

logger = logging.getLogger(__name__)


def remove_unresolvable_references(
    solutions: list[Solution], locator: ParentLocator
) -> int:
    """Delete references with no producer, keeping the survivors' order.

    An unresolved reference survives only if resolution has not tried it yet and
    some producing project can still be found above its hint path. Returns the
    number of references removed.
    """
    removed = 0
    for solution in solutions:
        for project in solution.projects:
            kept = [r for r in project.references if _is_resolvable(r, locator)]
            dropped = len(project.references) - len(kept)
            if dropped:
                logger.debug(
                    "Removed %d unresolvable reference(s) from %s",
                    dropped,
                    project.path,
                )
                project.references[:] = kept
                removed += dropped
    return removed


def _is_resolvable(reference: AssemblyReference, locator: ParentLocator) -> bool:
    """Decide whether a reference is, or may still become, resolved."""
    if reference.is_resolved:
        return True
    if reference.attempted:
        return False
    return locator.find_producing_project(reference.hint_path) is not None
