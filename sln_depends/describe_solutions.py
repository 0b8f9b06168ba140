"""Human-readable listing of the gathered solution graph."""

from sln_depends.models import Solution


def describe_solutions(solutions: list[Solution]) -> list[str]:
    """List solutions, their projects and each reference's resolution state."""
    lines = ["Information gathered so far:"]
    for solution in solutions:
        lines.append(f"  Solution: {solution.path.name}")
        for project in solution.projects:
            lines.append(f"    Project: {project.path.name}")
            for reference in project.references:
                name = reference.hint_path.name
                if reference.is_resolved:
                    lines.append(f"      Assembly reference: {name}")
                else:
                    lines.append(
                        "      Assembly reference's producing project couldn't be "
                        f"resolved: {name}"
                    )
    return lines
