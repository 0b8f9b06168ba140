"""Logic for rendering an ordered solution list as plain text."""

import os
from pathlib import Path

from sln_depends.models import Solution


def format_flat_list(solutions: list[Solution], base_dir: Path | None = None) -> str:
    """Render one solution path per line, optionally relative to ``base_dir``."""
    lines = []
    for solution in solutions:
        path = str(solution.path)
        if base_dir is not None:
            path = os.path.relpath(path, base_dir)
        lines.append(path)
    return "".join(f"{line}\n" for line in lines)
