"""Extraction of member project paths from solution files."""

import re
from pathlib import Path

from sln_depends.canonical_path import to_host_separators
from sln_depends.errors import ArtifactLoadError

_GUID = r"\{[A-F0-9]{8}-[A-F0-9]{4}-[A-F0-9]{4}-[A-F0-9]{4}-[A-F0-9]{12}\}"

# Project("{TYPE-GUID}") = "Name", "Path\To\Project.csproj", "{PROJECT-GUID}"
PROJECT_LINE_RE = re.compile(
    rf'^Project\("{_GUID}"\)\s*=\s*"[^"]+"\s*,\s*"([^"]+)"\s*,\s*"{_GUID}"\s*$',
    re.IGNORECASE | re.MULTILINE,
)


def read_solution_project_paths(path: Path) -> list[str]:
    """Return the project paths listed in a solution, in file order.

    Paths are relative to the solution directory; duplicates are kept.
    """
    try:
        content = path.read_text(encoding="utf-8-sig")
    except (OSError, UnicodeDecodeError) as exc:
        raise ArtifactLoadError(path, str(exc)) from exc
    return [
        to_host_separators(match.group(1))
        for match in PROJECT_LINE_RE.finditer(content)
    ]
