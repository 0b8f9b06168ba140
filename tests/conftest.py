"""Shared fixtures for on-disk solution trees."""

from pathlib import Path

import pytest

from tests.helpers import write_project, write_solution


@pytest.fixture
def solution_tree(tmp_path: Path) -> Path:
    """Build four solutions S1..S4 with projects P1..P8 on disk.

    S1/P1 uses binaries built by S2/P3 and S3/P5, S2/P3 uses S3/P5, S3/P6 uses
    S4/P7. P2 also references a NuGet package no project builds.
    """
    root = tmp_path / "repos"
    layout = {
        "s1": ("p1", "p2"),
        "s2": ("p3", "p4"),
        "s3": ("p5", "p6"),
        "s4": ("p7", "p8"),
    }
    hints = {
        "p1": [
            r"..\..\s2\p3\bin\$(Configuration)\p3.dll",
            r"..\..\s3\p5\bin\Debug\p5.dll",
        ],
        "p2": [r"..\..\packages\Newtonsoft.Json\lib\net45\Newtonsoft.Json.dll"],
        "p3": [r"..\..\s3\p5\bin\Release\p5.dll"],
        "p6": [r"..\..\s4\p7\bin\x86\Debug\p7.dll"],
    }
    for sln, projects in layout.items():
        write_solution(
            root / sln / f"{sln}.sln",
            [f"{p}\\{p}.csproj" for p in projects],
        )
        for p in projects:
            write_project(root / sln / p / f"{p}.csproj", hints.get(p, []))
    return root
