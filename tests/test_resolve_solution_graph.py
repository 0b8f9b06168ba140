"""Tests for discovering, loading and resolving a solution tree."""

from pathlib import Path

import pytest

from sln_depends.errors import SearchRootError, SolutionDependsError
from sln_depends.load_config import load_config
from sln_depends.resolve_solution_graph import (
    find_solution_files,
    resolve_solution_graph,
)
from tests.helpers import write_solution


@pytest.fixture
def broken_solutions(solution_tree: Path) -> list[Path]:
    """Add one undecodable solution and one with a malformed project."""
    undecodable = solution_tree / "bad_text" / "bad_text.sln"
    undecodable.parent.mkdir()
    undecodable.write_bytes(b"\xff\xfe\xfa not utf-8")

    malformed = write_solution(
        solution_tree / "bad_xml" / "bad_xml.sln", [r"bad\bad.csproj"]
    )
    (malformed.parent / "bad").mkdir()
    (malformed.parent / "bad" / "bad.csproj").write_text(
        "<Project><ItemGroup>", encoding="utf-8"
    )
    return [undecodable, malformed]


def test_resolve_solution_graph(solution_tree: Path) -> None:
    """Verify the counts gathered for the canonical tree."""
    graph = resolve_solution_graph(
        [solution_tree], load_config(), load_dependencies=True
    )

    assert sorted(s.path.name for s in graph.solutions) == [
        "s1.sln",
        "s2.sln",
        "s3.sln",
        "s4.sln",
    ]
    assert graph.project_count == 8
    assert graph.reference_count == 4
    assert graph.resolved == 4
    assert graph.unresolved_count == 0
    assert graph.removed_before == 1
    assert graph.removed_after == 0
    assert graph.failed == []


def test_failed_solutions_are_skipped_and_recorded(
    solution_tree: Path, broken_solutions: list[Path]
) -> None:
    """Verify that unloadable solutions don't stop the others from loading."""
    config = load_config()
    config["check_project_content"] = False

    graph = resolve_solution_graph([solution_tree], config, load_dependencies=True)

    assert sorted(p.name for p in graph.failed) == ["bad_text.sln", "bad_xml.sln"]
    assert sorted(s.path.name for s in graph.solutions) == [
        "s1.sln",
        "s2.sln",
        "s3.sln",
        "s4.sln",
    ]
    assert graph.unresolved_count == 0
    assert graph.repository.get_solution(broken_solutions[1]) is None


def test_no_solutions_found(tmp_path: Path) -> None:
    """Verify that a tree without solutions is an error."""
    with pytest.raises(SolutionDependsError, match="No solutions found."):
        resolve_solution_graph([tmp_path], load_config(), load_dependencies=True)


def test_find_solution_files_checks_every_root(solution_tree: Path) -> None:
    """Verify that each search root is searched and must exist."""
    found = find_solution_files(
        [solution_tree / "s1", solution_tree / "s4"], load_config()
    )
    assert [p.name for p in found] == ["s1.sln", "s4.sln"]

    with pytest.raises(SearchRootError):
        find_solution_files([solution_tree / "missing"], load_config())
