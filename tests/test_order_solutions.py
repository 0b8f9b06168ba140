"""Tests for ordering solutions by their resolved dependencies."""

import logging
from pathlib import Path

import pytest

from sln_depends.errors import OrderingError
from sln_depends.models import Project, Solution
from sln_depends.order_solutions import order_solutions


def make_solutions(
    names: list[str], deps: list[tuple[str, str]]
) -> list[Solution]:
    """Build one-project solutions, one reference per (consumer, producer) pair."""
    by_name: dict[str, Solution] = {}
    for name in names:
        solution = Solution(path=Path(f"/r/{name}/{name}.sln"), key=name)
        solution.projects.append(
            Project(
                path=Path(f"/r/{name}/{name}.csproj"),
                key=f"{name}.csproj",
                solution_key=name,
            )
        )
        by_name[name] = solution
    for consumer, producer in deps:
        project = by_name[consumer].projects[0]
        reference = project.add_reference(Path(f"/r/{producer}/bin/{producer}.dll"))
        reference.producer_key = f"{producer}.csproj"
    return [by_name[name] for name in names]


def keys(solutions: list[Solution]) -> list[str]:
    """Return the solution keys in order."""
    return [s.key for s in solutions]


def violations(order: list[str], deps: list[tuple[str, str]]) -> list[tuple[str, str]]:
    """List the dependency pairs whose producer comes after its consumer."""
    return [
        (consumer, producer)
        for consumer, producer in deps
        if consumer != producer and order.index(producer) > order.index(consumer)
    ]


CHAIN = [("S1", "S2"), ("S1", "S3"), ("S2", "S3"), ("S3", "S4")]


@pytest.mark.parametrize("strict", [False, True])
def test_dependency_chain(strict: bool) -> None:
    """Verify that S4 builds first and S1 last."""
    solutions = make_solutions(["S1", "S2", "S3", "S4"], CHAIN)
    ordered = order_solutions(solutions, strict=strict)
    assert keys(ordered) == ["S4", "S3", "S2", "S1"]


@pytest.mark.parametrize("strict", [False, True])
def test_empty_collection(strict: bool) -> None:
    """Verify that ordering nothing yields nothing."""
    assert order_solutions([], strict=strict) == []


@pytest.mark.parametrize("strict", [False, True])
def test_already_ordered_is_kept(strict: bool) -> None:
    """Verify that a valid order and independent solutions are left alone."""
    solutions = make_solutions(["A", "B", "X"], [("B", "A")])
    assert keys(order_solutions(solutions, strict=strict)) == ["A", "B", "X"]


@pytest.mark.parametrize("strict", [False, True])
def test_producer_moves_before_consumer(strict: bool) -> None:
    """Verify that a later producer is moved in front of its consumer."""
    solutions = make_solutions(["A", "B"], [("A", "B")])
    assert keys(order_solutions(solutions, strict=strict)) == ["B", "A"]


def test_input_list_is_not_modified() -> None:
    """Verify that a new list is returned and the input keeps its order."""
    solutions = make_solutions(["S1", "S2", "S3", "S4"], CHAIN)
    ordered = order_solutions(solutions)
    assert ordered is not solutions
    assert keys(solutions) == ["S1", "S2", "S3", "S4"]
    assert {id(s) for s in ordered} == {id(s) for s in solutions}


@pytest.mark.parametrize("strict", [False, True])
def test_references_within_one_solution_are_ignored(strict: bool) -> None:
    """Verify that a solution depending on itself does not move."""
    solutions = make_solutions(["A", "B"], [("B", "B"), ("A", "A")])
    assert keys(order_solutions(solutions, strict=strict)) == ["A", "B"]


def test_single_pass_can_leave_violations() -> None:
    """Verify the one-sweep limitation that strict ordering fixes."""
    deps = [("E", "C"), ("R", "Y"), ("C", "R")]
    solutions = make_solutions(["E", "R", "Y", "C"], deps)

    single = keys(order_solutions(solutions))
    strict = keys(order_solutions(solutions, strict=True))

    assert single == ["R", "C", "E", "Y"]
    assert violations(single, deps) == [("R", "Y")]
    assert strict == ["Y", "R", "C", "E"]
    assert violations(strict, deps) == []


def test_strict_order_is_stable() -> None:
    """Verify that unconstrained solutions keep their input order."""
    solutions = make_solutions(["A", "B", "C", "D"], [("A", "D")])
    assert keys(order_solutions(solutions, strict=True)) == ["B", "C", "D", "A"]


def test_cycle_single_pass_terminates() -> None:
    """Verify that a cycle still yields every solution exactly once."""
    solutions = make_solutions(["A", "B"], [("A", "B"), ("B", "A")])
    assert sorted(keys(order_solutions(solutions))) == ["A", "B"]


def test_cycle_strict_raises() -> None:
    """Verify that strict ordering reports the solutions on a cycle."""
    solutions = make_solutions(["A", "B", "C"], [("A", "B"), ("B", "A")])
    with pytest.raises(OrderingError, match=r"cycle among solutions: A\.sln, B\.sln"):
        order_solutions(solutions, strict=True)


@pytest.mark.parametrize("strict", [False, True])
def test_unresolved_reference_raises(
    strict: bool, caplog: pytest.LogCaptureFixture
) -> None:
    """Verify that ordering refuses a graph with an unresolved reference."""
    solutions = make_solutions(["A", "B"], [("A", "B")])
    solutions[1].projects[0].add_reference(Path("/r/ext/bin/Ext.dll"))

    with caplog.at_level(logging.ERROR), pytest.raises(OrderingError):
        order_solutions(solutions, strict=strict)

    assert "Solution: B.sln; Project: B.csproj; Hint path: Ext.dll" in caplog.text


def test_producer_outside_collection_raises() -> None:
    """Verify that a producer whose solution isn't being ordered is rejected."""
    solutions = make_solutions(["A", "B"], [("A", "B")])
    with pytest.raises(OrderingError, match="produced outside"):
        order_solutions(solutions[:1])
