"""Orchestration logic for ordering the solutions found under search roots."""

import argparse
import logging
import sys
from collections.abc import Callable
from pathlib import Path

from sln_depends.compute_config_hash import compute_config_hash
from sln_depends.configure_logging import configure_logging
from sln_depends.describe_solutions import describe_solutions
from sln_depends.errors import OrderingError, SolutionDependsError
from sln_depends.format_flat_list import format_flat_list
from sln_depends.load_config import load_config
from sln_depends.models import Solution
from sln_depends.order_solutions import order_solutions
from sln_depends.resolution_report import ResolutionReport
from sln_depends.resolve_solution_graph import SolutionGraph, resolve_solution_graph

logger = logging.getLogger(__name__)


def _format_flat(solutions: list[Solution], args: argparse.Namespace) -> str:
    """Render the flat list, honoring ``--output-format-flat-base-dir``."""
    return format_flat_list(solutions, args.output_format_flat_base_dir)


# Output format name -> renderer of the ordered solutions
OUTPUT_FORMATTERS: dict[str, Callable[[list[Solution], argparse.Namespace], str]] = {
    "flat": _format_flat,
}


def run_ordering(args: argparse.Namespace) -> int:
    """Execute the full discover, resolve and order pipeline."""
    configure_logging(verbose=args.verbose, log_file=args.log)
    try:
        config = load_config(args.config)
        load_dependencies = (
            config["resolution"]["load_dependencies"] and not args.without_dependencies
        )
        strict = args.strict_order or config["ordering"]["strict"]

        graph = resolve_solution_graph(
            args.search_dir, config, load_dependencies=load_dependencies
        )
    except SolutionDependsError as exc:
        print(exc, file=sys.stderr)
        return 1

    if graph.failed:
        print(
            f"Skipped {len(graph.failed)} solution(s) that failed to load.",
            file=sys.stderr,
        )
    if args.verbose:
        print("\n".join(describe_solutions(graph.solutions)))

    report = None
    if args.report:
        report = ResolutionReport(compute_config_hash(config))
        report.add_solutions(graph.solutions)
        report.removed = graph.removed_before + graph.removed_after
        report.failed = list(graph.failed)

    status = _write_output(graph, args, strict=strict, report=report)

    if report is not None:
        report.generate_report(args.report)
    return status


def _write_output(
    graph: SolutionGraph,
    args: argparse.Namespace,
    *,
    strict: bool,
    report: ResolutionReport | None,
) -> int:
    """Order the solutions and write them in the requested format."""
    out_file: Path = args.output_file
    try:
        ordered = order_solutions(graph.solutions, strict=strict)
    except OrderingError as exc:
        logger.error("Failed to sort the solutions: %s", exc)
        print(
            f"{graph.unresolved_count} assembly reference(s) remain unresolved.",
            file=sys.stderr,
        )
        print("Failed to generate a formatted dependency map.", file=sys.stderr)
        # Don't leave results from an earlier run behind
        out_file.unlink(missing_ok=True)
        return 1

    if report is not None:
        report.set_order(ordered)

    text = OUTPUT_FORMATTERS[args.output_format](ordered, args)
    out_file.parent.mkdir(parents=True, exist_ok=True)
    out_file.write_text(text, encoding="utf-8")
    print(f"Wrote {len(ordered)} solution(s) to: {out_file}")
    return 0
