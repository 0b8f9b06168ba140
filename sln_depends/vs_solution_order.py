"""Order Visual Studio solutions so dependencies are built first.

Scans directories for solutions, works out which solutions produce the binaries
that other solutions' projects reference, and writes the solutions in an order
where producers come before their consumers.
"""

import argparse
from pathlib import Path

from sln_depends.run_ordering import OUTPUT_FORMATTERS, run_ordering


def main(argv: list[str] | None = None) -> int:
    """Run the ordering process."""
    ap = argparse.ArgumentParser(
        description=(
            "Scans directories for Visual Studio solutions, then attempts to "
            "resolve their dependency solutions."
        ),
    )
    ap.add_argument(
        "-d",
        "--search-dir",
        action="append",
        required=True,
        type=Path,
        help="A root directory in which to search for solutions (repeatable)",
    )
    ap.add_argument(
        "-o",
        "--output-file",
        required=True,
        type=Path,
        help="Output file path",
    )
    ap.add_argument(
        "-f",
        "--output-format",
        choices=sorted(OUTPUT_FORMATTERS),
        default="flat",
        help="Dependency map output format (default: flat)",
    )
    ap.add_argument(
        "--output-format-flat-base-dir",
        type=Path,
        help="Make relative file paths using this directory as the base",
    )
    ap.add_argument(
        "--without-dependencies",
        action="store_true",
        help="Don't discover and load dependencies resolved from assembly references",
    )
    ap.add_argument(
        "--strict-order",
        action="store_true",
        help="Use a full topological sort and fail on dependency cycles",
    )
    ap.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Be verbose in the output (useful info, warnings, etc)",
    )
    ap.add_argument(
        "--log",
        help="Logs to a file; useful for troubleshooting",
    )
    ap.add_argument(
        "--config",
        help="Path to configuration file",
    )
    ap.add_argument(
        "--report",
        help="Write a JSON report of the resolved references to this file",
    )
    args = ap.parse_args(argv)
    return run_ordering(args)


if __name__ == "__main__":
    raise SystemExit(main())
