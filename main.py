"""Main orchestration script for ordering Visual Studio solutions."""

import argparse
import subprocess
import sys
from collections.abc import Sequence
from pathlib import Path


def run_command(cmd_list: Sequence[str | Path], cwd: Path | str | None = None) -> None:
    """Run a command and exit if it fails."""
    cmd_str = " ".join(str(x) for x in cmd_list)
    print(f"Running: {cmd_str}")
    try:
        subprocess.run(cmd_list, check=True, cwd=cwd)
    except subprocess.CalledProcessError as e:
        print(f"Error executing command: {cmd_str}")
        sys.exit(e.returncode)


def main() -> None:
    """Run the solution ordering, optionally after development checks."""
    parser = argparse.ArgumentParser(
        description=(
            "Order Visual Studio solutions by dependency. Unrecognized arguments "
            "are passed through to sln_depends.vs_solution_order."
        )
    )
    parser.add_argument(
        "--dev",
        action="store_true",
        help="Run development checks (linting, tests) before ordering",
    )
    args, passthrough = parser.parse_known_args()

    root_dir = Path(__file__).parent

    if args.dev:
        print("--- Running Development Checks ---")
        run_command([sys.executable, str(root_dir / "dev.py"), "--ci"])
        print("\nDevelopment checks passed. Proceeding with solution ordering.\n")

    cmd = [sys.executable, "-m", "sln_depends.vs_solution_order", *passthrough]
    run_command(cmd, cwd=root_dir)


if __name__ == "__main__":
    main()
