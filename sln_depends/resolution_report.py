"""Logic for writing a JSON report of the resolved solution graph."""

import json
import time
from pathlib import Path
from typing import Any

from sln_depends.models import Solution


class ResolutionReport:
    """Collects resolution results and writes them as a JSON document."""

    def __init__(self, config_hash: str) -> None:
        """Initialize the report with metadata."""
        self.config_hash = config_hash
        self.solutions: list[Solution] = []
        self.ordered: list[Solution] | None = None
        self.removed = 0
        self.failed: list[Path] = []
        self.start_time = time.time()

    def add_solutions(self, solutions: list[Solution]) -> None:
        """Add the loaded solutions to the report."""
        self.solutions.extend(solutions)

    def set_order(self, ordered: list[Solution]) -> None:
        """Record the final solution order."""
        self.ordered = list(ordered)

    def generate_report(self, path: str) -> None:
        """Write the summary report to a JSON file."""
        report = {
            "meta": {
                "timestamp": time.time(),
                "duration": time.time() - self.start_time,
                "config_hash": self.config_hash,
                "total_solutions": len(self.solutions),
            },
            "solutions": [self._describe_solution(s) for s in self.solutions],
            "order": (
                [str(s.path) for s in self.ordered]
                if self.ordered is not None
                else None
            ),
            "failed": [str(p) for p in self.failed],
            "stats": self._compute_stats(),
        }

        Path(path).write_text(json.dumps(report, indent=2), encoding="utf-8")

    def _describe_solution(self, solution: Solution) -> dict[str, Any]:
        """Describe one solution with its projects and their references."""
        projects = {p.key: p for s in self.solutions for p in s.projects}
        return {
            "path": str(solution.path),
            "projects": [
                {
                    "path": str(p.path),
                    "references": [
                        {
                            "hint_path": str(r.hint_path),
                            "producer": _producer_path(projects, r.producer_key),
                        }
                        for r in p.references
                    ],
                }
                for p in solution.projects
            ],
        }

    def _compute_stats(self) -> dict[str, Any]:
        """Summarize reference resolution counts."""
        references = [
            r for s in self.solutions for p in s.projects for r in p.references
        ]
        resolved = sum(1 for r in references if r.is_resolved)
        return {
            "projects": sum(len(s.projects) for s in self.solutions),
            "references": len(references),
            "resolved": resolved,
            "unresolved": len(references) - resolved,
            "removed": self.removed,
            "failed": len(self.failed),
        }


def _producer_path(projects: dict[str, Any], producer_key: str | None) -> str | None:
    """Return the producing project's path for a reference, if resolved."""
    if producer_key is None:
        return None
    producer = projects.get(producer_key)
    return str(producer.path) if producer else producer_key
