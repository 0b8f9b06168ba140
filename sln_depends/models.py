"""Data models for solutions, projects and assembly references.

Entities refer to each other by registry key (the canonical path string), never
by holding the other object: a Project knows its owning solution's key and an
AssemblyReference knows its producer project's key.
"""

from dataclasses import dataclass, field
from pathlib import Path

from sln_depends.canonical_path import path_key


@dataclass(eq=False)
class Assembly:
    """The referenced binary.

    Its real location depends on build configuration and platform, so it stays
    an empty marker.
    """

    file_path: Path | None = None


@dataclass(eq=False)
class AssemblyReference:
    """A project's reference to a binary, identified by its hint path."""

    hint_path: Path
    consumer_key: str
    assembly: Assembly = field(default_factory=Assembly)
    producer_key: str | None = None
    # Set once resolution has tried this reference, successful or not
    attempted: bool = False

    @property
    def is_resolved(self) -> bool:
        """Whether a producing project has been found."""
        return self.producer_key is not None


@dataclass(eq=False)
class Project:
    """A buildable project and the references it declares."""

    path: Path
    key: str
    solution_key: str
    references: list[AssemblyReference] = field(default_factory=list)

    @classmethod
    def from_path(cls, path: Path, solution: "Solution") -> "Project":
        """Create a project owned by ``solution``."""
        return cls(path=path, key=path_key(path), solution_key=solution.key)

    def add_reference(self, hint_path: Path) -> AssemblyReference:
        """Append an unresolved reference to ``hint_path``."""
        reference = AssemblyReference(hint_path=hint_path, consumer_key=self.key)
        self.references.append(reference)
        return reference


@dataclass(eq=False)
class Solution:
    """A solution file and its member projects in discovery order."""

    path: Path
    key: str
    projects: list[Project] = field(default_factory=list)

    @classmethod
    def from_path(cls, path: Path) -> "Solution":
        """Create an empty solution for ``path``."""
        return cls(path=path, key=path_key(path))
