"""Recognition of solution files."""

from collections.abc import Callable, Iterable
from pathlib import Path


def make_solution_file_predicate(extensions: Iterable[str]) -> Callable[[Path], bool]:
    """Build the predicate used to recognize solution files by extension."""
    exts = frozenset(ext.lower() for ext in extensions)
    return lambda path: path.suffix.lower() in exts
