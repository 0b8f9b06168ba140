"""Helpers for turning raw path strings into canonical, comparable forms."""

import os
from pathlib import Path


def to_host_separators(raw: str) -> str:
    """Convert Windows path separators found in VS files to the host separator."""
    if os.sep == "/":
        return raw.replace("\\", "/")
    return raw


def normalize_path(raw: str | Path, base: str | Path | None = None) -> Path:
    """Make a path absolute against ``base`` and collapse ``.``/``..`` lexically.

    Symlinks are left alone, so this is safe for paths that do not exist yet
    (hint paths usually point at build output that was never built).
    """
    text = to_host_separators(str(raw))
    if base is not None and not os.path.isabs(text):
        text = os.path.join(str(base), text)
    return Path(os.path.normpath(os.path.abspath(text)))


def canonical_path(raw: str | Path, base: str | Path | None = None) -> Path:
    """Return the absolute path with symlinks and ``.``/``..`` resolved."""
    return Path(os.path.realpath(normalize_path(raw, base)))


def path_key(path: str | Path) -> str:
    """Return the registry key for a path.

    Two spellings of the same file map to the same key on the host platform
    (case folding applies where the platform folds case).
    """
    return os.path.normcase(str(canonical_path(path)))


def paths_equivalent(a: str | Path, b: str | Path) -> bool:
    """Check whether two paths denote the same filesystem entity."""
    if path_key(a) == path_key(b):
        return True
    try:
        return os.path.samefile(a, b)
    except OSError:
        return False
