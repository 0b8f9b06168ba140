"""Exception types raised by solution discovery, loading and ordering."""

from pathlib import Path


class SolutionDependsError(Exception):
    """Base exception for all application-specific errors."""


class SearchRootError(SolutionDependsError):
    """Raised when a search root is missing or is not a directory."""

    def __init__(self, path: str | Path, reason: str) -> None:
        """Record the offending root and why it cannot be searched."""
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Unable to search in {self.path}: {reason}")


class ArtifactLoadError(SolutionDependsError):
    """Raised when a solution or project file cannot be read."""

    def __init__(self, path: str | Path, reason: str) -> None:
        """Record the unreadable file and the underlying error."""
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to read from file {self.path}: {reason}")


class ArtifactParseError(SolutionDependsError):
    """Raised when a project file is not well-formed XML."""

    def __init__(self, path: str | Path, reason: str) -> None:
        """Record the malformed file and the parser message."""
        self.path = Path(path)
        self.reason = reason
        super().__init__(f"Failed to parse {self.path}: {reason}")


class OrderingError(SolutionDependsError):
    """Raised when a solution collection cannot be ordered."""


class ConfigError(SolutionDependsError):
    """Raised for configuration-related problems."""
