"""Recognition of project files by extension and root element."""

import logging
import xml.etree.ElementTree as ET
from collections.abc import Callable, Iterable
from pathlib import Path

logger = logging.getLogger(__name__)

PROJECT_ROOT_ELEMENT = "Project"


def local_name(tag: str) -> str:
    """Strip an ``{namespace}`` prefix from an ElementTree tag."""
    return tag.rsplit("}", 1)[-1]


def has_project_extension(path: Path, extensions: Iterable[str]) -> bool:
    """Check the file extension against the recognized project extensions."""
    return path.suffix.lower() in {ext.lower() for ext in extensions}


def has_project_root_marker(path: Path) -> bool:
    """Check that the file is XML whose root element is ``<Project>``."""
    try:
        with open(path, "rb") as stream:
            for _event, elem in ET.iterparse(stream, events=("start",)):
                return local_name(elem.tag) == PROJECT_ROOT_ELEMENT
    except (ET.ParseError, OSError) as exc:
        logger.debug("Not a project file %s: %s", path, exc)
    return False


def make_project_file_predicate(
    extensions: Iterable[str], *, check_content: bool = True
) -> Callable[[Path], bool]:
    """Build the predicate used to recognize project files."""
    exts = frozenset(ext.lower() for ext in extensions)

    def is_project_file(path: Path) -> bool:
        """Return whether ``path`` looks like a recognized project file."""
        if not has_project_extension(path, exts):
            return False
        return not check_content or has_project_root_marker(path)

    return is_project_file
