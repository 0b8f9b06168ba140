"""Extraction of assembly reference hint paths from project files."""

import xml.etree.ElementTree as ET
from pathlib import Path

from sln_depends.errors import ArtifactLoadError, ArtifactParseError
from sln_depends.is_project_file import PROJECT_ROOT_ELEMENT, local_name

# Project/ItemGroup/Reference/HintPath, below the root element
HINT_PATH_CHAIN = ("ItemGroup", "Reference", "HintPath")


def read_project_hint_paths(path: Path) -> list[str]:
    """Return the raw HintPath strings of a project's references, in order.

    Framework (GAC) references carry no HintPath and never show up here.
    """
    try:
        root = ET.parse(path).getroot()
    except ET.ParseError as exc:
        raise ArtifactParseError(path, str(exc)) from exc
    except OSError as exc:
        raise ArtifactLoadError(path, str(exc)) from exc

    if local_name(root.tag) != PROJECT_ROOT_ELEMENT:
        return []

    hint_paths: list[str] = []
    for item_group in _children(root, HINT_PATH_CHAIN[0]):
        for reference in _children(item_group, HINT_PATH_CHAIN[1]):
            for hint in _children(reference, HINT_PATH_CHAIN[2]):
                text = (hint.text or "").strip()
                if text:
                    hint_paths.append(text)
    return hint_paths


def _children(elem: ET.Element, name: str) -> list[ET.Element]:
    """Return direct children matching ``name`` regardless of XML namespace."""
    return [child for child in elem if local_name(child.tag) == name]
