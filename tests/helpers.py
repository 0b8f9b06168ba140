"""Helpers for building fake and on-disk solution trees in tests."""

from collections.abc import Iterable
from pathlib import Path, PurePosixPath


CSHARP_TYPE_GUID = "FAE04EC0-301F-11D3-BF4B-00C04F79EFBC"
MSBUILD_NS = "http://schemas.microsoft.com/developer/msbuild/2003"


class FakeDirectoryListing:
    """In-memory DirectoryListing built from a list of file paths."""

    def __init__(self, files: Iterable[str], unreadable: Iterable[str] = ()) -> None:
        """Register every file and all of its ancestor directories.

        Listing a directory named in ``unreadable`` raises PermissionError.
        """
        self.files = {Path(PurePosixPath(f)) for f in files}
        self.dirs: set[Path] = set()
        for f in self.files:
            self.dirs.update(f.parents)
        self.unreadable = {Path(PurePosixPath(d)) for d in unreadable}

    def exists(self, path: Path) -> bool:
        """Return whether the path is a known file or directory."""
        return path in self.files or path in self.dirs

    def is_dir(self, path: Path) -> bool:
        """Return whether the path is a known directory."""
        return path in self.dirs

    def list_dir(self, path: Path) -> list[Path]:
        """Return direct children in reverse-lexical order."""
        if path in self.unreadable:
            raise PermissionError(13, "Permission denied", str(path))
        children = {p for p in self.files | self.dirs if p.parent == path and p != path}
        return sorted(children, reverse=True)


def write_solution(path: Path, project_paths: list[str]) -> Path:
    """Write a minimal .sln listing ``project_paths`` (relative, backslashed)."""
    lines = [
        "",
        "Microsoft Visual Studio Solution File, Format Version 12.00",
        "# Visual Studio 2013",
    ]
    for i, rel in enumerate(project_paths):
        guid = f"{i + 1:08X}-0000-0000-0000-000000000000"
        lines.append(
            f'Project("{{{CSHARP_TYPE_GUID}}}") = "Project{i}", "{rel}", "{{{guid}}}"'
        )
        lines.append("EndProject")
    lines.append("Global")
    lines.append("EndGlobal")
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("\r\n".join(lines) + "\r\n", encoding="utf-8-sig")
    return path


def write_project(
    path: Path, hint_paths: list[str], *, namespaced: bool = True
) -> Path:
    """Write a minimal MSBuild project with one Reference per hint path."""
    xmlns = f' xmlns="{MSBUILD_NS}"' if namespaced else ""
    refs = ['    <Reference Include="System" />']
    for i, hint in enumerate(hint_paths):
        refs.append(
            f'    <Reference Include="Lib{i}">\n'
            f"      <HintPath>{hint}</HintPath>\n"
            "    </Reference>"
        )
    body = "\n".join(refs)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(
        '<?xml version="1.0" encoding="utf-8"?>\n'
        f'<Project ToolsVersion="12.0"{xmlns}>\n'
        "  <ItemGroup>\n"
        f"{body}\n"
        "  </ItemGroup>\n"
        "</Project>\n",
        encoding="utf-8",
    )
    return path


