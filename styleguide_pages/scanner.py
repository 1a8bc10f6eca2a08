"""Walk a source tree and yield the files that may hold documentation.

Directories are visited in pre-order starting at the root, with sibling
directories sorted by name; files inside each directory are filtered by
extension and sorted lexicographically, so repeated scans of the same tree
always produce the same sequence.
"""

from __future__ import annotations

import dataclasses as dc
import os
import typing as typ
from pathlib import Path

from ._constants import MARKDOWN_EXTENSIONS, SUPPORTED_EXTENSIONS
from .errors import SourceDirectoryError

if typ.TYPE_CHECKING:
    import collections.abc as cabc


@dc.dataclass(slots=True, frozen=True)
class SourceFile:
    """A recognized file found while scanning the source tree."""

    path: Path
    extension: str

    @property
    def is_markdown(self) -> bool:
        """Return ``True`` for standalone markdown documents."""
        return self.extension in MARKDOWN_EXTENSIONS

    @property
    def page_name(self) -> str:
        """Return the page file name used for a standalone markdown document."""
        return f"{self.path.stem}.html"


def is_supported_file(name: str) -> bool:
    """Return ``True`` when ``name`` carries a recognized extension."""
    return Path(name).suffix in SUPPORTED_EXTENSIONS


def iter_source_directories(root: Path) -> cabc.Iterator[Path]:
    """Yield ``root`` and every descendant directory in sorted pre-order.

    Hidden directories (names starting with ``.``) and everything below them
    are skipped.

    Raises
    ------
    SourceDirectoryError
        If ``root`` does not exist or is not a directory.
    """
    if not root.is_dir():
        msg = f"Can not read source directory {root}, does it exist?"
        raise SourceDirectoryError(msg)

    def _on_error(exc: OSError) -> None:
        msg = f"Can not read source directory {exc.filename}: {exc.strerror}"
        raise SourceDirectoryError(msg) from exc

    for dirpath, dirnames, _filenames in os.walk(root, onerror=_on_error):
        dirnames[:] = sorted(name for name in dirnames if not name.startswith("."))
        yield Path(dirpath)


def list_source_files(directory: Path) -> list[SourceFile]:
    """Return the recognized files directly inside ``directory``, sorted by name."""
    try:
        entries = sorted(os.listdir(directory))
    except OSError as exc:
        msg = f"Can not read source directory {directory}: {exc.strerror}"
        raise SourceDirectoryError(msg) from exc
    files: list[SourceFile] = []
    for name in entries:
        path = directory / name
        if is_supported_file(name) and path.is_file():
            files.append(SourceFile(path=path, extension=path.suffix))
    return files


def scan_source_tree(root: Path) -> cabc.Iterator[SourceFile]:
    """Yield every recognized file below ``root`` in deterministic order.

    Parameters
    ----------
    root : Path
        Source directory to scan.

    Yields
    ------
    SourceFile
        Recognized files, directory by directory.

    Raises
    ------
    SourceDirectoryError
        If the root or one of its directories cannot be read.
    """
    for directory in iter_source_directories(root):
        yield from list_source_files(directory)


__all__ = [
    "SourceFile",
    "is_supported_file",
    "iter_source_directories",
    "list_source_files",
    "scan_source_tree",
]
