"""Copy static assets and dependency directories next to the generated pages.

Copies are best effort: a failure is logged as a warning and the build
continues with the remaining entries.
"""

from __future__ import annotations

import logging
import shutil
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

log = logging.getLogger(__name__)


def _replace(source: Path, target: Path) -> None:
    """Copy ``source`` over ``target``, removing any previous copy first."""
    if target.is_dir() and not target.is_symlink():
        shutil.rmtree(target)
    elif target.exists() or target.is_symlink():
        target.unlink()
    if source.is_dir():
        shutil.copytree(source, target)
    else:
        shutil.copy2(source, target)


def copy_dependencies(
    dependencies: cabc.Iterable[Path], destination: Path
) -> list[Path]:
    """Copy each dependency directory to ``destination/<name>``.

    Returns the paths that were copied successfully.
    """
    copied: list[Path] = []
    for directory in dependencies:
        if not directory.is_dir():
            log.warning("Could not copy dependency: %s", directory)
            continue
        resolved = directory.resolve()
        target = destination / resolved.name
        try:
            _replace(resolved, target)
        except OSError as exc:
            log.warning("Could not copy dependency: %s (%s)", directory, exc)
            continue
        copied.append(target)
    return copied


def copy_doc_assets(doc_assets: Path, destination: Path) -> list[Path]:
    """Copy the entries of ``doc_assets`` into ``destination``.

    Entries whose names start with an underscore (such as ``_header.html``)
    are templates rather than assets and are not copied.
    """
    copied: list[Path] = []
    for entry in sorted(doc_assets.iterdir()):
        if entry.name.startswith("_"):
            continue
        target = destination / entry.name
        try:
            _replace(entry, target)
        except OSError as exc:
            log.warning("Could not copy documentation asset: %s (%s)", entry, exc)
            continue
        copied.append(target)
    return copied


__all__ = ["copy_dependencies", "copy_doc_assets"]
