"""Cyclopts CLI entrypoint for building living style guides.

The ``styleguide`` console script defined here scaffolds a starter
configuration with ``styleguide init`` and renders the documentation comments
found in a source tree into HTML pages with ``styleguide build``. Warnings are
reported through :mod:`logging`; fatal build errors print a short diagnostic
and exit with status 1.

Examples
--------
Scaffold a config and assets in the current directory:

>>> from styleguide_pages.cli import app
>>> app(["init"])  # doctest: +SKIP

Build with an explicit configuration file:

>>> app(["build", "--config", "docs/styleguide_config.yml"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import shutil
import sys
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from ._constants import DEFAULT_CONFIG_FILENAME
from .builder import StyleguideBuilder
from .config import ConfigError, load_build_config
from .errors import StyleguideError

DEFAULT_CONFIG = Path(DEFAULT_CONFIG_FILENAME)
SCAFFOLD_DIR = Path(__file__).resolve().parent / "templates"

app = App(name="styleguide", config=cyclopts.config.Env("STYLEGUIDE_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _fail(exc: Exception) -> typ.NoReturn:
    """Report a fatal build error and exit with a non-zero status."""
    print("Build not complete.", file=sys.stderr)
    print(f" {exc}", file=sys.stderr)
    raise SystemExit(1) from exc


@app.command(help="Create a starter config file and documentation assets.")
def init(
    *,
    directory: typ.Annotated[
        Path, Parameter(help="Directory that receives the scaffold")
    ] = Path(),
) -> None:
    """Copy the bundled configuration and header/footer templates.

    Parameters
    ----------
    directory : Path, optional
        Target directory; defaults to the current working directory.

    Returns
    -------
    None
        Prints the created files, or a notice when a configuration file
        already exists (it is never overwritten).
    """
    config_path = directory / DEFAULT_CONFIG_FILENAME
    if config_path.exists():
        print(f"Cowardly refusing to overwrite existing {_format_path(config_path)}")
        return

    directory.mkdir(parents=True, exist_ok=True)
    shutil.copy2(SCAFFOLD_DIR / DEFAULT_CONFIG_FILENAME, config_path)
    assets_dir = directory / "doc_assets"
    shutil.copytree(SCAFFOLD_DIR / "doc_assets", assets_dir, dirs_exist_ok=True)
    print("Created the following files and directories:")
    print(f"  {_format_path(config_path)}")
    print(f"  {_format_path(assets_dir)}/")
    for entry in sorted(assets_dir.iterdir()):
        print(f"  {_format_path(entry)}")


@app.command(help="Build HTML style guide pages from documented sources.")
def build(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to the build config", env_var="STYLEGUIDE_CONFIG")
    ] = DEFAULT_CONFIG,
) -> None:
    """Build the style guide described by ``config``.

    Parameters
    ----------
    config : Path, optional
        Path to the YAML configuration file (overridable via
        ``STYLEGUIDE_CONFIG``).

    Returns
    -------
    None
        Writes the generated pages and logs the written paths.

    Raises
    ------
    SystemExit
        With status 1 when the configuration is invalid or the build hits a
        fatal error.
    """
    try:
        build_config = load_build_config(config)
        written = StyleguideBuilder(build_config).run()
    except (ConfigError, StyleguideError) as exc:
        _fail(exc)
    for path in written:
        print(f"wrote {_format_path(path)}")
    print("Build completed. (-:")


def main() -> None:
    """Invoke the Cyclopts application that powers the `styleguide` command.

    Configures :mod:`logging` so build warnings reach the terminal, then parses
    the command line and runs the requested subcommand.

    Examples
    --------
    >>> main()  # doctest: +SKIP
    """
    logging.basicConfig(level=logging.INFO, format="%(levelname)s: %(message)s")
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
