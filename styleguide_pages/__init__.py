"""Build living style guides from documentation comments in source files.

This package exposes the CLI entry points used by the ``styleguide`` console
script and the building blocks behind it: the build session that scans
sources and assembles pages, and the builder that renders and writes them.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.
- ``BuildSession``: Scan sources and fold documentation blocks into pages.
- ``StyleguideBuilder``: Run a full build from a ``BuildConfig``.

Examples
--------
>>> from styleguide_pages import BuildSession
>>> session = BuildSession()
>>> session.build_pages()
{}
"""

from __future__ import annotations

from .builder import StyleguideBuilder
from .cli import app, main
from .session import BuildSession

__all__ = ["BuildSession", "StyleguideBuilder", "app", "main"]
