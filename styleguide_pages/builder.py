"""High-level orchestration for style guide generation.

This module wires the build stages together. :class:`StyleguideBuilder` takes a
:class:`~styleguide_pages.config.BuildConfig`, scans the source tree through a
:class:`~styleguide_pages.session.BuildSession`, writes every page with a
markdown renderer and the header/footer templates, and finally copies
dependency directories and documentation assets into the destination.

Example
-------
>>> from pathlib import Path
>>> from styleguide_pages.config import load_build_config
>>> from styleguide_pages.builder import StyleguideBuilder
>>> config = load_build_config(Path("styleguide_config.yml"))  # doctest: +SKIP
>>> StyleguideBuilder(config).run()  # doctest: +SKIP
[PosixPath('docs/base_css.html'), PosixPath('docs/index.html')]
"""

from __future__ import annotations

import logging
import typing as typ

from .assets import copy_dependencies, copy_doc_assets
from .generator import HtmlContentRenderer, PageWriter, load_page_templates
from .session import BuildSession

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .config import BuildConfig
    from .generator import MarkdownRenderer

log = logging.getLogger(__name__)


class StyleguideBuilder:
    """Scan sources and emit the rendered style guide pages."""

    def __init__(
        self, config: BuildConfig, *, renderer: MarkdownRenderer | None = None
    ) -> None:
        """Initialize the builder with configuration and a markdown renderer.

        Parameters
        ----------
        config : BuildConfig
            Resolved build configuration.
        renderer : MarkdownRenderer, optional
            Renderer used for page bodies; defaults to
            :class:`~styleguide_pages.generator.HtmlContentRenderer` configured
            with the config's Pygments style and markdown extensions.
        """
        self.config = config
        self.renderer = renderer or HtmlContentRenderer(
            config.pygments_style, extensions=config.markdown_extensions
        )
        self.session = BuildSession(
            parent_heading_tag=config.parent_heading_tag,
            child_heading_tag=config.child_heading_tag,
        )

    def run(self) -> list[Path]:
        """Build every page and copy assets into the destination.

        Returns
        -------
        list[Path]
            Paths of the written HTML pages.

        Raises
        ------
        StyleguideError
            Raised for fatal conditions: an unreadable source directory, a
            malformed metadata header, or a root block without a category.
        """
        destination = self.config.destination
        destination.mkdir(parents=True, exist_ok=True)
        doc_assets = self._resolve_doc_assets()

        self.session.process_directory(self.config.source)
        pages = self.session.build_pages(self.config.index)

        writer = PageWriter(destination, self.renderer, load_page_templates(doc_assets))
        written = writer.write(pages)

        copy_dependencies(self.config.dependencies, destination)
        if doc_assets is not None:
            copy_doc_assets(doc_assets, destination)
        return written

    def _resolve_doc_assets(self) -> Path | None:
        """Return the documentation assets directory, or ``None`` if missing."""
        doc_assets = self.config.documentation_assets
        if doc_assets.is_dir():
            return doc_assets.resolve()
        log.warning("Could not find documentation assets at %s", doc_assets)
        return None


__all__ = ["StyleguideBuilder"]
