"""Typed dataclasses describing a style guide build configuration."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from styleguide_pages._constants import (
    DEFAULT_CHILD_HEADING_TAG,
    DEFAULT_PARENT_HEADING_TAG,
)


class ConfigError(ValueError):
    """Raised when the build configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class BuildConfig:
    """A fully resolved build definition sourced from YAML config.

    Attributes
    ----------
    source : Path
        Directory scanned for documentation comments.
    destination : Path
        Directory receiving the generated HTML pages.
    documentation_assets : Path
        Directory holding ``_header.html``/``_footer.html`` and static assets.
    index : str or None
        Category whose page is also published as ``index.html``.
    parent_heading_tag : str
        Tag wrapping the heading of root blocks.
    child_heading_tag : str
        Tag wrapping the heading of child blocks.
    dependencies : list[Path]
        Extra directories copied verbatim into the destination.
    markdown_extensions : list[str]
        Python-Markdown extensions loaded in addition to the defaults.
    pygments_style : str
        Pygments style used for highlighted code blocks.
    """

    source: Path
    destination: Path
    documentation_assets: Path
    index: str | None = None
    parent_heading_tag: str = DEFAULT_PARENT_HEADING_TAG
    child_heading_tag: str = DEFAULT_CHILD_HEADING_TAG
    dependencies: list[Path] = dc.field(default_factory=list)
    markdown_extensions: list[str] = dc.field(default_factory=list)
    pygments_style: str = "monokai"


__all__ = ["BuildConfig", "ConfigError"]
