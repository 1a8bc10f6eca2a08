"""Write assembled pages to disk between header and footer templates.

Header and footer templates are Jinja files taken from the documentation
assets directory. Both receive ``title`` (the page's first category),
``file_name`` (the page's output file), and ``blocks`` (the ordered
:class:`~styleguide_pages.blocks.BlockMeta` records used for navigation).
"""

from __future__ import annotations

import dataclasses as dc
import logging
import typing as typ

from jinja2 import Environment, FileSystemLoader, Template, select_autoescape

from styleguide_pages._constants import FOOTER_TEMPLATES, HEADER_TEMPLATES

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

    from styleguide_pages.blocks.models import Page

    from .renderer import MarkdownRenderer

log = logging.getLogger(__name__)


@dc.dataclass(slots=True)
class PageTemplates:
    """Optional header and footer templates wrapped around every page."""

    header: Template | None = None
    footer: Template | None = None

    def render_header(self, context: cabc.Mapping[str, typ.Any]) -> str:
        """Return the rendered header, or ``""`` when there is none."""
        return self.header.render(**context) if self.header else ""

    def render_footer(self, context: cabc.Mapping[str, typ.Any]) -> str:
        """Return the rendered footer, or ``""`` when there is none."""
        return self.footer.render(**context) if self.footer else ""


def _first_template(
    env: Environment, doc_assets: Path, candidates: cabc.Sequence[str]
) -> Template | None:
    for name in candidates:
        if (doc_assets / name).is_file():
            return env.get_template(name)
    return None


def load_page_templates(doc_assets: Path | None) -> PageTemplates:
    """Load ``_header.html`` and ``_footer.html`` from ``doc_assets``.

    Names without the leading underscore are accepted as a fallback. Missing
    templates are reported as warnings and rendered as empty strings.
    """
    header = footer = None
    if doc_assets is not None and doc_assets.is_dir():
        env = Environment(
            loader=FileSystemLoader(str(doc_assets)),
            autoescape=select_autoescape(["html", "xml"]),
        )
        header = _first_template(env, doc_assets, HEADER_TEMPLATES)
        footer = _first_template(env, doc_assets, FOOTER_TEMPLATES)
    if header is None:
        log.warning(
            "No _header.html found in documentation assets. Without this your "
            "css/header will not be included on the generated pages."
        )
    if footer is None:
        log.warning(
            "No _footer.html found in documentation assets. This might be okay "
            "to ignore..."
        )
    return PageTemplates(header=header, footer=footer)


class PageWriter:
    """Render each page's markdown and write it to the destination directory."""

    def __init__(
        self,
        destination: Path,
        renderer: MarkdownRenderer,
        templates: PageTemplates | None = None,
    ) -> None:
        self.destination = destination
        self.renderer = renderer
        self.templates = templates or PageTemplates()

    def render_page(self, file_name: str, page: Page) -> str:
        """Return the full HTML document for ``page``."""
        context = {
            "title": page.title,
            "file_name": file_name,
            "blocks": list(page.blocks),
        }
        return (
            self.templates.render_header(context)
            + self.renderer.render(page.markdown)
            + self.templates.render_footer(context)
        )

    def write(self, pages: cabc.Mapping[str, Page]) -> list[Path]:
        """Write every page and return the written paths in page order."""
        self.destination.mkdir(parents=True, exist_ok=True)
        written: list[Path] = []
        for file_name, page in pages.items():
            output_path = self.destination / file_name
            output_path.write_text(self.render_page(file_name, page), encoding="utf-8")
            written.append(output_path)
        return written


__all__ = ["PageTemplates", "PageWriter", "load_page_templates"]
