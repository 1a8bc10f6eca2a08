"""Fold the block hierarchy into output pages.

Blocks are visited in ascending name order at every level. A root block opens
(or extends) the page named by its ``output_file``; its descendants land on the
same page directly after it. Placeholders for parents that never appeared are
skipped together with everything attached to them.
"""

from __future__ import annotations

import logging
import typing as typ

from ._constants import INDEX_PAGE, PAGE_SUFFIX
from .blocks.models import Page, output_file_name
from .errors import StyleguideError

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from .blocks.models import DocumentBlock

log = logging.getLogger(__name__)


def fold_pages(
    blocks: cabc.Mapping[str, DocumentBlock],
    pages: dict[str, Page] | None = None,
    inherited_output_file: str | None = None,
) -> dict[str, Page]:
    """Append every block in ``blocks`` to the page it belongs to.

    Parameters
    ----------
    blocks : Mapping[str, DocumentBlock]
        Blocks keyed by name; either the top-level collection or one block's
        children.
    pages : dict[str, Page], optional
        Page map to extend in place; a new map is created when ``None``.
    inherited_output_file : str, optional
        Page of the nearest root ancestor, used by blocks without their own
        ``output_file``.

    Returns
    -------
    dict[str, Page]
        The page map, keyed by output file name.
    """
    if pages is None:
        pages = {}
    for _name, block in sorted(blocks.items()):
        if not block.is_valid:
            continue
        target = block.output_file or inherited_output_file
        if target is None:
            msg = f"Block {block.name!r} has no page to render on"
            raise StyleguideError(msg)
        page = pages.get(target)
        if page is None:
            page = pages[target] = Page()
        page.append(block)
        if block.children:
            fold_pages(block.children, pages, target)
    return pages


def alias_index_page(pages: dict[str, Page], category: str) -> bool:
    """Expose the page generated for ``category`` as ``index.html`` as well.

    The page is looked up as ``<category>.html`` verbatim, so markdown pages
    (``README`` → ``README.html``) can serve as the index. A category written
    the way it appears in block headers (``Base CSS``) falls back to the
    normalized root page name (``base_css.html``). The alias refers to the
    same :class:`Page` object. Returns ``False`` and logs a warning when no
    page was generated for the category.
    """
    page = pages.get(f"{category}{PAGE_SUFFIX}")
    if page is None:
        page = pages.get(output_file_name(category))
    if page is None:
        log.warning(
            "Could not generate %s, there was no content generated for the "
            "category %s.",
            INDEX_PAGE,
            category,
        )
        return False
    pages[INDEX_PAGE] = page
    return True


__all__ = ["alias_index_page", "fold_pages"]
