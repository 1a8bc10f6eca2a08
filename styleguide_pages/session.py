"""State for one style guide build, threaded through every pipeline stage.

A :class:`BuildSession` owns the block hierarchy and the page map. Sources are
fed in through :meth:`BuildSession.process_directory` (or the finer-grained
``process_*`` methods) and :meth:`BuildSession.build_pages` folds the result
into pages ready for the writer.

Example
-------
>>> session = BuildSession()
>>> session.process_comment("\\n---\\nname: a\\ncategory: Base\\n---\\nHi\\n")
>>> sorted(session.build_pages())
['base.html']
"""

from __future__ import annotations

import logging
import typing as typ

from ._constants import DEFAULT_CHILD_HEADING_TAG, DEFAULT_PARENT_HEADING_TAG
from .assembler import BlockCollection
from .blocks import Page, extract_comments, parse_block
from .errors import SourceDirectoryError
from .pages import alias_index_page, fold_pages
from .scanner import scan_source_tree

if typ.TYPE_CHECKING:
    from pathlib import Path

    from .scanner import SourceFile

log = logging.getLogger(__name__)


class BuildSession:
    """Collect blocks from source files and assemble them into pages."""

    def __init__(
        self,
        *,
        parent_heading_tag: str = DEFAULT_PARENT_HEADING_TAG,
        child_heading_tag: str = DEFAULT_CHILD_HEADING_TAG,
    ) -> None:
        self.collection = BlockCollection(
            parent_heading_tag=parent_heading_tag,
            child_heading_tag=child_heading_tag,
        )
        self.markdown_pages: dict[str, Page] = {}

    def process_directory(self, root: Path) -> None:
        """Scan ``root`` recursively and process every recognized file."""
        for source in scan_source_tree(root):
            self.process_file(source)

    def process_file(self, source: SourceFile) -> None:
        """Register a markdown page or extract the blocks of one source file."""
        try:
            text = source.path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            msg = f"Can not read source file {source.path}: {exc}"
            raise SourceDirectoryError(msg) from exc
        if source.is_markdown:
            self.markdown_pages[source.page_name] = Page(markdown=text)
            return
        for comment in extract_comments(text, source.extension):
            self.process_comment(comment)

    def process_comment(self, comment: str) -> None:
        """Parse one raw comment and insert the resulting block, if any."""
        block = parse_block(comment)
        if block is not None:
            self.collection.insert(block)

    def build_pages(self, index: str | None = None) -> dict[str, Page]:
        """Fold the collected blocks into pages and apply the index alias.

        Parameters
        ----------
        index : str, optional
            Category whose page should also be published as ``index.html``.

        Returns
        -------
        dict[str, Page]
            Pages keyed by output file name, including standalone markdown
            documents registered during scanning. Each call starts from a
            fresh map, so repeated calls return equal pages.
        """
        for name in self.collection.unresolved_parents():
            orphans = ", ".join(sorted(self.collection[name].children))
            log.warning(
                "Parent block %r was never defined; skipping its children: %s",
                name,
                orphans,
            )
        pages = {
            name: Page(markdown=page.markdown)
            for name, page in self.markdown_pages.items()
        }
        fold_pages(self.collection.blocks, pages)
        if index:
            alias_index_page(pages, index)
        return pages


__all__ = ["BuildSession"]
