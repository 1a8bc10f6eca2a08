"""Link parsed documentation blocks into a parent/child hierarchy.

Root blocks (no ``parent``) live in the top-level collection keyed by name and
resolve the page they anchor from their category. Child blocks are stored in
their parent's ``children`` mapping. Because files are scanned in path order a
child may be seen before its parent; a placeholder entry then holds the child
until the real parent arrives and adopts the placeholder's children.

Example
-------
>>> from styleguide_pages.assembler import BlockCollection
>>> from styleguide_pages.blocks import DocumentBlock
>>> collection = BlockCollection()
>>> collection.insert(DocumentBlock(name="b", parent="a", title="B", markdown="x"))
>>> collection.insert(DocumentBlock(name="a", category="Base", markdown="y"))
>>> sorted(collection["a"].children)
['b']
"""

from __future__ import annotations

import typing as typ

from ._constants import DEFAULT_CHILD_HEADING_TAG, DEFAULT_PARENT_HEADING_TAG
from .blocks.models import DocumentBlock, output_file_name
from .errors import MissingCategoryError

if typ.TYPE_CHECKING:
    import collections.abc as cabc


def heading_markup(tag: str, name: str, title: str | None) -> str:
    """Return the anchored heading prepended to a block's markdown."""
    return f'\n\n<{tag} id="{name}">{title or ""}</{tag}>'


class BlockCollection:
    """Top-level blocks keyed by name, plus placeholders for unseen parents."""

    def __init__(
        self,
        *,
        parent_heading_tag: str = DEFAULT_PARENT_HEADING_TAG,
        child_heading_tag: str = DEFAULT_CHILD_HEADING_TAG,
    ) -> None:
        self.parent_heading_tag = parent_heading_tag
        self.child_heading_tag = child_heading_tag
        self.blocks: dict[str, DocumentBlock] = {}

    def __getitem__(self, name: str) -> DocumentBlock:
        return self.blocks[name]

    def __contains__(self, name: object) -> bool:
        return name in self.blocks

    def __len__(self) -> int:
        return len(self.blocks)

    def __iter__(self) -> cabc.Iterator[str]:
        return iter(self.blocks)

    def insert(self, block: DocumentBlock) -> None:
        """Add ``block`` to the hierarchy.

        Invalid blocks are ignored. Root blocks replace any entry of the same
        name while keeping the children already attached to it; child blocks
        attach to their parent, which is created as a placeholder when it has
        not been seen yet.

        Raises
        ------
        MissingCategoryError
            If a root block has no category.
        """
        if not block.is_valid:
            return
        if block.is_root:
            self._insert_root(block)
        else:
            self._insert_child(block)

    def unresolved_parents(self) -> list[str]:
        """Return the names of placeholders that no real block has replaced."""
        return sorted(
            name
            for name, block in self.blocks.items()
            if not block.is_valid and block.children
        )

    def _insert_root(self, block: DocumentBlock) -> None:
        name = typ.cast("str", block.name)
        if not block.category:
            raise MissingCategoryError(repr(block))
        block.output_file = output_file_name(block.category)

        existing = self.blocks.get(name)
        if existing is not None:
            existing.children.update(block.children)
            block.children = existing.children
        self.blocks[name] = block
        block.markdown = (
            heading_markup(self.parent_heading_tag, name, block.title)
            + (block.markdown or "")
        )

    def _insert_child(self, block: DocumentBlock) -> None:
        name = typ.cast("str", block.name)
        parent_name = typ.cast("str", block.parent)
        parent = self.blocks.get(parent_name)
        if parent is None:
            parent = DocumentBlock()
            self.blocks[parent_name] = parent
        if block.title:
            block.markdown = (
                heading_markup(self.child_heading_tag, name, block.title)
                + (block.markdown or "")
            )
        parent.children[name] = block


__all__ = ["BlockCollection", "heading_markup"]
