"""Dataclasses shared by the block parsing and page assembly pipeline."""

from __future__ import annotations

import dataclasses as dc

from styleguide_pages._constants import PAGE_SUFFIX


def output_file_name(category: str) -> str:
    """Return the page file name derived from ``category``.

    Examples
    --------
    >>> output_file_name("Form Controls")
    'form_controls.html'
    """
    return category.replace(" ", "_").lower() + PAGE_SUFFIX


@dc.dataclass(slots=True, frozen=True)
class BlockMeta:
    """Navigation record describing one block on a page.

    Attributes
    ----------
    name : str
        Unique block identifier, also used as the heading anchor.
    parent : str or None
        Name of the parent block, ``None`` for root blocks.
    category : str or None
        Category that names the page of a root block.
    title : str or None
        Heading text shown for the block.
    """

    name: str
    parent: str | None = None
    category: str | None = None
    title: str | None = None


@dc.dataclass(slots=True)
class DocumentBlock:
    """A single documentation unit extracted from one comment.

    Attributes
    ----------
    name : str or None
        Unique identifier; blocks without one are invalid.
    parent : str or None
        Name of the block this one nests under.
    category : str or None
        Category used to name the output page of a root block.
    title : str or None
        Heading text injected ahead of the markdown.
    markdown : str or None
        Markdown body; heading markup is prepended at insertion time.
    output_file : str or None
        Page file name, resolved only for root blocks.
    children : dict[str, DocumentBlock]
        Child blocks keyed by name.
    """

    name: str | None = None
    parent: str | None = None
    category: str | None = None
    title: str | None = None
    markdown: str | None = None
    output_file: str | None = None
    children: dict[str, DocumentBlock] = dc.field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        """Return ``True`` when the block has a name and a body, even an empty one."""
        return self.name is not None and self.markdown is not None

    @property
    def is_root(self) -> bool:
        """Return ``True`` when the block declares no parent."""
        return not self.parent

    def meta(self) -> BlockMeta:
        """Return the navigation record for this block."""
        return BlockMeta(
            name=self.name or "",
            parent=self.parent,
            category=self.category,
            title=self.title,
        )


@dc.dataclass(slots=True)
class Page:
    """Accumulated markdown and block metadata for one output file."""

    markdown: str = ""
    blocks: list[BlockMeta] = dc.field(default_factory=list)

    @property
    def title(self) -> str:
        """Return the category of the first block, or ``""`` without blocks."""
        if not self.blocks:
            return ""
        return self.blocks[0].category or ""

    def append(self, block: DocumentBlock) -> None:
        """Record ``block`` on this page in traversal order."""
        self.blocks.append(block.meta())
        self.markdown += block.markdown or ""


__all__ = ["BlockMeta", "DocumentBlock", "Page", "output_file_name"]
