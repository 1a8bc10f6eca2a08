r"""Turn raw documentation comments into :class:`DocumentBlock` values.

Each comment opens with a YAML metadata header fenced by ``---`` lines. The
header supplies the block's ``name`` plus optional ``parent``, ``category``,
and ``title``; everything outside the header is the block's markdown.

Example
-------
>>> from styleguide_pages.blocks.parser import parse_block
>>> block = parse_block("\n---\nname: buttons\ncategory: Base CSS\n---\nBody\n")
>>> block.name, block.category, block.markdown
('buttons', 'Base CSS', '\nBody\n')
"""

from __future__ import annotations

import logging
import re
import typing as typ

from ruamel.yaml import YAML
from ruamel.yaml.error import YAMLError

from styleguide_pages.errors import HeaderParseError

from .models import DocumentBlock

HEADER_PATTERN = re.compile(r"^\s*---\s(.*?)\s---$", re.MULTILINE | re.DOTALL)

log = logging.getLogger(__name__)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def parse_header(header: str) -> dict[str, typ.Any]:
    """Parse the YAML between the ``---`` fences into a mapping.

    Raises
    ------
    HeaderParseError
        If the YAML is malformed or does not describe a mapping.
    """
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    try:
        loaded = loader.load(header)
    except YAMLError as exc:
        raise HeaderParseError(header) from exc
    if loaded is None:
        return {}
    if not isinstance(loaded, dict):
        raise HeaderParseError(header, "Metadata header must be a mapping")
    return dict(loaded)


def parse_block(comment: str) -> DocumentBlock | None:
    """Build a block from one raw comment body.

    Parameters
    ----------
    comment : str
        Inner text of a documentation comment as returned by the extractor.

    Returns
    -------
    DocumentBlock or None
        The parsed block, or ``None`` when the comment has no metadata header
        or the header lacks a ``name``.

    Raises
    ------
    HeaderParseError
        If the metadata header cannot be parsed.
    """
    match = HEADER_PATTERN.search(comment)
    if match is None:
        return None
    config = parse_header(match.group(1))
    markdown = comment[: match.start()] + comment[match.end() :]

    name = _optional_str(config.get("name"))
    if name is None:
        log.warning(
            "Missing required name config value. This comment will be skipped.\n %r",
            config,
        )
        return None
    return DocumentBlock(
        name=name,
        parent=_optional_str(config.get("parent")),
        category=_optional_str(config.get("category")),
        title=_optional_str(config.get("title")),
        markdown=markdown,
    )


__all__ = ["HEADER_PATTERN", "parse_block", "parse_header"]
