r"""Locate documentation comments inside stylesheet and script sources.

Two conventions are recognized. Indented-syntax Sass files mark a block with a
``//doc`` line followed by lines indented by one space; every other supported
file type wraps the block in ``/*doc ... */``.

Example
-------
>>> from styleguide_pages.blocks.extractor import extract_comments
>>> extract_comments("/*doc\n---\nname: a\n---\nBody\n*/", ".css")
['\n---\nname: a\n---\nBody\n']
"""

from __future__ import annotations

import re

from styleguide_pages._constants import LINE_COMMENT_EXTENSIONS

BLOCK_COMMENT_PATTERN = re.compile(r"^\s*/\*doc(.*?)\*/", re.MULTILINE | re.DOTALL)
LINE_COMMENT_PATTERN = re.compile(r"\s*//doc\s*((?:(?: [^\n]*\n)|\n)+)")


def comment_pattern(extension: str) -> re.Pattern[str]:
    """Return the comment pattern used for files with ``extension``."""
    if extension.lower() in LINE_COMMENT_EXTENSIONS:
        return LINE_COMMENT_PATTERN
    return BLOCK_COMMENT_PATTERN


def extract_comments(text: str, extension: str) -> list[str]:
    """Return the inner text of every documentation comment in ``text``.

    Parameters
    ----------
    text : str
        Full contents of one source file.
    extension : str
        File extension including the leading dot (for example ``".scss"``).

    Returns
    -------
    list[str]
        Raw comment bodies in file order; empty when the file has none.
    """
    return [match.group(1) for match in comment_pattern(extension).finditer(text)]


__all__ = [
    "BLOCK_COMMENT_PATTERN",
    "LINE_COMMENT_PATTERN",
    "comment_pattern",
    "extract_comments",
]
