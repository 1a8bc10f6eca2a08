"""Exceptions that abort a style guide build."""

from __future__ import annotations


class StyleguideError(RuntimeError):
    """Base class for fatal build errors."""


class HeaderParseError(StyleguideError):
    """Raised when a comment's metadata header is not a valid YAML mapping."""

    def __init__(self, header: str, reason: str = "Could not parse YAML") -> None:
        self.header = header
        super().__init__(f"{reason}:\n{header}")


class MissingCategoryError(StyleguideError):
    """Raised when a root block has no category to derive its page from."""

    def __init__(self, block_repr: str) -> None:
        self.block_repr = block_repr
        super().__init__(f"No output file specified. Missing category?\n{block_repr}")


class SourceDirectoryError(StyleguideError):
    """Raised when the source directory cannot be read."""


__all__ = [
    "HeaderParseError",
    "MissingCategoryError",
    "SourceDirectoryError",
    "StyleguideError",
]
