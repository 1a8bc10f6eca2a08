"""Utilities for rendering and writing style guide pages."""

from .renderer import HtmlContentRenderer, MarkdownRenderer
from .writer import PageTemplates, PageWriter, load_page_templates

__all__ = [
    "HtmlContentRenderer",
    "MarkdownRenderer",
    "PageTemplates",
    "PageWriter",
    "load_page_templates",
]
