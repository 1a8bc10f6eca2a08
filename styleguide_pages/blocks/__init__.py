"""Extract, parse, and model documentation blocks from source comments."""

from .extractor import extract_comments
from .models import BlockMeta, DocumentBlock, Page, output_file_name
from .parser import parse_block, parse_header

__all__ = [
    "BlockMeta",
    "DocumentBlock",
    "Page",
    "extract_comments",
    "output_file_name",
    "parse_block",
    "parse_header",
]
