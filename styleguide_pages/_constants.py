"""Common literal values used across styleguide_pages.

These constants keep file extensions, heading defaults, and reserved page
names centralized so the scanner, assembler, writer, and tests import the same
values without drifting. Intended for internal use within the package.

Examples
--------
>>> from styleguide_pages import _constants
>>> ".sass" in _constants.SUPPORTED_EXTENSIONS
True
>>> _constants.INDEX_PAGE
'index.html'
"""

SUPPORTED_EXTENSIONS = (
    ".css",
    ".scss",
    ".less",
    ".sass",
    ".styl",
    ".js",
    ".md",
    ".markdown",
)
MARKDOWN_EXTENSIONS = (".md", ".markdown")
LINE_COMMENT_EXTENSIONS = (".sass",)

DEFAULT_PARENT_HEADING_TAG = "h1"
DEFAULT_CHILD_HEADING_TAG = "h2"

PAGE_SUFFIX = ".html"
INDEX_PAGE = "index.html"

DEFAULT_CONFIG_FILENAME = "styleguide_config.yml"
HEADER_TEMPLATES = ("_header.html", "header.html")
FOOTER_TEMPLATES = ("_footer.html", "footer.html")
