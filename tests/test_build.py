"""End-to-end tests for style guide generation.

This module runs the full pipeline driven by
``styleguide_pages.builder.StyleguideBuilder`` against a temporary source tree
and documentation assets directory, then inspects the written HTML with
BeautifulSoup. It verifies that:

* Root and child blocks render on their category page with anchored headings,
  even when the child's file is scanned before the parent's.
* Header and footer templates wrap each page and receive the page title, file
  name, and ordered block metadata.
* Fenced code blocks are highlighted and tagged with ``data-language``.
* Standalone markdown files become their own pages.
* ``index.html`` mirrors the configured category page.
* Static assets are copied while underscore-prefixed templates are not.
* Fatal errors abort the ``build`` command with exit status 1.
"""

from __future__ import annotations

import logging
import typing as typ

import pytest
from bs4 import BeautifulSoup

from styleguide_pages.builder import StyleguideBuilder
from styleguide_pages.cli import build, init
from styleguide_pages.config import load_build_config
from styleguide_pages.errors import MissingCategoryError
from styleguide_pages.generator import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from pathlib import Path

HEADER_TEMPLATE = (
    "<header>{{ title }}|{{ file_name }}|"
    "{% for block in blocks %}{{ block.name }}:{{ block.parent or '' }},{% endfor %}"
    "</header>"
)
FOOTER_TEMPLATE = "<footer>{{ file_name }}</footer>"

PARENT_SOURCE = """
/*doc
---
name: a
title: Foo
category: Widgets
---
Hello

```css
.widget { color: red; }
```
*/
.widget { color: red; }
"""

CHILD_SOURCE = """
/*doc
---
name: b
parent: a
title: Bar
---
Child body
*/
"""


def _write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def project(tmp_path: Path) -> Path:
    """Create a source tree, assets, and config; return the config path."""
    _write(tmp_path / "src" / "a_child.css", CHILD_SOURCE)
    _write(tmp_path / "src" / "widgets" / "z_parent.scss", PARENT_SOURCE)
    _write(tmp_path / "src" / "intro.md", "# Intro\n\nWelcome.\n")
    _write(tmp_path / "doc_assets" / "_header.html", HEADER_TEMPLATE)
    _write(tmp_path / "doc_assets" / "_footer.html", FOOTER_TEMPLATE)
    _write(tmp_path / "doc_assets" / "_partial.html", "<p>partial</p>")
    _write(tmp_path / "doc_assets" / "style.css", "body { margin: 0; }\n")
    _write(tmp_path / "vendor" / "lib.js", "// vendored\n")
    return _write(
        tmp_path / "styleguide_config.yml",
        "source: ./src\n"
        "destination: ./docs\n"
        "documentation_assets: ./doc_assets\n"
        "index: widgets\n"
        "dependencies:\n"
        "  - ./vendor\n",
    )


@pytest.fixture
def written(project: Path) -> list[Path]:
    """Run the builder for the sample project and return the written pages."""
    return StyleguideBuilder(load_build_config(project)).run()


def _soup(path: Path) -> BeautifulSoup:
    return BeautifulSoup(path.read_text(encoding="utf-8"), "html.parser")


def test_expected_pages_are_written(written: list[Path]) -> None:
    """Category, markdown, and index pages are all generated."""
    assert sorted(path.name for path in written) == [
        "index.html",
        "intro.html",
        "widgets.html",
    ]


def test_parent_and_child_render_on_category_page(written: list[Path]) -> None:
    """The parent heading precedes the child heading on the category page."""
    page = next(path for path in written if path.name == "widgets.html")
    soup = _soup(page)
    parent = soup.find("h1", id="a")
    child = soup.find("h2", id="b")
    assert parent is not None, "expected the parent heading anchor"
    assert child is not None, "expected the child heading anchor"
    assert parent.get_text() == "Foo"
    assert child.get_text() == "Bar"
    text = soup.get_text()
    assert text.index("Hello") < text.index("Child body")


def test_header_and_footer_wrap_the_page(written: list[Path]) -> None:
    """Templates receive title, file name, and ordered block metadata."""
    page = next(path for path in written if path.name == "widgets.html")
    html = page.read_text(encoding="utf-8")
    assert html.startswith("<header>Widgets|widgets.html|a:,b:a,</header>")
    assert html.endswith("<footer>widgets.html</footer>")


def test_code_blocks_are_highlighted(written: list[Path]) -> None:
    """Fenced code inside a block becomes a codehilite div tagged with its language."""
    page = next(path for path in written if path.name == "widgets.html")
    blocks = _soup(page).select("div.codehilite")
    assert blocks, "expected a highlighted code block"
    assert blocks[0].get("data-language") == "css"
    assert ".widget" in blocks[0].get_text()


def test_markdown_file_becomes_its_own_page(written: list[Path]) -> None:
    """Standalone markdown renders verbatim with an empty title."""
    page = next(path for path in written if path.name == "intro.html")
    html = page.read_text(encoding="utf-8")
    assert html.startswith("<header>|intro.html|</header>")
    assert _soup(page).find("h1").get_text() == "Intro"


def test_index_mirrors_configured_category(written: list[Path]) -> None:
    """``index.html`` carries the same body as the index category page."""
    index = next(path for path in written if path.name == "index.html")
    soup = _soup(index)
    assert soup.find("h1", id="a").get_text() == "Foo"
    assert soup.find("header").get_text().startswith("Widgets|index.html|")


def test_assets_and_dependencies_are_copied(project: Path, written: list[Path]) -> None:
    """Non-template assets and dependency directories land in the destination."""
    docs = project.parent / "docs"
    assert (docs / "style.css").is_file()
    assert (docs / "vendor" / "lib.js").is_file()
    assert not (docs / "_header.html").exists()
    assert not (docs / "_partial.html").exists()


def test_missing_assets_are_warnings(
    tmp_path: Path, caplog: pytest.LogCaptureFixture
) -> None:
    """Builds without documentation assets succeed and log warnings."""
    _write(tmp_path / "src" / "a.css", PARENT_SOURCE)
    config_path = _write(
        tmp_path / "styleguide_config.yml",
        "source: src\ndestination: out\ndocumentation_assets: nowhere\n",
    )
    with caplog.at_level(logging.WARNING, logger="styleguide_pages"):
        written = StyleguideBuilder(load_build_config(config_path)).run()
    assert [path.name for path in written] == ["widgets.html"]
    assert "Could not find documentation assets" in caplog.text
    assert "No _header.html found" in caplog.text
    html = written[0].read_text(encoding="utf-8")
    assert html.lstrip().startswith("<h1")


def test_renderer_can_be_injected(project: Path) -> None:
    """A caller-supplied renderer replaces the default markdown engine."""

    class UpperRenderer:
        def render(self, text: str) -> str:
            return text.upper()

    config = load_build_config(project)
    written = StyleguideBuilder(config, renderer=UpperRenderer()).run()
    page = next(path for path in written if path.name == "widgets.html")
    assert "CHILD BODY" in page.read_text(encoding="utf-8")


def test_renderer_supports_tables() -> None:
    """The default renderer understands pipe tables and skips blank input."""
    renderer = HtmlContentRenderer()
    html = renderer.render("| a | b |\n|---|---|\n| 1 | 2 |\n")
    assert "<table>" in html
    assert renderer.render("   \n") == ""


def test_missing_category_aborts_build(tmp_path: Path) -> None:
    """A root block without a category is a fatal build error."""
    _write(tmp_path / "src" / "a.css", "/*doc\n---\nname: nocat\n---\nBody\n*/\n")
    config_path = _write(
        tmp_path / "styleguide_config.yml",
        "source: src\ndestination: out\ndocumentation_assets: assets\n",
    )
    with pytest.raises(MissingCategoryError, match="nocat"):
        StyleguideBuilder(load_build_config(config_path)).run()


def test_build_command_exits_non_zero_on_fatal_error(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """The CLI reports fatal errors on stderr and exits with status 1."""
    _write(tmp_path / "src" / "a.css", "/*doc\n---\nname: [oops\n---\nBody\n*/\n")
    config_path = _write(
        tmp_path / "styleguide_config.yml",
        "source: src\ndestination: out\ndocumentation_assets: assets\n",
    )
    with pytest.raises(SystemExit) as excinfo:
        build(config=config_path)
    assert excinfo.value.code == 1
    err = capsys.readouterr().err
    assert "Build not complete." in err
    assert "name: [oops" in err


def test_build_command_reports_written_files(
    project: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """A successful build lists each written page."""
    build(config=project)
    out = capsys.readouterr().out
    assert "widgets.html" in out
    assert "Build completed." in out


def test_init_scaffolds_config_and_assets(
    tmp_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    """``init`` writes a config and templates and never overwrites them."""
    init(directory=tmp_path)
    config_path = tmp_path / "styleguide_config.yml"
    assert config_path.is_file()
    assert (tmp_path / "doc_assets" / "_header.html").is_file()
    assert (tmp_path / "doc_assets" / "_footer.html").is_file()
    config = load_build_config(config_path)
    assert config.destination == tmp_path.resolve() / "docs"

    config_path.write_text("source: custom\n", encoding="utf-8")
    capsys.readouterr()
    init(directory=tmp_path)
    assert "Cowardly refusing to overwrite" in capsys.readouterr().out
    assert config_path.read_text(encoding="utf-8") == "source: custom\n"
