"""Tests for Markdown rendering, link rewriting and outline collection."""

from __future__ import annotations

import typing as typ

import pytest
from bs4 import BeautifulSoup
from markdown import Markdown

from docsite.generator import HighlighterSession, HtmlContentRenderer
from docsite.generator.link_rewriter import ContentLinkTreeprocessor


@pytest.fixture
def renderer() -> typ.Iterator[HtmlContentRenderer]:
    with HighlighterSession() as session:
        yield HtmlContentRenderer(session)


@pytest.mark.parametrize(
    ("target", "expected"),
    [
        ("./setup.md", "/guide/setup/"),
        ("setup.md?tab=pip", "/guide/setup/?tab=pip"),
        ("../index.md#usage", "/#usage"),
        ("nested/index.md", "/guide/nested/"),
        ("../../outside.md", "/outside/"),
        ("#usage", None),
        ("/absolute.md", None),
        ("//cdn.example.com/a.md", None),
        ("https://example.com/readme.md", None),
        ("mailto:docs@example.com", None),
        ("diagram.png", None),
        ("", None),
    ],
)
def test_rewrite_relative_markdown_links(target: str, expected: str | None) -> None:
    processor = ContentLinkTreeprocessor(Markdown(), "guide")

    assert processor.rewrite(target) == expected


def test_markdown_renders_links_tables_and_code(renderer: HtmlContentRenderer) -> None:
    rendered = renderer.markdown(
        "See [setup](./setup.md).\n\n"
        "| a | b |\n|---|---|\n| 1 | 2 |\n\n"
        "```python[demo.py]\nprint('hi')\n```\n",
        base_dir="guide",
    )
    soup = BeautifulSoup(rendered.html, "html.parser")

    assert soup.find("a")["href"] == "/guide/setup/"
    assert soup.find("table") is not None
    assert soup.select_one("div > span").get_text() == "demo.py"


def test_markdown_collects_h2_and_h3_outline(renderer: HtmlContentRenderer) -> None:
    rendered = renderer.markdown("# Title\n\n## Usage\n\n### Details\n\n#### Deep\n")

    assert rendered.toc_items == [
        {"label": "Usage", "anchor": "usage", "level": 2},
        {"label": "Details", "anchor": "details", "level": 3},
    ]
    soup = BeautifulSoup(rendered.html, "html.parser")
    assert soup.find("h2")["id"] == "usage"


def test_blank_markdown_renders_nothing(renderer: HtmlContentRenderer) -> None:
    rendered = renderer.markdown("   \n")

    assert rendered.html == ""
    assert rendered.toc_items == []


def test_renderer_exposes_session_stylesheet(renderer: HtmlContentRenderer) -> None:
    assert renderer.stylesheet == renderer.session.stylesheet
