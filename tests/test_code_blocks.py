"""Tests for fence info parsing and the Markdown code-block extension."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup
from markdown import Markdown

from docsite.generator import (
    CodeBlockExtension,
    FenceInfo,
    HighlighterSession,
    parse_fence_info,
)


@pytest.mark.parametrize(
    ("info", "expected"),
    [
        ("js", FenceInfo("js", None)),
        ("js[app.js]", FenceInfo("js", "app.js")),
        ("js{1,3}[app.js]", FenceInfo("js", "app.js")),
        ("js [app.js]", FenceInfo("js", "app.js")),
        ("rust,no_run", FenceInfo("rust", None)),
        ("  python  ", FenceInfo("python", None)),
        ("[notes.txt]", FenceInfo(None, "notes.txt")),
        ("", FenceInfo(None, None)),
    ],
)
def test_parse_fence_info(info: str, expected: FenceInfo) -> None:
    assert parse_fence_info(info) == expected


def _convert(text: str) -> BeautifulSoup:
    with HighlighterSession() as session:
        md = Markdown(extensions=[CodeBlockExtension(session)])
        return BeautifulSoup(md.convert(text), "html.parser")


def test_fenced_block_renders_label_and_container() -> None:
    soup = _convert("Intro.\n\n```js[app.js]\nlet x = 1\n```\n\nOutro.\n")

    container = soup.select_one("div.rounded-xl.overflow-hidden.my-6")
    assert container is not None
    label = container.find_previous_sibling("span")
    assert label is not None
    assert label.get_text() == "app.js"
    assert "let x = 1" in container.get_text()
    assert container.find_parent("p") is None
    assert [p.get_text() for p in soup.find_all("p")] == ["Intro.", "Outro."]


def test_fenced_block_without_file_name_has_no_label() -> None:
    soup = _convert("```python\nprint('hi')\n```\n")

    wrapper = soup.find("div")
    assert wrapper is not None
    assert wrapper.find("span", recursive=False) is None
    assert len(wrapper.find_all(recursive=False)) == 1


def test_tilde_fences_and_longer_fences_are_supported() -> None:
    soup = _convert("~~~python\nx = 1\n~~~\n\n````text\n```\ninner\n```\n````\n")

    containers = soup.select("div.rounded-xl")
    assert len(containers) == 2
    assert "```" in containers[1].get_text()


def test_indented_fence_inside_list_item_is_highlighted() -> None:
    soup = _convert(
        "- **Example** item\n\n"
        "  ```rust,no_run\n"
        '  fn main() { println!("hi"); }\n'
        "  ```\n"
    )

    container = soup.select_one("div.rounded-xl")
    assert container is not None
    assert "fn main" in container.get_text()


def test_unterminated_fence_is_left_to_markdown() -> None:
    soup = _convert("```python\nprint('hi')\n")

    assert soup.select_one("div.rounded-xl") is None
    assert "print" in soup.get_text()


def test_inline_code_is_untouched() -> None:
    soup = _convert("Use `pip` here.\n")

    assert soup.select_one("div.rounded-xl") is None
    assert soup.find("code").get_text() == "pip"
