"""End-to-end tests for rendering a content directory into HTML pages."""

from __future__ import annotations

import typing as typ
from pathlib import Path

import pytest
from bs4 import BeautifulSoup

from docsite.config import load_site_config
from docsite.generator import SiteBuilder

if typ.TYPE_CHECKING:
    from docsite.config import SiteConfig


@pytest.fixture
def generated_pages(site_config: SiteConfig) -> dict[str, BeautifulSoup]:
    """Run the builder and return the parsed pages keyed by output path."""
    written = SiteBuilder(site_config).run()
    output_dir = site_config.root / "public"
    return {
        path.relative_to(output_dir).as_posix(): BeautifulSoup(
            path.read_text(encoding="utf-8"), "html.parser"
        )
        for path in written
    }


def test_every_document_is_written_under_its_route(
    generated_pages: dict[str, BeautifulSoup],
) -> None:
    assert list(generated_pages) == [
        "index.html",
        "guide/setup/index.html",
        "drafts/index.html",
    ]


def test_root_elements_carry_configured_classes(
    generated_pages: dict[str, BeautifulSoup],
) -> None:
    soup = generated_pages["index.html"]

    assert soup.html["lang"] == "en"
    assert soup.html["class"] == ["h-full"]
    assert soup.body["class"] == ["bg-gray-50"]


def test_head_uses_page_metadata(generated_pages: dict[str, BeautifulSoup]) -> None:
    soup = generated_pages["index.html"]

    assert soup.title.get_text() == "Introduction | docs"
    descriptions = soup.find_all("meta", attrs={"name": "description"})
    assert [meta["content"] for meta in descriptions] == ["Start here."]
    assert soup.find("meta", attrs={"charset": "utf-8"}) is not None
    assert soup.find("link", rel="icon")["href"] == "/favicon.ico"
    assert soup.find("link", href="/styles.css") is not None
    assert ".highlight" in soup.find("style").get_text()


def test_page_without_description_keeps_placeholder(
    generated_pages: dict[str, BeautifulSoup],
) -> None:
    soup = generated_pages["guide/setup/index.html"]

    (meta,) = soup.find_all("meta", attrs={"name": "description"})
    assert meta["content"] == ""
    assert soup.title.get_text() == "Setup | docs"
    assert len(soup.find_all("h1")) == 1


def test_navigation_marks_active_links(
    generated_pages: dict[str, BeautifulSoup],
) -> None:
    soup = generated_pages["guide/setup/index.html"]
    links = {link["href"]: link["class"] for link in soup.select("nav a")}

    assert set(links) == {"/", "/guide/setup/"}
    assert "nuxt-link-active" in links["/"]
    assert "nuxt-link-exact-active" not in links["/"]
    assert {"nuxt-link-active", "nuxt-link-exact-active"} <= set(links["/guide/setup/"])
    assert "current:text-cyan-800" in links["/"]


def test_code_blocks_render_filename_labels(
    generated_pages: dict[str, BeautifulSoup],
) -> None:
    soup = generated_pages["index.html"]
    container = soup.select_one("article div.rounded-xl.overflow-hidden.my-6")

    assert container is not None
    assert container.find_previous_sibling("span").get_text() == "hello.js"
    assert "greeting" in container.get_text()


def test_links_between_documents_point_at_routes(
    generated_pages: dict[str, BeautifulSoup],
) -> None:
    index = generated_pages["index.html"]
    setup = generated_pages["guide/setup/index.html"]

    assert index.select_one('article a[href="/guide/setup/"]') is not None
    assert setup.select_one('article a[href="/#usage"]') is not None


def test_outline_lists_section_headings(
    generated_pages: dict[str, BeautifulSoup],
) -> None:
    soup = generated_pages["index.html"]
    outline = [link["href"] for link in soup.select("aside a")]

    assert outline == ["#usage", "#details"]


def test_output_dir_override(site_config: SiteConfig, tmp_path: Path) -> None:
    target = tmp_path / "elsewhere"

    written = SiteBuilder(site_config, output_dir=target).run()

    assert written[0] == target / "index.html"
    html = written[0].read_text(encoding="utf-8")
    assert 'href="/styles.css"' in html


def test_empty_content_directory_is_an_error(tmp_path: Path) -> None:
    (tmp_path / "content").mkdir()
    config_path = tmp_path / "docsite.yaml"
    config_path.write_text("", encoding="utf-8")

    with pytest.raises(RuntimeError, match="No Markdown documents"):
        SiteBuilder(load_site_config(config_path)).run()
