"""Utilities for rendering Markdown documents with highlighted code blocks."""

from __future__ import annotations

import dataclasses as dc
import typing as typ

from markdown import Markdown

from .code_blocks import CodeBlockExtension
from .link_rewriter import ContentLinkExtension

if typ.TYPE_CHECKING:
    from markdown.extensions import Extension

    from .highlighter import HighlighterSession
else:  # pragma: no cover - type-checking fallback
    Extension = typ.Any


@dc.dataclass(slots=True)
class RenderedMarkdown:
    """HTML body plus the table of contents collected while converting."""

    html: str
    toc_items: list[dict[str, typ.Any]]


class HtmlContentRenderer:
    """Render Markdown with consistent extensions for every page of a pass."""

    def __init__(self, session: HighlighterSession) -> None:
        """Initialize a renderer bound to the pass's highlighter session.

        Parameters
        ----------
        session : HighlighterSession
            Open session used for every fenced code block.
        """
        self.session = session

    @property
    def stylesheet(self) -> str:
        """Return the CSS used for highlighted code blocks."""
        return self.session.stylesheet

    def markdown(self, text: str, *, base_dir: str = "") -> RenderedMarkdown:
        """Render Markdown into HTML and collect its h2/h3 outline.

        Parameters
        ----------
        text : str
            Markdown source without front matter.
        base_dir : str, optional
            Directory of the document relative to the content root, used to
            resolve relative links to other documents.
        """
        if not text.strip():
            return RenderedMarkdown(html="", toc_items=[])
        extensions: list[Extension | str] = [
            CodeBlockExtension(self.session),
            ContentLinkExtension(base_dir),
            "tables",
            "sane_lists",
            "toc",
        ]
        md = Markdown(
            extensions=extensions,
            extension_configs={"toc": {"toc_depth": "2-3", "permalink": False}},
        )
        html = md.convert(text)
        tokens = getattr(md, "toc_tokens", [])
        return RenderedMarkdown(html=html, toc_items=_flatten_toc(tokens))


def _flatten_toc(tokens: list[dict[str, typ.Any]]) -> list[dict[str, typ.Any]]:
    """Flatten nested toc tokens into label/anchor/level entries."""
    items: list[dict[str, typ.Any]] = []
    for token in tokens:
        items.append(
            {"label": token["name"], "anchor": token["id"], "level": token["level"]}
        )
        items.extend(_flatten_toc(token.get("children", [])))
    return items


__all__ = ["HtmlContentRenderer", "RenderedMarkdown"]
