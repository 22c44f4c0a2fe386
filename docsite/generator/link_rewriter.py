"""Helpers for rewriting relative Markdown links to site routes."""

from __future__ import annotations

import posixpath
import typing as typ
from pathlib import PurePosixPath
from urllib.parse import urlsplit

from markdown.extensions import Extension
from markdown.treeprocessors import Treeprocessor

from docsite.content import route_for_path

if typ.TYPE_CHECKING:
    from xml.etree.ElementTree import Element

    from markdown import Markdown
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    Element = typ.Any


class ContentLinkExtension(Extension):
    """Rewrite links between content documents to their routes.

    Insert this extension into a ``markdown.Markdown`` instance so that
    intra-site links written against the source tree (``./setup.md``,
    ``../index.md#install``) point at the generated pages (``/guide/setup/``,
    ``/#install``). ``base_dir`` is the directory of the document being
    rendered, relative to the content directory.
    """

    def __init__(self, base_dir: str) -> None:
        super().__init__()
        self.base_dir = base_dir

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the content-link treeprocessor on the Markdown instance."""
        processor = ContentLinkTreeprocessor(md, self.base_dir)
        md.treeprocessors.register(processor, "docsite_content_links", 15)


class ContentLinkTreeprocessor(Treeprocessor):
    """Point relative ``*.md`` anchors at the routes that serve them."""

    def __init__(self, md: Markdown, base_dir: str) -> None:
        super().__init__(md)
        self.base_dir = base_dir

    def run(self, root: Element) -> Element:
        """Rewrite relative anchors in the parsed Markdown tree."""
        for element in root.iter():
            if element.tag == "a":
                rewritten = self.rewrite(element.get("href"))
                if rewritten:
                    element.set("href", rewritten)
        return root

    def rewrite(self, target: str | None) -> str | None:
        """Return the route for a relative Markdown link, or ``None`` to keep it."""
        if not target:
            return None

        invalid = target.startswith(("#", "/", "//")) or "://" in target
        parsed = None
        if not invalid:
            parsed = urlsplit(target)
            invalid = bool(
                parsed.scheme
                or parsed.netloc
                or not parsed.path.lower().endswith(".md")
            )

        joined = None
        if not invalid and parsed is not None:
            joined = posixpath.normpath(posixpath.join(self.base_dir, parsed.path))
            while joined.startswith("../"):
                joined = joined[3:]
            if joined in (".", "..", ""):
                invalid = True

        if invalid or parsed is None or joined is None:
            return None

        url = route_for_path(PurePosixPath(joined))
        if parsed.query:
            url = f"{url}?{parsed.query}"
        if parsed.fragment:
            url = f"{url}#{parsed.fragment}"
        return url


__all__ = ["ContentLinkExtension", "ContentLinkTreeprocessor"]
