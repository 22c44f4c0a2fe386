"""Turn the page metadata record into ordered ``<meta>``/``<link>`` tags."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from html import escape

if typ.TYPE_CHECKING:
    from .config import HeadConfig


@dc.dataclass(frozen=True, slots=True)
class HeadTag:
    """One void element emitted inside the document head."""

    name: str
    attrs: tuple[tuple[str, str], ...]

    def render(self) -> str:
        """Return the tag as HTML with every attribute value escaped."""
        rendered = "".join(
            f' {key}="{escape(value, quote=True)}"' for key, value in self.attrs
        )
        return f"<{self.name}{rendered}>"


def build_head_tags(head: HeadConfig, *, description: str | None = None) -> list[HeadTag]:
    """Return the meta tags followed by the link tags for one page.

    Parameters
    ----------
    head : HeadConfig
        Site-wide metadata record.
    description : str, optional
        Page description; replaces the content of the ``description``
        placeholder when provided.

    Returns
    -------
    list[HeadTag]
        Tags in configuration order, meta entries first.
    """
    tags: list[HeadTag] = []
    for meta in head.meta:
        attrs = dict(meta.attrs)
        if description is not None and meta.hid == "description":
            attrs["content"] = description
        tags.append(HeadTag("meta", tuple(attrs.items())))
    tags.extend(HeadTag("link", tuple(link.attrs.items())) for link in head.link)
    return tags


def format_title(head: HeadConfig, page_title: str | None) -> str:
    """Combine the page title with the site title, avoiding repetition."""
    if not page_title or page_title == head.title:
        return head.title
    return f"{page_title} | {head.title}"


__all__ = ["HeadTag", "build_head_tags", "format_title"]
