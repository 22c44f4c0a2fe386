"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from html import escape


@dc.dataclass(frozen=True, slots=True)
class RawNode:
    """Pre-rendered HTML inserted verbatim."""

    html: str


@dc.dataclass(frozen=True, slots=True)
class ElementNode:
    """Element wrapping an ordered tuple of child nodes."""

    tag: str
    class_names: tuple[str, ...] = ()
    children: tuple[Node, ...] = ()


Node: typ.TypeAlias = RawNode | ElementNode


def render_node(node: Node) -> str:
    """Serialize a node tree into an HTML string."""
    if isinstance(node, RawNode):
        return node.html
    inner = "".join(render_node(child) for child in node.children)
    if node.class_names:
        classes = escape(" ".join(node.class_names), quote=True)
        return f'<{node.tag} class="{classes}">{inner}</{node.tag}>'
    return f"<{node.tag}>{inner}</{node.tag}>"


@dc.dataclass(slots=True)
class NavEntry:
    """Sidebar link metadata for a single document.

    Attributes
    ----------
    label : str
        Link text.
    href : str
        Route path of the target document.
    classes : tuple[str, ...]
        Active-link marker classes computed for the page being rendered.
    """

    label: str
    href: str
    classes: tuple[str, ...] = ()


@dc.dataclass(slots=True)
class PageModel:
    """Structured data passed to the page template.

    Attributes
    ----------
    route : str
        Route path of the page (``/``, ``/guide/setup/``).
    title : str
        Document title shown in the page heading.
    html_title : str
        Value of the ``<title>`` element.
    description : str or None
        Page description used for the description meta tag.
    body_html : str
        Rendered Markdown body.
    toc_items : list[dict[str, str]]
        Table-of-contents entries with ``label``, ``anchor`` and ``level``.
    body_has_heading : bool
        Whether the body opens with its own ``h1``, in which case the template
        does not add one.
    """

    route: str
    title: str
    html_title: str
    description: str | None
    body_html: str
    toc_items: list[dict[str, typ.Any]]
    body_has_heading: bool = False


__all__ = ["ElementNode", "NavEntry", "Node", "PageModel", "RawNode", "render_node"]
