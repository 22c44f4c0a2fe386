"""Sidebar navigation with router-style active-link marker classes.

Links receive ``nuxt-link-active`` when the current route lies inside the
link's route and additionally ``nuxt-link-exact-active`` when the routes are
equal. The ``current:`` and ``exact:`` utility variants key on these markers.
"""

from __future__ import annotations

import typing as typ

from .models import NavEntry

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from docsite.content import ContentDocument

ACTIVE_LINK_CLASS = "nuxt-link-active"
EXACT_ACTIVE_LINK_CLASS = "nuxt-link-exact-active"


def _normalize_route(route: str) -> str:
    """Return ``route`` with a leading and trailing slash."""
    stripped = route.strip("/")
    return f"/{stripped}/" if stripped else "/"


def active_link_classes(link_route: str, current_route: str) -> tuple[str, ...]:
    """Return the marker classes a link to ``link_route`` carries on ``current_route``.

    Examples
    --------
    >>> active_link_classes("/guide/", "/guide/setup/")
    ('nuxt-link-active',)
    >>> active_link_classes("/guide/", "/guide/")
    ('nuxt-link-active', 'nuxt-link-exact-active')
    >>> active_link_classes("/guide/", "/guides/")
    ()
    """
    link = _normalize_route(link_route)
    current = _normalize_route(current_route)
    if link == current:
        return (ACTIVE_LINK_CLASS, EXACT_ACTIVE_LINK_CLASS)
    if current.startswith(link):
        return (ACTIVE_LINK_CLASS,)
    return ()


def build_navigation(
    documents: cabc.Iterable[ContentDocument], current_route: str
) -> list[NavEntry]:
    """Return sidebar entries for every navigable document, in order."""
    return [
        NavEntry(
            label=doc.title,
            href=doc.route,
            classes=active_link_classes(doc.route, current_route),
        )
        for doc in documents
        if doc.navigation
    ]


__all__ = [
    "ACTIVE_LINK_CLASS",
    "EXACT_ACTIVE_LINK_CLASS",
    "active_link_classes",
    "build_navigation",
]
