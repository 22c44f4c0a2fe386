"""Typed dataclasses describing docsite configuration structures."""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(slots=True)
class MetaTagConfig:
    """A single ``<meta>`` entry in the document head.

    Attributes
    ----------
    attrs : dict[str, str]
        Attribute mapping emitted on the tag, in insertion order.
    hid : str or None
        Stable identifier used to replace a default entry instead of adding a
        duplicate. It is never rendered.
    """

    attrs: dict[str, str]
    hid: str | None = None


@dc.dataclass(slots=True)
class LinkTagConfig:
    """A single ``<link>`` entry in the document head."""

    attrs: dict[str, str]


def _default_meta() -> list[MetaTagConfig]:
    return [
        MetaTagConfig({"charset": "utf-8"}),
        MetaTagConfig(
            {"name": "viewport", "content": "width=device-width, initial-scale=1"}
        ),
        MetaTagConfig({"name": "description", "content": ""}, hid="description"),
        MetaTagConfig({"name": "format-detection", "content": "telephone=no"}),
    ]


def _default_links() -> list[LinkTagConfig]:
    return [
        LinkTagConfig({"rel": "icon", "type": "image/x-icon", "href": "/favicon.ico"}),
        LinkTagConfig({"rel": "preconnect", "href": "https://fonts.googleapis.com"}),
        LinkTagConfig(
            {
                "rel": "stylesheet",
                "href": "https://fonts.googleapis.com/css2?family=Inter:wght@400;500;600;700&display=swap",
            }
        ),
    ]


@dc.dataclass(slots=True)
class HeadConfig:
    """Page metadata record consumed once per page to emit the document head."""

    title: str = "docs"
    lang: str = "en"
    html_class: str = "h-full"
    body_class: str = "bg-gray-50"
    meta: list[MetaTagConfig] = dc.field(default_factory=_default_meta)
    link: list[LinkTagConfig] = dc.field(default_factory=_default_links)


@dc.dataclass(slots=True)
class MarkdownConfig:
    """Settings for the Markdown conversion pass."""

    theme: str = "material"
    fallback_language: str = "text"


@dc.dataclass(slots=True)
class VariantConfig:
    """Marker variant declared in configuration.

    A utility prefixed with ``name`` only applies when the same element also
    carries the ``marker`` class.
    """

    name: str
    marker: str


def _default_variants() -> list[VariantConfig]:
    return [
        VariantConfig(name="current", marker="nuxt-link-active"),
        VariantConfig(name="exact", marker="nuxt-link-exact-active"),
    ]


def _default_typography() -> dict[str, typ.Any]:
    return {
        "a": {"color": "theme(colors.cyan.800)"},
        "pre": {
            "borderRadius": 0,
            "marginTop": 0,
            "marginBottom": 0,
            "padding": "0.75rem 1.2rem",
        },
        "code": {
            "backgroundColor": "theme(colors.gray.200)",
            "padding": "0.25rem 0.5rem",
            "borderRadius": "0.375rem",
            "color": "theme(colors.cyan.800)",
            "fontWeight": 500,
        },
        "code::before": False,
        "code::after": False,
    }


@dc.dataclass(slots=True)
class StylesConfig:
    """Utility-framework settings: scan globs, tokens, typography, variants."""

    content: list[str] = dc.field(
        default_factory=lambda: [
            "templates/**/*.jinja",
            "content/**/*.md",
            "public/**/*.html",
        ]
    )
    colors: dict[str, str] = dc.field(
        default_factory=lambda: {"gray": "slate", "cyan": "cyan"}
    )
    font_family: dict[str, list[str]] = dc.field(
        default_factory=lambda: {
            "sans": ["Inter", "ui-sans-serif", "system-ui", "sans-serif"]
        }
    )
    typography: dict[str, typ.Any] = dc.field(default_factory=_default_typography)
    variants: list[VariantConfig] = dc.field(default_factory=_default_variants)
    separator: str = ":"
    dark_mode: str = "class"


@dc.dataclass(slots=True)
class SiteConfig:
    """Fully resolved site configuration."""

    root: Path
    content_dir: Path = Path("content")
    output_dir: Path = Path("public")
    stylesheet_output: Path = Path("public/styles.css")
    head: HeadConfig = dc.field(default_factory=HeadConfig)
    markdown: MarkdownConfig = dc.field(default_factory=MarkdownConfig)
    styles: StylesConfig = dc.field(default_factory=StylesConfig)

    def resolve(self, path: Path) -> Path:
        """Return ``path`` anchored at the project root when it is relative."""
        if path.is_absolute():
            return path
        return self.root / path

    def stylesheet_path(self, output_dir: Path | None = None) -> Path:
        """Return where the stylesheet is written for a build into ``output_dir``.

        Without an override this is ``stylesheet_output``. With one, a
        stylesheet configured inside ``output_dir`` keeps its relative place
        under the override and any other stylesheet lands at its root.
        """
        configured = self.resolve(self.stylesheet_output)
        if output_dir is None:
            return configured
        try:
            relative = configured.relative_to(self.resolve(self.output_dir))
        except ValueError:
            relative = Path(configured.name)
        return output_dir / relative


__all__ = [
    "HeadConfig",
    "LinkTagConfig",
    "MarkdownConfig",
    "MetaTagConfig",
    "SiteConfig",
    "SiteConfigError",
    "StylesConfig",
    "VariantConfig",
]
