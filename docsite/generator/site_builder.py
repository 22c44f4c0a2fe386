"""High-level orchestration for documentation page generation.

This module coordinates discovering the Markdown documents of a site,
rendering them with one shared highlighter session, and writing themed HTML
pages. It exposes :class:`SiteBuilder`, which consumes a
:class:`~docsite.config.SiteConfig` and writes ``<route>/index.html`` for
every document under the configured output directory.

Example
-------
>>> from pathlib import Path
>>> from docsite.config import load_site_config
>>> from docsite.generator import SiteBuilder
>>> config = load_site_config(Path("docsite.yaml"))  # doctest: +SKIP
>>> SiteBuilder(config).run()  # doctest: +SKIP
[PosixPath('public/index.html'), ...]
"""

from __future__ import annotations

import datetime as dt
import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader, select_autoescape

from docsite.content import ContentDocument, discover_documents
from docsite.head import build_head_tags, format_title

from .highlighter import HighlighterSession
from .models import PageModel
from .navigation import build_navigation
from .renderer import HtmlContentRenderer

if typ.TYPE_CHECKING:
    from docsite.config import SiteConfig

_log = logging.getLogger(__name__)

DEFAULT_TEMPLATES_DIR = Path(__file__).resolve().parents[1] / "templates"


class SiteBuilder:
    """Render every content document into a themed HTML page."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        templates_dir: Path | None = None,
        output_dir: Path | None = None,
    ) -> None:
        """Initialize the builder with configuration and template context.

        Parameters
        ----------
        site_config : SiteConfig
            Site configuration describing content location, head metadata and
            the highlighting theme.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        output_dir : Path, optional
            Override for the HTML output directory; defaults to the configured
            one.
        """
        self.site = site_config
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.output_override = output_dir
        self.output_dir = output_dir or site_config.resolve(site_config.output_dir)
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=select_autoescape(["html", "xml", "jinja"]),
            trim_blocks=True,
            lstrip_blocks=True,
        )
        self.template = self.env.get_template("page.jinja")

    def run(self) -> list[Path]:
        """Render every document into HTML files on disk.

        Returns
        -------
        list[Path]
            Paths to the generated HTML documents, in navigation order.

        Raises
        ------
        FileNotFoundError
            Raised when the content directory does not exist.
        RuntimeError
            Raised when the content directory holds no Markdown documents.
        """
        documents = discover_documents(self.site.resolve(self.site.content_dir))
        if not documents:
            msg = "No Markdown documents were found in the content directory."
            raise RuntimeError(msg)

        generated_at = dt.datetime.now(dt.UTC)
        written: list[Path] = []
        with HighlighterSession(
            self.site.markdown.theme,
            fallback_language=self.site.markdown.fallback_language,
        ) as session:
            renderer = HtmlContentRenderer(session)
            pygments_css = renderer.stylesheet
            for document in documents:
                page = self._build_page_model(document, renderer)
                context = {
                    "page": page,
                    "head": self.site.head,
                    "head_tags": build_head_tags(
                        self.site.head, description=document.description
                    ),
                    "nav_entries": build_navigation(documents, document.route),
                    "stylesheet_href": self._stylesheet_href(),
                    "pygments_css": pygments_css,
                    "generated_at": generated_at,
                }
                html = self.template.render(**context)
                if not html.endswith("\n"):
                    html += "\n"
                output_path = self.output_dir / document.output_name
                output_path.parent.mkdir(parents=True, exist_ok=True)
                output_path.write_text(html, encoding="utf-8")
                _log.info("Rendered %s to %s", document.relative_path, output_path)
                written.append(output_path)
        return written

    def _build_page_model(
        self, document: ContentDocument, renderer: HtmlContentRenderer
    ) -> PageModel:
        """Construct a PageModel with rendered HTML and outline metadata."""
        base_dir = document.relative_path.parent.as_posix()
        rendered = renderer.markdown(
            document.markdown, base_dir="" if base_dir == "." else base_dir
        )
        return PageModel(
            route=document.route,
            title=document.title,
            html_title=format_title(self.site.head, document.title),
            description=document.description,
            body_html=rendered.html,
            toc_items=rendered.toc_items,
            body_has_heading=rendered.html.lstrip().startswith("<h1"),
        )

    def _stylesheet_href(self) -> str | None:
        """Return the root-relative URL of the generated stylesheet, if it is served."""
        stylesheet = self.site.stylesheet_path(self.output_override)
        try:
            relative = stylesheet.relative_to(self.output_dir)
        except ValueError:
            return None
        return "/" + relative.as_posix()


__all__ = ["SiteBuilder"]
