"""Syntax-highlighted rendering of fenced code blocks.

A :class:`HighlighterSession` owns the Pygments formatter for one conversion
pass. It is created before the first block is rendered, reused for every block
of the pass, and released when the pass ends::

    with HighlighterSession("material") as session:
        html = render_node(session.render_block("let x = 1", "js", "app.js"))

Each rendered block is a small node tree: an optional filename label followed
by a container holding the highlighted fragment.
"""

from __future__ import annotations

import logging
import typing as typ

from pygments import highlight
from pygments.formatters.html import HtmlFormatter
from pygments.lexers import get_lexer_by_name
from pygments.util import ClassNotFound

from .models import ElementNode, RawNode

if typ.TYPE_CHECKING:
    from types import TracebackType

    from pygments.lexer import Lexer

_log = logging.getLogger(__name__)

CODE_CONTAINER_CLASSES: tuple[str, ...] = ("rounded-xl", "overflow-hidden", "my-6")
HIGHLIGHT_CSS_CLASS = "highlight"


class HighlighterSession:
    """Scoped handle on a themed highlighting engine."""

    def __init__(
        self,
        theme: str = "material",
        *,
        fallback_language: str = "text",
        css_class: str = HIGHLIGHT_CSS_CLASS,
    ) -> None:
        """Prepare a session; the formatter is built on first use.

        Parameters
        ----------
        theme : str, optional
            Pygments style name applied to every block. Defaults to
            ``"material"``.
        fallback_language : str, optional
            Lexer used when a block declares no language or one Pygments does
            not know.
        css_class : str, optional
            CSS class wrapping each highlighted fragment.
        """
        self.theme = theme
        self.fallback_language = fallback_language
        self.css_class = css_class
        self._formatter: HtmlFormatter | None = None
        self._lexers: dict[str, Lexer] = {}
        self._closed = False

    def __enter__(self) -> HighlighterSession:
        self._acquire()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @property
    def closed(self) -> bool:
        """Return whether the session has been released."""
        return self._closed

    @property
    def stylesheet(self) -> str:
        """Return the theme CSS for highlighted fragments."""
        return self._acquire().get_style_defs(f".{self.css_class}")

    def close(self) -> None:
        """Release the formatter and lexer cache; further use is an error."""
        if not self._closed:
            _log.debug("Releasing highlighter session for theme %s", self.theme)
        self._formatter = None
        self._lexers.clear()
        self._closed = True

    def highlight(self, raw: str, language: str | None) -> str:
        """Convert ``raw`` source into a themed HTML fragment."""
        return highlight(raw, self._lexer(language), self._acquire())

    def render_block(
        self, raw: str, language: str | None, file_name: str | None = None
    ) -> ElementNode:
        """Render one fenced block into its composite node.

        Parameters
        ----------
        raw : str
            Source text of the block.
        language : str or None
            Declared language; unknown values fall back to
            ``fallback_language``.
        file_name : str, optional
            Filename annotation. When present a ``span`` label holding it as
            unescaped text precedes the code container.

        Returns
        -------
        ElementNode
            A ``div`` whose children are the optional label and the container.
        """
        children: list[RawNode | ElementNode] = []
        if file_name:
            children.append(ElementNode("span", children=(RawNode(file_name),)))
        children.append(
            ElementNode(
                "div",
                CODE_CONTAINER_CLASSES,
                (RawNode(self.highlight(raw, language)),),
            )
        )
        return ElementNode("div", children=tuple(children))

    def _acquire(self) -> HtmlFormatter:
        if self._closed:
            msg = "Highlighter session has already been released."
            raise RuntimeError(msg)
        if self._formatter is None:
            _log.debug("Creating highlighter for theme %s", self.theme)
            self._formatter = HtmlFormatter(style=self.theme, cssclass=self.css_class)
        return self._formatter

    def _lexer(self, language: str | None) -> Lexer:
        name = (language or self.fallback_language).lower()
        lexer = self._lexers.get(name)
        if lexer is None:
            try:
                lexer = get_lexer_by_name(name)
            except ClassNotFound:
                _log.debug("No lexer for %r, using %r", name, self.fallback_language)
                lexer = get_lexer_by_name(self.fallback_language)
            self._lexers[name] = lexer
        return lexer


__all__ = ["CODE_CONTAINER_CLASSES", "HIGHLIGHT_CSS_CLASS", "HighlighterSession"]
