"""Markdown extension rendering fenced code blocks through a highlighter session."""

from __future__ import annotations

import dataclasses as dc
import logging
import re
import typing as typ

from markdown.extensions import Extension
from markdown.preprocessors import Preprocessor

from .models import render_node

if typ.TYPE_CHECKING:
    from markdown import Markdown

    from .highlighter import HighlighterSession
else:  # pragma: no cover - type-checking fallback
    Markdown = typ.Any
    HighlighterSession = typ.Any

_log = logging.getLogger(__name__)

FENCE_OPEN_PATTERN = re.compile(r"^(?P<indent> {0,3})(?P<fence>`{3,}|~{3,})(?P<info>.*)$")
FENCE_INFO_PATTERN = re.compile(
    r"^(?P<language>[A-Za-z0-9_+#.-]+)?"
    r"(?:,[^\s\[{]*)?"
    r"\s*(?:\{[^}]*\})?"
    r"\s*(?:\[(?P<file_name>[^\]]*)\])?\s*$"
)


@dc.dataclass(frozen=True, slots=True)
class FenceInfo:
    """Language and filename annotation parsed from a fence's info string."""

    language: str | None
    file_name: str | None


def parse_fence_info(info: str) -> FenceInfo:
    """Split a fence info string into its language and filename.

    Examples
    --------
    >>> parse_fence_info("js[app.js]")
    FenceInfo(language='js', file_name='app.js')
    >>> parse_fence_info("rust,no_run")
    FenceInfo(language='rust', file_name=None)
    """
    text = info.strip()
    match = FENCE_INFO_PATTERN.match(text)
    if match is None:
        first = text.split(maxsplit=1)
        return FenceInfo(language=first[0] if first else None, file_name=None)
    file_name = (match.group("file_name") or "").strip()
    return FenceInfo(
        language=match.group("language") or None, file_name=file_name or None
    )


class CodeBlockPreprocessor(Preprocessor):
    """Replace fenced code blocks with highlighted HTML from the session."""

    def __init__(self, md: Markdown, session: HighlighterSession) -> None:
        super().__init__(md)
        self.session = session

    def run(self, lines: list[str]) -> list[str]:
        result: list[str] = []
        index = 0
        total = len(lines)
        while index < total:
            line = lines[index]
            opening = FENCE_OPEN_PATTERN.match(line)
            if opening is None or (
                opening.group("fence").startswith("`") and "`" in opening.group("info")
            ):
                result.append(line)
                index += 1
                continue

            indent = len(opening.group("indent"))
            fence = opening.group("fence")
            closing = re.compile(
                rf"^ {{0,3}}{re.escape(fence[0])}{{{len(fence)},}}\s*$"
            )
            end = index + 1
            while end < total and not closing.match(lines[end]):
                end += 1
            if end >= total:
                # Unterminated fence; leave the text for Markdown to handle.
                result.extend(lines[index:])
                break

            raw = "\n".join(_dedent(body, indent) for body in lines[index + 1 : end])
            info = parse_fence_info(opening.group("info"))
            _log.debug(
                "Rendering %s code block (file=%s)", info.language, info.file_name
            )
            node = self.session.render_block(raw, info.language, info.file_name)
            placeholder = self.md.htmlStash.store(render_node(node))
            result.extend(["", f"{opening.group('indent')}{placeholder}", ""])
            index = end + 1
        return result


def _dedent(line: str, width: int) -> str:
    """Remove up to ``width`` leading spaces from ``line``."""
    stripped = len(line) - len(line.lstrip(" "))
    return line[min(stripped, width) :]


class CodeBlockExtension(Extension):
    """Render fenced code blocks with a shared :class:`HighlighterSession`."""

    def __init__(self, session: HighlighterSession) -> None:
        super().__init__()
        self.session = session

    def extendMarkdown(self, md: Markdown) -> None:  # type: ignore[override]  # noqa: N802
        """Register the code-block preprocessor on the Markdown instance."""
        md.registerExtension(self)
        md.preprocessors.register(
            CodeBlockPreprocessor(md, self.session), "docsite_code_blocks", 25
        )


__all__ = [
    "CodeBlockExtension",
    "CodeBlockPreprocessor",
    "FenceInfo",
    "parse_fence_info",
]
