r"""Discover Markdown documents and their front matter.

Every ``*.md`` file under the content directory becomes one page. Documents
may open with a YAML front matter block delimited by ``---`` lines; the keys
``title``, ``description``, ``position`` and ``navigation`` are recognised and
the rest are kept on :attr:`ContentDocument.meta`.

Example
-------
>>> from docsite.content import split_front_matter
>>> meta, body = split_front_matter("---\ntitle: Intro\n---\n# Hello\n")
>>> meta["title"], body
('Intro', '# Hello\n')
"""

from __future__ import annotations

import dataclasses as dc
import io
import logging
import re
import typing as typ
from pathlib import Path, PurePosixPath

from ruamel.yaml import YAML

_log = logging.getLogger(__name__)

FRONT_MATTER_PATTERN = re.compile(
    r"\A---[ \t]*\r?\n(.*?)^---[ \t]*(?:\r?\n|\Z)", re.DOTALL | re.MULTILINE
)
H1_PATTERN = re.compile(r"^#\s+(.+?)\s*#*\s*$")
FENCE_PATTERN = re.compile(r"^ {0,3}(?P<fence>`{3,}|~{3,})")


@dc.dataclass(slots=True)
class ContentDocument:
    """A Markdown document discovered in the content directory.

    Attributes
    ----------
    path : Path
        Filesystem path of the source file.
    relative_path : PurePosixPath
        Path relative to the content directory.
    route : str
        Route path served for the document, always ending in ``/``.
    title : str
        Front matter title, first ``#`` heading, or the prettified stem.
    description : str or None
        Front matter description, used for the description meta tag.
    position : int or None
        Explicit navigation order.
    navigation : bool
        Whether the document appears in the sidebar.
    markdown : str
        Markdown body with the front matter removed.
    meta : dict[str, Any]
        Complete front matter mapping.
    """

    path: Path
    relative_path: PurePosixPath
    route: str
    title: str
    description: str | None
    position: int | None
    navigation: bool
    markdown: str
    meta: dict[str, typ.Any] = dc.field(default_factory=dict)

    @property
    def output_name(self) -> PurePosixPath:
        """Return the output file path relative to the output directory."""
        return PurePosixPath(self.route.strip("/")) / "index.html"


def split_front_matter(text: str) -> tuple[dict[str, typ.Any], str]:
    """Return the parsed front matter mapping and the remaining body.

    Raises
    ------
    TypeError
        If the front matter is not a YAML mapping.
    """
    match = FRONT_MATTER_PATTERN.match(text)
    if match is None:
        return {}, text
    loader = YAML(typ="safe")
    loader.version = (1, 2)
    loaded = loader.load(io.StringIO(match.group(1))) or {}
    if not isinstance(loaded, dict):
        msg = "Front matter must be a mapping."
        raise TypeError(msg)
    return dict(loaded), text[match.end() :]


def route_for_path(relative_path: PurePosixPath) -> str:
    """Map a content-relative Markdown path to its route.

    ``index.md`` maps to ``/``, ``guide/index.md`` to ``/guide/`` and
    ``guide/setup.md`` to ``/guide/setup/``.
    """
    parts = list(relative_path.with_suffix("").parts)
    if parts and parts[-1] == "index":
        parts.pop()
    if not parts:
        return "/"
    return "/" + "/".join(parts) + "/"


def _display_stem(relative: PurePosixPath) -> str:
    if relative.stem != "index":
        return relative.stem
    return relative.parent.name or "home"


def _title_from_stem(stem: str) -> str:
    return re.sub(r"[-_]+", " ", stem).strip().title() or "Untitled"


def _resolve_title(meta: typ.Mapping[str, typ.Any], body: str, stem: str) -> str:
    title = meta.get("title")
    if isinstance(title, str) and title.strip():
        return title.strip()
    heading = _first_heading(body)
    if heading:
        return heading
    return _title_from_stem(stem)


def _first_heading(body: str) -> str | None:
    """Return the first level-one heading outside fenced code blocks."""
    fence: str | None = None
    for line in body.splitlines():
        opening = FENCE_PATTERN.match(line)
        if fence is not None:
            if opening and opening.group("fence")[0] == fence[0] and (
                len(opening.group("fence")) >= len(fence)
                and not line.strip().lstrip(fence[0])
            ):
                fence = None
            continue
        if opening:
            fence = opening.group("fence")
            continue
        heading = H1_PATTERN.match(line)
        if heading:
            return heading.group(1).replace("\\", "").strip()
    return None


def _coerce_position(value: object, path: Path) -> int | None:
    if value is None:
        return None
    if isinstance(value, bool) or not isinstance(value, (int, float, str)):
        _log.warning("Ignoring non-numeric position %r in %s", value, path)
        return None
    try:
        return int(value)
    except ValueError:
        _log.warning("Ignoring non-numeric position %r in %s", value, path)
        return None


def load_document(path: Path, content_dir: Path) -> ContentDocument:
    """Read one Markdown file into a :class:`ContentDocument`."""
    relative = PurePosixPath(path.relative_to(content_dir).as_posix())
    meta, body = split_front_matter(path.read_text(encoding="utf-8"))
    description = meta.get("description")
    return ContentDocument(
        path=path,
        relative_path=relative,
        route=route_for_path(relative),
        title=_resolve_title(meta, body, _display_stem(relative)),
        description=str(description) if description is not None else None,
        position=_coerce_position(meta.get("position"), path),
        navigation=meta.get("navigation", True) is not False,
        markdown=body,
        meta=meta,
    )


def discover_documents(content_dir: Path) -> list[ContentDocument]:
    """Return every Markdown document under ``content_dir`` in navigation order.

    Documents with an explicit ``position`` come first in ascending order;
    ties and documents without one are ordered by route.

    Raises
    ------
    FileNotFoundError
        If ``content_dir`` does not exist.
    """
    if not content_dir.is_dir():
        msg = f"Content directory '{content_dir}' not found."
        raise FileNotFoundError(msg)
    documents = [
        load_document(path, content_dir)
        for path in sorted(content_dir.rglob("*.md"))
        if path.is_file()
    ]
    _log.debug("Discovered %d documents in %s", len(documents), content_dir)
    return sorted(
        documents,
        key=lambda doc: (
            doc.position is None,
            doc.position if doc.position is not None else 0,
            doc.route,
        ),
    )


__all__ = [
    "ContentDocument",
    "discover_documents",
    "load_document",
    "route_for_path",
    "split_front_matter",
]
