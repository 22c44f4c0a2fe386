"""Collect candidate utility class names from content files."""

from __future__ import annotations

import logging
import re
import typing as typ

if typ.TYPE_CHECKING:
    import collections.abc as cabc
    from pathlib import Path

_log = logging.getLogger(__name__)

TOKEN_SPLIT_PATTERN = re.compile(r"""[\s"'`<>={}]+""")
CANDIDATE_PATTERN = re.compile(r"^-?[A-Za-z0-9][A-Za-z0-9_:\-/.%#\[\]]*[A-Za-z0-9%\]]$")
EXCLUDED_PARTS = {"node_modules", ".git", "__pycache__"}


def extract_candidates(text: str) -> set[str]:
    """Return every token in ``text`` shaped like a utility class name."""
    return {
        token
        for token in TOKEN_SPLIT_PATTERN.split(text)
        if token and CANDIDATE_PATTERN.match(token)
    }


def iter_content_files(root: Path, patterns: cabc.Iterable[str]) -> list[Path]:
    """Expand glob ``patterns`` relative to ``root`` into a sorted file list."""
    files: set[Path] = set()
    for pattern in patterns:
        for path in root.glob(pattern):
            if path.is_file() and not EXCLUDED_PARTS.intersection(path.parts):
                files.add(path)
    return sorted(files)


def scan_candidates(files: cabc.Iterable[Path]) -> set[str]:
    """Read ``files`` and return the union of their candidate tokens."""
    candidates: set[str] = set()
    for path in files:
        try:
            text = path.read_text(encoding="utf-8")
        except UnicodeDecodeError:
            _log.debug("Skipping non-text content file %s", path)
            continue
        candidates |= extract_candidates(text)
    return candidates


__all__ = ["extract_candidates", "iter_content_files", "scan_candidates"]
