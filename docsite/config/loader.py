"""Load site configuration YAML into typed dataclasses."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _build_head_config, _build_markdown_config, _build_styles_config
from .models import SiteConfig, SiteConfigError


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the site and its stylesheet.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``docsite.yaml``). Relative paths inside the file resolve against
        the directory that holds it.

    Returns
    -------
    SiteConfig
        Parsed configuration with every omitted key filled from the defaults.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If a section has the wrong shape or holds invalid values.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from docsite.config import load_site_config
    >>> config = load_site_config(Path("docsite.yaml"))  # doctest: +SKIP
    >>> config.head.title  # doctest: +SKIP
    'docs'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    return SiteConfig(
        root=path.resolve().parent,
        content_dir=Path(raw.get("content_dir", "content")),
        output_dir=Path(raw.get("output_dir", "public")),
        stylesheet_output=Path(raw.get("stylesheet_output", "public/styles.css")),
        head=_build_head_config(_section(raw, "head")),
        markdown=_build_markdown_config(_section(raw, "markdown")),
        styles=_build_styles_config(_section(raw, "styles")),
    )


def _section(raw: typ.Mapping[str, typ.Any], key: str) -> typ.Mapping[str, typ.Any]:
    """Return the mapping stored under ``key``, treating null as empty."""
    value = raw.get(key) or {}
    if not isinstance(value, dict):
        msg = f"Section '{key}' must be a mapping."
        raise SiteConfigError(msg)
    return value


__all__ = ["load_site_config"]
