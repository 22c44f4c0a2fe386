"""Load and validate site configuration YAML for docsite builds.

This subpackage parses the project's ``docsite.yaml`` file, fills every omitted
key from the built-in defaults (page head metadata, highlighting theme, and
the utility-stylesheet settings), and produces slotted dataclasses that the
page and stylesheet builders consume. The primary entry point is
:func:`load_site_config`.

Examples
--------
>>> from pathlib import Path
>>> from docsite.config import load_site_config
>>> site = load_site_config(Path("docsite.yaml"))  # doctest: +SKIP
>>> site.markdown.theme  # doctest: +SKIP
'material'
"""

from .loader import load_site_config
from .models import (
    HeadConfig,
    LinkTagConfig,
    MarkdownConfig,
    MetaTagConfig,
    SiteConfig,
    SiteConfigError,
    StylesConfig,
    VariantConfig,
)

__all__ = [
    "HeadConfig",
    "LinkTagConfig",
    "MarkdownConfig",
    "MetaTagConfig",
    "SiteConfig",
    "SiteConfigError",
    "StylesConfig",
    "VariantConfig",
    "load_site_config",
]
