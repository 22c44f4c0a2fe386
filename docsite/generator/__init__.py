"""Utilities for rendering, highlighting, and generating docsite pages."""

from .code_blocks import CodeBlockExtension, FenceInfo, parse_fence_info
from .highlighter import CODE_CONTAINER_CLASSES, HighlighterSession
from .link_rewriter import ContentLinkExtension
from .models import ElementNode, NavEntry, PageModel, RawNode, render_node
from .navigation import active_link_classes, build_navigation
from .renderer import HtmlContentRenderer, RenderedMarkdown
from .site_builder import SiteBuilder

__all__ = [
    "CODE_CONTAINER_CLASSES",
    "CodeBlockExtension",
    "ContentLinkExtension",
    "ElementNode",
    "FenceInfo",
    "HighlighterSession",
    "HtmlContentRenderer",
    "NavEntry",
    "PageModel",
    "RawNode",
    "RenderedMarkdown",
    "SiteBuilder",
    "active_link_classes",
    "build_navigation",
    "parse_fence_info",
    "render_node",
]
