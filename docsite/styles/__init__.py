"""Utility-class stylesheet generation: tokens, variants, prose and output."""

from .selectors import class_selector, escape_class_name
from .stylesheet import StylesheetBuilder
from .tokens import Theme, build_theme
from .typography import prose_rules
from .utilities import RuleSpec, resolve_utility
from .variants import (
    Variant,
    VariantRegistry,
    build_variant_registry,
    dark_class_variant,
    marker_variant,
    pseudo_variant,
)

__all__ = [
    "RuleSpec",
    "StylesheetBuilder",
    "Theme",
    "Variant",
    "VariantRegistry",
    "build_theme",
    "build_variant_registry",
    "class_selector",
    "dark_class_variant",
    "escape_class_name",
    "marker_variant",
    "prose_rules",
    "pseudo_variant",
    "resolve_utility",
]
