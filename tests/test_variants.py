"""Tests for selector escaping and the variant registry."""

from __future__ import annotations

import pytest

from docsite.config import SiteConfigError, StylesConfig
from docsite.styles import (
    VariantRegistry,
    build_variant_registry,
    dark_class_variant,
    escape_class_name,
    marker_variant,
    pseudo_variant,
)


@pytest.mark.parametrize(
    ("name", "escaped"),
    [
        ("text-sm", "text-sm"),
        ("current:foo", "current\\:foo"),
        ("w-1/2", "w-1\\/2"),
        ("py-0.5", "py-0\\.5"),
        ("2xl", "\\32 xl"),
        ("-mt-2", "-mt-2"),
        ("-2", "-\\32 "),
        ("-", "\\-"),
        ("bg-[#fff]", "bg-\\[\\#fff\\]"),
    ],
)
def test_escape_class_name(name: str, escaped: str) -> None:
    assert escape_class_name(name) == escaped


def test_current_variant_requires_active_marker() -> None:
    variant = marker_variant("current", "nuxt-link-active")

    assert variant.selector_for("foo", ":") == ".nuxt-link-active.current\\:foo"


def test_exact_variant_requires_exact_marker() -> None:
    variant = marker_variant("exact", "nuxt-link-exact-active")

    assert variant.selector_for("foo", ":") == ".nuxt-link-exact-active.exact\\:foo"


def test_pseudo_and_dark_variants() -> None:
    assert pseudo_variant("hover").selector_for("underline", ":") == (
        ".hover\\:underline:hover"
    )
    assert pseudo_variant("first", "first-child").modify(".x") == ".x:first-child"
    assert dark_class_variant().modify(".bg-gray-900") == ".dark .bg-gray-900"


def test_registry_preserves_order_and_replaces_duplicates() -> None:
    registry = VariantRegistry([pseudo_variant("hover"), pseudo_variant("focus")])
    registry.add(pseudo_variant("hover", "focus-visible"))

    assert [variant.name for variant in registry] == ["focus", "hover"]
    assert registry.order("hover") == 1
    assert registry.get("hover").modify(".x") == ".x:focus-visible"
    assert "focus" in registry
    assert "exact" not in registry


def test_registry_rejects_unknown_and_empty_names() -> None:
    registry = VariantRegistry()

    with pytest.raises(KeyError, match="Unknown variant"):
        registry.get("current")
    with pytest.raises(SiteConfigError):
        registry.add(pseudo_variant(""))


def test_build_variant_registry_from_styles() -> None:
    registry = build_variant_registry(StylesConfig())

    assert [variant.name for variant in registry] == [
        "hover",
        "focus",
        "dark",
        "current",
        "exact",
    ]


def test_media_dark_mode_has_no_dark_class_variant() -> None:
    registry = build_variant_registry(StylesConfig(dark_mode="media"))

    assert "dark" not in registry


def test_only_dark_is_an_ancestor_variant() -> None:
    assert dark_class_variant().ancestor is True
    assert marker_variant("current", "nuxt-link-active").ancestor is False
    assert pseudo_variant("hover").ancestor is False
