"""Tests for the prose typography preset and its overrides."""

from __future__ import annotations

import pytest

from docsite.config import SiteConfigError, StylesConfig
from docsite.styles import Theme, build_theme, prose_rules
from docsite.styles.typography import kebab_case, merge_preset


@pytest.fixture(scope="module")
def theme() -> Theme:
    return build_theme(StylesConfig())


def test_kebab_case() -> None:
    assert kebab_case("backgroundColor") == "background-color"
    assert kebab_case("color") == "color"


def test_merge_preset_extends_selectors_and_removes_false() -> None:
    base = {"color": "red", "a": {"color": "blue", "fontWeight": 500}, "b": {"x": 1}}

    merged = merge_preset(base, {"a": {"color": "green"}, "b": False})

    assert merged == {"color": "red", "a": {"color": "green", "fontWeight": 500}, "b": False}
    assert base["a"] == {"color": "blue", "fontWeight": 500}


def test_configured_overrides_shape_the_prose_rules(theme: Theme) -> None:
    rules = dict(prose_rules(theme, StylesConfig().typography))

    assert rules[".prose a"] == (
        "color: #155e75",
        "text-decoration: underline",
        "font-weight: 500",
    )
    assert rules[".prose code"] == (
        "color: #155e75",
        "font-weight: 500",
        "font-size: 0.875em",
        "background-color: #e2e8f0",
        "padding: 0.25rem 0.5rem",
        "border-radius: 0.375rem",
    )
    assert "border-radius: 0" in rules[".prose pre"]
    assert "margin-top: 0" in rules[".prose pre"]
    assert "padding: 0.75rem 1.2rem" in rules[".prose pre"]
    assert ".prose code::before" not in rules
    assert ".prose code::after" not in rules
    assert ".prose pre code::before" in rules


def test_root_declarations_come_first(theme: Theme) -> None:
    selector, declarations = prose_rules(theme)[0]

    assert selector == ".prose"
    assert declarations[0] == "color: #334155"
    assert "max-width: 65ch" in declarations


def test_comma_selectors_are_scoped_individually(theme: Theme) -> None:
    rules = dict(prose_rules(theme, {"h4, h5": {"fontWeight": 600}}))

    assert rules[".prose h4, .prose h5"] == ("font-weight: 600",)


def test_unknown_theme_reference_raises(theme: Theme) -> None:
    with pytest.raises(SiteConfigError):
        prose_rules(theme, {"a": {"color": "theme(colors.pink.500)"}})
