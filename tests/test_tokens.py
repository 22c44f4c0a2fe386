"""Tests for theme tokens and colour remaps."""

from __future__ import annotations

import pytest

from docsite.config import SiteConfigError, StylesConfig
from docsite.styles import Theme, build_theme
from docsite.styles.tokens import PALETTES


@pytest.fixture
def theme() -> Theme:
    return build_theme(StylesConfig())


def test_gray_is_remapped_to_slate(theme: Theme) -> None:
    assert theme.color("gray-200") == PALETTES["slate"]["200"]
    assert theme.value("colors.gray.50") == "#f8fafc"


def test_cyan_keeps_its_palette(theme: Theme) -> None:
    assert theme.color("cyan-800") == "#155e75"


def test_alpha_suffix_produces_rgb(theme: Theme) -> None:
    assert theme.color("cyan-800/50") == "rgb(21 94 117 / 0.5)"
    assert theme.color("cyan-800/half") is None


def test_single_colours_and_unknown_tokens(theme: Theme) -> None:
    assert theme.color("white") == "#ffffff"
    assert theme.color("current") == "currentColor"
    assert theme.color("mauve-500") is None
    assert theme.color("gray-1000") is None


def test_font_family_value_quotes_names_with_spaces() -> None:
    theme = build_theme(
        StylesConfig(font_family={"sans": ["Inter var", "system-ui", "sans-serif"]})
    )

    assert theme.value("fontFamily.sans") == '"Inter var", system-ui, sans-serif'


def test_substitute_expands_theme_calls(theme: Theme) -> None:
    assert theme.substitute("1px solid theme(colors.gray.200)") == "1px solid #e2e8f0"
    assert theme.substitute("theme('colors.cyan.800')") == "#155e75"
    assert theme.substitute(500) == "500"


def test_unknown_theme_path_raises(theme: Theme) -> None:
    with pytest.raises(SiteConfigError, match="colors.pink.500"):
        theme.value("colors.pink.500")
    with pytest.raises(SiteConfigError):
        theme.value("colors.gray")


def test_unknown_palette_remap_raises() -> None:
    with pytest.raises(SiteConfigError, match="unknown palette"):
        build_theme(StylesConfig(colors={"gray": "chartreuse"}))


def test_hex_remap_is_a_single_colour() -> None:
    theme = build_theme(StylesConfig(colors={"brand": "#0ea5e9"}))

    assert theme.color("brand") == "#0ea5e9"
