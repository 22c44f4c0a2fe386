"""Design tokens: colour palettes, font stacks and spacing used by utilities.

The theme is assembled from the built-in palettes plus the ``styles.colors``
remaps of the site configuration, so ``gray`` can resolve to the slate
palette while keeping utility names such as ``bg-gray-50`` unchanged.
"""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

from docsite.config import SiteConfigError

if typ.TYPE_CHECKING:
    from docsite.config import StylesConfig

PALETTES: dict[str, dict[str, str]] = {
    "slate": {
        "50": "#f8fafc",
        "100": "#f1f5f9",
        "200": "#e2e8f0",
        "300": "#cbd5e1",
        "400": "#94a3b8",
        "500": "#64748b",
        "600": "#475569",
        "700": "#334155",
        "800": "#1e293b",
        "900": "#0f172a",
        "950": "#020617",
    },
    "gray": {
        "50": "#f9fafb",
        "100": "#f3f4f6",
        "200": "#e5e7eb",
        "300": "#d1d5db",
        "400": "#9ca3af",
        "500": "#6b7280",
        "600": "#4b5563",
        "700": "#374151",
        "800": "#1f2937",
        "900": "#111827",
        "950": "#030712",
    },
    "cyan": {
        "50": "#ecfeff",
        "100": "#cffafe",
        "200": "#a5f3fc",
        "300": "#67e8f9",
        "400": "#22d3ee",
        "500": "#06b6d4",
        "600": "#0891b2",
        "700": "#0e7490",
        "800": "#155e75",
        "900": "#164e63",
        "950": "#083344",
    },
}

SINGLE_COLORS: dict[str, str] = {
    "inherit": "inherit",
    "current": "currentColor",
    "transparent": "transparent",
    "black": "#000000",
    "white": "#ffffff",
}

SPACING_SCALE: dict[str, str] = {
    "px": "1px",
    "0": "0px",
    "0.5": "0.125rem",
    "1": "0.25rem",
    "1.5": "0.375rem",
    "2": "0.5rem",
    "2.5": "0.625rem",
    "3": "0.75rem",
    "3.5": "0.875rem",
    "4": "1rem",
    "5": "1.25rem",
    "6": "1.5rem",
    "7": "1.75rem",
    "8": "2rem",
    "9": "2.25rem",
    "10": "2.5rem",
    "11": "2.75rem",
    "12": "3rem",
    "14": "3.5rem",
    "16": "4rem",
    "20": "5rem",
    "24": "6rem",
    "28": "7rem",
    "32": "8rem",
    "36": "9rem",
    "40": "10rem",
    "44": "11rem",
    "48": "12rem",
    "52": "13rem",
    "56": "14rem",
    "60": "15rem",
    "64": "16rem",
    "72": "18rem",
    "80": "20rem",
    "96": "24rem",
}

THEME_CALL_PATTERN = re.compile(r"""theme\(\s*['"]?([A-Za-z0-9_.-]+)['"]?\s*\)""")


@dc.dataclass(slots=True)
class Theme:
    """Resolved design tokens for one stylesheet build."""

    colors: dict[str, dict[str, str] | str]
    font_family: dict[str, list[str]]
    spacing: dict[str, str] = dc.field(default_factory=lambda: dict(SPACING_SCALE))

    def color(self, token: str) -> str | None:
        """Resolve ``gray-200`` / ``white`` / ``cyan-800/50`` to a CSS colour."""
        color_part, _, alpha_part = token.partition("/")
        value = self._lookup_color(color_part)
        if value is None or not alpha_part:
            return value
        try:
            alpha = float(alpha_part) / 100
        except ValueError:
            return None
        return with_alpha(value, alpha)

    def value(self, path: str) -> str:
        """Return the token at a dotted ``path`` such as ``colors.cyan.800``.

        Raises
        ------
        SiteConfigError
            If the path does not name an existing token.
        """
        segments = path.split(".")
        namespace = segments[0].replace("_", "").lower()
        roots: dict[str, typ.Any] = {
            "colors": self.colors,
            "fontfamily": self.font_family,
            "spacing": self.spacing,
        }
        current: typ.Any = roots.get(namespace)
        for segment in segments[1:]:
            if not isinstance(current, dict) or segment not in current:
                current = None
                break
            current = current[segment]
        if current is None or isinstance(current, dict):
            msg = f"Unknown theme token '{path}'."
            raise SiteConfigError(msg)
        if isinstance(current, list):
            return ", ".join(_quote_font(name) for name in current)
        return str(current)

    def substitute(self, value: object) -> str:
        """Render a style value, expanding ``theme(colors.x.y)`` references."""
        if isinstance(value, list):
            return ", ".join(self.substitute(item) for item in value)
        text = str(value)
        return THEME_CALL_PATTERN.sub(lambda match: self.value(match.group(1)), text)

    def _lookup_color(self, token: str) -> str | None:
        single = self.colors.get(token)
        if isinstance(single, str):
            return single
        name, _, shade = token.rpartition("-")
        palette = self.colors.get(name)
        if isinstance(palette, dict):
            return palette.get(shade)
        return None


def with_alpha(hex_value: str, alpha: float) -> str | None:
    """Convert ``#rrggbb`` (or ``#rgb``) plus alpha into an ``rgb()`` colour."""
    if not hex_value.startswith("#"):
        return None
    digits = hex_value[1:]
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    red, green, blue = (int(digits[idx : idx + 2], 16) for idx in (0, 2, 4))
    return f"rgb({red} {green} {blue} / {alpha:g})"


def _quote_font(name: str) -> str:
    if " " in name and not name.startswith(("'", '"')):
        return f'"{name}"'
    return name


def build_theme(styles: StylesConfig) -> Theme:
    """Assemble the theme from built-in palettes and configured remaps.

    Raises
    ------
    SiteConfigError
        If a remap names a palette that does not exist.
    """
    colors: dict[str, dict[str, str] | str] = dict(SINGLE_COLORS)
    colors.update({name: dict(shades) for name, shades in PALETTES.items()})
    for alias, palette in styles.colors.items():
        if palette in PALETTES:
            colors[alias] = dict(PALETTES[palette])
        elif palette in SINGLE_COLORS:
            colors[alias] = SINGLE_COLORS[palette]
        elif palette.startswith("#"):
            colors[alias] = palette
        else:
            msg = f"Colour '{alias}' maps to unknown palette '{palette}'."
            raise SiteConfigError(msg)
    return Theme(
        colors=colors,
        font_family={name: list(stack) for name, stack in styles.font_family.items()},
    )


__all__ = ["PALETTES", "SINGLE_COLORS", "SPACING_SCALE", "Theme", "build_theme", "with_alpha"]
