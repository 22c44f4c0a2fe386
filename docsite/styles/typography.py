"""Default prose styling for rendered Markdown, extended by configuration.

The preset is a nested mapping: scalar values are declarations on ``.prose``
itself, mapping values are nested selectors, and ``False`` removes a selector
from the preset entirely.
"""

from __future__ import annotations

import re
import typing as typ

if typ.TYPE_CHECKING:
    from .tokens import Theme

PROSE_CLASS = "prose"

PROSE_PRESET: dict[str, typ.Any] = {
    "color": "theme(colors.gray.700)",
    "maxWidth": "65ch",
    "fontSize": "1rem",
    "lineHeight": "1.75",
    "p": {"marginTop": "1.25em", "marginBottom": "1.25em"},
    "a": {
        "color": "theme(colors.gray.900)",
        "textDecoration": "underline",
        "fontWeight": 500,
    },
    "strong": {"color": "theme(colors.gray.900)", "fontWeight": 600},
    "h1": {
        "color": "theme(colors.gray.900)",
        "fontWeight": 800,
        "fontSize": "2.25em",
        "marginTop": 0,
        "marginBottom": "0.8888889em",
        "lineHeight": "1.1111111",
    },
    "h2": {
        "color": "theme(colors.gray.900)",
        "fontWeight": 700,
        "fontSize": "1.5em",
        "marginTop": "2em",
        "marginBottom": "1em",
        "lineHeight": "1.3333333",
    },
    "h3": {
        "color": "theme(colors.gray.900)",
        "fontWeight": 600,
        "fontSize": "1.25em",
        "marginTop": "1.6em",
        "marginBottom": "0.6em",
        "lineHeight": "1.6",
    },
    "ul": {"listStyleType": "disc", "paddingLeft": "1.625em"},
    "ol": {"listStyleType": "decimal", "paddingLeft": "1.625em"},
    "li": {"marginTop": "0.5em", "marginBottom": "0.5em"},
    "blockquote": {
        "fontWeight": 500,
        "fontStyle": "italic",
        "color": "theme(colors.gray.900)",
        "borderLeftWidth": "0.25rem",
        "borderLeftColor": "theme(colors.gray.200)",
        "paddingLeft": "1em",
    },
    "hr": {
        "borderColor": "theme(colors.gray.200)",
        "borderTopWidth": "1px",
        "marginTop": "3em",
        "marginBottom": "3em",
    },
    "code": {"color": "theme(colors.gray.900)", "fontWeight": 600, "fontSize": "0.875em"},
    "code::before": {"content": '"`"'},
    "code::after": {"content": '"`"'},
    "pre": {
        "color": "theme(colors.gray.200)",
        "backgroundColor": "theme(colors.gray.800)",
        "overflowX": "auto",
        "fontSize": "0.875em",
        "lineHeight": "1.7142857",
        "marginTop": "1.7142857em",
        "marginBottom": "1.7142857em",
        "borderRadius": "0.375rem",
        "paddingTop": "0.8571429em",
        "paddingRight": "1.1428571em",
        "paddingBottom": "0.8571429em",
        "paddingLeft": "1.1428571em",
    },
    "pre code": {
        "backgroundColor": "transparent",
        "borderWidth": 0,
        "borderRadius": 0,
        "padding": 0,
        "fontWeight": "inherit",
        "color": "inherit",
        "fontSize": "inherit",
        "fontFamily": "inherit",
        "lineHeight": "inherit",
    },
    "pre code::before": {"content": "none"},
    "pre code::after": {"content": "none"},
    "table": {"width": "100%", "tableLayout": "auto", "textAlign": "left"},
    "thead th": {"color": "theme(colors.gray.900)", "fontWeight": 600},
}


def kebab_case(name: str) -> str:
    """Convert a camelCase property name to its CSS spelling."""
    return re.sub(r"(?<!^)(?=[A-Z])", "-", name).lower()


def merge_preset(
    base: typ.Mapping[str, typ.Any], overrides: typ.Mapping[str, typ.Any]
) -> dict[str, typ.Any]:
    """Extend ``base`` with ``overrides``; selector mappings merge key by key."""
    merged: dict[str, typ.Any] = {}
    for key, value in base.items():
        merged[key] = dict(value) if isinstance(value, dict) else value
    for key, value in overrides.items():
        current = merged.get(key)
        if isinstance(value, dict) and isinstance(current, dict):
            current.update(value)
        else:
            merged[key] = dict(value) if isinstance(value, dict) else value
    return merged


def _scoped(selector: str) -> str:
    return ", ".join(
        f".{PROSE_CLASS} {part.strip()}" for part in selector.split(",") if part.strip()
    )


def _declarations(rules: typ.Mapping[str, typ.Any], theme: Theme) -> tuple[str, ...]:
    return tuple(
        f"{kebab_case(prop)}: {theme.substitute(value)}"
        for prop, value in rules.items()
        if value is not None and value is not False and not isinstance(value, dict)
    )


def prose_rules(
    theme: Theme, overrides: typ.Mapping[str, typ.Any] | None = None
) -> list[tuple[str, tuple[str, ...]]]:
    """Return ``(selector, declarations)`` pairs for the prose component.

    Raises
    ------
    SiteConfigError
        If a value references an unknown theme token.
    """
    preset = merge_preset(PROSE_PRESET, overrides or {})
    rules: list[tuple[str, tuple[str, ...]]] = []
    root = _declarations(preset, theme)
    if root:
        rules.append((f".{PROSE_CLASS}", root))
    for selector, body in preset.items():
        if not isinstance(body, dict):
            continue
        declarations = _declarations(body, theme)
        if declarations:
            rules.append((_scoped(selector), declarations))
    return rules


__all__ = ["PROSE_CLASS", "PROSE_PRESET", "kebab_case", "merge_preset", "prose_rules"]
