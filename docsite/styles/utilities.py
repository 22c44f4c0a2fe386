"""Map base utility class names to CSS declarations."""

from __future__ import annotations

import dataclasses as dc
import re
import typing as typ

if typ.TYPE_CHECKING:
    from .tokens import Theme


@dc.dataclass(frozen=True, slots=True)
class RuleSpec:
    """Declarations for one utility, optionally scoped by a selector suffix."""

    selector_suffix: str
    declarations: tuple[str, ...]


SPACING_PROPERTIES: dict[str, tuple[str, ...]] = {
    "p": ("padding",),
    "px": ("padding-left", "padding-right"),
    "py": ("padding-top", "padding-bottom"),
    "pt": ("padding-top",),
    "pr": ("padding-right",),
    "pb": ("padding-bottom",),
    "pl": ("padding-left",),
    "m": ("margin",),
    "mx": ("margin-left", "margin-right"),
    "my": ("margin-top", "margin-bottom"),
    "mt": ("margin-top",),
    "mr": ("margin-right",),
    "mb": ("margin-bottom",),
    "ml": ("margin-left",),
}

DISPLAY = {
    "block": "block",
    "inline-block": "inline-block",
    "inline": "inline",
    "flex": "flex",
    "inline-flex": "inline-flex",
    "grid": "grid",
    "hidden": "none",
}

FLEX = {
    "flex-1": ("flex: 1 1 0%",),
    "flex-auto": ("flex: 1 1 auto",),
    "flex-none": ("flex: none",),
    "flex-row": ("flex-direction: row",),
    "flex-col": ("flex-direction: column",),
    "items-start": ("align-items: flex-start",),
    "items-center": ("align-items: center",),
    "items-end": ("align-items: flex-end",),
    "justify-start": ("justify-content: flex-start",),
    "justify-center": ("justify-content: center",),
    "justify-between": ("justify-content: space-between",),
    "justify-end": ("justify-content: flex-end",),
}

BORDER_RADIUS = {
    "rounded-none": "0px",
    "rounded-sm": "0.125rem",
    "rounded": "0.25rem",
    "rounded-md": "0.375rem",
    "rounded-lg": "0.5rem",
    "rounded-xl": "0.75rem",
    "rounded-2xl": "1rem",
    "rounded-3xl": "1.5rem",
    "rounded-full": "9999px",
}

FONT_SIZES = {
    "xs": ("0.75rem", "1rem"),
    "sm": ("0.875rem", "1.25rem"),
    "base": ("1rem", "1.5rem"),
    "lg": ("1.125rem", "1.75rem"),
    "xl": ("1.25rem", "1.75rem"),
    "2xl": ("1.5rem", "2rem"),
    "3xl": ("1.875rem", "2.25rem"),
    "4xl": ("2.25rem", "2.5rem"),
    "5xl": ("3rem", "1"),
    "6xl": ("3.75rem", "1"),
}

FONT_WEIGHTS = {
    "thin": "100",
    "extralight": "200",
    "light": "300",
    "normal": "400",
    "medium": "500",
    "semibold": "600",
    "bold": "700",
    "extrabold": "800",
    "black": "900",
}

TEXT_ALIGN = {"left", "center", "right", "justify"}

SIZE_KEYWORDS = {
    "auto": "auto",
    "full": "100%",
    "min": "min-content",
    "max": "max-content",
    "fit": "fit-content",
}

MAX_WIDTHS = {
    "none": "none",
    "xs": "20rem",
    "sm": "24rem",
    "md": "28rem",
    "lg": "32rem",
    "xl": "36rem",
    "2xl": "42rem",
    "3xl": "48rem",
    "4xl": "56rem",
    "5xl": "64rem",
    "6xl": "72rem",
    "7xl": "80rem",
    "full": "100%",
    "prose": "65ch",
}

BORDER_WIDTHS = {"": "1px", "0": "0px", "2": "2px", "4": "4px", "8": "8px"}
BORDER_SIDES = {
    "t": ("border-top-width",),
    "r": ("border-right-width",),
    "b": ("border-bottom-width",),
    "l": ("border-left-width",),
    "x": ("border-left-width", "border-right-width"),
    "y": ("border-top-width", "border-bottom-width"),
}

SHADOWS = {
    "shadow-sm": "0 1px 2px 0 rgb(0 0 0 / 0.05)",
    "shadow": "0 1px 3px 0 rgb(0 0 0 / 0.1), 0 1px 2px -1px rgb(0 0 0 / 0.1)",
    "shadow-md": "0 4px 6px -1px rgb(0 0 0 / 0.1), 0 2px 4px -2px rgb(0 0 0 / 0.1)",
    "shadow-lg": "0 10px 15px -3px rgb(0 0 0 / 0.1), 0 4px 6px -4px rgb(0 0 0 / 0.1)",
    "shadow-xl": "0 20px 25px -5px rgb(0 0 0 / 0.1), 0 8px 10px -6px rgb(0 0 0 / 0.1)",
    "shadow-none": "0 0 #0000",
}

OVERFLOW_PATTERN = re.compile(
    r"^overflow(?:-(?P<axis>[xy]))?-(?P<value>auto|hidden|clip|visible|scroll)$"
)
FRACTION_PATTERN = re.compile(r"^(?P<num>\d+)/(?P<den>\d+)$")
SPACE_BETWEEN_SELECTOR = " > :not([hidden]) ~ :not([hidden])"


def _rule(*declarations: str, suffix: str = "") -> list[RuleSpec]:
    return [RuleSpec(suffix, tuple(declarations))]


def _size_value(token: str, theme: Theme, *, axis: str) -> str | None:
    if token in SIZE_KEYWORDS:
        return SIZE_KEYWORDS[token]
    if token == "screen":
        return "100vw" if axis == "w" else "100vh"
    fraction = FRACTION_PATTERN.match(token)
    if fraction:
        numerator = int(fraction.group("num"))
        denominator = int(fraction.group("den"))
        if denominator == 0:
            return None
        return f"{numerator / denominator * 100:g}%"
    return theme.spacing.get(token)


def rules_for_spacing(prefix: str, token: str, theme: Theme) -> list[RuleSpec]:
    """Resolve ``p-4`` / ``mx-auto`` / ``-mt-2`` style utilities."""
    negative = prefix.startswith("-")
    props = SPACING_PROPERTIES[prefix.lstrip("-")]
    if token == "auto" and not negative and prefix.lstrip("-").startswith("m"):
        value = "auto"
    else:
        resolved = theme.spacing.get(token)
        if resolved is None:
            return []
        value = f"-{resolved}" if negative and resolved != "0px" else resolved
    return _rule(*(f"{prop}: {value}" for prop in props))


def rules_for_space_between(axis: str, token: str, theme: Theme) -> list[RuleSpec]:
    """Resolve ``space-y-2`` / ``space-x-4`` sibling spacing."""
    value = theme.spacing.get(token)
    if value is None:
        return []
    prop = "margin-top" if axis == "y" else "margin-left"
    return _rule(f"{prop}: {value}", suffix=SPACE_BETWEEN_SELECTOR)


def rules_for_border(base: str, theme: Theme) -> list[RuleSpec]:
    """Resolve border widths and colours."""
    rest = base[len("border") :].lstrip("-")
    if rest in BORDER_WIDTHS:
        return _rule(f"border-width: {BORDER_WIDTHS[rest]}")
    side, _, width = rest.partition("-")
    if side in BORDER_SIDES and width in BORDER_WIDTHS:
        value = BORDER_WIDTHS[width]
        return _rule(*(f"{prop}: {value}" for prop in BORDER_SIDES[side]))
    color = theme.color(rest)
    if color:
        return _rule(f"border-color: {color}")
    return []


def rules_for_text(token: str, theme: Theme) -> list[RuleSpec]:
    """Resolve text size, alignment and colour utilities."""
    if token in FONT_SIZES:
        size, line_height = FONT_SIZES[token]
        return _rule(f"font-size: {size}", f"line-height: {line_height}")
    if token in TEXT_ALIGN:
        return _rule(f"text-align: {token}")
    color = theme.color(token)
    if color:
        return _rule(f"color: {color}")
    return []


def rules_for_font(token: str, theme: Theme) -> list[RuleSpec]:
    """Resolve font weight and font family utilities."""
    if token in FONT_WEIGHTS:
        return _rule(f"font-weight: {FONT_WEIGHTS[token]}")
    if token in theme.font_family:
        return _rule(f"font-family: {theme.value(f'fontFamily.{token}')}")
    return []


def resolve_utility(base: str, theme: Theme) -> list[RuleSpec]:  # noqa: C901, PLR0911, PLR0912
    """Return the rules generated by a base (variant-free) utility name.

    Unknown names produce an empty list so arbitrary scanned tokens can be fed
    straight in.
    """
    if base in DISPLAY:
        return _rule(f"display: {DISPLAY[base]}")
    if base in FLEX:
        return _rule(*FLEX[base])
    if base in BORDER_RADIUS:
        return _rule(f"border-radius: {BORDER_RADIUS[base]}")
    if base in SHADOWS:
        return _rule(f"box-shadow: {SHADOWS[base]}")
    overflow = OVERFLOW_PATTERN.match(base)
    if overflow:
        axis = overflow.group("axis")
        prop = f"overflow-{axis}" if axis else "overflow"
        return _rule(f"{prop}: {overflow.group('value')}")

    if base == "border" or base.startswith("border-"):
        return rules_for_border(base, theme)

    prefix, _, token = base.lstrip("-").partition("-")
    if base.startswith("-"):
        prefix = f"-{prefix}"
    if not token:
        return []
    if prefix.lstrip("-") in SPACING_PROPERTIES:
        return rules_for_spacing(prefix, token, theme)
    if prefix == "space" and token[:2] in ("x-", "y-"):
        return rules_for_space_between(token[0], token[2:], theme)
    if prefix in ("w", "h"):
        value = _size_value(token, theme, axis=prefix)
        prop = "width" if prefix == "w" else "height"
        return _rule(f"{prop}: {value}") if value else []
    if prefix == "min" and token.startswith("h-"):
        value = {"full": "100%", "screen": "100vh", "0": "0px"}.get(token[2:])
        return _rule(f"min-height: {value}") if value else []
    if prefix == "max" and token.startswith("w-"):
        value = MAX_WIDTHS.get(token[2:])
        return _rule(f"max-width: {value}") if value else []
    if prefix == "text":
        return rules_for_text(token, theme)
    if prefix == "font":
        return rules_for_font(token, theme)
    if prefix == "bg":
        color = theme.color(token)
        return _rule(f"background-color: {color}") if color else []
    return []


__all__ = ["RuleSpec", "resolve_utility"]
