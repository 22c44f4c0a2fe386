"""Conditional utility prefixes (variants) and their selector rewrites.

A variant turns the selector of a prefixed utility into a conditional one.
``current:`` and ``exact:`` are declared in configuration as marker
variants: the rule applies only when the element also carries the router's
active-link marker class::

    >>> registry = VariantRegistry()
    >>> registry.add(marker_variant("current", "nuxt-link-active"))
    >>> print(registry.get("current").selector_for("foo", ":"))
    .nuxt-link-active.current\\:foo
"""

from __future__ import annotations

import collections.abc as cabc
import dataclasses as dc
import typing as typ

from docsite.config import SiteConfigError

from .selectors import escape_class_name

if typ.TYPE_CHECKING:
    from docsite.config import StylesConfig

SelectorRewrite: typ.TypeAlias = cabc.Callable[[str], str]


@dc.dataclass(frozen=True, slots=True)
class Variant:
    """A named prefix and the rewrite it applies to a class selector.

    ``ancestor`` variants wrap the selector in a descendant combinator and are
    applied after every variant that qualifies the element itself.
    """

    name: str
    rewrite: SelectorRewrite
    ancestor: bool = False

    def modify(self, selector: str) -> str:
        """Apply this variant to an already escaped class selector."""
        return self.rewrite(selector)

    def selector_for(self, class_name: str, separator: str) -> str:
        """Return the selector for ``class_name`` prefixed with this variant."""
        return self.modify(f".{escape_class_name(f'{self.name}{separator}{class_name}')}")


def marker_variant(name: str, marker: str) -> Variant:
    """Require the element to also carry the ``marker`` class."""
    prefix = f".{escape_class_name(marker)}"
    return Variant(name, lambda selector: f"{prefix}{selector}")


def pseudo_variant(name: str, pseudo: str | None = None) -> Variant:
    """Apply the rule only in the given pseudo-class state."""
    suffix = f":{pseudo or name}"
    return Variant(name, lambda selector: f"{selector}{suffix}")


def dark_class_variant(name: str = "dark") -> Variant:
    """Apply the rule beneath an element carrying the ``dark`` class."""
    return Variant(name, lambda selector: f".{name} {selector}", ancestor=True)


class VariantRegistry:
    """Ordered collection of variants keyed by prefix name."""

    def __init__(self, variants: cabc.Iterable[Variant] = ()) -> None:
        self._variants: dict[str, Variant] = {}
        for variant in variants:
            self.add(variant)

    def __contains__(self, name: object) -> bool:
        return name in self._variants

    def __iter__(self) -> cabc.Iterator[Variant]:
        return iter(self._variants.values())

    def add(self, variant: Variant) -> None:
        """Register ``variant``; a later registration replaces an earlier one."""
        if not variant.name:
            msg = "Variant names must not be empty."
            raise SiteConfigError(msg)
        self._variants.pop(variant.name, None)
        self._variants[variant.name] = variant

    def get(self, name: str) -> Variant:
        """Return the variant registered under ``name``."""
        try:
            return self._variants[name]
        except KeyError as exc:
            known = ", ".join(self._variants)
            msg = f"Unknown variant '{name}'. Known variants: {known}"
            raise KeyError(msg) from exc

    def order(self, name: str) -> int:
        """Return the registration position of ``name``."""
        return list(self._variants).index(name)


def build_variant_registry(styles: StylesConfig) -> VariantRegistry:
    """Return the built-in pseudo/dark variants followed by configured markers."""
    registry = VariantRegistry([pseudo_variant("hover"), pseudo_variant("focus")])
    if styles.dark_mode == "class":
        registry.add(dark_class_variant())
    for entry in styles.variants:
        registry.add(marker_variant(entry.name, entry.marker))
    return registry


__all__ = [
    "Variant",
    "VariantRegistry",
    "build_variant_registry",
    "dark_class_variant",
    "marker_variant",
    "pseudo_variant",
]
