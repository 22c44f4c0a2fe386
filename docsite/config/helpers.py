"""Utility helpers shared by the docsite configuration loader."""

from __future__ import annotations

import typing as typ

from .models import (
    HeadConfig,
    LinkTagConfig,
    MarkdownConfig,
    MetaTagConfig,
    SiteConfigError,
    StylesConfig,
    VariantConfig,
)


def _normalize_classes(value: str | list[object] | None) -> list[str]:
    """Normalize class definitions into a list of non-empty strings."""
    if isinstance(value, str):
        return [segment for segment in value.split() if segment]
    if isinstance(value, list):
        normalized: list[str] = []
        for segment in value:
            text = str(segment).strip()
            if text:
                normalized.append(text)
        return normalized
    return []


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _string_attrs(payload: typ.Mapping[str, typ.Any], *, skip: str = "") -> dict[str, str]:
    """Return the mapping with values stringified, dropping ``skip`` and nulls."""
    return {
        str(key): str(value)
        for key, value in payload.items()
        if key != skip and value is not None
    }


def _merge_meta(
    base: list[MetaTagConfig], extra: list[object] | None
) -> list[MetaTagConfig]:
    """Append extra meta entries, replacing defaults that share a ``hid``."""
    merged = list(base)
    for entry in extra or []:
        if not isinstance(entry, dict):
            msg = f"Head meta entries must be mappings, got {entry!r}."
            raise SiteConfigError(msg)
        hid = _optional_str(entry.get("hid"))
        tag = MetaTagConfig(_string_attrs(entry, skip="hid"), hid=hid)
        index = next(
            (idx for idx, item in enumerate(merged) if hid and item.hid == hid),
            None,
        )
        if index is None:
            merged.append(tag)
        else:
            merged[index] = tag
    return merged


def _merge_links(
    base: list[LinkTagConfig], extra: list[object] | None
) -> list[LinkTagConfig]:
    """Append extra link entries after the defaults."""
    merged = list(base)
    for entry in extra or []:
        if not isinstance(entry, dict):
            msg = f"Head link entries must be mappings, got {entry!r}."
            raise SiteConfigError(msg)
        merged.append(LinkTagConfig(_string_attrs(entry)))
    return merged


def _build_head_config(payload: typ.Mapping[str, typ.Any]) -> HeadConfig:
    """Build a HeadConfig instance from the provided mapping payload."""
    base = HeadConfig()
    return HeadConfig(
        title=_optional_str(payload.get("title")) or base.title,
        lang=_optional_str(payload.get("lang")) or base.lang,
        html_class=" ".join(
            _normalize_classes(payload.get("html_class", base.html_class))
        ),
        body_class=" ".join(
            _normalize_classes(payload.get("body_class", base.body_class))
        ),
        meta=_merge_meta(base.meta, payload.get("meta")),
        link=_merge_links(base.link, payload.get("link")),
    )


def _build_markdown_config(payload: typ.Mapping[str, typ.Any]) -> MarkdownConfig:
    """Build a MarkdownConfig instance from the provided mapping payload."""
    base = MarkdownConfig()
    return MarkdownConfig(
        theme=_optional_str(payload.get("theme")) or base.theme,
        fallback_language=_optional_str(payload.get("fallback_language"))
        or base.fallback_language,
    )


def _build_variants(raw: list[object] | None) -> list[VariantConfig]:
    """Parse declarative marker variant definitions."""
    variants: list[VariantConfig] = []
    for entry in raw or []:
        match entry:
            case {"name": str() as name, "marker": str() as marker} if (
                name.strip() and marker.strip()
            ):
                variants.append(VariantConfig(name=name.strip(), marker=marker.strip()))
            case _:
                msg = f"Variant entries need non-empty 'name' and 'marker': {entry!r}"
                raise SiteConfigError(msg)
    return variants


def _merge_typography(
    base: typ.Mapping[str, typ.Any], override: typ.Mapping[str, typ.Any] | None
) -> dict[str, typ.Any]:
    """Deep-merge typography overrides into the base preset, per selector."""
    merged: dict[str, typ.Any] = {
        selector: dict(rules) if isinstance(rules, dict) else rules
        for selector, rules in base.items()
    }
    for selector, rules in (override or {}).items():
        existing = merged.get(selector)
        if isinstance(rules, dict) and isinstance(existing, dict):
            existing.update(rules)
        elif isinstance(rules, dict):
            merged[selector] = dict(rules)
        else:
            merged[selector] = rules
    return merged


def _build_styles_config(payload: typ.Mapping[str, typ.Any]) -> StylesConfig:
    """Build a StylesConfig instance, extending defaults with overrides."""
    base = StylesConfig()
    content = payload.get("content")
    colors = dict(base.colors)
    colors.update({str(k): str(v) for k, v in (payload.get("colors") or {}).items()})
    font_family = dict(base.font_family)
    for family, stack in (payload.get("font_family") or {}).items():
        entries = stack if isinstance(stack, list) else str(stack).split(",")
        font_family[str(family)] = [
            text for text in (str(item).strip() for item in entries) if text
        ]
    variants = (
        _build_variants(payload["variants"])
        if "variants" in payload
        else base.variants
    )
    separator = str(payload.get("separator", base.separator))
    if not separator:
        msg = "Style separator must not be empty."
        raise SiteConfigError(msg)
    return StylesConfig(
        content=[str(item) for item in content] if content else base.content,
        colors=colors,
        font_family=font_family,
        typography=_merge_typography(base.typography, payload.get("typography")),
        variants=variants,
        separator=separator,
        dark_mode=str(payload.get("dark_mode", base.dark_mode)),
    )


__all__ = [
    "_build_head_config",
    "_build_markdown_config",
    "_build_styles_config",
    "_merge_typography",
    "_normalize_classes",
    "_optional_str",
]
