"""Generate the utility stylesheet for a docsite build.

:class:`StylesheetBuilder` scans the configured content globs (plus the
package templates) for utility class names, resolves each against the theme,
applies any variant prefixes, and writes a deterministic CSS file made of
base rules, the prose preset and the utilities.

Example
-------
>>> from pathlib import Path
>>> from docsite.config import load_site_config
>>> from docsite.styles import StylesheetBuilder
>>> config = load_site_config(Path("docsite.yaml"))  # doctest: +SKIP
>>> StylesheetBuilder(config).run()  # doctest: +SKIP
PosixPath('public/styles.css')
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from docsite.generator.highlighter import CODE_CONTAINER_CLASSES
from docsite.generator.site_builder import DEFAULT_TEMPLATES_DIR

from .scanner import iter_content_files, scan_candidates
from .selectors import class_selector
from .tokens import build_theme
from .typography import prose_rules
from .utilities import resolve_utility
from .variants import build_variant_registry

if typ.TYPE_CHECKING:
    import collections.abc as cabc

    from docsite.config import SiteConfig

_log = logging.getLogger(__name__)

Rule: typ.TypeAlias = tuple[str, tuple[str, ...]]


def format_rule(selector: str, declarations: cabc.Iterable[str]) -> str:
    """Serialize one CSS rule."""
    body = "".join(f"  {declaration};\n" for declaration in declarations)
    return f"{selector} {{\n{body}}}\n"


class StylesheetBuilder:
    """Build the utility stylesheet from scanned content."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        output: Path | None = None,
        output_dir: Path | None = None,
        templates_dir: Path | None = None,
    ) -> None:
        """Initialize the builder and resolve the theme and variants.

        Parameters
        ----------
        site_config : SiteConfig
            Site configuration; ``styles`` drives scanning and tokens, ``head``
            contributes the root element classes.
        output : Path, optional
            Override for the stylesheet path; defaults to
            ``stylesheet_output``, or its place under ``output_dir``.
        output_dir : Path, optional
            Override for the HTML output directory. The stylesheet moves with
            it and the pages written there are scanned for classes.
        templates_dir : Path, optional
            Template directory scanned in addition to the content globs.

        Raises
        ------
        SiteConfigError
            If the colour remaps name an unknown palette.
        """
        self.site = site_config
        self.styles = site_config.styles
        self.output_dir = output_dir
        self.output = output or site_config.stylesheet_path(output_dir)
        self.templates_dir = templates_dir or DEFAULT_TEMPLATES_DIR
        self.theme = build_theme(self.styles)
        self.variants = build_variant_registry(self.styles)

    def run(self) -> Path:
        """Write the stylesheet and return its path."""
        css = self.build()
        self.output.parent.mkdir(parents=True, exist_ok=True)
        self.output.write_text(css, encoding="utf-8")
        _log.info("Wrote stylesheet %s", self.output)
        return self.output

    def build(self, candidates: cabc.Iterable[str] | None = None) -> str:
        """Return the stylesheet text for ``candidates`` (scanned when omitted)."""
        names = set(self.candidates() if candidates is None else candidates)
        chunks = [format_rule(selector, body) for selector, body in self.base_rules()]
        chunks.extend(
            format_rule(selector, body)
            for selector, body in prose_rules(self.theme, self.styles.typography)
        )
        chunks.extend(
            format_rule(selector, body) for selector, body in self.utility_rules(names)
        )
        return "\n".join(chunks)

    def candidates(self) -> set[str]:
        """Return every class-like token found in the scanned files."""
        files = iter_content_files(self.site.root, self.styles.content)
        files.extend(iter_content_files(self.templates_dir, ["**/*.jinja"]))
        if self.output_dir is not None:
            files.extend(iter_content_files(self.output_dir, ["**/*.html"]))
        _log.debug("Scanning %d files for utility classes", len(files))
        found = scan_candidates(files)
        found.update(CODE_CONTAINER_CLASSES)
        found.update(self.site.head.html_class.split())
        found.update(self.site.head.body_class.split())
        return found

    def base_rules(self) -> list[Rule]:
        """Return the reset rules and the body font stack."""
        return [
            (
                "*, ::before, ::after",
                (
                    "box-sizing: border-box",
                    "border-width: 0",
                    "border-style: solid",
                    f"border-color: {self.theme.substitute('theme(colors.gray.200)')}",
                ),
            ),
            (
                "html",
                (
                    "line-height: 1.5",
                    "-webkit-text-size-adjust: 100%",
                    f"font-family: {self.theme.value('fontFamily.sans')}",
                ),
            ),
            ("body", ("margin: 0", "line-height: inherit")),
        ]

    def utility_rules(self, candidates: cabc.Iterable[str]) -> list[Rule]:
        """Return resolved utility rules, plain utilities before variants."""
        keyed: list[tuple[tuple[typ.Any, ...], Rule]] = []
        for candidate in set(candidates):
            for key, rule in self.compile_candidate(candidate):
                keyed.append((key, rule))
        keyed.sort(key=lambda item: item[0])
        return [rule for _key, rule in keyed]

    def compile_candidate(
        self, candidate: str
    ) -> list[tuple[tuple[typ.Any, ...], Rule]]:
        """Resolve one (possibly variant-prefixed) class name into rules.

        ``exact:hover:font-bold`` applies ``hover`` then ``exact`` to the
        selector of ``font-bold``. Ancestor variants such as ``dark`` are
        applied last so the other variants stay on the element itself.
        Unknown variants or utilities yield nothing.
        """
        *variant_names, base = candidate.split(self.styles.separator)
        if not base or any(name not in self.variants for name in variant_names):
            return []
        specs = resolve_utility(base, self.theme)
        if not specs:
            return []
        variants = [self.variants.get(name) for name in reversed(variant_names)]
        selector = class_selector(candidate)
        for variant in sorted(variants, key=lambda item: item.ancestor):
            selector = variant.modify(selector)
        order = tuple(self.variants.order(name) for name in variant_names)
        return [
            (
                (len(variant_names), order, candidate, index),
                (f"{selector}{spec.selector_suffix}", spec.declarations),
            )
            for index, spec in enumerate(specs)
        ]


__all__ = ["StylesheetBuilder", "format_rule"]
