"""Cyclopts CLI entrypoint for building docsite pages and stylesheets.

The ``docsite`` console script defined here renders the Markdown content
directory into static HTML pages and generates the utility stylesheet those
pages use. Typical usage is ``docsite generate`` locally or in CI, and
``docsite styles`` when only templates or style settings changed.

Examples
--------
Build the site for the default configuration:

>>> from docsite.cli import main
>>> main()  # doctest: +SKIP

Rebuild only the stylesheet into a custom file:

>>> from docsite.cli import app
>>> app(["styles", "--output", "dist/site.css"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter

from .config import load_site_config
from .generator import SiteBuilder
from .styles import StylesheetBuilder

DEFAULT_CONFIG = Path("docsite.yaml")

app = App(name="docsite", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


def _configure_logging(*, verbose: bool) -> None:
    """Send library logs to stderr, at DEBUG when ``verbose`` is set."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command(help="Render Markdown content into static HTML pages and CSS.")
def generate(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output_dir: typ.Annotated[
        Path | None,
        Parameter(help="Override the output folder", env_var="INPUT_OUTPUT_DIR"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Generate every page and then the stylesheet.

    Parameters
    ----------
    config : Path, optional
        Path to the ``docsite.yaml`` configuration file (overridable via
        ``INPUT_CONFIG``).
    output_dir : Path or None, optional
        Override the HTML output directory. The stylesheet is written inside
        it as well.
    verbose : bool, optional
        Emit debug logs for discovery, highlighting and scanning.

    Returns
    -------
    None
        Writes rendered artifacts and prints the generated paths.
    """
    _configure_logging(verbose=verbose)
    site_config = load_site_config(config)
    written = SiteBuilder(site_config, output_dir=output_dir).run()
    for path in written:
        print(f"wrote {_format_path(path)}")
    stylesheet_path = StylesheetBuilder(site_config, output_dir=output_dir).run()
    print(f"wrote {_format_path(stylesheet_path)}")


@app.command(help="Generate only the utility stylesheet.")
def styles(
    *,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    output: typ.Annotated[
        Path | None,
        Parameter(help="Override the stylesheet path", env_var="INPUT_OUTPUT"),
    ] = None,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Scan content for utility classes and write the stylesheet."""
    _configure_logging(verbose=verbose)
    site_config = load_site_config(config)
    stylesheet_path = StylesheetBuilder(site_config, output=output).run()
    print(f"wrote {_format_path(stylesheet_path)}")


def main() -> None:
    """Invoke the Cyclopts application that powers the ``docsite`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
