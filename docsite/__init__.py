"""Static documentation site builder.

This package renders a directory of Markdown documents into themed HTML pages
and generates the utility-class stylesheet those pages use. The CLI entry
points are exposed for ``docsite`` console usage.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from docsite import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
