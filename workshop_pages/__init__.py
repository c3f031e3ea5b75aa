"""Static site generator for the markdown workshop exercises.

This package exposes the CLI entry points used by ``uv run workshop-pages``
to render the exercise pages, the landing page, and the shared stylesheet.

Exports
-------
- ``app``: Cyclopts application entry for subcommands.
- ``main``: Convenience function that invokes the Cyclopts app.

Examples
--------
>>> from workshop_pages import main
>>> main()  # doctest: +SKIP
"""

from __future__ import annotations

from .cli import app, main

__all__ = ["app", "main"]
