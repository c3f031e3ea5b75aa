"""Cyclopts CLI entrypoint for generating the workshop website.

The ``workshop-pages`` console script defined here renders every configured
markdown exercise into a flat directory of HTML pages alongside ``index.html``
and ``style.css``. ``workshop-pages clean`` removes previously generated
files. Options can also be supplied through ``INPUT_*`` environment
variables, which keeps CI invocations short.

Examples
--------
Generate the site with the default directories:

>>> from workshop_pages.cli import main
>>> main()  # doctest: +SKIP

Render into a custom directory:

>>> from workshop_pages.cli import app
>>> app(["generate", "--output-dir", "dist"])  # doctest: +SKIP
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

import cyclopts
from cyclopts import App, Parameter
from ruamel.yaml import YAMLError

from .config import SiteConfigError, load_site_config
from .errors import WorkshopPagesError
from .generator import SiteGenerator
from .writer import SiteWriter

DEFAULT_CONFIG = Path("config/workshop.yaml")
DEFAULT_EXERCISES_DIR = Path("exercises")
DEFAULT_OUTPUT_DIR = Path("website")

logger = logging.getLogger(__name__)

app = App(name="workshop-pages", config=cyclopts.config.Env("INPUT_", command=False))  # type: ignore[unknown-argument]


def setup_logging(verbose: bool = False) -> None:
    """Configure logging for the CLI."""
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(levelname)s: %(message)s",
    )


def _format_path(path: Path) -> str:
    """Return a cwd-relative path when possible, otherwise the absolute path."""
    if path.is_absolute():
        try:
            return str(path.relative_to(Path.cwd()))
        except ValueError:  # pragma: no cover - fallback for different roots
            return str(path)
    return str(path)


@app.command(help="Generate the workshop website from markdown exercises.")
def generate(
    *,
    exercises_dir: typ.Annotated[
        Path, Parameter(help="Path to exercises directory", env_var="INPUT_EXERCISES")
    ] = DEFAULT_EXERCISES_DIR,
    output_dir: typ.Annotated[
        Path, Parameter(help="Path to output directory", env_var="INPUT_OUTPUT")
    ] = DEFAULT_OUTPUT_DIR,
    config: typ.Annotated[
        Path, Parameter(help="Path to site config", env_var="INPUT_CONFIG")
    ] = DEFAULT_CONFIG,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Render every configured exercise, the landing page, and the stylesheet.

    Parameters
    ----------
    exercises_dir : Path, optional
        Directory holding the markdown sources; defaults to ``exercises``.
    output_dir : Path, optional
        Directory receiving the generated site; created when missing and
        defaults to ``website``.
    config : Path, optional
        Path to the ``workshop.yaml`` configuration file.
    verbose : bool, optional
        Log per-stage and per-document progress.

    Raises
    ------
    SystemExit
        With status ``1`` when the configuration is invalid or any stage of
        the run fails. The success summary is only printed after every file
        has been written.
    """
    setup_logging(verbose)
    try:
        site_config = load_site_config(config)
    except (FileNotFoundError, TypeError, SiteConfigError, YAMLError) as exc:
        logger.error("Invalid configuration: %s", exc)
        raise SystemExit(1) from exc

    generator = SiteGenerator(
        site_config, source_dir=exercises_dir, output_dir=output_dir
    )
    try:
        result = generator.run()
    except WorkshopPagesError as exc:
        logger.error("Generation failed while %s: %s", exc.stage, exc)
        raise SystemExit(1) from exc

    for path in result.written:
        print(f"wrote {_format_path(path)}")
    print(
        f"Generated {result.page_count} exercise pages + index page "
        f"in {_format_path(output_dir)}"
    )


@app.command(help="Remove generated HTML and CSS files from the output directory.")
def clean(
    *,
    output_dir: typ.Annotated[
        Path, Parameter(help="Path to output directory", env_var="INPUT_OUTPUT")
    ] = DEFAULT_OUTPUT_DIR,
    verbose: typ.Annotated[bool, Parameter(help="Enable debug logging")] = False,
) -> None:
    """Delete previously generated pages and stylesheets."""
    setup_logging(verbose)
    try:
        removed = SiteWriter(output_dir).clean()
    except WorkshopPagesError as exc:
        logger.error("Clean failed: %s", exc)
        raise SystemExit(1) from exc
    for path in removed:
        print(f"removed {_format_path(path)}")


def main() -> None:
    """Invoke the Cyclopts application behind the ``workshop-pages`` command."""
    app()


if __name__ == "__main__":  # pragma: no cover - manual invocation helper
    main()
