"""High-level orchestration for workshop site generation.

This module coordinates reading every configured markdown document, rendering
it with :class:`HtmlContentRenderer`, rewriting document links, wrapping each
fragment in the exercise page template, building the landing page, and
writing the flat output directory. It exposes :class:`SiteGenerator`, which
consumes a :class:`~workshop_pages.config.SiteConfig`.

A run moves strictly through three stages: ``collecting`` (read and convert
every source), ``composing`` (pages and landing page), and ``writing``. Any
error aborts the run in the stage where it happened. Since every source is
collected before the first write, a missing source leaves the output
directory untouched.

Example
-------
>>> from pathlib import Path
>>> from workshop_pages.config import load_site_config
>>> from workshop_pages.generator import SiteGenerator
>>> config = load_site_config(Path("config/workshop.yaml"))  # doctest: +SKIP
>>> generator = SiteGenerator(
...     config, source_dir=Path("exercises"), output_dir=Path("website")
... )  # doctest: +SKIP
>>> generator.run().page_count  # doctest: +SKIP
11
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from workshop_pages._constants import STYLESHEET_FILENAME
from workshop_pages.errors import ConversionError, RunStage, WorkshopPagesError
from workshop_pages.generator.link_rewriter import LinkRewriter
from workshop_pages.generator.models import GenerationResult
from workshop_pages.generator.page_composer import PageComposer
from workshop_pages.generator.renderer import HtmlContentRenderer
from workshop_pages.index_page import IndexComposer
from workshop_pages.sources import DirectorySourceProvider, SourceProvider
from workshop_pages.writer import SiteWriter

if typ.TYPE_CHECKING:
    from workshop_pages.config import DocumentDescriptor, SiteConfig

logger = logging.getLogger(__name__)

STATIC_DIR = Path(__file__).resolve().parents[1] / "static"


class SiteGenerator:
    """Render every configured document and write the workshop site."""

    def __init__(
        self,
        site_config: SiteConfig,
        *,
        source_dir: Path,
        output_dir: Path,
        templates_dir: Path | None = None,
        source_provider: SourceProvider | None = None,
    ) -> None:
        """Initialize the generator with configuration and collaborators.

        Parameters
        ----------
        site_config : SiteConfig
            Ordered documents, site metadata, and landing copy.
        source_dir : Path
            Directory containing the markdown sources.
        output_dir : Path
            Directory receiving the generated HTML and stylesheet.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package templates.
        source_provider : SourceProvider, optional
            Override for reading sources; defaults to reading ``source_dir``.
        """
        self.config = site_config
        self.documents: tuple[DocumentDescriptor, ...] = tuple(
            sorted(site_config.documents)
        )
        self.source_dir = source_dir
        self.output_dir = output_dir
        self.sources = source_provider or DirectorySourceProvider(source_dir)
        self.link_rewriter = LinkRewriter.for_documents(
            {d.source_filename: d.output_filename for d in self.documents},
            overview_link=site_config.site.overview_link,
            source_dir_name=site_config.site.source_dir_name,
        )
        self.renderer = HtmlContentRenderer(
            site_config.site.pygments_style,
            link_extension=self.link_rewriter.extension(),
        )
        self.page_composer = PageComposer(site_config.site, templates_dir=templates_dir)
        self.index_composer = IndexComposer(site_config, templates_dir=templates_dir)
        self.writer = SiteWriter(output_dir)
        self.stage = RunStage.COLLECTING

    def run(self) -> GenerationResult:
        """Collect, compose, and write the site.

        Returns
        -------
        GenerationResult
            Written paths (pages in document order, then the landing page and
            stylesheet) and the number of document pages.

        Raises
        ------
        WorkshopPagesError
            ``SourceNotFoundError`` or ``ConversionError`` while collecting,
            ``SiteWriteError`` while writing. The error's ``stage`` records
            where the run stopped.
        """
        self._enter(RunStage.COLLECTING)
        fragments = self._collect()

        self._enter(RunStage.COMPOSING)
        pages = [
            self.page_composer.compose(descriptor, fragments[descriptor.id], self.documents)
            for descriptor in self.documents
        ]
        index_page = self.index_composer.compose(self.documents)

        self._enter(RunStage.WRITING)
        files = [(page.filename, page.html) for page in pages]
        files.append((index_page.filename, index_page.html))
        files.append((STYLESHEET_FILENAME, self.stylesheet()))
        written = self.writer.write(files)
        return GenerationResult(written=tuple(written), page_count=len(pages))

    def render_fragment(self, descriptor: DocumentDescriptor) -> str:
        """Fetch and convert one document's body, rewriting its document links."""
        text = self.sources.fetch(descriptor.source_filename)
        try:
            html = self.renderer.markdown(text)
        except WorkshopPagesError:
            raise
        except Exception as exc:  # noqa: BLE001
            raise ConversionError(descriptor.source_filename, str(exc)) from exc
        return html

    def stylesheet(self) -> str:
        """Return the site stylesheet followed by the Pygments highlight rules."""
        base = (STATIC_DIR / STYLESHEET_FILENAME).read_text(encoding="utf-8")
        return f"{base.rstrip()}\n\n/* Syntax highlighting */\n{self.renderer.stylesheet}\n"

    def _collect(self) -> dict[int, str]:
        fragments: dict[int, str] = {}
        for descriptor in self.documents:
            logger.debug("Converting %s", descriptor.source_filename)
            fragments[descriptor.id] = self.render_fragment(descriptor)
        return fragments

    def _enter(self, stage: RunStage) -> None:
        logger.debug("Entering %s stage", stage)
        self.stage = stage


__all__ = ["STATIC_DIR", "SiteGenerator"]
