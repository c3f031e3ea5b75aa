"""Build the workshop landing page.

This module takes the ordered document descriptors and the landing copy from
:class:`~workshop_pages.config.SiteConfig` and renders ``index.html``: the
hero, the configured markdown sections, and one card per document in
ascending ``id`` order linking to its generated page.

Typical usage pairs the loader with the composer:

>>> from pathlib import Path
>>> from workshop_pages.config import load_site_config
>>> from workshop_pages.index_page import IndexComposer
>>> site = load_site_config(Path("config/workshop.yaml"))  # doctest: +SKIP
>>> page = IndexComposer(site).compose(site.documents)  # doctest: +SKIP
>>> page.filename  # doctest: +SKIP
'index.html'

The composer reads Jinja templates from ``workshop_pages/templates`` by
default. It performs no filesystem writes; persisting the returned markup is
the job of :class:`~workshop_pages.writer.SiteWriter`.
"""

from __future__ import annotations

import dataclasses as dc
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
from markdown import markdown

from ._constants import INDEX_FILENAME, STYLESHEET_FILENAME

if typ.TYPE_CHECKING:  # pragma: no cover - import for type hints only
    from .config import DocumentDescriptor, LandingSection, SiteConfig


@dc.dataclass(frozen=True, slots=True)
class IndexPage:
    """The composed landing page and the entries it enumerates."""

    entries: tuple[DocumentDescriptor, ...]
    html: str
    filename: str


class IndexComposer:
    """Render a landing page enumerating every workshop document."""

    def __init__(
        self, site_config: SiteConfig, *, templates_dir: Path | None = None
    ) -> None:
        """Initialize the index composer.

        Parameters
        ----------
        site_config : SiteConfig
            Parsed site configuration providing site metadata and landing copy.
        templates_dir : Path, optional
            Directory containing the Jinja templates. Defaults to the
            ``workshop_pages/templates`` directory when ``None``.
        """
        self.site_config = site_config
        self.templates_dir = templates_dir or Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.template = self.env.get_template("index_page.jinja")
        self._markdown_extensions = ["sane_lists", "tables", "fenced_code"]

    def compose(self, descriptors: typ.Sequence[DocumentDescriptor]) -> IndexPage:
        """Render the landing page for ``descriptors`` in ascending ``id`` order."""
        entries = tuple(sorted(descriptors))
        landing = self.site_config.landing
        context = {
            "site": self.site_config.site,
            "landing": landing,
            "entries": [self._entry(descriptor) for descriptor in entries],
            "lead_html": self._render_markdown(landing.lead),
            "version_note_html": self._render_markdown(landing.version_note),
            "overview_html": self._render_markdown(
                landing.overview_text.replace("{count}", str(len(entries)))
            ),
            "sections_before": self._render_sections(landing.sections_before),
            "sections_after": self._render_sections(landing.sections_after),
            "closing_html": self._render_markdown(landing.closing_note),
            "first_href": entries[0].output_filename if entries else None,
            "index_filename": INDEX_FILENAME,
            "stylesheet_filename": STYLESHEET_FILENAME,
        }
        html = self.template.render(**context)
        if not html.endswith("\n"):
            html += "\n"
        return IndexPage(entries=entries, html=html, filename=INDEX_FILENAME)

    @staticmethod
    def _entry(descriptor: DocumentDescriptor) -> dict[str, typ.Any]:
        return {
            "ordinal": descriptor.id,
            "title": descriptor.title,
            "emoji": descriptor.emoji,
            "description": descriptor.description,
            "href": descriptor.output_filename,
        }

    def _render_sections(
        self, sections: typ.Iterable[LandingSection]
    ) -> list[dict[str, str]]:
        """Return landing sections with their markdown bodies rendered."""
        return [
            {"heading": section.heading, "html": self._render_markdown(section.body)}
            for section in sections
        ]

    def _render_markdown(self, text: str) -> str:
        normalized = (text or "").strip()
        if not normalized:
            return ""
        return markdown(
            normalized,
            extensions=self._markdown_extensions,
            output_format="html",
        )


__all__ = ["IndexComposer", "IndexPage"]
