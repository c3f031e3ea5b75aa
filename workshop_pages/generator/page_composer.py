"""Compose exercise pages with previous/next navigation.

:func:`resolve_navigation` derives the bottom navigation targets for one
document from the ordered descriptor list, and :class:`PageComposer` wraps a
converted fragment in the ``exercise_page.jinja`` template using an explicit
:class:`~workshop_pages.generator.models.PageViewModel`. Composition is a pure
function of its inputs; nothing is read from or written to disk after the
template is loaded.

Example
-------
>>> from workshop_pages.config import DocumentDescriptor, SiteMetadata
>>> docs = (
...     DocumentDescriptor(0, "Setup", "", "", "00-setup.md"),
...     DocumentDescriptor(1, "Build", "", "", "01-build.md"),
... )
>>> resolve_navigation(docs, docs[0])
Navigation(previous='index.html', next='01-build.html', next_ordinal=1)
"""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from jinja2 import Environment, FileSystemLoader

from workshop_pages._constants import INDEX_FILENAME, STYLESHEET_FILENAME
from workshop_pages.config.models import DocumentDescriptor, SiteMetadata
from workshop_pages.generator.models import Navigation, PageViewModel, RenderedPage

logger = logging.getLogger(__name__)


def resolve_navigation(
    descriptors: typ.Sequence[DocumentDescriptor], descriptor: DocumentDescriptor
) -> Navigation:
    """Return the previous/next targets for ``descriptor``.

    Parameters
    ----------
    descriptors : Sequence[DocumentDescriptor]
        Every configured document; ordered by ``id`` before use.
    descriptor : DocumentDescriptor
        The document whose page is being composed.

    Returns
    -------
    Navigation
        ``previous`` is the preceding document's output filename or
        ``index.html`` for the first document; ``next`` is the following
        document's output filename or ``None`` for the last.

    Raises
    ------
    ValueError
        If ``descriptor`` is not part of ``descriptors``.
    """
    ordered = sorted(descriptors)
    position = ordered.index(descriptor)
    previous = ordered[position - 1].output_filename if position > 0 else INDEX_FILENAME
    if position + 1 < len(ordered):
        following = ordered[position + 1]
        return Navigation(previous, following.output_filename, following.id)
    return Navigation(previous)


class PageComposer:
    """Wrap converted document fragments in the exercise page template."""

    def __init__(self, site: SiteMetadata, *, templates_dir: Path | None = None) -> None:
        """Initialize the composer and its Jinja environment.

        Parameters
        ----------
        site : SiteMetadata
            Site name, brand, and footer copy shared by every page.
        templates_dir : Path, optional
            Directory containing Jinja templates; defaults to the package
            templates.
        """
        self.site = site
        default_templates = Path(__file__).resolve().parents[1] / "templates"
        self.templates_dir = templates_dir or default_templates
        self.env = Environment(
            loader=FileSystemLoader(str(self.templates_dir)),
            autoescape=True,
            trim_blocks=True,
            lstrip_blocks=True,
            keep_trailing_newline=True,
        )
        self.template = self.env.get_template("exercise_page.jinja")

    def build_view_model(
        self,
        descriptor: DocumentDescriptor,
        body_html: str,
        descriptors: typ.Sequence[DocumentDescriptor],
    ) -> PageViewModel:
        """Return the template view-model for ``descriptor``."""
        return PageViewModel(
            title=descriptor.title,
            ordinal=descriptor.id,
            emoji=descriptor.emoji,
            body_html=body_html,
            navigation=resolve_navigation(descriptors, descriptor),
            site=self.site,
            html_title=f"Exercise {descriptor.id}: {descriptor.title} - {self.site.name}",
        )

    def compose(
        self,
        descriptor: DocumentDescriptor,
        body_html: str,
        descriptors: typ.Sequence[DocumentDescriptor],
    ) -> RenderedPage:
        """Render the full page markup for one document.

        Parameters
        ----------
        descriptor : DocumentDescriptor
            The document being composed.
        body_html : str
            Converted, link-rewritten HTML fragment for the document body.
        descriptors : Sequence[DocumentDescriptor]
            The full ordered descriptor list, used for navigation.

        Returns
        -------
        RenderedPage
            The descriptor, the page HTML, and its navigation targets.
        """
        view = self.build_view_model(descriptor, body_html, descriptors)
        html = self.template.render(
            page=view,
            site=view.site,
            index_filename=INDEX_FILENAME,
            stylesheet_filename=STYLESHEET_FILENAME,
        )
        if not html.endswith("\n"):
            html += "\n"
        logger.debug(
            "Composed %s (previous=%s, next=%s)",
            descriptor.output_filename,
            view.navigation.previous,
            view.navigation.next,
        )
        return RenderedPage(descriptor=descriptor, html=html, navigation=view.navigation)


__all__ = ["PageComposer", "resolve_navigation"]
