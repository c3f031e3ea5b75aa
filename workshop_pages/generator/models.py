"""Shared dataclasses used by the page generation pipeline."""

from __future__ import annotations

import dataclasses as dc
from pathlib import Path

from workshop_pages.config.models import DocumentDescriptor, SiteMetadata


@dc.dataclass(frozen=True, slots=True)
class Navigation:
    """Bottom-of-page navigation targets.

    Attributes
    ----------
    previous : str
        Output filename of the preceding document, or the landing page for
        the first document.
    next : str | None
        Output filename of the following document; ``None`` for the last.
    next_ordinal : int | None
        Ordinal of the following document, used for the "Next" label.
    """

    previous: str
    next: str | None = None
    next_ordinal: int | None = None


@dc.dataclass(frozen=True, slots=True)
class PageViewModel:
    """Structured data passed to the exercise page template.

    Attributes
    ----------
    title : str
        Document title.
    ordinal : int
        Zero-based position shown as "Exercise N".
    emoji : str
        Decorative marker.
    body_html : str
        Converted and link-rewritten HTML fragment.
    navigation : Navigation
        Previous/next targets for the bottom navigation strip.
    site : SiteMetadata
        Site name, brand, and footer copy.
    html_title : str
        Text used for the ``<title>`` element.
    """

    title: str
    ordinal: int
    emoji: str
    body_html: str
    navigation: Navigation
    site: SiteMetadata
    html_title: str


@dc.dataclass(frozen=True, slots=True)
class RenderedPage:
    """A composed document page ready to be written."""

    descriptor: DocumentDescriptor
    html: str
    navigation: Navigation

    @property
    def filename(self) -> str:
        return self.descriptor.output_filename

    @property
    def previous(self) -> str:
        return self.navigation.previous

    @property
    def next(self) -> str | None:
        return self.navigation.next


@dc.dataclass(frozen=True, slots=True)
class GenerationResult:
    """Outcome of a successful generation run."""

    written: tuple[Path, ...]
    page_count: int


__all__ = [
    "GenerationResult",
    "Navigation",
    "PageViewModel",
    "RenderedPage",
]
