"""Typed dataclasses describing workshop site configuration structures."""

from __future__ import annotations

import dataclasses as dc
from pathlib import PurePosixPath

from workshop_pages._constants import (
    DEFAULT_OVERVIEW_LINK,
    DEFAULT_SOURCE_DIR_NAME,
    OUTPUT_SUFFIX,
)


class SiteConfigError(ValueError):
    """Raised when the site configuration is invalid or incomplete."""


@dc.dataclass(frozen=True, slots=True, order=True)
class DocumentDescriptor:
    """Static metadata for one workshop document and its place in the sequence.

    Descriptors compare and sort by ``id`` only; the remaining fields are
    excluded from ordering so the declared sequence is the single source of
    truth for navigation and index order.

    Attributes
    ----------
    id : int
        Zero-based ordinal position within the configured document list.
    title : str
        Human-readable document title.
    description : str
        Short summary shown on the landing page.
    emoji : str
        Decorative marker displayed next to the title.
    source_filename : str
        Markdown filename inside the source directory.
    """

    id: int
    title: str = dc.field(compare=False)
    description: str = dc.field(compare=False)
    emoji: str = dc.field(compare=False)
    source_filename: str = dc.field(compare=False)

    @property
    def output_filename(self) -> str:
        """Return the source filename with its suffix swapped for ``.html``."""
        return PurePosixPath(self.source_filename).with_suffix(OUTPUT_SUFFIX).name


@dc.dataclass(frozen=True, slots=True)
class LandingSection:
    """A heading plus markdown body rendered on the landing page."""

    heading: str
    body: str


@dc.dataclass(frozen=True, slots=True)
class LandingConfig:
    """Copy used to compose the landing page around the document grid."""

    title: str = "Workshop"
    lead: str = ""
    version_note: str = ""
    overview_heading: str = "Workshop Overview"
    overview_text: str = ""
    sections_before: tuple[LandingSection, ...] = ()
    sections_after: tuple[LandingSection, ...] = ()
    cta_label: str = "Start with Exercise 0"
    closing_note: str = ""


@dc.dataclass(frozen=True, slots=True)
class SiteMetadata:
    """Site-wide naming, styling, and link-rewriting settings."""

    name: str = "Workshop"
    brand: str = "Workshop"
    footer_note: str = ""
    pygments_style: str = "monokai"
    overview_link: str = DEFAULT_OVERVIEW_LINK
    source_dir_name: str = DEFAULT_SOURCE_DIR_NAME


@dc.dataclass(frozen=True, slots=True)
class SiteConfig:
    """Ordered documents alongside site metadata and landing copy."""

    documents: tuple[DocumentDescriptor, ...]
    site: SiteMetadata = dc.field(default_factory=SiteMetadata)
    landing: LandingConfig = dc.field(default_factory=LandingConfig)


__all__ = [
    "DocumentDescriptor",
    "LandingConfig",
    "LandingSection",
    "SiteConfig",
    "SiteConfigError",
    "SiteMetadata",
]
