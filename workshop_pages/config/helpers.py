"""Utility helpers shared by the workshop configuration loader."""

from __future__ import annotations

import typing as typ
from pathlib import PurePosixPath

from workshop_pages._constants import INDEX_FILENAME, SOURCE_SUFFIX

from .models import (
    DocumentDescriptor,
    LandingConfig,
    LandingSection,
    SiteConfigError,
    SiteMetadata,
)


def _optional_str(value: object | None) -> str | None:
    """Return a stripped string value or None when empty."""
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def _require_str(payload: typ.Mapping[str, typ.Any], key: str, where: str) -> str:
    """Return the non-empty string stored at ``key`` or raise SiteConfigError."""
    value = _optional_str(payload.get(key))
    if value is None:
        msg = f"{where} is missing '{key}'."
        raise SiteConfigError(msg)
    return value


def _build_site_metadata(payload: typ.Mapping[str, typ.Any]) -> SiteMetadata:
    """Build a SiteMetadata instance, falling back to defaults for blank fields."""
    base = SiteMetadata()
    name = _optional_str(payload.get("name")) or base.name
    return SiteMetadata(
        name=name,
        brand=_optional_str(payload.get("brand")) or name,
        footer_note=_optional_str(payload.get("footer_note")) or base.footer_note,
        pygments_style=_optional_str(payload.get("pygments_style"))
        or base.pygments_style,
        overview_link=_optional_str(payload.get("overview_link"))
        or base.overview_link,
        source_dir_name=_optional_str(payload.get("source_dir_name"))
        or base.source_dir_name,
    )


def _build_sections(raw: object, where: str) -> tuple[LandingSection, ...]:
    """Return landing sections built from a list of ``{heading, body}`` maps.

    Raises
    ------
    SiteConfigError
        If ``raw`` is neither absent nor a list, or an entry is not a mapping
        with a heading.
    """
    if raw is None:
        return ()
    if not isinstance(raw, list):
        msg = f"Landing '{where}' must be a list of sections."
        raise SiteConfigError(msg)
    sections: list[LandingSection] = []
    for position, entry in enumerate(raw):
        label = f"Landing '{where}' section #{position}"
        if not isinstance(entry, dict):
            msg = f"{label} must be a mapping."
            raise SiteConfigError(msg)
        heading = _require_str(entry, "heading", label)
        body = _optional_str(entry.get("body")) or ""
        sections.append(LandingSection(heading=heading, body=body))
    return tuple(sections)


def _build_landing_config(payload: typ.Mapping[str, typ.Any]) -> LandingConfig:
    """Build a LandingConfig instance, falling back to defaults per blank field."""
    base = LandingConfig()

    def _text(key: str) -> str:
        return _optional_str(payload.get(key)) or getattr(base, key)

    return LandingConfig(
        title=_text("title"),
        lead=_text("lead"),
        version_note=_text("version_note"),
        overview_heading=_text("overview_heading"),
        overview_text=_text("overview_text"),
        sections_before=_build_sections(
            payload.get("sections_before"), "sections_before"
        ),
        sections_after=_build_sections(payload.get("sections_after"), "sections_after"),
        cta_label=_text("cta_label"),
        closing_note=_text("closing_note"),
    )


def _build_documents(raw: object) -> tuple[DocumentDescriptor, ...]:
    """Build ordered descriptors, assigning ``id`` by list position.

    Raises
    ------
    SiteConfigError
        If the list is empty, an entry is malformed, a source is not markdown,
        a source is declared twice, or an output would overwrite the index.
    """
    if not isinstance(raw, list) or not raw:
        msg = "No documents defined in site configuration."
        raise SiteConfigError(msg)

    documents: list[DocumentDescriptor] = []
    seen: set[str] = set()
    for position, entry in enumerate(raw):
        where = f"Document #{position}"
        if not isinstance(entry, dict):
            msg = f"{where} must be a mapping."
            raise SiteConfigError(msg)
        source = _require_str(entry, "source", where)
        if PurePosixPath(source).suffix != SOURCE_SUFFIX:
            msg = f"{where} source '{source}' must be a '{SOURCE_SUFFIX}' file."
            raise SiteConfigError(msg)
        if source in seen:
            msg = f"{where} repeats source '{source}'."
            raise SiteConfigError(msg)
        seen.add(source)
        descriptor = DocumentDescriptor(
            id=position,
            title=_require_str(entry, "title", where),
            description=_optional_str(entry.get("description")) or "",
            emoji=_optional_str(entry.get("emoji")) or "",
            source_filename=source,
        )
        if descriptor.output_filename == INDEX_FILENAME:
            msg = f"{where} output '{INDEX_FILENAME}' collides with the landing page."
            raise SiteConfigError(msg)
        documents.append(descriptor)
    return tuple(documents)


__all__ = [
    "_build_documents",
    "_build_landing_config",
    "_build_sections",
    "_build_site_metadata",
    "_optional_str",
    "_require_str",
]
