"""Shared fixtures for workshop site generation tests.

The fixtures build a three-document workshop (ids 0, 1, 2) with markdown
sources written into a temporary exercises directory, so every test can run
the full pipeline without touching the repository's own content.
"""

from __future__ import annotations

import typing as typ

import pytest

from workshop_pages.config import (
    DocumentDescriptor,
    LandingConfig,
    LandingSection,
    SiteConfig,
    SiteMetadata,
)

if typ.TYPE_CHECKING:
    from pathlib import Path

SAMPLE_SOURCES: dict[str, str] = {
    "00-setup.md": (
        "# Setup\n\n"
        "Start from the [overview](../README.md) and continue with "
        "[building](01-build.md).\n\n"
        "```bash\n"
        "git clone https://go.googlesource.com/go\n"
        "```\n"
    ),
    "01-build.md": (
        "# Build\n\n"
        "| Step | Command |\n"
        "| ---- | ------- |\n"
        "| make | `./make.bash` |\n\n"
        "See [the parser exercise](../exercises/02-parser.md#changes) or "
        "https://go.dev/doc/install for details.\n"
    ),
    "02-parser.md": (
        "# Parser\n\n"
        "Go back to [building](01-build.md) or read the "
        "[spec](https://go.dev/ref/spec).\n"
    ),
}


@pytest.fixture
def descriptors() -> tuple[DocumentDescriptor, ...]:
    """Return three ordered descriptors matching ``SAMPLE_SOURCES``."""
    return (
        DocumentDescriptor(0, "Setup", "Prepare the toolchain.", "🌱", "00-setup.md"),
        DocumentDescriptor(1, "Build", "Compile from source.", "🔨", "01-build.md"),
        DocumentDescriptor(2, "Parser", "Change the parser.", "🔄", "02-parser.md"),
    )


@pytest.fixture
def site_metadata() -> SiteMetadata:
    """Return site metadata used by the fixture workshop."""
    return SiteMetadata(
        name="Fixture Workshop",
        brand="Fixture Brand",
        footer_note="Fixture footer",
    )


@pytest.fixture
def site_config(
    descriptors: tuple[DocumentDescriptor, ...], site_metadata: SiteMetadata
) -> SiteConfig:
    """Return a site configuration wrapping the fixture descriptors."""
    landing = LandingConfig(
        title="Fixture Landing",
        lead="Welcome to the **fixture** workshop.",
        overview_text="There are {count} exercises.",
        sections_before=(LandingSection("Prerequisites", "- Git\n- Go"),),
        sections_after=(LandingSection("Tips", "Take your time."),),
        cta_label="Begin",
    )
    return SiteConfig(documents=descriptors, site=site_metadata, landing=landing)


@pytest.fixture
def exercises_dir(tmp_path: Path) -> Path:
    """Write ``SAMPLE_SOURCES`` into a temporary exercises directory."""
    root = tmp_path / "exercises"
    root.mkdir()
    for name, text in SAMPLE_SOURCES.items():
        (root / name).write_text(text, encoding="utf-8")
    return root
