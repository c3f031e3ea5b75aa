"""Load and validate the workshop site configuration.

This subpackage parses ``workshop.yaml``, assigns each declared document its
ordinal, and produces typed dataclasses (:class:`SiteConfig`,
:class:`DocumentDescriptor`, etc.) that the generator consumes. The document
list is the single source of ordering truth for navigation and the landing
page.

Examples
--------
>>> from pathlib import Path
>>> from workshop_pages.config import load_site_config
>>> site = load_site_config(Path("config/workshop.yaml"))  # doctest: +SKIP
>>> [d.id for d in site.documents][:3]  # doctest: +SKIP
[0, 1, 2]
"""

from .loader import load_site_config
from .models import (
    DocumentDescriptor,
    LandingConfig,
    LandingSection,
    SiteConfig,
    SiteConfigError,
    SiteMetadata,
)

__all__ = [
    "DocumentDescriptor",
    "LandingConfig",
    "LandingSection",
    "SiteConfig",
    "SiteConfigError",
    "SiteMetadata",
    "load_site_config",
]
