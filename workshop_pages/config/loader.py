"""Load workshop configuration YAML into typed dataclasses."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from ruamel.yaml import YAML

from .helpers import _build_documents, _build_landing_config, _build_site_metadata
from .models import SiteConfig

logger = logging.getLogger(__name__)


def load_site_config(path: Path) -> SiteConfig:
    """Load the YAML configuration describing the workshop documents.

    Parameters
    ----------
    path : Path
        Filesystem path to the YAML configuration file (for example,
        ``config/workshop.yaml``).

    Returns
    -------
    SiteConfig
        Parsed configuration: ordered document descriptors, site metadata,
        and landing page copy.

    Raises
    ------
    FileNotFoundError
        If the configuration file does not exist at ``path``.
    TypeError
        If the top-level YAML structure is not a mapping.
    SiteConfigError
        If the document list is missing, empty, or contains invalid entries.
    YAMLError
        If the YAML content cannot be parsed by the underlying loader.

    Examples
    --------
    >>> from pathlib import Path
    >>> from workshop_pages.config import load_site_config
    >>> config = load_site_config(Path("config/workshop.yaml"))  # doctest: +SKIP
    >>> config.documents[0].output_filename  # doctest: +SKIP
    '00-introduction-setup.html'
    """
    if not path.exists():
        msg = f"Configuration file '{path}' not found."
        raise FileNotFoundError(msg)

    loader = YAML(typ="safe")
    loader.version = (1, 2)
    with path.open("r", encoding="utf-8") as handle:
        loaded = loader.load(handle) or {}
    if not isinstance(loaded, dict):
        msg = "Top-level YAML structure must be a mapping."
        raise TypeError(msg)
    raw: dict[str, typ.Any] = dict(loaded)

    config = SiteConfig(
        documents=_build_documents(raw.get("documents")),
        site=_build_site_metadata(raw.get("site", {}) or {}),
        landing=_build_landing_config(raw.get("landing", {}) or {}),
    )
    logger.debug("Loaded %d documents from %s", len(config.documents), path)
    return config


__all__ = ["load_site_config"]
