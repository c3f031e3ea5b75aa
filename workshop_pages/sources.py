"""Read workshop markdown sources from a directory on disk."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from .errors import ConversionError, SourceNotFoundError

logger = logging.getLogger(__name__)


class SourceProvider(typ.Protocol):
    """Anything that can return raw markdown for a source filename."""

    def fetch(self, filename: str) -> str:
        """Return the markdown text stored under ``filename``."""
        ...


class DirectorySourceProvider:
    """Serve markdown documents from a single source directory."""

    def __init__(self, root: Path) -> None:
        self.root = root

    def fetch(self, filename: str) -> str:
        """Return the UTF-8 text of ``filename`` inside the source directory.

        Raises
        ------
        SourceNotFoundError
            If the file does not exist or is not a regular file.
        ConversionError
            If the file is not valid UTF-8.
        """
        path = self.root / filename
        logger.debug("Reading %s", path)
        try:
            return path.read_text(encoding="utf-8")
        except (FileNotFoundError, IsADirectoryError) as exc:
            raise SourceNotFoundError(filename, self.root) from exc
        except UnicodeDecodeError as exc:
            raise ConversionError(filename, f"not valid UTF-8 ({exc.reason})") from exc


__all__ = ["DirectorySourceProvider", "SourceProvider"]
