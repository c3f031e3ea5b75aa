"""Persist generated pages and the stylesheet into the output directory."""

from __future__ import annotations

import logging
import typing as typ
from pathlib import Path

from .errors import SiteWriteError

logger = logging.getLogger(__name__)

GENERATED_PATTERNS = ("*.html", "*.css")


class SiteWriter:
    """Write ``(filename, content)`` pairs as siblings in one directory."""

    def __init__(self, output_dir: Path) -> None:
        self.output_dir = output_dir

    def write(self, files: typ.Iterable[tuple[str, str]]) -> list[Path]:
        """Create the output directory and write every file verbatim.

        Parameters
        ----------
        files : Iterable[tuple[str, str]]
            Filename and UTF-8 content pairs, written in iteration order.

        Returns
        -------
        list[Path]
            Paths of the written files, in write order.

        Raises
        ------
        SiteWriteError
            If the directory cannot be created or a file cannot be written.
            Files written before the failure are left in place.
        """
        try:
            self.output_dir.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise SiteWriteError(self.output_dir, exc.strerror or str(exc)) from exc

        written: list[Path] = []
        for filename, content in files:
            path = self.output_dir / filename
            try:
                path.write_text(content, encoding="utf-8")
            except OSError as exc:
                raise SiteWriteError(path, exc.strerror or str(exc)) from exc
            logger.debug("Wrote %s (%d chars)", path, len(content))
            written.append(path)
        return written

    def clean(self) -> list[Path]:
        """Remove generated HTML and CSS files, returning the removed paths."""
        if not self.output_dir.is_dir():
            return []
        removed: list[Path] = []
        for pattern in GENERATED_PATTERNS:
            for path in sorted(self.output_dir.glob(pattern)):
                if not path.is_file():
                    continue
                try:
                    path.unlink()
                except OSError as exc:
                    raise SiteWriteError(path, exc.strerror or str(exc)) from exc
                removed.append(path)
        return removed


__all__ = ["GENERATED_PATTERNS", "SiteWriter"]
