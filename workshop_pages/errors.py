"""Exceptions raised while generating the workshop site.

Every failure that can abort a generation run derives from
:class:`WorkshopPagesError` and records the :class:`RunStage` in which it
happened, so the CLI can report which stage failed and which resource it was
working on.
"""

from __future__ import annotations

import enum
from pathlib import Path


class RunStage(enum.StrEnum):
    """Sequential stages of a generation run."""

    COLLECTING = "collecting"
    COMPOSING = "composing"
    WRITING = "writing"


class WorkshopPagesError(RuntimeError):
    """Base class for errors that terminate a generation run."""

    stage: RunStage = RunStage.COLLECTING

    def __init__(self, message: str, *, stage: RunStage | None = None) -> None:
        super().__init__(message)
        if stage is not None:
            self.stage = stage


class SourceNotFoundError(WorkshopPagesError):
    """Raised when a configured document has no source file."""

    def __init__(self, filename: str, source_dir: Path) -> None:
        self.filename = filename
        self.source_dir = source_dir
        msg = f"Source document '{filename}' not found in '{source_dir}'."
        super().__init__(msg, stage=RunStage.COLLECTING)


class ConversionError(WorkshopPagesError):
    """Raised when a source document cannot be decoded or converted to HTML."""

    def __init__(self, filename: str, reason: str) -> None:
        self.filename = filename
        msg = f"Could not convert '{filename}': {reason}"
        super().__init__(msg, stage=RunStage.COLLECTING)


class SiteWriteError(WorkshopPagesError):
    """Raised when the output directory or an output file cannot be written."""

    def __init__(self, path: Path, reason: str) -> None:
        self.path = path
        msg = f"Could not write '{path}': {reason}"
        super().__init__(msg, stage=RunStage.WRITING)


__all__ = [
    "ConversionError",
    "RunStage",
    "SiteWriteError",
    "SourceNotFoundError",
    "WorkshopPagesError",
]
