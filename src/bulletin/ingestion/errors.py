"""Errors raised at the page-extraction boundary."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(slots=True)
class DocumentLoadError(Exception):
    """Domain error for a source document that cannot be opened at all."""

    path: Path
    message: str

    def __str__(self) -> str:
        return f"{self.message} (path={self.path})"
