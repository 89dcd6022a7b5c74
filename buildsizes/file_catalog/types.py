"""Domain datatypes for files discovered in a build directory."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class FileRecord:
    """One regular file observed during a build-directory scan."""

    name: str
    path: Path
    size: int


__all__ = [
    "FileRecord",
]
