"""File-type selection over catalog records."""

from __future__ import annotations

from collections.abc import Iterable

from .types import FileRecord


def filter_files_by_type(files: Iterable[FileRecord], file_type: str) -> list[FileRecord]:
    """Return records whose name ends with ``.<file_type>``, ignoring case.

    ``file_type`` may be given with or without its leading dot.
    """
    suffix = "." + file_type.lstrip(".").lower()
    return [record for record in files if record.name.lower().endswith(suffix)]


__all__ = [
    "filter_files_by_type",
]
