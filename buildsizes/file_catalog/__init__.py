"""Build-directory file catalog.

This package contains non-UI primitives:
- the ``FileRecord`` datatype
- concurrent recursive scanning of a build directory
- file-type selection over scanned records
"""

from __future__ import annotations

from .types import FileRecord
from .fs import get_files, list_directory_files
from .filtering import filter_files_by_type

__all__ = [
    "FileRecord",
    "get_files",
    "list_directory_files",
    "filter_files_by_type",
]
