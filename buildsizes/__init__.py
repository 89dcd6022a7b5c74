"""Public package surface for build-sizes.

Exports the report and ledger operations plus ``main`` for programmatic CLI
invocation. Most implementation lives in submodules under ``buildsizes``.
"""

from __future__ import annotations

from .compression import get_file_size_brotli, get_file_size_gzip
from .csv_ledger import save_build_sizes
from .errors import BuildSizeError, ErrorKind
from .file_catalog import FileRecord, filter_files_by_type, get_files
from .formatting import format_bytes
from .report import BuildSizes, get_build_sizes, get_build_sizes_sync


def main(*args, **kwargs):
    """Lazily import CLI entrypoint to keep package imports lightweight."""
    from .cli import main as _main

    return _main(*args, **kwargs)


__all__ = [
    "BuildSizeError",
    "BuildSizes",
    "ErrorKind",
    "FileRecord",
    "filter_files_by_type",
    "format_bytes",
    "get_build_sizes",
    "get_build_sizes_sync",
    "get_file_size_brotli",
    "get_file_size_gzip",
    "get_files",
    "main",
    "save_build_sizes",
]
