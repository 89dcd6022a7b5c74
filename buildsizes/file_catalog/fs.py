"""Filesystem scanning for build-directory file catalogs."""

from __future__ import annotations

import asyncio
import logging
import os
import stat
from pathlib import Path

from ..errors import BuildSizeError
from .types import FileRecord

logger = logging.getLogger(__name__)

SCAN_OPERATION = "finding build files"


def list_directory_files(directory: Path) -> tuple[list[FileRecord], list[Path]]:
    """List regular files and subdirectories directly inside ``directory``.

    Entries are classified without following symlinks. Symlinks, devices,
    sockets and fifos are neither recorded nor descended into. Raises
    ``OSError`` when the directory or one of its entries cannot be read.
    """
    files: list[FileRecord] = []
    subdirectories: list[Path] = []
    with os.scandir(directory) as entries:
        for entry in sorted(entries, key=lambda item: item.name):
            if entry.is_dir(follow_symlinks=False):
                subdirectories.append(Path(entry.path))
                continue
            if not entry.is_file(follow_symlinks=False):
                continue
            entry_stat = entry.stat(follow_symlinks=False)
            files.append(FileRecord(name=entry.name, path=Path(entry.path), size=int(entry_stat.st_size)))
    return files, subdirectories


async def _scan_directory(directory: Path) -> tuple[list[FileRecord], list[Path]]:
    try:
        return await asyncio.to_thread(list_directory_files, directory)
    except OSError as exc:
        raise BuildSizeError.io_error(directory, SCAN_OPERATION, exc) from exc


async def get_files(parent_dir: Path | str) -> list[FileRecord]:
    """Return every regular file under ``parent_dir`` with its byte size.

    Sibling directories are listed concurrently, one wave of directories per
    depth level, so arbitrarily deep trees never hit the recursion limit.
    Ordering of the result is not part of the contract.
    """
    root = Path(parent_dir).resolve()
    try:
        root_stat = root.stat()
    except FileNotFoundError as exc:
        raise BuildSizeError.not_found(root, SCAN_OPERATION) from exc
    except OSError as exc:
        raise BuildSizeError.io_error(root, SCAN_OPERATION, exc) from exc
    if not stat.S_ISDIR(root_stat.st_mode):
        raise BuildSizeError.io_error(root, SCAN_OPERATION, NotADirectoryError(f"not a directory: {root}"))

    files: list[FileRecord] = []
    pending = [root]
    while pending:
        listings = await asyncio.gather(*(_scan_directory(directory) for directory in pending))
        pending = []
        for directory_files, subdirectories in listings:
            files.extend(directory_files)
            pending.extend(subdirectories)

    logger.debug("Found %d files under %s", len(files), root)
    return files


__all__ = [
    "SCAN_OPERATION",
    "list_directory_files",
    "get_files",
]
