"""On-disk footprint probes for build directories.

The on-disk size is what the filesystem actually allocates (block aligned),
which differs from the summed logical file sizes. Three probe variants exist:
the host ``du`` command, a native ``st_blocks`` walk, and an unsupported
variant that reports NaN on Windows.
"""

from __future__ import annotations

import asyncio
import logging
import math
import os
import shutil
import sys
from pathlib import Path
from typing import Protocol

from .errors import BuildSizeError

logger = logging.getLogger(__name__)

DISK_USAGE_OPERATION = "measuring on-disk size"
DU_COMMAND = ("du", "-sk")
DU_BLOCK_SIZE = 1024
STAT_BLOCK_SIZE = 512


class DiskUsageProbe(Protocol):
    supported: bool

    async def measure(self, directory: Path) -> int | float:
        ...


class UnsupportedProbe:
    """Probe for platforms without disk-usage accounting; always NaN."""

    supported = False

    async def measure(self, directory: Path) -> float:
        return math.nan


class DuCommandProbe:
    """Run ``du`` as a subprocess and parse the leading size field.

    ``command`` receives the directory as its final argument. The first
    whitespace-separated token of stdout is multiplied by ``block_size``.
    """

    supported = True

    def __init__(self, command: tuple[str, ...] = DU_COMMAND, block_size: int = DU_BLOCK_SIZE) -> None:
        self.command = tuple(command)
        self.block_size = block_size

    async def measure(self, directory: Path) -> int:
        directory = Path(directory)
        try:
            proc = await asyncio.create_subprocess_exec(
                *self.command,
                str(directory),
                stdout=asyncio.subprocess.PIPE,
                stderr=asyncio.subprocess.PIPE,
            )
            stdout, stderr = await proc.communicate()
        except OSError as exc:
            raise BuildSizeError.io_error(directory, DISK_USAGE_OPERATION, exc) from exc

        if proc.returncode != 0:
            message = stderr.decode(errors="replace").strip() or f"exit status {proc.returncode}"
            raise BuildSizeError.io_error(
                directory,
                DISK_USAGE_OPERATION,
                OSError(f"{self.command[0]} failed: {message}"),
            )

        output = stdout.decode(errors="replace").strip()
        fields = output.split()
        try:
            blocks = int(fields[0])
        except (IndexError, ValueError):
            raise BuildSizeError.parse_error(directory, DISK_USAGE_OPERATION, output) from None
        return blocks * self.block_size


def allocated_tree_size(directory: Path) -> int:
    """Sum allocated bytes (``st_blocks``) for ``directory`` and its contents."""
    total = 0
    for current, dirnames, filenames in os.walk(directory, onerror=_raise_walk_error):
        total += os.lstat(current).st_blocks * STAT_BLOCK_SIZE
        for name in filenames:
            total += os.lstat(os.path.join(current, name)).st_blocks * STAT_BLOCK_SIZE
    return total


def _raise_walk_error(exc: OSError) -> None:
    raise exc


class StatBlocksProbe:
    """Native variant using ``lstat`` block counts (POSIX only)."""

    supported = True

    async def measure(self, directory: Path) -> int:
        directory = Path(directory)
        try:
            return await asyncio.to_thread(allocated_tree_size, directory)
        except OSError as exc:
            raise BuildSizeError.io_error(directory, DISK_USAGE_OPERATION, exc) from exc


def default_disk_usage_probe(platform: str | None = None) -> DiskUsageProbe:
    """Pick the disk-usage probe for ``platform`` (default: this host)."""
    platform = sys.platform if platform is None else platform
    if platform == "win32":
        probe: DiskUsageProbe = UnsupportedProbe()
    elif shutil.which(DU_COMMAND[0]) is not None:
        probe = DuCommandProbe()
    else:
        probe = StatBlocksProbe()
    logger.debug("Using %s for on-disk size", type(probe).__name__)
    return probe


__all__ = [
    "DISK_USAGE_OPERATION",
    "DU_COMMAND",
    "DU_BLOCK_SIZE",
    "DiskUsageProbe",
    "UnsupportedProbe",
    "DuCommandProbe",
    "StatBlocksProbe",
    "allocated_tree_size",
    "default_disk_usage_probe",
]
