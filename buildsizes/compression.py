"""Compressed-size measurement for single files.

Files are read and compressed in memory on a worker thread; only the length
of the compressed payload is kept.
"""

from __future__ import annotations

import asyncio
import gzip
import logging
from enum import Enum
from pathlib import Path

import brotli

from .errors import BuildSizeError

logger = logging.getLogger(__name__)

# zlib's Z_DEFAULT_COMPRESSION level; ``gzip.compress`` would otherwise use 9.
GZIP_COMPRESS_LEVEL = 6


class CompressionAlgorithm(Enum):
    GZIP = "gzip"
    BROTLI = "brotli"


def compress_bytes(data: bytes, algorithm: CompressionAlgorithm) -> bytes:
    """Compress ``data`` with the format's default parameters."""
    if algorithm is CompressionAlgorithm.GZIP:
        return gzip.compress(data, compresslevel=GZIP_COMPRESS_LEVEL, mtime=0)
    return brotli.compress(data)


def compressed_file_size(path: Path, algorithm: CompressionAlgorithm) -> int:
    """Blocking helper returning the compressed byte length of ``path``."""
    return len(compress_bytes(path.read_bytes(), algorithm))


class CompressionSizer:
    """Measure compressed sizes; counts calls so tests can assert usage."""

    def __init__(self) -> None:
        self.calls = 0

    async def measure(self, path: Path | str, algorithm: CompressionAlgorithm) -> int:
        self.calls += 1
        target = Path(path)
        try:
            size = await asyncio.to_thread(compressed_file_size, target, algorithm)
        except OSError as exc:
            raise BuildSizeError.io_error(target, f"{algorithm.value} compression", exc) from exc
        logger.debug("%s size of %s: %d bytes", algorithm.value, target, size)
        return size


async def get_file_size_gzip(path: Path | str) -> int:
    """Return the gzip-compressed byte size of ``path``."""
    return await CompressionSizer().measure(path, CompressionAlgorithm.GZIP)


async def get_file_size_brotli(path: Path | str) -> int:
    """Return the brotli-compressed byte size of ``path``."""
    return await CompressionSizer().measure(path, CompressionAlgorithm.BROTLI)


__all__ = [
    "GZIP_COMPRESS_LEVEL",
    "CompressionAlgorithm",
    "CompressionSizer",
    "compress_bytes",
    "compressed_file_size",
    "get_file_size_gzip",
    "get_file_size_brotli",
]
