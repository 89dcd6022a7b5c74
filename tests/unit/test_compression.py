"""Tests for gzip/brotli size measurement."""

from __future__ import annotations

import gzip
import tempfile
import unittest
from pathlib import Path

import brotli

from buildsizes.compression import (
    CompressionAlgorithm,
    CompressionSizer,
    compress_bytes,
    get_file_size_brotli,
    get_file_size_gzip,
)
from buildsizes.errors import BuildSizeError, ErrorKind

SAMPLE_JS = "function add(a, b) { return a + b; }\nconsole.log(add(1, 2));\n" * 400


class CompressionSizerTests(unittest.IsolatedAsyncioTestCase):
    async def test_sizes_match_in_memory_compression_lengths(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "main.js"
            target.write_text(SAMPLE_JS, encoding="utf-8")
            data = target.read_bytes()

            gzip_size = await get_file_size_gzip(target)
            brotli_size = await get_file_size_brotli(target)

            self.assertEqual(gzip_size, len(compress_bytes(data, CompressionAlgorithm.GZIP)))
            self.assertEqual(brotli_size, len(brotli.compress(data)))
            self.assertLess(gzip_size, len(data))
            self.assertLess(brotli_size, len(data))

    async def test_file_is_left_untouched(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "main.js"
            target.write_text(SAMPLE_JS, encoding="utf-8")

            await get_file_size_gzip(target)
            await get_file_size_brotli(target)

            self.assertEqual(target.read_text(encoding="utf-8"), SAMPLE_JS)
            self.assertEqual(sorted(path.name for path in Path(tmp).iterdir()), ["main.js"])

    async def test_missing_file_reports_path_and_algorithm(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            missing = Path(tmp) / "gone.js"
            sizer = CompressionSizer()

            with self.assertRaises(BuildSizeError) as ctx:
                await sizer.measure(missing, CompressionAlgorithm.BROTLI)

            self.assertIs(ctx.exception.kind, ErrorKind.IO)
            self.assertEqual(ctx.exception.path, missing)
            self.assertEqual(ctx.exception.operation, "brotli compression")
            self.assertIsInstance(ctx.exception.__cause__, FileNotFoundError)

    async def test_sizer_counts_measurements(self) -> None:
        with tempfile.TemporaryDirectory() as tmp:
            target = Path(tmp) / "a.js"
            target.write_bytes(b"")
            sizer = CompressionSizer()

            await sizer.measure(target, CompressionAlgorithm.GZIP)
            await sizer.measure(target, CompressionAlgorithm.BROTLI)

            self.assertEqual(sizer.calls, 2)


class CompressBytesTests(unittest.TestCase):
    def test_gzip_output_round_trips_and_is_deterministic(self) -> None:
        data = SAMPLE_JS.encode("utf-8")

        first = compress_bytes(data, CompressionAlgorithm.GZIP)

        self.assertEqual(gzip.decompress(first), data)
        self.assertEqual(first, compress_bytes(data, CompressionAlgorithm.GZIP))


if __name__ == "__main__":
    unittest.main()
