"""Build-size report assembly.

Combines the file catalog, type filter, compression sizer and disk-usage
probe into one immutable ``BuildSizes`` snapshot.
"""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Sequence
from dataclasses import dataclass
from pathlib import Path

from .compression import CompressionAlgorithm, CompressionSizer
from .disk_usage import DiskUsageProbe, default_disk_usage_probe
from .errors import BuildSizeError
from .file_catalog import FileRecord, filter_files_by_type, get_files

logger = logging.getLogger(__name__)

DEFAULT_BUNDLE_FILE_TYPE = "js"
NOT_FOUND_BUNDLE_NAME = "Not found"
REPORT_OPERATION = "getting build sizes"

# (report field name, attribute name) in serialization order.
REPORT_FIELDS: tuple[tuple[str, str], ...] = (
    ("mainBundleName", "main_bundle_name"),
    ("mainBundleSize", "main_bundle_size"),
    ("mainBundleSizeGzip", "main_bundle_size_gzip"),
    ("mainBundleSizeBrotli", "main_bundle_size_brotli"),
    ("buildSize", "build_size"),
    ("buildSizeOnDisk", "build_size_on_disk"),
    ("buildFileCount", "build_file_count"),
)


@dataclass(frozen=True)
class BuildSizes:
    """Size metrics for one build directory at one point in time.

    ``build_size_on_disk`` is ``nan`` where the platform cannot report it.
    """

    main_bundle_name: str
    main_bundle_size: int
    main_bundle_size_gzip: int
    main_bundle_size_brotli: int
    build_size: int
    build_size_on_disk: int | float
    build_file_count: int

    def to_dict(self) -> dict[str, object]:
        """Return fields keyed by report name, in serialization order."""
        return {name: getattr(self, attribute) for name, attribute in REPORT_FIELDS}


def select_main_bundle(candidates: Sequence[FileRecord]) -> FileRecord | None:
    """Return the largest candidate, or ``None`` when there are none.

    Ties on size go to the lexicographically smallest path, so the choice
    does not depend on scan order.
    """
    if not candidates:
        return None
    return min(candidates, key=lambda record: (-record.size, str(record.path)))


async def get_build_sizes(
    build_path: Path | str,
    bundle_file_type: str = DEFAULT_BUNDLE_FILE_TYPE,
    *,
    compression_sizer: CompressionSizer | None = None,
    disk_usage_probe: DiskUsageProbe | None = None,
    cwd: Path | None = None,
) -> BuildSizes:
    """Compute size metrics for the build directory at ``build_path``.

    ``build_path`` is resolved against ``cwd`` (the process working directory
    by default). Any failure aborts the computation with a ``BuildSizeError``
    carrying the resolved path and requested bundle file type.
    """
    base = Path.cwd() if cwd is None else Path(cwd)
    build = (base / build_path).resolve()
    sizer = compression_sizer if compression_sizer is not None else CompressionSizer()
    probe = disk_usage_probe if disk_usage_probe is not None else default_disk_usage_probe()

    try:
        build_files = await get_files(build)
        main_bundle = select_main_bundle(filter_files_by_type(build_files, bundle_file_type))

        if main_bundle is not None:
            gzip_size, brotli_size, on_disk = await asyncio.gather(
                sizer.measure(main_bundle.path, CompressionAlgorithm.GZIP),
                sizer.measure(main_bundle.path, CompressionAlgorithm.BROTLI),
                probe.measure(build),
            )
        else:
            logger.debug("No .%s file found under %s", bundle_file_type, build)
            gzip_size = brotli_size = 0
            on_disk = await probe.measure(build)
    except BuildSizeError as exc:
        raise exc.with_context(
            REPORT_OPERATION,
            build_path=build,
            bundle_file_type=bundle_file_type,
        ) from exc

    return BuildSizes(
        main_bundle_name=main_bundle.name if main_bundle is not None else NOT_FOUND_BUNDLE_NAME,
        main_bundle_size=main_bundle.size if main_bundle is not None else 0,
        main_bundle_size_gzip=gzip_size,
        main_bundle_size_brotli=brotli_size,
        build_size=sum(record.size for record in build_files),
        build_size_on_disk=on_disk,
        build_file_count=len(build_files),
    )


def get_build_sizes_sync(
    build_path: Path | str,
    bundle_file_type: str = DEFAULT_BUNDLE_FILE_TYPE,
    **kwargs: object,
) -> BuildSizes:
    """Blocking wrapper around ``get_build_sizes`` for callers without a loop."""
    return asyncio.run(get_build_sizes(build_path, bundle_file_type, **kwargs))


__all__ = [
    "DEFAULT_BUNDLE_FILE_TYPE",
    "NOT_FOUND_BUNDLE_NAME",
    "REPORT_FIELDS",
    "BuildSizes",
    "select_main_bundle",
    "get_build_sizes",
    "get_build_sizes_sync",
]
