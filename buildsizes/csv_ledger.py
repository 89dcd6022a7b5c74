"""Append-only CSV ledger of build-size snapshots.

The header row is written once with an exclusive create; every call then
appends one data row. Values are comma-joined without quoting, so file names
containing commas shift columns in that row.
"""

from __future__ import annotations

import asyncio
import json
import logging
import math
from datetime import datetime
from pathlib import Path

from .errors import BuildSizeError
from .report import BuildSizes

logger = logging.getLogger(__name__)

PACKAGE_JSON = "package.json"
SIZE_UNITS_COLUMN = "(File sizes in bytes)"
SAVE_OPERATION = "saving build sizes"


def read_package_version(cwd: Path | None = None) -> str:
    """Return ``version`` from ``package.json`` in ``cwd``, or ``""``.

    A missing or unparsable file is logged as a warning and is not an error.
    """
    package_json = (Path.cwd() if cwd is None else Path(cwd)) / PACKAGE_JSON
    try:
        data = json.loads(package_json.read_text(encoding="utf-8"))
    except FileNotFoundError:
        logger.warning(
            "No %s file found in %s. The package version will not be specified.",
            PACKAGE_JSON,
            package_json.parent,
        )
        return ""
    except (OSError, ValueError) as exc:
        logger.warning("Could not read the package version from %s: %s", package_json, exc)
        return ""

    version = data.get("version") if isinstance(data, dict) else None
    if not isinstance(version, str):
        logger.warning("%s has no string version field.", package_json)
        return ""
    return version.strip()


def format_timestamp(now: datetime | None = None) -> str:
    """Locale date and time with zone, e.g. ``10/18/26 at 14:03:01 UTC``."""
    moment = (now or datetime.now()).astimezone()
    stamp = moment.strftime("%x at %X %Z").strip()
    return stamp.replace(",", "")


def _csv_value(value: object) -> str:
    if isinstance(value, float) and math.isnan(value):
        return "NaN"
    return str(value)


def build_csv_lines(build_sizes: BuildSizes, version: str, timestamp: str) -> tuple[str, str]:
    """Return ``(header, row)`` lines, each ending in a newline."""
    header: list[str] = ["Version"] if version else []
    row: list[str] = [version] if version else []
    header.append("Timestamp")
    row.append(timestamp)
    for name, value in build_sizes.to_dict().items():
        header.append(name)
        row.append(_csv_value(value))
    header.append(SIZE_UNITS_COLUMN)
    return ",".join(header) + "\n", ",".join(row) + "\n"


def write_header_once(outfile: Path, header: str) -> bool:
    """Create ``outfile`` holding ``header``; return ``False`` if it exists."""
    try:
        with outfile.open("x", encoding="utf-8", errors="surrogateescape") as handle:
            handle.write(header)
    except FileExistsError:
        return False
    return True


def append_row(outfile: Path, row: str) -> None:
    with outfile.open("a", encoding="utf-8", errors="surrogateescape") as handle:
        handle.write(row)


def _write_ledger(outfile: Path, header: str, row: str) -> None:
    try:
        outfile.parent.mkdir(parents=True, exist_ok=True)
        if write_header_once(outfile, header):
            logger.debug("Created build size ledger %s", outfile)
        append_row(outfile, row)
    except OSError as exc:
        raise BuildSizeError.io_error(outfile, SAVE_OPERATION, exc) from exc


async def save_build_sizes(
    build_sizes: BuildSizes,
    output_path: Path | str,
    *,
    cwd: Path | None = None,
    now: datetime | None = None,
) -> Path:
    """Append ``build_sizes`` to the CSV ledger at ``output_path``.

    The header is only written when the ledger does not exist yet, so
    repeated calls yield one header and one row per call. Returns the
    resolved ledger path.
    """
    base = Path.cwd() if cwd is None else Path(cwd)
    outfile = (base / output_path).resolve()
    version = await asyncio.to_thread(read_package_version, base)
    header, row = build_csv_lines(build_sizes, version, format_timestamp(now))
    await asyncio.to_thread(_write_ledger, outfile, header, row)
    return outfile


__all__ = [
    "PACKAGE_JSON",
    "SIZE_UNITS_COLUMN",
    "read_package_version",
    "format_timestamp",
    "build_csv_lines",
    "write_header_once",
    "append_row",
    "save_build_sizes",
]
