"""Human-readable byte formatting."""

from __future__ import annotations

import math

SIZE_UNITS = ("B", "KB", "MB", "GB", "TB", "PB", "EB", "ZB", "YB")


def format_bytes(num_bytes: int | float, decimals: int = 2, binary: bool = False) -> str:
    """Format ``num_bytes`` with a unit suffix, e.g. ``1.70 MB``.

    Uses base 1000 by default and base 1024 when ``binary`` is set; both
    share the same suffix letters. Zero, negative and non-finite values
    format as ``0 B``.
    """
    if not math.isfinite(num_bytes) or num_bytes <= 0:
        return "0 B"

    base = 1024 if binary else 1000
    exponent = max(0, min(int(math.log(num_bytes, base)), len(SIZE_UNITS) - 1))
    value = num_bytes / base**exponent
    # ``log`` can land just below an integer for exact powers.
    if value >= base and exponent < len(SIZE_UNITS) - 1:
        exponent += 1
        value = num_bytes / base**exponent
    return f"{value:.{max(0, decimals)}f} {SIZE_UNITS[exponent]}"


__all__ = [
    "SIZE_UNITS",
    "format_bytes",
]
