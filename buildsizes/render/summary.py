"""Terminal summary and JSON renderings of a ``BuildSizes`` report.

Both renderers are presentation-only and side-effect free.
"""

from __future__ import annotations

import json
import math

from pygments import highlight
from pygments.formatters import Terminal256Formatter
from pygments.lexers import JsonLexer
from pygments.styles import get_style_by_name
from pygments.util import ClassNotFound

from ..formatting import format_bytes
from ..report import BuildSizes
from ..ui_theme import PLAIN_THEME, UITheme

SUMMARY_TITLE = "|> Application Build Sizes <|"
DEFAULT_STYLE = "monokai"


def _size_text(num_bytes: int | float, decimals: int, binary: bool, theme: UITheme) -> str:
    value, unit = format_bytes(num_bytes, decimals, binary).rsplit(" ", 1)
    return f"{theme.number}{value}{theme.reset} {theme.unit}{unit}{theme.reset}"


def _row(label: str, value: str, theme: UITheme) -> str:
    return f" {theme.label}--> {label}:{theme.reset} {value}"


def render_summary(
    build_sizes: BuildSizes,
    bundle_file_type: str,
    *,
    decimals: int = 2,
    binary: bool = False,
    theme: UITheme = PLAIN_THEME,
) -> str:
    """Render the human-readable build summary block.

    The on-disk row is left out when the platform could not measure it.
    """
    line = f"{theme.divider}{'-' * len(SUMMARY_TITLE)}{theme.reset}"

    def size(num_bytes: int | float) -> str:
        return _size_text(num_bytes, decimals, binary, theme)

    lines = [
        "",
        line,
        f"{theme.title}{SUMMARY_TITLE}{theme.reset}",
        line,
        f"{theme.heading}Build{theme.reset}",
        _row("file count", f"{theme.number}{build_sizes.build_file_count}{theme.reset}", theme),
        _row("size", size(build_sizes.build_size), theme),
    ]
    if not math.isnan(build_sizes.build_size_on_disk):
        lines.append(_row("on-disk size", size(build_sizes.build_size_on_disk), theme))
    lines.extend(
        [
            line,
            f"{theme.heading}Main {bundle_file_type.lstrip('.').upper()} bundle{theme.reset}",
            _row("name", f"{theme.value}{build_sizes.main_bundle_name}{theme.reset}", theme),
            _row("size", size(build_sizes.main_bundle_size), theme),
            _row("gzip size", size(build_sizes.main_bundle_size_gzip), theme),
            _row("brotli size", size(build_sizes.main_bundle_size_brotli), theme),
            line,
            "",
        ]
    )
    return "\n".join(lines)


def _normalize_style(style: str) -> str:
    try:
        get_style_by_name(style)
    except ClassNotFound:
        return DEFAULT_STYLE
    return style


def render_json(build_sizes: BuildSizes, *, style: str = DEFAULT_STYLE, no_color: bool = False) -> str:
    """Render the report as pretty JSON; NaN sizes become ``null``."""
    payload = {
        key: None if isinstance(value, float) and math.isnan(value) else value
        for key, value in build_sizes.to_dict().items()
    }
    text = json.dumps(payload, indent=2) + "\n"
    if no_color:
        return text
    return highlight(text, JsonLexer(), Terminal256Formatter(style=_normalize_style(style)))


__all__ = [
    "SUMMARY_TITLE",
    "DEFAULT_STYLE",
    "render_summary",
    "render_json",
]
