"""Command-line front door for build-sizes.

Parses CLI options into an immutable ``BuildSizesOptions``, computes the
report, optionally appends it to a CSV ledger, then prints a summary or JSON.
"""

from __future__ import annotations

import argparse
import asyncio
import contextlib
import locale
import os
import sys
from collections.abc import Sequence
from dataclasses import dataclass

from .config import CliDefaults, load_cli_defaults, save_cli_defaults
from .csv_ledger import save_build_sizes
from .errors import BuildSizeError
from .logging_config import setup_logging
from .render import DESCRIPTION, USAGE_EXAMPLES, format_error, render_json, render_summary
from .report import BuildSizes, get_build_sizes
from .terminal import LoadingIndicator
from .ui_theme import available_theme_names, resolve_theme


@dataclass(frozen=True)
class BuildSizesOptions:
    """Everything one invocation needs, resolved from argv and config."""

    path: str
    filetype: str = "js"
    decimals: int = 2
    binary: bool = False
    outfile: str | None = None
    json: bool = False
    style: str = "monokai"
    theme: str = "default"
    no_color: bool = False
    verbose: bool = False
    save_defaults: bool = False


def _non_negative_int(value: str) -> int:
    """argparse type for non-negative integer values."""
    try:
        parsed = int(value)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(f"invalid integer value: {value!r}") from exc
    if parsed < 0:
        raise argparse.ArgumentTypeError("value must be >= 0")
    return parsed


def build_parser(defaults: CliDefaults) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="build-sizes",
        description=DESCRIPTION,
        epilog=USAGE_EXAMPLES,
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("path", nargs="?", default=None, help="Path to the build directory.")
    parser.add_argument(
        "-p",
        "--path",
        dest="path_option",
        default=None,
        help="Path to the build directory (alternative to the positional argument).",
    )
    parser.add_argument(
        "-f",
        "--filetype",
        default=defaults.filetype,
        help=f"Filetype of the main bundle (default: {defaults.filetype}).",
    )
    parser.add_argument(
        "-d",
        "--decimals",
        type=_non_negative_int,
        default=defaults.decimals,
        help=f"Decimal places when rounding sizes (default: {defaults.decimals}).",
    )
    parser.add_argument(
        "-b",
        "--binary",
        action=argparse.BooleanOptionalAction,
        default=defaults.binary,
        help="Use base 2 instead of base 10 for human readable sizes.",
    )
    parser.add_argument("-o", "--outfile", default=None, help="Path to a CSV file the build sizes are appended to.")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON.")
    parser.add_argument("--style", default=defaults.style, help="Pygments style name for JSON output.")
    parser.add_argument(
        "--theme",
        default=defaults.theme,
        help=f"Summary theme name ({', '.join(available_theme_names())}).",
    )
    parser.add_argument("--no-color", action="store_true", help="Disable color output even on TTY.")
    parser.add_argument(
        "--save-defaults",
        action="store_true",
        help="Remember filetype, decimals, binary, theme and style for later runs.",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    return parser


def parse_options(argv: Sequence[str] | None = None, defaults: CliDefaults | None = None) -> BuildSizesOptions:
    """Parse ``argv`` (default ``sys.argv[1:]``) into ``BuildSizesOptions``."""
    parser = build_parser(defaults if defaults is not None else load_cli_defaults())
    args = parser.parse_args(argv)

    path = args.path or args.path_option
    if not path:
        parser.error("the path to the build directory is required")

    no_color = args.no_color or bool(os.environ.get("NO_COLOR")) or not sys.stdout.isatty()
    return BuildSizesOptions(
        path=path,
        filetype=args.filetype,
        decimals=args.decimals,
        binary=args.binary,
        outfile=args.outfile,
        json=args.json,
        style=args.style,
        theme=args.theme,
        no_color=no_color,
        verbose=args.verbose,
        save_defaults=args.save_defaults,
    )


async def run(options: BuildSizesOptions) -> BuildSizes:
    """Compute the report and append it to the ledger when requested."""
    build_sizes = await get_build_sizes(options.path, options.filetype)
    if options.outfile:
        await save_build_sizes(build_sizes, options.outfile)
    return build_sizes


def main(argv: Sequence[str] | None = None) -> None:
    """Run build-sizes; exits with status 1 after printing any failure."""
    options = parse_options(argv)
    setup_logging(options.verbose)
    with contextlib.suppress(locale.Error):
        locale.setlocale(locale.LC_TIME, "")

    if options.save_defaults:
        save_cli_defaults(
            CliDefaults(
                filetype=options.filetype,
                decimals=options.decimals,
                binary=options.binary,
                theme=options.theme,
                style=options.style,
            )
        )

    theme = resolve_theme(options.theme, no_color=options.no_color)
    try:
        with LoadingIndicator(sys.stdout, enabled=not options.no_color and not options.json):
            build_sizes = asyncio.run(run(options))
    except (BuildSizeError, OSError) as exc:
        sys.stderr.write(format_error(exc, theme))
        raise SystemExit(1) from exc

    if options.json:
        sys.stdout.write(render_json(build_sizes, style=options.style, no_color=options.no_color))
        return
    sys.stdout.write(
        render_summary(
            build_sizes,
            options.filetype,
            decimals=options.decimals,
            binary=options.binary,
            theme=theme,
        )
    )


if __name__ == "__main__":
    main()
