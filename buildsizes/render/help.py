"""Usage text and error presentation for the command line."""

from __future__ import annotations

from ..ui_theme import PLAIN_THEME, UITheme

DESCRIPTION = "A small script that provides build sizes to assist with optimization."

USAGE_EXAMPLES = """\
examples:
  # simplest usage with sane defaults
  build-sizes dist

  # size of the largest css file with tweaked number formatting
  build-sizes dist --filetype=css --binary --decimals=1

  # use a flag for the path when it is not the first argument
  build-sizes -f css -b -d 1 -p dist

  # save the build sizes to a csv
  build-sizes dist --outfile=data/build-sizes.csv
"""

ERROR_HINT = "Add the -h or --help flag for usage information."


def format_error(exc: BaseException, theme: UITheme = PLAIN_THEME) -> str:
    """Render an error message followed by the usage hint."""
    return f"{theme.error}Error: {exc}{theme.reset}\n\n{theme.hint}{ERROR_HINT}{theme.reset}\n"


__all__ = [
    "DESCRIPTION",
    "USAGE_EXAMPLES",
    "ERROR_HINT",
    "format_error",
]
