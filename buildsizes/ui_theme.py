"""UI theme definitions and selection helpers.

Themes are ANSI palettes for the terminal summary. JSON output is colored
separately through a Pygments style.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class UITheme:
    """Semantic ANSI palette used by the summary renderer."""

    name: str
    reset: str
    divider: str
    title: str
    heading: str
    label: str
    value: str
    number: str
    unit: str
    error: str
    hint: str


DEFAULT_THEME = UITheme(
    name="default",
    reset="\033[0m",
    divider="\033[2m",
    title="\033[1m",
    heading="\033[1m\033[4m",
    label="\033[38;5;250m",
    value="\033[38;5;252m",
    number="\033[33m",
    unit="\033[38;5;109m",
    error="\033[31m",
    hint="\033[2;38;5;250m",
)

OCEAN_THEME = UITheme(
    name="ocean",
    reset="\033[0m",
    divider="\033[2;38;5;31m",
    title="\033[1;38;5;45m",
    heading="\033[1;4;38;5;45m",
    label="\033[38;5;110m",
    value="\033[38;5;153m",
    number="\033[38;5;117m",
    unit="\033[38;5;73m",
    error="\033[38;5;203m",
    hint="\033[2;38;5;110m",
)

PLAIN_THEME = UITheme(
    name="plain",
    reset="",
    divider="",
    title="",
    heading="",
    label="",
    value="",
    number="",
    unit="",
    error="",
    hint="",
)

_THEMES: dict[str, UITheme] = {
    DEFAULT_THEME.name: DEFAULT_THEME,
    OCEAN_THEME.name: OCEAN_THEME,
}


def available_theme_names() -> tuple[str, ...]:
    """Return selectable non-plain theme names."""
    return tuple(sorted(_THEMES.keys()))


def normalize_theme_name(name: str | None) -> str:
    """Return a valid theme name, falling back to default."""
    if not name:
        return DEFAULT_THEME.name
    candidate = str(name).strip().lower()
    if candidate in _THEMES:
        return candidate
    return DEFAULT_THEME.name


def resolve_theme(name: str | None, *, no_color: bool = False) -> UITheme:
    """Return concrete theme for requested name and color mode."""
    if no_color:
        return PLAIN_THEME
    return _THEMES[normalize_theme_name(name)]


__all__ = [
    "UITheme",
    "DEFAULT_THEME",
    "OCEAN_THEME",
    "PLAIN_THEME",
    "available_theme_names",
    "normalize_theme_name",
    "resolve_theme",
]
