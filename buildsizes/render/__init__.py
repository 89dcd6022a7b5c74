"""Presentation helpers for build-size reports."""

from __future__ import annotations

from .help import DESCRIPTION, ERROR_HINT, USAGE_EXAMPLES, format_error
from .summary import render_json, render_summary

__all__ = [
    "DESCRIPTION",
    "ERROR_HINT",
    "USAGE_EXAMPLES",
    "format_error",
    "render_json",
    "render_summary",
]
