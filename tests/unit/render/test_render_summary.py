"""Tests for summary and JSON report rendering."""

from __future__ import annotations

import json
import math
import unittest

from buildsizes.render import render_json, render_summary
from buildsizes.render.help import ERROR_HINT, format_error
from buildsizes.report import BuildSizes
from buildsizes.ui_theme import DEFAULT_THEME, OCEAN_THEME, PLAIN_THEME, available_theme_names, resolve_theme


def _sizes(on_disk: int | float = 1_765_376) -> BuildSizes:
    return BuildSizes(
        main_bundle_name="main.abc123.js",
        main_bundle_size=1_700_000,
        main_bundle_size_gzip=512_000,
        main_bundle_size_brotli=430_000,
        build_size=1_752_000,
        build_size_on_disk=on_disk,
        build_file_count=3,
    )


class RenderSummaryTests(unittest.TestCase):
    def test_plain_summary_lists_build_and_bundle_rows(self) -> None:
        text = render_summary(_sizes(), "js", decimals=2, binary=False, theme=PLAIN_THEME)

        lines = text.splitlines()
        self.assertIn("|> Application Build Sizes <|", lines)
        self.assertIn(" --> file count: 3", lines)
        self.assertIn(" --> size: 1.75 MB", lines)
        self.assertIn(" --> on-disk size: 1.77 MB", lines)
        self.assertIn("Main JS bundle", lines)
        self.assertIn(" --> name: main.abc123.js", lines)
        self.assertIn(" --> gzip size: 512.00 KB", lines)
        self.assertIn(" --> brotli size: 430.00 KB", lines)
        self.assertNotIn("\033", text)

    def test_on_disk_row_is_omitted_when_unmeasured(self) -> None:
        text = render_summary(_sizes(math.nan), "css", theme=PLAIN_THEME)

        self.assertNotIn("on-disk", text)
        self.assertIn("Main CSS bundle", text)

    def test_themed_summary_colors_numbers_and_units(self) -> None:
        text = render_summary(_sizes(), "js", decimals=0, theme=DEFAULT_THEME)

        self.assertIn(f"{DEFAULT_THEME.number}2{DEFAULT_THEME.reset} {DEFAULT_THEME.unit}MB", text)
        self.assertIn(f"{DEFAULT_THEME.heading}Build{DEFAULT_THEME.reset}", text)


class RenderJsonTests(unittest.TestCase):
    def test_plain_json_uses_report_names_and_null_for_nan(self) -> None:
        payload = json.loads(render_json(_sizes(math.nan), no_color=True))

        self.assertEqual(payload["mainBundleName"], "main.abc123.js")
        self.assertEqual(payload["buildFileCount"], 3)
        self.assertIsNone(payload["buildSizeOnDisk"])

    def test_colored_json_contains_ansi_and_tolerates_unknown_style(self) -> None:
        text = render_json(_sizes(), style="no-such-style")

        self.assertIn("\x1b[", text)
        self.assertIn("mainBundleName", text)


class ThemeAndHelpTests(unittest.TestCase):
    def test_resolve_theme_falls_back_to_default(self) -> None:
        self.assertIs(resolve_theme("OCEAN"), OCEAN_THEME)
        self.assertIs(resolve_theme("unknown"), DEFAULT_THEME)
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertEqual(available_theme_names(), ("default", "ocean"))

    def test_format_error_appends_help_hint(self) -> None:
        text = format_error(ValueError("boom"))

        self.assertTrue(text.startswith("Error: boom"))
        self.assertIn(ERROR_HINT, text)


if __name__ == "__main__":
    unittest.main()
