"""Tests for background color extraction and contrast calculation."""

import math
import shutil
import tempfile
import unittest
from pathlib import Path

from modules.alacritty.colors import (
    DARK_TARGET,
    LIGHT_TARGET,
    Color,
    calc_contrast_color,
    calc_luminance,
    extract_color,
    format_hex,
    parse_color_literal,
    read_theme_color,
)
from modules.alacritty.errors import ParseError


# ──────────────────────────────────────────────────────────────────────────
# extraction
# ──────────────────────────────────────────────────────────────────────────

class TestExtractColor(unittest.TestCase):

    def test_quoted_literal(self):
        """The quote and hash are the two skipped prefix characters."""
        color = extract_color(["background = '#112233'"])
        self.assertEqual(color, Color(17, 34, 51))

    def test_fixed_offsets_skip_prefix_and_ignore_tail(self):
        """Channels come from offsets 2-7; anything after is ignored."""
        self.assertEqual(extract_color(["background = #00112233"]), Color(17, 34, 51))
        self.assertEqual(extract_color(['background = "#aabbccdd"']), Color(0xAA, 0xBB, 0xCC))

    def test_comment_lines_are_skipped(self):
        lines = [
            "# background = '#ffffff'",
            "   # background = '#eeeeee'",
            "[colors.primary]",
            "background = '#1d1f21'",
        ]
        self.assertEqual(extract_color(lines), Color(0x1D, 0x1F, 0x21))

    def test_first_match_wins(self):
        lines = [
            "background = '#010203'",
            "background = '#ffffff'",
        ]
        self.assertEqual(extract_color(lines), Color(1, 2, 3))

    def test_missing_background_line(self):
        with self.assertRaises(ParseError) as cm:
            extract_color(["foreground = '#ffffff'"])
        self.assertEqual(cm.exception.channels, ())
        self.assertIn("Failed to parse hex color", str(cm.exception))

    def test_background_line_without_assignment(self):
        with self.assertRaises(ParseError):
            extract_color(["[colors.background]"])

    def test_bad_channel_is_named(self):
        with self.assertRaises(ParseError) as cm:
            extract_color(["background = '#zz2233'"])
        self.assertEqual(cm.exception.channels, ("red",))

    def test_short_literal_fails_every_channel(self):
        with self.assertRaises(ParseError) as cm:
            parse_color_literal("'#1'")
        self.assertEqual(cm.exception.channels, ("red", "green", "blue"))

    def test_sign_and_whitespace_are_not_hex(self):
        """int(x, 16) would accept these; the parser must not."""
        with self.assertRaises(ParseError):
            parse_color_literal("'#+f2233'")
        with self.assertRaises(ParseError):
            parse_color_literal("'# f2233'")


class TestReadThemeColor(unittest.TestCase):

    def setUp(self):
        self.tmpdir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.tmpdir, ignore_errors=True)

    def test_reads_theme_file(self):
        path = Path(self.tmpdir) / "gruvbox_dark.toml"
        path.write_text(
            "# Colors (Gruvbox dark)\n"
            "\n"
            "[colors.primary]\n"
            "background = '#282828'\n"
            "foreground = '#ebdbb2'\n",
            encoding="utf-8",
        )
        self.assertEqual(read_theme_color(path), Color(0x28, 0x28, 0x28))

    def test_line_separator_does_not_split_a_comment(self):
        """A U+2028 inside a comment must not expose the text after it."""
        path = Path(self.tmpdir) / "odd.toml"
        path.write_bytes(
            "# old\u2028background = '#ffffff'\nbackground = '#101010'\n".encode("utf-8")
        )
        self.assertEqual(read_theme_color(path), Color(0x10, 0x10, 0x10))

    def test_missing_file_propagates(self):
        with self.assertRaises(FileNotFoundError):
            read_theme_color(Path(self.tmpdir) / "nope.toml")


# ──────────────────────────────────────────────────────────────────────────
# contrast
# ──────────────────────────────────────────────────────────────────────────

class TestContrastColor(unittest.TestCase):

    def test_luminance_includes_opacity_factor(self):
        self.assertAlmostEqual(calc_luminance(Color(255, 255, 255)), 204.0)
        self.assertAlmostEqual(calc_luminance(Color(100, 0, 0)), 0.8 * 29.9)

    def test_white_is_darkened(self):
        """Luminance 204 -> LIGHT target, scale 64/204."""
        self.assertEqual(calc_contrast_color(Color(255, 255, 255)), Color(80, 80, 80))

    def test_light_background_targets_light_luminance(self):
        result = calc_contrast_color(Color(200, 200, 200))
        self.assertEqual(result, Color(80, 80, 80))
        self.assertAlmostEqual(calc_luminance(result), LIGHT_TARGET)

    def test_dark_background_targets_dark_luminance(self):
        result = calc_contrast_color(Color(100, 100, 100))
        self.assertEqual(result, Color(160, 160, 160))
        self.assertAlmostEqual(calc_luminance(result), DARK_TARGET)

    def test_threshold_is_inclusive(self):
        """Luminance exactly 128 counts as light and is darkened."""
        self.assertEqual(calc_luminance(Color(160, 160, 160)), 128.0)
        self.assertEqual(calc_contrast_color(Color(160, 160, 160)), Color(80, 80, 80))

    def test_just_below_threshold_brightens(self):
        self.assertEqual(calc_contrast_color(Color(159, 159, 159)), Color(160, 160, 160))

    def test_typical_dark_theme(self):
        self.assertEqual(calc_contrast_color(Color(0x1D, 0x1F, 0x21)), Color(151, 162, 172))

    def test_channels_are_clamped(self):
        self.assertEqual(calc_contrast_color(Color(0, 0, 1)), Color(0, 0, 255))

    def test_black_background_regression(self):
        """Zero luminance must not divide by zero or leak inf/nan."""
        result = calc_contrast_color(Color(0, 0, 0))
        self.assertEqual(result, Color(160, 160, 160))

    def test_output_is_always_valid(self):
        samples = [
            Color(0, 0, 0), Color(0, 0, 1), Color(1, 0, 0), Color(255, 0, 0),
            Color(0, 255, 0), Color(12, 200, 33), Color(255, 255, 255),
        ]
        for color in samples:
            with self.subTest(color=color):
                result = calc_contrast_color(color)
                for channel in result:
                    self.assertIsInstance(channel, int)
                    self.assertTrue(math.isfinite(channel))
                    self.assertGreaterEqual(channel, 0)
                    self.assertLessEqual(channel, 255)

    def test_is_pure(self):
        color = Color(0x28, 0x2C, 0x34)
        self.assertEqual(calc_contrast_color(color), calc_contrast_color(color))
        self.assertEqual(color, Color(0x28, 0x2C, 0x34))

    def test_format_hex(self):
        self.assertEqual(format_hex(Color(80, 80, 80)), "#505050")
        self.assertEqual(format_hex(Color(151, 162, 172)), "#97A2AC")


if __name__ == "__main__":
    unittest.main()
