from __future__ import annotations

import unittest

from moontree.ansi import clip_ansi_line, display_width, pad_ansi_line


class AnsiWidthTests(unittest.TestCase):
    def test_display_width_ignores_escape_sequences(self) -> None:
        self.assertEqual(display_width("\033[1;34mapp\033[0m"), 3)

    def test_wide_and_combining_characters(self) -> None:
        self.assertEqual(display_width("日本"), 4)
        self.assertEqual(display_width("é"), 1)

    def test_clip_keeps_styles_and_stops_at_width(self) -> None:
        clipped = clip_ansi_line("\033[31mabcdef\033[0m", 3)

        self.assertEqual(clipped, "\033[31mabc")

    def test_clip_does_not_split_wide_character(self) -> None:
        self.assertEqual(clip_ansi_line("a日b", 2), "a")

    def test_pad_fills_to_requested_width(self) -> None:
        padded = pad_ansi_line("\033[2mab\033[0m", 5)

        self.assertEqual(display_width(padded), 5)
        self.assertTrue(padded.endswith("   "))

    def test_non_positive_width_yields_empty(self) -> None:
        self.assertEqual(clip_ansi_line("abc", 0), "")
        self.assertEqual(pad_ansi_line("abc", 0), "")


if __name__ == "__main__":
    unittest.main()
