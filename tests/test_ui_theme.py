from __future__ import annotations

import unittest

from moontree.ui_theme import (
    DEFAULT_THEME,
    OCEAN_THEME,
    PLAIN_THEME,
    available_theme_names,
    normalize_theme_name,
    resolve_theme,
)


class UIThemeTests(unittest.TestCase):
    def test_available_names_exclude_plain(self) -> None:
        self.assertEqual(available_theme_names(), ("default", "ocean"))

    def test_unknown_or_empty_names_fall_back_to_default(self) -> None:
        self.assertEqual(normalize_theme_name(None), "default")
        self.assertEqual(normalize_theme_name("  Ocean "), "ocean")
        self.assertEqual(normalize_theme_name("solarized"), "default")

    def test_no_color_always_resolves_plain(self) -> None:
        self.assertIs(resolve_theme("ocean", no_color=True), PLAIN_THEME)
        self.assertIs(resolve_theme("ocean"), OCEAN_THEME)
        self.assertIs(resolve_theme(None), DEFAULT_THEME)

    def test_default_highlight_is_bold_black_on_light_green(self) -> None:
        self.assertEqual(DEFAULT_THEME.highlight, "\033[1;30;102m")


if __name__ == "__main__":
    unittest.main()
