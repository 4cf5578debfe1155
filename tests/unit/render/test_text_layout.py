"""Tests for display-width measurement, clipping, wrapping, and escaping."""

from __future__ import annotations

import unittest

from gut.text import char_display_width, clip_text, display_width, escape_control_chars, wrap_text


class DisplayWidthTests(unittest.TestCase):
    def test_wide_and_combining_characters(self) -> None:
        self.assertEqual(char_display_width("a"), 1)
        self.assertEqual(char_display_width("日"), 2)
        self.assertEqual(char_display_width("\u0301"), 0)
        self.assertEqual(display_width("é日本"), 5)


class ClipTextTests(unittest.TestCase):
    def test_short_text_is_unchanged(self) -> None:
        self.assertEqual(clip_text("abc", 3), "abc")

    def test_long_text_gets_ellipsis(self) -> None:
        self.assertEqual(clip_text("abcdef", 4), "abc…")

    def test_non_positive_width_is_empty(self) -> None:
        self.assertEqual(clip_text("abc", 0), "")

    def test_wide_name_stays_within_budget(self) -> None:
        clipped = clip_text("日本語のファイル名です", 10)
        self.assertLessEqual(display_width(clipped), 10)
        self.assertEqual(clipped, "日本語の…")


class WrapTextTests(unittest.TestCase):
    def test_chunks_fit_width_and_rejoin(self) -> None:
        text = "abcdefghij"
        chunks = wrap_text(text, 4)
        self.assertEqual(chunks, ["abcd", "efgh", "ij"])
        self.assertEqual("".join(chunks), text)

    def test_wide_character_moves_to_next_chunk(self) -> None:
        self.assertEqual(wrap_text("ab日本", 3), ["ab", "日", "本"])

    def test_empty_text_is_one_empty_chunk(self) -> None:
        self.assertEqual(wrap_text("", 10), [""])


class EscapeControlCharsTests(unittest.TestCase):
    def test_printable_text_is_unchanged(self) -> None:
        self.assertEqual(escape_control_chars("plain name 日本.txt"), "plain name 日本.txt")

    def test_control_characters_become_escapes(self) -> None:
        self.assertEqual(escape_control_chars("a\nb\x1b[2J\t\x7f"), "a\\nb\\x1b[2J\\t\\x7f")


if __name__ == "__main__":
    unittest.main()
