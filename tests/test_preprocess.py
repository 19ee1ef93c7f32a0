"""Tests for editor export normalization."""

from email_styler.rendering.preprocess import normalize_source


class TestNormalizeSource:
    def test_trailing_backslash_removed(self):
        """Test that hard-break backslashes at line ends are dropped."""
        assert normalize_source("first line\\\nsecond line\\") == "first line\nsecond line"

    def test_escaped_markdown_characters(self):
        """Test that escaped emphasis characters lose their backslash."""
        text = "\\*not italic\\* and \\_x\\_ and \\~\\~ and \\`"
        assert normalize_source(text) == "*not italic* and _x_ and ~~ and `"

    def test_line_ending_in_escaped_character(self):
        """Test that an escaped character at the end of a line is only unescaped."""
        assert normalize_source("ends with \\*\nnext") == "ends with *\nnext"

    def test_double_backslash_line(self):
        """Test that a two-backslash artifact line collapses to an empty line."""
        assert normalize_source("a\n\\\\\nb") == "a\n\nb"

    def test_windows_line_endings(self):
        assert normalize_source("a\\\r\nb\r\nc") == "a\nb\nc"

    def test_other_backslashes_untouched(self):
        assert normalize_source("C:\\path\\file and \\# heading") == "C:\\path\\file and \\# heading"

    def test_empty(self):
        assert normalize_source("") == ""
