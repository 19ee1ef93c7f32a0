"""Normalization of editor-exported markdown.

The rich-text editor's markdown export leaves a few artifacts behind: a
backslash at the end of hard-broken lines, escaped newlines, and
backslash-escaped emphasis characters. They are removed in a fixed order so a
line ending in an escaped special character is only processed once.
"""

import re

_TRAILING_BACKSLASH_RE = re.compile(r"\\$", re.MULTILINE)
_ESCAPED_NEWLINE_RE = re.compile(r"\\\n")
_ESCAPED_MARKDOWN_RE = re.compile(r"\\([*_~`])")


def normalize_source(text: str) -> str:
    """Return ``text`` with editor export artifacts removed.

    1. ``\\r\\n`` and lone ``\\r`` become ``\\n``.
    2. A backslash at the end of any line is dropped.
    3. A backslash followed by a newline collapses to the newline.
    4. Backslash-escaped ``*``, ``_``, ``~`` and backticks lose the backslash.
    """
    text = text.replace("\r\n", "\n").replace("\r", "\n")
    text = _TRAILING_BACKSLASH_RE.sub("", text)
    text = _ESCAPED_NEWLINE_RE.sub("\n", text)
    return _ESCAPED_MARKDOWN_RE.sub(r"\1", text)
