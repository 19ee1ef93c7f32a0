"""Email Styler exception hierarchy.

The renderer itself never raises; these cover the surfaces around it
(style files, command line).
"""


class EmailStylerError(Exception):
    """Base exception for all Email Styler errors."""


class StyleFileError(EmailStylerError):
    """Raised when a style file cannot be read or holds invalid values."""
