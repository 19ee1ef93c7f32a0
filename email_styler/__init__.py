"""Markdown to inline-styled, email-client-safe HTML."""

__version__ = "0.1.0"
