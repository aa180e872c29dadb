"""Typed errors for comptools.

Policy:
- Errors are small and boring.
- Every error is raised ``from`` the library exception that caused it.
- Most errors also subclass ``ValueError`` so callers that only know the
  stdlib contract keep working.
"""

from __future__ import annotations


class ComptoolsError(Exception):
    """Base error for comptools."""


class ConfigError(ComptoolsError, ValueError):
    """Invalid options, format descriptor or codec id."""


class CorruptPayload(ComptoolsError, ValueError):
    """Compressed input is malformed, truncated or followed by garbage."""


class InvalidBase64(ComptoolsError, ValueError):
    pass


class TextEncodingError(ComptoolsError, ValueError):
    pass


class NumberFormatError(ComptoolsError, ValueError):
    pass


class CodecUnavailable(ComptoolsError, RuntimeError):
    """The backend module for a codec is not installed."""
