"""
(C) 2026 Joseph Tingiris (joseph.tingiris@gmail.com)

Exceptions raised by hop-hints.
"""


class HopHintsError(Exception):
    """Base class for every error raised by hop-hints."""


class ConfigurationError(HopHintsError):
    """The keyset or configuration cannot produce hints."""


class SelectionParseError(HopHintsError, ValueError):
    """A target or candidate encoding is malformed."""


class HintSessionError(HopHintsError):
    """A finished hint session was advanced again."""
