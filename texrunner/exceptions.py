"""
Custom exception hierarchy for texrunner.

All texrunner exceptions inherit from TeXRunnerError so callers can catch
the entire family with a single except clause.
"""

from __future__ import annotations


class TeXRunnerError(Exception):
    """Base exception for all texrunner errors."""


class ParseError(TeXRunnerError):
    """Raised when a required piece of engine output cannot be decoded.

    ``position`` is the byte offset at which decoding gave up.
    """

    def __init__(self, message: str, position: int = 0) -> None:
        super().__init__(message)
        self.position = position


class ConfigError(TeXRunnerError):
    """Raised when a configuration file is unreadable or invalid."""
