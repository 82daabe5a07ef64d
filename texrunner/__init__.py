"""
texrunner -- Structured diagnostics from TeX engine output.

Parses the transcript of a TeX run into a program banner, page count and
classified errors, and decodes box and dimension reports written by
``\\showbox`` and ``\\showthe``.
"""

__version__ = "0.1.0"

from texrunner.dimensions import decode_box, decode_dimension, read_box, read_dimension
from texrunner.errors import bad_box, some_error
from texrunner.exceptions import ConfigError, ParseError, TeXRunnerError
from texrunner.log import parse_log, parse_log_file, scan_bad_boxes
from texrunner.scanner import Cursor
from texrunner.types import Box, TeXError, TeXLog

__all__ = [
    "Box",
    "ConfigError",
    "Cursor",
    "ParseError",
    "TeXError",
    "TeXLog",
    "TeXRunnerError",
    "bad_box",
    "decode_box",
    "decode_dimension",
    "parse_log",
    "parse_log_file",
    "read_box",
    "read_dimension",
    "scan_bad_boxes",
    "some_error",
]
