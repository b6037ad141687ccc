"""Extraction entry points: tree-level ``extract`` and string-level ``strip_tags``."""

from extraction.strip import extract, strip_tags
from parsing.errors import ErrorKind, ParseError, SelectorError, StripError

__version__ = "0.6.0"

__all__ = [
    "extract",
    "strip_tags",
    "ErrorKind",
    "ParseError",
    "SelectorError",
    "StripError",
]
