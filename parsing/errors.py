"""Failure kinds raised while parsing markup or matching selectors.

Both kinds are fatal to a single extraction call.  Callers that need to
tell them apart can either catch the subclass or inspect ``exc.kind``.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(str, Enum):
    """Enumerable failure categories of an extraction call."""

    PARSE = "parse"
    SELECTOR = "selector"


class StripError(Exception):
    """Base class for every extraction failure."""

    kind: ErrorKind

    def __init__(self, message: str, kind: ErrorKind) -> None:
        super().__init__(message)
        self.kind = kind


class ParseError(StripError):
    """The markup could not be turned into a tree at all."""

    def __init__(self, message: str) -> None:
        super().__init__(message, ErrorKind.PARSE)


class SelectorError(StripError):
    """A selector string is not valid CSS selector syntax."""

    def __init__(self, selector: str, message: str) -> None:
        super().__init__(f"Invalid selector {selector!r}: {message}", ErrorKind.SELECTOR)
        self.selector = selector
