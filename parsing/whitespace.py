"""Whitespace minification for text extracted from markup."""

from __future__ import annotations

import re

_WS_RUN = re.compile(r"\s+")


def _collapse_run(match: re.Match[str]) -> str:
    newlines = match.group(0).count("\n")
    if newlines >= 2:
        return "\n\n"
    if newlines == 1:
        return "\n"
    return " "


def collapse_whitespace(text: str) -> str:
    """Collapse every whitespace run in *text*.

    A run holding two or more newlines becomes ``"\\n\\n"``, a run with
    exactly one newline becomes ``"\\n"`` and any other run becomes a
    single space.  Applying it twice gives the same result as once.
    """
    return _WS_RUN.sub(_collapse_run, text)


def minify_whitespace(text: str) -> str:
    """Minify the content of a single text node.

    Like :func:`collapse_whitespace`, except that a node collapsing to
    just ``"\\n"`` becomes ``" "``: formatting whitespace between inline
    siblings must not turn into a line break.
    """
    result = collapse_whitespace(text)
    if result == "\n":
        return " "
    return result
