"""CSS selector validation and matching.

Selectors are matched by soupsieve through ``Tag.select``.  Every
selector is compiled up front so that a syntax error is reported before
any tree mutation happens.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Iterable

import soupsieve

from parsing.errors import SelectorError

if TYPE_CHECKING:
    from bs4 import Tag


def validate_selectors(selectors: Iterable[str]) -> None:
    """Compile each selector, raising ``SelectorError`` on the first bad one."""
    for selector in selectors:
        try:
            soupsieve.compile(selector)
        except soupsieve.SelectorSyntaxError as exc:
            raise SelectorError(selector, str(exc).splitlines()[0]) from exc
        except NotImplementedError as exc:
            # Constructs soupsieve recognizes but does not support,
            # e.g. pseudo-elements.
            raise SelectorError(selector, str(exc)) from exc


def select_all(root: Tag, selector: str) -> list[Tag]:
    """Return the elements under *root* matching *selector*, in document order."""
    try:
        return root.select(selector)
    except soupsieve.SelectorSyntaxError as exc:
        raise SelectorError(selector, str(exc).splitlines()[0]) from exc


def remove_matching(root: Tag, selector: str) -> int:
    """Decompose every element matching *selector*.

    Returns the number of elements removed.  Elements nested inside one
    already removed are skipped.
    """
    removed = 0
    for el in select_all(root, selector):
        if el.decomposed:
            continue
        el.decompose()
        removed += 1
    return removed
