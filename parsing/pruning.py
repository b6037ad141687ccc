"""Markup parsing and pre-extraction tree mutation.

Everything that changes the tree lives here and runs strictly before
serialization:

    1. ``remove_selected()`` -- drops the subtrees matched by caller
       removal selectors.
    2. ``prune_display_none()`` -- drops elements that are never rendered
       (``<script>``, ``<head>``, ``[hidden]``, ...) unless a kept tag
       would be lost with them.
    3. ``replace_images_with_alt()`` -- swaps ``<img alt="...">`` for its
       alternative text when images are not kept.
"""

from __future__ import annotations

import logging
from typing import AbstractSet, Iterable

from bs4 import BeautifulSoup, FeatureNotFound, NavigableString, Tag
from bs4.builder import ParserRejectedMarkup

from parsing.errors import ParseError
from parsing.selectors import remove_matching, select_all
from parsing.tags import DISPLAY_NONE_SELECTORS

logger = logging.getLogger("striptags")


def parse_html(raw_html: str, parser: str = "lxml") -> BeautifulSoup:
    """Parse *raw_html* into a tree.

    Multi-valued attribute splitting is disabled so that attribute values
    such as ``class`` keep their exact source text.

    Raises:
        ParseError: If *parser* names no installed tree builder, or the
            builder rejects the markup outright.
    """
    try:
        return BeautifulSoup(raw_html, parser, multi_valued_attributes=None)
    except FeatureNotFound as exc:
        raise ParseError(f"Unknown parser {parser!r}") from exc
    except ParserRejectedMarkup as exc:
        raise ParseError(f"Markup could not be parsed: {exc}") from exc


def remove_selected(soup: Tag, selectors: Iterable[str]) -> int:
    """Remove every element matched by each selector, in selector order."""
    total = 0
    for selector in selectors:
        removed = remove_matching(soup, selector)
        logger.debug(
            "removed elements", extra={"selector": selector, "removed": removed}
        )
        total += removed
    return total


def should_keep(element: Tag, keep_tags: AbstractSet[str]) -> bool:
    """Return True if *element* or any element below it is a kept tag."""
    if not keep_tags:
        return False
    if element.name in keep_tags:
        return True
    return any(
        isinstance(descendant, Tag) and descendant.name in keep_tags
        for descendant in element.descendants
    )


def prune_display_none(soup: Tag, keep_tags: AbstractSet[str]) -> int:
    """Decompose elements that are never displayed, unless they must be kept.

    Returns the number of elements removed.
    """
    removed = 0
    for selector in DISPLAY_NONE_SELECTORS:
        for el in select_all(soup, selector):
            if el.decomposed or should_keep(el, keep_tags):
                continue
            el.decompose()
            removed += 1
    logger.debug("pruned hidden elements", extra={"removed": removed})
    return removed


def replace_images_with_alt(soup: Tag, keep_tags: AbstractSet[str]) -> int:
    """Replace each ``<img alt="...">`` with a text node holding its alt text.

    Does nothing when ``img`` is a kept tag.  Images without an ``alt``
    attribute are left in place.  Returns the number of images replaced.
    """
    if "img" in keep_tags:
        return 0
    replaced = 0
    for img in select_all(soup, "img[alt]"):
        img.replace_with(NavigableString(img["alt"]))
        replaced += 1
    return replaced
