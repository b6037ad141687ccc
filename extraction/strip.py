"""Extraction orchestrator: from a parsed tree to plain (or re-tagged) text.

Runs the two phases strictly in sequence:

    1. **Mutation** -- caller removal selectors, display-none pruning and
       image alt-text substitution change the tree in place.
    2. **Extraction** -- each target selector is matched in order and
       every match is serialized; the tree is only read from here on.

Selectors are all validated before phase 1, so an invalid selector never
leaves a half-mutated tree behind.
"""

from __future__ import annotations

import logging
from typing import Iterable, Optional

from bs4 import Tag

from extraction.settings import settings
from models.config import StripConfig
from parsing.pruning import (
    parse_html,
    prune_display_none,
    remove_selected,
    replace_images_with_alt,
)
from parsing.selectors import select_all, validate_selectors
from parsing.serializer import SerializeOptions, join_fragments, serialize_fragments
from parsing.tags import NEWLINE_ELEMENTS, expand_bundles

logger = logging.getLogger("striptags")


def _remove_blank_lines(text: str) -> str:
    return "\n".join(line for line in text.split("\n") if line.strip())


def extract(soup: Tag, config: StripConfig | None = None) -> str:
    """Extract text from *soup* according to *config*.

    The tree is mutated in place (removed, pruned and image-substituted
    elements are gone afterwards); callers must not share it between
    concurrent calls.

    Returns:
        The extracted text, stripped of leading and trailing whitespace.
        No matches gives an empty string.

    Raises:
        SelectorError: If any target or removal selector is invalid.
    """
    config = config or StripConfig()
    validate_selectors([*config.removes, *config.selectors])

    keep_tags = expand_bundles(config.keep_tags)

    # ---- Phase 1: mutation ----
    remove_selected(soup, config.removes)
    prune_display_none(soup, keep_tags)
    replaced = replace_images_with_alt(soup, keep_tags)
    logger.debug("replaced images with alt text", extra={"replaced": replaced})

    # ---- Phase 2: extraction ----
    options = SerializeOptions(
        keep_tags=keep_tags, minify=config.minify, all_attrs=config.all_attrs
    )
    fragments: list[str] = []
    for el in _iter_targets(soup, config.selectors, first=config.first):
        fragments.extend(serialize_fragments(el, options))
        if el.name in NEWLINE_ELEMENTS:
            fragments.append("\n")

    output = join_fragments(fragments, minify=config.minify).strip()

    if config.remove_blank_lines:
        output = _remove_blank_lines(output)

    return output


def _iter_targets(soup: Tag, selectors: Iterable[str], *, first: bool):
    """Yield matched elements selector by selector, in document order.

    No selectors yields the document itself.  With *first*, stops after
    the very first element matched.
    """
    if not selectors:
        yield soup
        return
    for selector in selectors:
        matches = select_all(soup, selector)
        logger.debug(
            "matched target selector",
            extra={"selector": selector, "matches": len(matches)},
        )
        for el in matches:
            yield el
            if first:
                return


def strip_tags(
    html: str,
    *,
    selectors: Optional[Iterable[str]] = None,
    removes: Optional[Iterable[str]] = None,
    minify: bool = False,
    remove_blank_lines: bool = False,
    first: bool = False,
    keep_tags: Optional[Iterable[str]] = None,
    all_attrs: bool = False,
    parser: str | None = None,
) -> str:
    """Strip tags from *html*, optionally only from areas matched by selectors.

    Parses *html* into a freshly owned tree and runs :func:`extract`.

    Args:
        html: The markup to process.
        selectors: CSS selectors of the areas to extract (default: the
            whole document).
        removes: CSS selectors of elements to remove entirely.
        minify: Collapse whitespace.
        remove_blank_lines: Drop whitespace-only lines from the output.
        first: Return only the first matching element.
        keep_tags: Tags (or bundle names such as ``hs``) to keep in the
            output, with a limited attribute set.
        all_attrs: Keep every attribute on kept tags.
        parser: BeautifulSoup tree builder (default from settings).

    Raises:
        ParseError: If the markup cannot be parsed at all.
        SelectorError: If any selector is invalid.
    """
    config = StripConfig(
        selectors=tuple(selectors or ()),
        removes=tuple(removes or ()),
        minify=minify,
        remove_blank_lines=remove_blank_lines,
        first=first,
        keep_tags=tuple(keep_tags or ()),
        all_attrs=all_attrs,
    )
    soup = parse_html(html, parser or settings.parser)
    return extract(soup, config)
