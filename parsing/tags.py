"""Fixed tag tables and keep-tag bundle expansion.

The block-level set is derived from the HTML rendering section's
``display: block`` defaults:
https://www.w3.org/TR/2011/WD-html5-20110405/rendering.html#display-types
"""

from __future__ import annotations

from typing import Iterable

# Elements followed by a newline in the extracted text.
NEWLINE_ELEMENTS = frozenset({
    # display: block
    "address", "article", "aside", "blockquote", "body", "center", "dd",
    "dir", "div", "dl", "dt", "figure", "figcaption", "footer", "form",
    "h1", "h2", "h3", "h4", "h5", "h6", "header", "hgroup", "hr", "html",
    "legend", "listing", "menu", "nav", "ol", "p", "plaintext", "pre",
    "section", "summary", "ul", "xmp",
    # display: list-item
    "li",
})

# Selectors for elements with display: none.  Order matters: it is the
# order in which the pruning pass visits them.
DISPLAY_NONE_SELECTORS = [
    "[hidden]",
    "area",
    "base",
    "basefont",
    "command",
    "datalist",
    "head",
    "input[type=hidden]",
    "link",
    "menu[type=context]",
    "meta",
    "noembed",
    "noframes",
    "param",
    "rp",
    "script",
    "source",
    "style",
    "track",
    "title",
]

SELF_CLOSING_TAGS = frozenset({
    "area", "base", "br", "col", "command", "embed", "hr", "img", "input",
    "keygen", "link", "meta", "param", "source", "track", "wbr",
})

BUNDLES: dict[str, list[str]] = {
    "hs": ["h1", "h2", "h3", "h4", "h5", "h6"],
    "metadata": ["title", "meta"],
    "structure": ["header", "nav", "main", "article", "section", "aside", "footer"],
    "tables": [
        "table", "tr", "td", "th", "thead", "tbody", "tfoot", "caption",
        "colgroup", "col",
    ],
    "lists": ["ul", "ol", "li", "dl", "dd", "dt"],
}


def expand_bundles(
    keep_tags: Iterable[str] | None,
    bundles: dict[str, list[str]] | None = None,
) -> frozenset[str]:
    """Expand bundle names in *keep_tags* into a concrete keep-set.

    Entries naming a bundle contribute all of its member tags; any other
    entry is taken as a literal tag name.  Tag names compare
    case-insensitively, so every entry is lower-cased first.  Unknown
    literal names are simply inert.
    """
    table = BUNDLES if bundles is None else bundles
    expanded: list[str] = []
    for tag in keep_tags or ():
        name = tag.strip().lower()
        if not name:
            continue
        if name in table:
            expanded.extend(table[name])
        else:
            expanded.append(name)
    return frozenset(expanded)
