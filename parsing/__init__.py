"""Markup parsing, pruning, and text serialization primitives."""

from parsing.attributes import allowed_attributes, filter_attributes
from parsing.errors import ErrorKind, ParseError, SelectorError, StripError
from parsing.pruning import (
    parse_html,
    prune_display_none,
    remove_selected,
    replace_images_with_alt,
    should_keep,
)
from parsing.selectors import select_all, validate_selectors
from parsing.serializer import (
    NodeKind,
    SerializeOptions,
    join_fragments,
    node_kind,
    serialize,
    serialize_fragments,
)
from parsing.tags import (
    BUNDLES,
    DISPLAY_NONE_SELECTORS,
    NEWLINE_ELEMENTS,
    SELF_CLOSING_TAGS,
    expand_bundles,
)
from parsing.whitespace import collapse_whitespace, minify_whitespace

__all__ = [
    # Tables
    "BUNDLES",
    "DISPLAY_NONE_SELECTORS",
    "NEWLINE_ELEMENTS",
    "SELF_CLOSING_TAGS",
    # Errors
    "ErrorKind",
    "ParseError",
    "SelectorError",
    "StripError",
    # Tree mutation
    "parse_html",
    "prune_display_none",
    "remove_selected",
    "replace_images_with_alt",
    "should_keep",
    "select_all",
    "validate_selectors",
    # Serialization
    "NodeKind",
    "SerializeOptions",
    "join_fragments",
    "node_kind",
    "serialize",
    "serialize_fragments",
    "allowed_attributes",
    "filter_attributes",
    "expand_bundles",
    "collapse_whitespace",
    "minify_whitespace",
]
