"""Attribute allow-listing for tags kept in the output."""

from __future__ import annotations

from typing import Iterator

# Attributes every kept tag may carry.
DEFAULT_ATTRS = frozenset({"id", "class"})

# Additional attributes permitted on specific tags.
ATTRS_TO_KEEP: dict[str, frozenset[str]] = {
    "a": frozenset({"href"}),
    "img": frozenset({"alt"}),
    "meta": frozenset({"name", "value", "property", "content"}),
}


def allowed_attributes(tag_name: str) -> frozenset[str]:
    """Return the attribute names allowed on *tag_name*."""
    return DEFAULT_ATTRS | ATTRS_TO_KEEP.get(tag_name, frozenset())


def _attr_value_to_str(value: object) -> str:
    """Flatten a BS4 attribute value to a string.

    BS4 may return list values for multi-valued attributes like ``class``
    when the tree was parsed with its default settings.  These are
    joined with a space.
    """
    if isinstance(value, list):
        return " ".join(str(item) for item in value)
    return str(value)


def filter_attributes(
    tag_name: str, attrs: dict, *, all_attrs: bool = False
) -> Iterator[tuple[str, str]]:
    """Yield the ``(name, value)`` pairs of *attrs* that survive output.

    Pairs come out in the element's original attribute order.  With
    *all_attrs* every attribute survives.  Values are not escaped.
    """
    allowed = allowed_attributes(tag_name)
    for name, value in attrs.items():
        if all_attrs or name in allowed:
            yield name, _attr_value_to_str(value)
