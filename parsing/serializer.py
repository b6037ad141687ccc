"""Recursive serialization of a tree into text with optional kept tags.

Each node is classified into a closed set of kinds (:class:`NodeKind`)
and dispatched on that kind.  Serialization produces a flat list of
string fragments; ``<pre>`` content and start tags are emitted as
:class:`Preformatted` fragments so that whitespace collapsing across
fragment boundaries skips them.  Serialization never mutates the tree.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import AbstractSet, Iterable

from bs4 import BeautifulSoup, Comment, Tag
from bs4.element import Declaration, Doctype, PageElement, ProcessingInstruction

from parsing.attributes import filter_attributes
from parsing.tags import NEWLINE_ELEMENTS, SELF_CLOSING_TAGS
from parsing.whitespace import collapse_whitespace, minify_whitespace


class NodeKind(str, Enum):
    """The node variants the serializer knows how to handle."""

    DOCUMENT = "document"
    ELEMENT = "element"
    TEXT = "text"
    COMMENT = "comment"


# String subclasses that carry no readable text.
_SILENT_STRINGS = (Comment, Declaration, Doctype, ProcessingInstruction)


def node_kind(node: PageElement) -> NodeKind:
    """Classify *node*.  Doctypes and other declarations count as comments."""
    if isinstance(node, BeautifulSoup):
        return NodeKind.DOCUMENT
    if isinstance(node, Tag):
        return NodeKind.ELEMENT
    if isinstance(node, _SILENT_STRINGS):
        return NodeKind.COMMENT
    return NodeKind.TEXT


class Preformatted(str):
    """A fragment whose whitespace must be passed through untouched.

    Used for ``<pre>`` content and for start tags, whose attribute values
    are emitted verbatim.
    """


@dataclass(frozen=True)
class SerializeOptions:
    """Per-call serialization policy."""

    keep_tags: AbstractSet[str] = frozenset()
    minify: bool = False
    all_attrs: bool = False


def start_tag(el: Tag, *, all_attrs: bool = False) -> Preformatted:
    """Render the start tag of *el* with its allowed attributes."""
    parts = [f"<{el.name}"]
    for name, value in filter_attributes(el.name, el.attrs, all_attrs=all_attrs):
        parts.append(f'{name}="{value}"')
    return Preformatted(" ".join(parts) + ">")


def _wrap(el: Tag, content: list[str], options: SerializeOptions) -> list[str]:
    wrapped = [start_tag(el, all_attrs=options.all_attrs), *content]
    if el.name not in SELF_CLOSING_TAGS:
        wrapped.append(f"</{el.name}>")
    return wrapped


def _serialize_into(node: PageElement, options: SerializeOptions, out: list[str]) -> None:
    kind = node_kind(node)

    if kind is NodeKind.COMMENT:
        return

    if kind is NodeKind.TEXT:
        text = str(node)
        out.append(minify_whitespace(text) if options.minify else text)
        return

    # DOCUMENT and ELEMENT
    if node.name == "pre":
        # Flattened text, never minified.
        content = [Preformatted(node.get_text())]
        if "pre" in options.keep_tags:
            content = _wrap(node, content, options)
        out.extend(content)
        return

    content: list[str] = []
    for child in node.children:
        _serialize_into(child, options, content)
        if isinstance(child, Tag) and child.name in NEWLINE_ELEMENTS:
            content.append("\n")
    if node.name in options.keep_tags:
        content = _wrap(node, content, options)
    out.extend(content)


def serialize_fragments(node: PageElement, options: SerializeOptions) -> list[str]:
    """Serialize *node* and its subtree into a list of fragments."""
    out: list[str] = []
    _serialize_into(node, options, out)
    return out


def join_fragments(fragments: Iterable[str], *, minify: bool = False) -> str:
    """Concatenate *fragments*.

    With *minify*, whitespace meeting across fragment boundaries is
    collapsed again so the joined text has no double spaces and no run
    of three newlines.  :class:`Preformatted` fragments are left as-is.
    """
    if not minify:
        return "".join(fragments)
    parts: list[str] = []
    pending: list[str] = []
    for fragment in fragments:
        if isinstance(fragment, Preformatted):
            parts.append(collapse_whitespace("".join(pending)))
            pending = []
            parts.append(str(fragment))
        else:
            pending.append(fragment)
    parts.append(collapse_whitespace("".join(pending)))
    return "".join(parts)


def serialize(node: PageElement, options: SerializeOptions | None = None) -> str:
    """Serialize *node* to text according to *options*."""
    options = options or SerializeOptions()
    return join_fragments(serialize_fragments(node, options), minify=options.minify)
