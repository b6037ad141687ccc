"""StripConfig Pydantic model: the immutable per-call extraction policy."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, field_validator


class StripConfig(BaseModel):
    """Which parts of a document to extract and how to render them.

    selectors: target selectors, visited in order.  Empty means the whole
        document, whatever root elements the parser produced.
    removes: selectors whose matches are deleted before extraction.
    minify: collapse whitespace in text nodes.
    remove_blank_lines: drop whitespace-only lines from the result.
    first: return only the first matched element.
    keep_tags: tag names (or bundle names) whose markup is preserved.
    all_attrs: keep every attribute on kept tags.
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    selectors: tuple[str, ...] = ()
    removes: tuple[str, ...] = ()
    minify: bool = False
    remove_blank_lines: bool = False
    first: bool = False
    keep_tags: tuple[str, ...] = ()
    all_attrs: bool = False

    @field_validator("selectors", "removes", "keep_tags", mode="before")
    @classmethod
    def none_as_empty(cls, v):
        if v is None:
            return ()
        if isinstance(v, str):
            return (v,)
        return v
