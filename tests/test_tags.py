"""Tests for the fixed tag tables and keep-tag bundle expansion."""

from __future__ import annotations

from parsing.tags import (
    BUNDLES,
    DISPLAY_NONE_SELECTORS,
    NEWLINE_ELEMENTS,
    SELF_CLOSING_TAGS,
    expand_bundles,
)


class TestExpandBundles:
    def test_heading_bundle_expands_to_all_levels(self) -> None:
        assert expand_bundles(["hs"]) == frozenset({"h1", "h2", "h3", "h4", "h5", "h6"})

    def test_literal_tags_pass_through(self) -> None:
        assert expand_bundles(["a", "custom-tag"]) == frozenset({"a", "custom-tag"})

    def test_bundles_and_literals_mix(self) -> None:
        kept = expand_bundles(["lists", "a"])
        assert kept == frozenset({"ul", "ol", "li", "dl", "dd", "dt", "a"})

    def test_none_and_empty_give_empty_set(self) -> None:
        assert expand_bundles(None) == frozenset()
        assert expand_bundles([]) == frozenset()

    def test_names_are_case_insensitive(self) -> None:
        assert expand_bundles(["H1", "HS"]) == frozenset(BUNDLES["hs"])

    def test_blank_entries_ignored(self) -> None:
        assert expand_bundles(["", "  ", "p"]) == frozenset({"p"})

    def test_custom_bundle_table(self) -> None:
        kept = expand_bundles(["inline"], {"inline": ["b", "i"]})
        assert kept == frozenset({"b", "i"})
        # With a custom table the default bundle names are plain literals.
        assert expand_bundles(["hs"], {"inline": ["b"]}) == frozenset({"hs"})


class TestTables:
    def test_list_items_are_block_level(self) -> None:
        assert "li" in NEWLINE_ELEMENTS
        assert "span" not in NEWLINE_ELEMENTS

    def test_display_none_starts_with_hidden_attribute(self) -> None:
        assert DISPLAY_NONE_SELECTORS[0] == "[hidden]"
        assert "script" in DISPLAY_NONE_SELECTORS
        assert "style" in DISPLAY_NONE_SELECTORS

    def test_self_closing(self) -> None:
        assert {"img", "br", "meta", "hr"} <= SELF_CLOSING_TAGS
        assert "p" not in SELF_CLOSING_TAGS
