"""Tests for selector validation and matching."""

from __future__ import annotations

import pytest
from bs4 import BeautifulSoup

from parsing.errors import ErrorKind, SelectorError
from parsing.selectors import select_all, validate_selectors


class TestValidateSelectors:
    def test_valid_selectors_pass(self) -> None:
        validate_selectors(["div", ".entry > p", "input[type=hidden]", "[hidden]"])

    @pytest.mark.parametrize("bad", ["!!!", "p[[", "div >"])
    def test_invalid_selector_raises(self, bad: str) -> None:
        with pytest.raises(SelectorError) as exc_info:
            validate_selectors(["div", bad])
        assert exc_info.value.selector == bad
        assert exc_info.value.kind is ErrorKind.SELECTOR


class TestSelectAll:
    def test_document_order(self) -> None:
        soup = BeautifulSoup('<p class="x">1</p><div><p class="x">2</p></div><p class="x">3</p>', "html.parser")
        assert [el.get_text() for el in select_all(soup, ".x")] == ["1", "2", "3"]

    def test_invalid_selector(self) -> None:
        soup = BeautifulSoup("<p>x</p>", "html.parser")
        with pytest.raises(SelectorError):
            select_all(soup, "!!!")
