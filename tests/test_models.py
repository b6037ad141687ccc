"""Tests for the configuration and request/response models."""

from __future__ import annotations

import pytest
from pydantic import ValidationError

from models import StripConfig, StripRequest, StripResponse
from models.response import ErrorResponse
from parsing.errors import ErrorKind


class TestStripConfig:
    def test_defaults(self) -> None:
        config = StripConfig()
        assert config.selectors == ()
        assert config.removes == ()
        assert config.keep_tags == ()
        assert not (config.minify or config.remove_blank_lines or config.first or config.all_attrs)

    def test_empty_selectors_mean_whole_document(self) -> None:
        assert StripConfig(selectors=[]).selectors == ()
        assert StripConfig(selectors=None).selectors == ()

    def test_lists_become_tuples(self) -> None:
        config = StripConfig(selectors=["div", "p"], keep_tags=["hs"])
        assert config.selectors == ("div", "p")
        assert config.keep_tags == ("hs",)

    def test_single_string_is_one_selector(self) -> None:
        assert StripConfig(selectors=".entry", removes="nav").removes == ("nav",)
        assert StripConfig(selectors=".entry").selectors == (".entry",)

    def test_frozen(self) -> None:
        config = StripConfig()
        with pytest.raises(ValidationError):
            config.minify = True

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StripConfig(unknown=True)


class TestStripRequest:
    def test_to_config_drops_html(self) -> None:
        request = StripRequest(html="<p>x</p>", selectors=["p"], minify=True)
        config = request.to_config()
        assert type(config) is StripConfig
        assert config.selectors == ("p",)
        assert config.minify is True

    def test_extra_fields_rejected(self) -> None:
        with pytest.raises(ValidationError):
            StripRequest(html="", task_id="x")


class TestResponses:
    def test_error_response_serializes_kind(self) -> None:
        body = ErrorResponse(error=ErrorKind.SELECTOR, detail="bad")
        assert body.model_dump(mode="json") == {"error": "selector", "detail": "bad"}

    def test_strip_response(self) -> None:
        assert StripResponse(text="x").model_dump() == {"text": "x"}
